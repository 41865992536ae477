"""
Date normalization for registry timestamps
"""
import re
from datetime import datetime, tzinfo
from types import MappingProxyType
from typing import Optional, Tuple

from dateutil import tz
from dateutil.parser import isoparse

# Tried in order after ISO-8601; the first layout that matches wins
DATE_LAYOUTS = (
    '%d-%b-%Y',                 # 02-jan-2000
    '%d-%B-%Y',                 # 11-February-2000
    '%d-%m-%Y',                 # 20-10-2000
    '%d.%m.%Y',                 # 2.1.2000
    '%Y.%m.%d',                 # 2000.01.02
    '%Y. %m. %d.',              # 2000. 01. 02.
    '%Y/%m/%d',                 # 2000/01/02
    '%d/%m/%Y',                 # 02/01/2013
    '%Y-%m-%d %H:%M:%S %Z',     # 2000-08-22 18:55:20 UTC
    '%Y-%m-%d %H:%M:%S%z',      # 2000-08-22 18:55:20+0300
    '%Y/%m/%d %H:%M:%S',        # 2011/06/01 01:05:01
    '%Y/%m/%d %H:%M:%S (%z)',   # 2011/06/01 01:05:01 (+0900)
    '%Y.%m.%d %H:%M:%S',        # 2014.03.08 10:28:24
    '%Y%m%d %H:%M:%S',          # 20110908 14:44:51
    '%d.%m.%Y %H:%M:%S',        # 08.03.2014 10:28:24
    '%d/%m/%Y %H:%M:%S',        # 23/04/2015 12:00:07
    '%d-%b-%Y %H:%M:%S %Z',     # 24-Jul-2009 13:20:03 UTC
    '%d-%b-%Y %H:%M:%S',        # 24-Jul-2009 13:20:03
    '%d %b %Y %H:%M:%S',        # 08 Apr 2013 05:44:00
    '%d %B %Y',                 # 14 August 2017
    '%a %b %d %H:%M:%S %Z %Y',  # Tue Jun 21 23:59:59 GMT 2011
    '%a %b %d %Y',              # Tue Dec 12 2000
    '%B %d %Y',                 # August 14 2017
    '%B %d, %Y',                # August 14, 2017
    'before %b-%Y',             # before aug-1996
)

# UTC offset, in hours, of the zone names registries append in parentheses.
# CST is China Standard Time, the only registry use seen.
ZONE_OFFSETS = MappingProxyType({
    "UTC": 0,
    "GMT": 0,
    "JST": 9,
    "CST": 8,
})

# Trailing zone notes strptime cannot digest, e.g. "(JST)" or "(UTC+8)"
_ZONE_NOTE = re.compile(
    r'\s*\((?P<zone>UTC|GMT|JST|CST)'
    r'(?:\s*(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?)?\)\s*$',
    re.IGNORECASE,
)
_ZONE_SUFFIX = re.compile(r'\s+(?:UTC|GMT)$', re.IGNORECASE)


def split_zone_note(value: str) -> Tuple[str, Optional[tzinfo]]:
    """
    Cut a trailing zone note off a date string

    Args:
        value: Trimmed date text

    Returns:
        (date text without the note, fixed-offset zone of the note); the
        zone is None when the text carries no note
    """
    match = _ZONE_NOTE.search(value)
    if not match:
        return value, None

    seconds = ZONE_OFFSETS[match.group("zone").upper()] * 3600
    if match.group("sign"):
        shift = int(match.group("hours")) * 3600 + int(match.group("minutes") or 0) * 60
        seconds += shift if match.group("sign") == "+" else -shift

    return value[:match.start()].strip(), tz.tzoffset(None, seconds)


def _candidates(value: str):
    yield value
    cleaned = _ZONE_SUFFIX.sub('', value).strip()
    if cleaned and cleaned != value:
        yield cleaned


def _aware(parsed: datetime, zone: Optional[tzinfo] = None) -> datetime:
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone or tz.UTC)
    return parsed


def _parse(candidate: str) -> Optional[datetime]:
    try:
        return isoparse(candidate)
    except (ValueError, OverflowError):
        pass

    for layout in DATE_LAYOUTS:
        try:
            return datetime.strptime(candidate, layout)
        except ValueError:
            continue

    return None


def parse_date_string(value: str) -> Optional[datetime]:
    """
    Parse a registry date string

    ISO-8601 forms are handled by dateutil's strict isoparse; everything
    else is matched against DATE_LAYOUTS in order. A trailing zone note such
    as "(JST)" or "(UTC+8)" sets the zone of the parsed time; timestamps
    with neither an offset nor a note are taken as UTC.

    Args:
        value: Date text as found in the whois response

    Returns:
        Timezone-aware datetime, or None when no layout matches
    """
    if not value or not value.strip():
        return None

    text, zone = split_zone_note(value.strip())
    for candidate in _candidates(text):
        parsed = _parse(candidate)
        if parsed is not None:
            return _aware(parsed, zone)

    return None
