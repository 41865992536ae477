"""
Domain whois parser

Scans registrar and registry responses line by line. Labels are mapped to
canonical keys by utils.keys; keys describing the domain itself are written
to the DomainRecord and everything else is routed to one of the five role
contacts by the first word of its label.
"""
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Optional, Tuple

from core.errors import DomainNotFoundError
from core.logger import get_module_logger
from core.models import Contact, DomainRecord, RecordType, WhoisResult, non_empty
from parsers.base import ParserBase
from parsers.prepare import prepare
from utils import keys
from utils.dates import parse_date_string
from utils.domain import (
    fix_domain_status,
    fix_name_servers,
    get_domain_error,
    is_dnssec_enabled,
    is_ext_not_found_domain,
    search_domain,
    to_punycode,
)

logger = get_module_logger("parsers.domain")

# First label word to contact role
CONTACT_ROLES = MappingProxyType({
    "registrar": "registrar",
    "registration": "registrar",
    "registrant": "registrant",
    "holder": "registrant",
    "admin": "administrative",
    "administrative": "administrative",
    "tech": "technical",
    "technical": "technical",
    "bill": "billing",
    "billing": "billing",
})

# Canonical contact key to Contact attribute
CONTACT_FIELDS = MappingProxyType({
    keys.CONTACT_ID: "id",
    keys.CONTACT_NAME: "name",
    keys.CONTACT_ORGANIZATION: "organization",
    keys.CONTACT_STREET: "street",
    keys.CONTACT_CITY: "city",
    keys.CONTACT_PROVINCE: "province",
    keys.CONTACT_POSTAL_CODE: "postal_code",
    keys.CONTACT_COUNTRY: "country",
    keys.CONTACT_PHONE: "phone",
    keys.CONTACT_PHONE_EXT: "phone_ext",
    keys.CONTACT_FAX: "fax",
    keys.CONTACT_FAX_EXT: "fax_ext",
    keys.CONTACT_EMAIL: "email",
})

# Keep the first value seen for these attributes
FIRST_WINS = frozenset(("name", "organization"))

# Date keys to (raw attribute, parsed attribute) of DomainRecord
DATE_FIELDS = MappingProxyType({
    keys.CREATED_DATE: ("created_date", "created_date_in_time"),
    keys.UPDATED_DATE: ("updated_date", "updated_date_in_time"),
    keys.EXPIRED_DATE: ("expiration_date", "expiration_date_in_time"),
})


def iter_fields(text: str, skip_line: Callable[[str], bool]) -> Iterator[Tuple[str, str]]:
    """
    Yield (label, value) pairs from a domain whois response

    A label ending the line ("Registrant:") takes the following lines
    without a colon as its value, joined with commas.

    Args:
        text: Prepared whois text
        skip_line: Predicate for lines that carry no field

    Yields:
        Raw label and trimmed, non-empty value
    """
    lines = text.split("\n")
    index = 0

    while index < len(lines):
        line = lines[index].strip()
        index += 1

        if skip_line(line):
            continue

        if line.endswith(":"):
            continuation = []
            while index < len(lines):
                next_line = lines[index].strip()
                if ":" in next_line:
                    break
                if next_line:
                    continuation.append(next_line)
                index += 1
            line += ",".join(continuation)

        label, value = line.split(":", 1)
        value = value.strip().strip(":").strip()
        if value:
            yield label.strip(), value


def contact_target(label: str, extension: str) -> Tuple[Optional[str], str]:
    """
    Work out which contact a label belongs to

    Args:
        label: Raw field label
        extension: Punycode extension of the domain

    Returns:
        (role, canonical contact key); role is None for labels that name no
        known contact
    """
    name = keys.clear_key_name(label)
    if " " not in name:
        if name == "registrar":
            name = "registrar name"
        elif extension == "dk":
            name = f"registrant {name}"
        else:
            name = f"{name} organization"

    first, _, rest = name.partition(" ")
    return CONTACT_ROLES.get(first), keys.search_key_name(f"registrant {rest}")


def parse_contact(contact: Contact, key: str, value: str):
    """Write one canonical contact field"""
    attribute = CONTACT_FIELDS.get(key)
    if attribute is None:
        return

    current = getattr(contact, attribute)
    if attribute in FIRST_WINS and current:
        return

    if attribute == "street" and current:
        value = f"{current}, {value}"
    elif attribute == "email":
        value = value.lower()

    setattr(contact, attribute, value)


class DomainParser(ParserBase):
    """Parser for domain name registration records"""

    name = "domain"
    description = "Domain registrar and registry responses"
    record_type = RecordType.DOMAIN
    comment_prefixes = ("-", "*", "%", ">", ";")

    def parse(self, text: str) -> WhoisResult:
        name, extension = search_domain(text)
        if not name:
            error = get_domain_error(text)
            logger.debug(f"No domain name found in whois text: {error}")
            raise error

        if extension and is_ext_not_found_domain(text, extension):
            logger.debug(f"Registry for .{extension} reports {name}.{extension} as not found")
            raise DomainNotFoundError()

        domain = DomainRecord(name=to_punycode(name), extension=to_punycode(extension))
        contacts: Dict[str, Contact] = {role: Contact() for role in set(CONTACT_ROLES.values())}
        logger.debug(f"Parsing domain whois for {domain.name}.{domain.extension}")

        status = []
        name_servers = []

        for label, value in iter_fields(prepare(text, domain.extension), self.skip_line):
            key = keys.search_key_name(label)

            if key == keys.DOMAIN_ID:
                domain.id = value
            elif key == keys.DOMAIN_NAME:
                if not domain.domain:
                    domain.domain = value.split(" ", 1)[0].lower()
                    domain.punycode = to_punycode(domain.domain)
            elif key == keys.DOMAIN_STATUS:
                status.extend(value.split(","))
            elif key == keys.DOMAIN_DNSSEC:
                if not domain.dnssec:
                    domain.dnssec = is_dnssec_enabled(value)
            elif key == keys.WHOIS_SERVER:
                if not domain.whois_server:
                    domain.whois_server = value
            elif key == keys.NAME_SERVERS:
                name_servers.extend(value.split(","))
            elif key in DATE_FIELDS:
                raw_field, time_field = DATE_FIELDS[key]
                if not getattr(domain, raw_field):
                    setattr(domain, raw_field, value)
                    setattr(domain, time_field, parse_date_string(value))
            elif key == keys.REFERRAL_URL:
                contacts["registrar"].referral_url = value
            else:
                role, contact_key = contact_target(label, domain.extension)
                if role is not None:
                    parse_contact(contacts[role], contact_key, value)

        domain.status = fix_domain_status(status)
        domain.name_servers = fix_name_servers(name_servers)

        return WhoisResult(
            domain=domain,
            registrar=non_empty(contacts["registrar"]),
            registrant=non_empty(contacts["registrant"]),
            administrative=non_empty(contacts["administrative"]),
            technical=non_empty(contacts["technical"]),
            billing=non_empty(contacts["billing"]),
        )
