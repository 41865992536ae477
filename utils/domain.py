"""
Domain name helpers for whoisparser

Locating the queried domain inside a raw response, recognizing the various
"no such domain" answers registries send back, and cleaning up status and
name server values.
"""
import re
from types import MappingProxyType
from typing import Iterable, List, Tuple

import idna

from core.errors import (
    DomainBlockedError,
    DomainDataInvalidError,
    DomainError,
    DomainLimitExceededError,
    DomainNotFoundError,
    DomainPremiumError,
    DomainReservedError,
)

# "Domain Name: example.com" and its bracketed/dotted variants
DOMAIN_WITH_EXTENSION = re.compile(
    r'\[?domain:?(\s*_?name)?\]?[\s.]*:?\s*([^\s,;@()]+)\.([^\s,;().]{2,})',
    re.IGNORECASE,
)
# "Domain: example" with no extension, terminated by a newline
DOMAIN_WITHOUT_EXTENSION = re.compile(
    r'\[?domain:?(\s*_?name)?\]?[\s.]*:?\s*([^\s,;@().]{2,})\n',
    re.IGNORECASE,
)

NOT_FOUND_PHRASES = (
    "is free",
    "no found",
    "no match",
    "not found",
    "not match",
    "no data found",
    "no entries found",
    "no matching record",
    "not registered",
    "not been registered",
    "object does not exist",
    "query returned 0 objects",
    "domain name not known",
    "no such domain",
    "available for registration",
)

BLOCKED_PHRASES = (
    "the domain you requested is blocked",
    "has been blocked by the registry",
    "the registration of this domain is restricted",
    "this name is blocked",
    "protected by dpml",
)

PREMIUM_PHRASES = (
    "platinum domain",
    "premium domain",
    "is available at premium price",
    "premium name",
)

RESERVED_PHRASES = (
    "reserved domain name",
    "reserved by the registry",
    "is reserved",
    "can not be registered online",
    "this domain is reserved",
    "reserved name",
)

LIMIT_EXCEEDED_PHRASES = (
    "limit exceeded",
    "query rate limit",
    "too many queries",
    "quota exceeded",
    "excessive querying",
    "requests exceeded",
)

# Registries whose "not found" answer still contains a domain label
EXTENSION_NOT_FOUND = MappingProxyType({
    "ai": "no object found",
    "at": "nothing found",
    "ch": "we do not have an entry in our database matching your query",
    "cl": "no entries found",
    "de": "status: free",
    "dk": "no entries found for the selected source",
    "eu": "status: available",
    "fi": "domain not found",
    "hk": "the domain has not been registered",
    "ie": "not registered",
    "is": "no entries found for query",
    "jp": "no match!!",
    "kr": "the requested domain was not found",
    "lu": "no such domain",
    "nl": "is free",
    "no": "no match",
    "pl": "no information available about domain name",
    "pt": "no match",
    "se": "not found.",
    "sg": "domain not found",
    "tw": "no found",
    "uk": "no match for",
})

DNSSEC_ENABLED_VALUES = frozenset((
    "yes",
    "active",
    "signed",
    "signeddelegation",
    "signed delegation",
    "dnssec enabled",
    "enabled",
    "true",
))


def search_domain(text: str) -> Tuple[str, str]:
    """
    Find the domain name and extension in a whois response

    Args:
        text: Raw whois response

    Returns:
        (name, extension) lower-cased; both empty when nothing matches and
        the extension empty when only a bare name was found
    """
    name = extension = ""

    match = DOMAIN_WITH_EXTENSION.search(text)
    if match:
        name = match.group(2).strip()
        if name.startswith('"'):
            name = name[1:]
        extension = match.group(3).strip()
        if extension.endswith('"'):
            extension = extension[:-1]

    if not name:
        match = DOMAIN_WITHOUT_EXTENSION.search(text)
        if match:
            name = match.group(2).strip()
            extension = ""

    return name.lower(), extension.lower()


def _contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def is_not_found_domain(text: str) -> bool:
    return _contains_any(text.lower(), NOT_FOUND_PHRASES)


def is_blocked_domain(text: str) -> bool:
    return _contains_any(text.lower(), BLOCKED_PHRASES)


def is_premium_domain(text: str) -> bool:
    return _contains_any(text.lower(), PREMIUM_PHRASES)


def is_reserved_domain(text: str) -> bool:
    return _contains_any(text.lower(), RESERVED_PHRASES)


def is_limit_exceeded(text: str) -> bool:
    return _contains_any(text.lower(), LIMIT_EXCEEDED_PHRASES)


def is_ext_not_found_domain(text: str, extension: str) -> bool:
    """Check the registry specific "not found" answer for an extension"""
    phrase = EXTENSION_NOT_FOUND.get(extension.lower())
    if not phrase:
        return False
    return phrase in text.lower()


def get_domain_error(text: str) -> DomainError:
    """
    Classify a response in which no domain name could be located

    Args:
        text: Raw whois response

    Returns:
        The error instance to raise
    """
    if is_not_found_domain(text):
        return DomainNotFoundError()
    if is_blocked_domain(text):
        return DomainBlockedError()
    if is_premium_domain(text):
        return DomainPremiumError()
    if is_reserved_domain(text):
        return DomainReservedError()
    if is_limit_exceeded(text):
        return DomainLimitExceededError()
    return DomainDataInvalidError()


def is_dnssec_enabled(value: str) -> bool:
    return value.strip().lower() in DNSSEC_ENABLED_VALUES


def to_punycode(value: str) -> str:
    """ASCII compatible form of a domain name; the input itself when it cannot be encoded"""
    if not value:
        return value
    try:
        return idna.encode(value, uts46=True).decode("ascii")
    except idna.IDNAError:
        return value


def unique(values: Iterable[str]) -> List[str]:
    """Drop empty and repeated values, keeping the first occurrence order"""
    seen = set()
    result = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def fix_name_servers(name_servers: Iterable[str]) -> List[str]:
    """Keep only the host name of each entry, lower-cased and without the root dot"""
    fixed = []
    for value in name_servers:
        parts = value.split()
        if not parts:
            continue
        fixed.append(parts[0].strip(".").lower())
    return unique(fixed)


def fix_domain_status(status: Iterable[str]) -> List[str]:
    """
    Reduce status values to their status code

    "clientTransferProhibited https://icann.org/epp#clientTransferProhibited"
    becomes "clientTransferProhibited".
    """
    fixed = []
    for value in status:
        parts = value.split()
        if parts:
            fixed.append(parts[0])
    return unique(fixed)
