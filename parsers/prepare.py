"""
Per-extension text preparation

A few registries answer with sectioned layouts instead of "label: value"
lines: a header on its own line followed by indented values. The preparers
here rewrite those layouts into labelled lines the domain scanner
understands. Extensions without a preparer pass through with only their
line endings normalized.
"""
import re
from types import MappingProxyType
from typing import Callable, Dict, List, Optional

from core.logger import get_module_logger

logger = get_module_logger("parsers.prepare")

# Label for the n-th value line of a section
LabelFunc = Callable[[int, str], str]

UK_FOOTER = "WHOIS lookup made at"

JP_FIELD = re.compile(r'^(?:[a-z]\.\s*)?\[(?P<label>[^\]]+)\]\s*(?P<value>.*)$')
JP_LABELS = MappingProxyType({
    "organization": "Registrant Organization",
    "registrant": "Registrant Name",
    "administrative contact": "Admin ID",
    "technical contact": "Tech ID",
    "state": "Status",
})

PHONE_LINE = re.compile(r'^\+?[\d\s().-]{7,}$')


def _fixed(label: str) -> LabelFunc:
    return lambda index, line: label


def _contact(role: str, first: str) -> LabelFunc:
    """First line names the contact, the rest is address unless it looks like a phone or email"""
    def label(index: int, line: str) -> str:
        if index == 0:
            return f"{role} {first}"
        if "@" in line:
            return f"{role} email"
        if PHONE_LINE.match(line):
            return f"{role} phone"
        return f"{role} street"
    return label


UK_SECTIONS = MappingProxyType({
    "domain name": _fixed("Domain Name"),
    "registrant": _fixed("Registrant Name"),
    "registrant's address": _fixed("Registrant Street"),
    "registrar": _fixed("Registrar Name"),
    "registration status": _fixed("Status"),
    "name servers": _fixed("Name Server"),
})

EDU_SECTIONS = MappingProxyType({
    "registrant": _contact("Registrant", "organization"),
    "administrative contact": _contact("Admin", "name"),
    "technical contact": _contact("Tech", "name"),
    "name servers": _fixed("Name Server"),
})


def _rewrite_sections(text: str, sections: Dict[str, LabelFunc],
                      stop: Optional[str] = None) -> str:
    """
    Turn "Header:" blocks into labelled lines

    A line ending in a colon opens a section; a known header is dropped and
    every following value line without a colon gets the section's label. A
    blank line or the next header closes the section. Lines that already
    carry a colon are kept as they are.

    Args:
        text: Whois response with normalized line endings
        sections: Lower-cased header to label function
        stop: Prefix of a footer line that ends the useful data

    Returns:
        Rewritten text
    """
    output: List[str] = []
    label_for = None
    index = 0

    for line in text.split("\n"):
        stripped = line.strip()

        if stop and stripped.startswith(stop):
            break

        if not stripped:
            label_for = None
            output.append("")
            continue

        if stripped.endswith(":"):
            label_for = sections.get(stripped[:-1].strip().lower())
            index = 0
            if label_for is None:
                output.append(stripped)
            continue

        if label_for is not None and ":" not in stripped:
            output.append(f"{label_for(index, stripped)}: {stripped}")
            index += 1
        else:
            output.append(stripped)

    return "\n".join(output)


def prepare_uk(text: str) -> str:
    """Nominet layout"""
    return _rewrite_sections(text, UK_SECTIONS, stop=UK_FOOTER)


def prepare_edu(text: str) -> str:
    """EDUCAUSE layout"""
    return _rewrite_sections(text, EDU_SECTIONS)


def prepare_jp(text: str) -> str:
    """JPRS layout: "a. [Domain Name]   EXAMPLE.JP" becomes "Domain Name: EXAMPLE.JP" """
    output = []
    for line in text.split("\n"):
        match = JP_FIELD.match(line.strip())
        if not match:
            output.append(line)
            continue
        label = match.group("label").strip()
        label = JP_LABELS.get(label.lower(), label)
        output.append(f"{label}: {match.group('value').strip()}")
    return "\n".join(output)


PREPARERS = MappingProxyType({
    "uk": prepare_uk,
    "edu": prepare_edu,
    "jp": prepare_jp,
})


def prepare(text: str, extension: str) -> str:
    """
    Normalize a whois response ahead of the domain scan

    Args:
        text: Raw whois response
        extension: Punycode extension of the queried domain

    Returns:
        Text with "\\n" line endings, rewritten for known sectioned layouts
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    preparer = PREPARERS.get(extension.lower())
    if preparer is None:
        return text

    logger.debug(f"Preparing whois text for extension .{extension}")
    return preparer(text)
