"""
Section state machine shared by the IP and AS parsers

ARIN style responses are flat "Label: value" lists in which the meaning of
a label such as "City" or "RegDate" depends on the block it appears in.
Both parsers keep the current block as a Section and dispatch every label
through a table of handlers. A handler writes its value and returns the
section that is current afterwards.
"""
from enum import Enum
from typing import Callable, Dict, Optional

from core.models import Contact


class Section(Enum):
    NONE = "none"
    NETWORK = "network"
    ORGANIZATION = "organization"
    CUSTOMER = "customer"
    ABUSE = "abuse"
    TECHNICAL = "technical"
    ROUTING = "routing"


class ScanState:
    """Scratch state owned by a single scan"""

    def __init__(self, record):
        self.record = record
        self.section = Section.NONE


# (state, value) -> next section
Handler = Callable[[ScanState, str], Section]

# Label word, record attribute and section of the role contacts
ROLE_CONTACTS = (
    ("abuse", "abuse", Section.ABUSE),
    ("tech", "technical", Section.TECHNICAL),
    ("routing", "routing", Section.ROUTING),
)

ROLE_FIELDS = (
    ("name", "name"),
    ("phone", "phone"),
    ("email", "email"),
)


def append_line(current: str, value: str) -> str:
    """Add one line to a multi-line field; trailing newline is trimmed after the scan"""
    return f"{current}{value}\n"


def _role_handle(attribute: str, section: Section) -> Handler:
    def handler(state: ScanState, value: str) -> Section:
        setattr(state.record, attribute, Contact(id=value))
        return section
    return handler


def _role_field(attribute: str, section: Section, field: str, strict: bool) -> Handler:
    def handler(state: ScanState, value: str) -> Section:
        contact: Optional[Contact] = getattr(state.record, attribute)
        if contact is not None and (not strict or state.section is section):
            setattr(contact, field, value)
        return state.section
    return handler


def _role_ref(attribute: str, section: Section, strict: bool) -> Handler:
    def handler(state: ScanState, value: str) -> Section:
        contact: Optional[Contact] = getattr(state.record, attribute)
        if contact is not None and (not strict or state.section is section):
            contact.referral_url = value
        # The reference URL is the last line of a contact block
        return Section.NONE if strict else state.section
    return handler


def role_contact_handlers(strict: bool) -> Dict[str, Handler]:
    """
    Handlers for the OrgAbuse*, OrgTech* and OrgRouting* labels

    The Handle label opens the contact and its section. With strict set the
    remaining labels only apply while that section is current and the Ref
    label closes it; otherwise they apply to the contact whatever the
    current section is.

    Args:
        strict: Whether the contact block is section scoped

    Returns:
        Lower-cased label to handler, for both "orgabusename" and
        "org-abuse-name" spellings
    """
    handlers: Dict[str, Handler] = {}

    for word, attribute, section in ROLE_CONTACTS:
        role_handlers = {
            "handle": _role_handle(attribute, section),
            "ref": _role_ref(attribute, section, strict),
        }
        for suffix, field in ROLE_FIELDS:
            role_handlers[suffix] = _role_field(attribute, section, field, strict)

        for suffix, handler in role_handlers.items():
            handlers[f"org{word}{suffix}"] = handler
            handlers[f"org-{word}-{suffix}"] = handler

    return handlers
