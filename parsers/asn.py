"""
Autonomous system whois parser
"""
from types import MappingProxyType

from core.errors import AsHandleMissingError, AsNumberMissingError
from core.logger import get_module_logger
from core.models import AsRecord, Contact, RecordType, WhoisResult, non_empty
from parsers.base import ParserBase
from parsers.sections import Section, ScanState, append_line, role_contact_handlers

logger = get_module_logger("parsers.asn")


class AsScanState(ScanState):
    """AS record being filled and the mandatory labels seen so far"""

    def __init__(self):
        super().__init__(AsRecord())
        self.has_number = False
        self.has_handle = False

    def organization(self):
        """Organization contact while its block is current"""
        if self.section is Section.ORGANIZATION:
            return self.record.organization
        return None


def _as_number(state: AsScanState, value: str) -> Section:
    state.record.number = value[2:] if value.startswith("AS") else value
    state.has_number = True
    return state.section


def _as_name(state: AsScanState, value: str) -> Section:
    state.record.name = value
    return state.section


def _as_handle(state: AsScanState, value: str) -> Section:
    state.record.handle = value
    state.has_handle = True
    return state.section


def _scoped(contact_attribute: str, record_attribute: str):
    """Organization field inside its block, AS record field elsewhere"""
    def handler(state: AsScanState, value: str) -> Section:
        organization = state.organization()
        if organization is not None:
            setattr(organization, contact_attribute, value)
        else:
            setattr(state.record, record_attribute, value)
        return state.section
    return handler


def _org_name(state: AsScanState, value: str) -> Section:
    state.record.organization = Contact(organization=value)
    return Section.ORGANIZATION


def _org_id(state: AsScanState, value: str) -> Section:
    organization = state.organization()
    if organization is not None:
        organization.id = value
    return state.section


def _organization_field(attribute: str, append: bool = False):
    def handler(state: AsScanState, value: str) -> Section:
        organization = state.organization()
        if organization is not None:
            if append:
                value = append_line(getattr(organization, attribute), value)
            setattr(organization, attribute, value)
        return state.section
    return handler


def _labels(handler, *labels):
    return {label: handler for label in labels}


HANDLERS = MappingProxyType({
    **_labels(_as_number, "asnumber", "as-number", "as number", "aut-num"),
    **_labels(_as_name, "asname", "as-name", "as name"),
    **_labels(_as_handle, "ashandle", "as-handle", "as handle"),
    **_labels(_scoped("registration_date", "reg_date"), "regdate", "registration-date", "created"),
    **_labels(_scoped("updated", "updated"), "updated", "last-modified"),
    **_labels(_scoped("referral_url", "ref"), "ref", "reference"),
    **_labels(_org_name, "orgname", "org-name", "organization", "owner"),
    **_labels(_org_id, "orgid", "org-id"),
    "address": _organization_field("street", append=True),
    "city": _organization_field("city"),
    **_labels(_organization_field("province"), "stateprov", "state"),
    **_labels(_organization_field("postal_code"), "postalcode", "postal-code"),
    "country": _organization_field("country"),
    "comment": _organization_field("comment", append=True),
    **role_contact_handlers(strict=False),
})


class AsParser(ParserBase):
    """Parser for autonomous system records"""

    name = "as"
    description = "ARIN ASNumber and RIPE aut-num responses"
    record_type = RecordType.AS
    comment_prefixes = ("#",)

    def parse(self, text: str) -> WhoisResult:
        """
        Parse an AS whois response

        Raises:
            AsNumberMissingError: No AS number label was found
            AsHandleMissingError: AS number found but no AS handle
        """
        state = AsScanState()
        self.run_handlers(text, state, HANDLERS)

        if not state.has_number:
            raise AsNumberMissingError()
        if not state.has_handle:
            raise AsHandleMissingError()

        record = state.record
        for contact in (record.organization, record.abuse, record.technical, record.routing):
            if contact is not None:
                contact.street = contact.street.strip()
        if record.organization is not None:
            record.organization.comment = record.organization.comment.strip()

        record.organization = non_empty(record.organization)
        record.abuse = non_empty(record.abuse)
        record.technical = non_empty(record.technical)
        record.routing = non_empty(record.routing)

        logger.debug(f"Parsed AS{record.number} ({record.handle})")
        return WhoisResult(as_info=record)
