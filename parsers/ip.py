"""
IP block whois parser

Reads ARIN style NetRange responses, and RIPE style inetnum/inet6num
responses as a fallback, into a list of network blocks with their
organization and customer contacts plus the abuse, technical and routing
contacts of the response.
"""
from types import MappingProxyType
from typing import Optional

from core.logger import get_module_logger
from core.models import Contact, IpRecord, NetworkBlock, RecordType, WhoisResult, non_empty
from parsers.base import ParserBase
from parsers.sections import Section, ScanState, append_line, role_contact_handlers

logger = get_module_logger("parsers.ip")

# Sections that own a contact nested in the current block
NESTED_SECTIONS = frozenset((Section.ORGANIZATION, Section.CUSTOMER))


class IpScanState(ScanState):
    """Blocks collected so far and the one being filled"""

    def __init__(self):
        super().__init__(IpRecord())
        self.network: Optional[NetworkBlock] = None
        self.fallback = NetworkBlock()

    def nested_contact(self) -> Optional[Contact]:
        if self.network is None:
            return None
        if self.section is Section.ORGANIZATION:
            return self.network.organization
        if self.section is Section.CUSTOMER:
            return self.network.customer
        return None


def _net_range(state: IpScanState, value: str) -> Section:
    state.network = NetworkBlock(range=value)
    state.record.networks.append(state.network)
    return Section.NETWORK


def _fallback_range(state: IpScanState, value: str) -> Section:
    state.fallback.range = value
    return state.section


def _cidr(state: IpScanState, value: str) -> Section:
    if state.network is None:
        return state.section
    state.network.cidr.extend(part.strip() for part in value.split(",") if part.strip())
    return Section.NETWORK


def _network_field(attribute: str):
    def handler(state: IpScanState, value: str) -> Section:
        if state.network is None:
            return state.section
        setattr(state.network, attribute, value)
        return Section.NETWORK
    return handler


def _organization(state: IpScanState, value: str) -> Section:
    block = state.network if state.network is not None else state.fallback
    block.organization_name = value
    return state.section


def _org_name(state: IpScanState, value: str) -> Section:
    if state.network is None:
        return state.section
    if state.network.organization is None:
        state.network.organization = Contact()
    state.network.organization.organization = value
    return Section.ORGANIZATION


def _org_id(state: IpScanState, value: str) -> Section:
    if state.network is None:
        return state.section
    if state.network.organization is None:
        state.network.organization = Contact()
    state.network.organization.id = value
    return Section.ORGANIZATION


def _cust_name(state: IpScanState, value: str) -> Section:
    if state.network is None:
        return state.section
    if state.network.customer is None:
        state.network.customer = Contact()
    state.network.customer.name = value
    return Section.CUSTOMER


def _scoped(contact_attribute: str, network_attribute: str, closes: bool = False):
    """Write to the nested contact of the section, or to the block itself"""
    def handler(state: IpScanState, value: str) -> Section:
        if state.network is None:
            return state.section
        if state.section in NESTED_SECTIONS:
            contact = state.nested_contact()
            if contact is not None:
                setattr(contact, contact_attribute, value)
            return Section.NETWORK if closes else state.section
        setattr(state.network, network_attribute, value)
        return state.section
    return handler


def _nested_field(attribute: str, append: bool = False):
    def handler(state: IpScanState, value: str) -> Section:
        contact = state.nested_contact()
        if contact is not None:
            if append:
                value = append_line(getattr(contact, attribute), value)
            setattr(contact, attribute, value)
        return state.section
    return handler


def _comment(state: IpScanState, value: str) -> Section:
    if state.network is None:
        return state.section
    contact = state.nested_contact()
    if contact is not None:
        contact.comment = append_line(contact.comment, value)
    else:
        state.network.comment = append_line(state.network.comment, value)
    return state.section


HANDLERS = MappingProxyType({
    "netrange": _net_range,
    "inetnum": _fallback_range,
    "inet6num": _fallback_range,
    "cidr": _cidr,
    "netname": _network_field("name"),
    "nethandle": _network_field("handle"),
    "parent": _network_field("parent"),
    "nettype": _network_field("type"),
    "originas": _network_field("origin_as"),
    "organization": _organization,
    "orgname": _org_name,
    "orgid": _org_id,
    "custname": _cust_name,
    "regdate": _scoped("registration_date", "reg_date"),
    "updated": _scoped("updated", "updated"),
    "ref": _scoped("referral_url", "ref", closes=True),
    "address": _nested_field("street", append=True),
    "city": _nested_field("city"),
    "stateprov": _nested_field("province"),
    "state": _nested_field("province"),
    "postalcode": _nested_field("postal_code"),
    "postal-code": _nested_field("postal_code"),
    "country": _nested_field("country"),
    "comment": _comment,
    **role_contact_handlers(strict=True),
})


def _finish_contact(contact: Optional[Contact]) -> Optional[Contact]:
    if contact is None:
        return None
    contact.street = contact.street.strip()
    contact.comment = contact.comment.strip()
    return non_empty(contact)


class IpParser(ParserBase):
    """Parser for IP address block records"""

    name = "ip"
    description = "ARIN NetRange and RIPE inetnum responses"
    record_type = RecordType.IP
    comment_prefixes = ("#",)

    def parse(self, text: str) -> WhoisResult:
        state = IpScanState()
        self.run_handlers(text, state, HANDLERS)

        record = state.record
        if not record.networks and state.fallback.range:
            logger.debug(f"No NetRange found, using inetnum block {state.fallback.range}")
            record.networks.append(state.fallback)

        for network in record.networks:
            network.comment = network.comment.strip()
            network.organization = _finish_contact(network.organization)
            network.customer = _finish_contact(network.customer)

        record.abuse = non_empty(record.abuse)
        record.technical = non_empty(record.technical)
        record.routing = non_empty(record.routing)

        logger.debug(f"Parsed {len(record.networks)} network block(s)")
        return WhoisResult(ip=record)
