"""
Data model for parsed whois records

Every entity is a plain dataclass built fresh for a single parse call.
to_dict() renders an entity for JSON output and omits every absent value
(empty strings, empty lists, None, False).
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class RecordType(str, Enum):
    """Kind of registry response"""

    DOMAIN = "domain"
    IP = "ip"
    AS = "as"


def _is_absent(value: Any) -> bool:
    return value is None or value is False or value == "" or value == [] or value == {}


def _render(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_render(item) for item in value]
    return value


def _to_dict(entity: Any, names: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Render a dataclass as a dict, skipping absent values

    Args:
        entity: Dataclass instance
        names: Optional mapping of attribute name to output key

    Returns:
        Dict with the non-empty fields of the entity
    """
    names = names or {}
    data = {}
    for item in fields(entity):
        value = _render(getattr(entity, item.name))
        if _is_absent(value):
            continue
        data[names.get(item.name, item.name)] = value
    return data


@dataclass
class Contact:
    """Person, role or organization attached to a record"""

    id: str = ""
    name: str = ""
    organization: str = ""
    street: str = ""
    city: str = ""
    province: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    phone_ext: str = ""
    fax: str = ""
    fax_ext: str = ""
    email: str = ""
    referral_url: str = ""
    registration_date: str = ""
    updated: str = ""
    comment: str = ""

    def is_empty(self) -> bool:
        """True when no field carries a value"""
        return all(getattr(self, item.name) == "" for item in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)


def non_empty(contact: Optional[Contact]) -> Optional[Contact]:
    """Return the contact, or None when it is missing or has no data"""
    if contact is None or contact.is_empty():
        return None
    return contact


@dataclass
class DomainRecord:
    """Registration data of a domain name"""

    id: str = ""
    domain: str = ""
    punycode: str = ""
    name: str = ""
    extension: str = ""
    whois_server: str = ""
    status: List[str] = field(default_factory=list)
    name_servers: List[str] = field(default_factory=list)
    dnssec: bool = False
    created_date: str = ""
    created_date_in_time: Optional[datetime] = None
    updated_date: str = ""
    updated_date_in_time: Optional[datetime] = None
    expiration_date: str = ""
    expiration_date_in_time: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)


@dataclass
class NetworkBlock:
    """One allocated address range of an IP record"""

    range: str = ""
    cidr: List[str] = field(default_factory=list)
    name: str = ""
    handle: str = ""
    parent: str = ""
    type: str = ""
    origin_as: str = ""
    organization_name: str = ""
    organization: Optional[Contact] = None
    customer: Optional[Contact] = None
    reg_date: str = ""
    updated: str = ""
    comment: str = ""
    ref: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)


@dataclass
class IpRecord:
    """IP allocation record"""

    networks: List[NetworkBlock] = field(default_factory=list)
    abuse: Optional[Contact] = None
    technical: Optional[Contact] = None
    routing: Optional[Contact] = None

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)


@dataclass
class AsRecord:
    """Autonomous system record"""

    number: str = ""
    name: str = ""
    handle: str = ""
    reg_date: str = ""
    updated: str = ""
    ref: str = ""
    organization: Optional[Contact] = None
    routing: Optional[Contact] = None
    technical: Optional[Contact] = None
    abuse: Optional[Contact] = None

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)


@dataclass
class WhoisResult:
    """
    Parsed whois response

    Exactly one of domain, ip and as_info is set after a successful parse.
    The five role contacts only accompany the domain branch.
    """

    domain: Optional[DomainRecord] = None
    registrar: Optional[Contact] = None
    registrant: Optional[Contact] = None
    administrative: Optional[Contact] = None
    technical: Optional[Contact] = None
    billing: Optional[Contact] = None
    ip: Optional[IpRecord] = None
    as_info: Optional[AsRecord] = None

    @property
    def record_type(self) -> Optional[RecordType]:
        if self.as_info is not None:
            return RecordType.AS
        if self.ip is not None:
            return RecordType.IP
        if self.domain is not None:
            return RecordType.DOMAIN
        return None

    def to_dict(self) -> Dict[str, Any]:
        # "as" is a keyword, so the attribute carries a suffix
        data = _to_dict(self, names={"as_info": "as"})

        # An IP record without networks still names its branch
        record_type = self.record_type
        if record_type is not None and record_type.value not in data:
            data[record_type.value] = {}

        return data
