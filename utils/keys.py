"""
Field label normalization

Registries spell the same field in dozens of ways ("Creation Date",
"created", "Registered on", "Domain record activated", ...). The table below
maps every known spelling, after clear_key_name() has folded case and
punctuation, to one canonical key.

Contact labels are looked up in their "registrant ..." form: the domain
parser rewrites "Admin Email" to "registrant email" before asking for the
canonical key, so one set of entries covers every contact role.
"""
import re
from types import MappingProxyType

# Top-level domain keys
DOMAIN_ID = "domain_id"
DOMAIN_NAME = "domain_name"
DOMAIN_STATUS = "domain_status"
DOMAIN_DNSSEC = "domain_dnssec"
WHOIS_SERVER = "whois_server"
NAME_SERVERS = "name_servers"
CREATED_DATE = "created_date"
UPDATED_DATE = "updated_date"
EXPIRED_DATE = "expired_date"
REFERRAL_URL = "referral_url"

# Contact keys
CONTACT_ID = "registrant_id"
CONTACT_NAME = "registrant_name"
CONTACT_ORGANIZATION = "registrant_organization"
CONTACT_STREET = "registrant_street"
CONTACT_CITY = "registrant_city"
CONTACT_PROVINCE = "registrant_state_province"
CONTACT_POSTAL_CODE = "registrant_postal_code"
CONTACT_COUNTRY = "registrant_country"
CONTACT_PHONE = "registrant_phone"
CONTACT_PHONE_EXT = "registrant_phone_ext"
CONTACT_FAX = "registrant_fax"
CONTACT_FAX_EXT = "registrant_fax_ext"
CONTACT_EMAIL = "registrant_email"

_KEY_SPELLINGS = {
    DOMAIN_ID: (
        "id", "roid", "domain id", "domain roid", "registry domain id",
        "domain handle", "domain repository object id",
    ),
    DOMAIN_NAME: (
        "domain", "domain name", "domainname", "domain names", "ascii",
        "domain ascii", "complete domain name",
    ),
    DOMAIN_STATUS: (
        "status", "domain status", "state", "registration status",
        "domain state", "epp status", "registry status", "statut",
    ),
    DOMAIN_DNSSEC: (
        "dnssec", "domain dnssec", "dnssec status", "dnssec signed",
        "signed", "signing key",
    ),
    WHOIS_SERVER: (
        "whois server", "whois", "registrar whois server", "registrar whois",
        "whois service", "registry whois server",
    ),
    NAME_SERVERS: (
        "name server", "name servers", "nameserver", "nameservers", "nserver",
        "ns", "dns", "dns servers", "host name", "hostname", "domain nameservers",
        "domain servers in listed order", "name server information",
        "nameservers in listed order", "primary server", "secondary server",
    ),
    CREATED_DATE: (
        "created", "created on", "created date", "creation date", "create date",
        "registered", "registered on", "registered date", "registration date",
        "registration time", "domain registration date", "domain created",
        "domain create date", "record created", "domain record activated",
        "activation date", "commencement date", "registered at", "assigned",
        "first registration date", "created at",
    ),
    UPDATED_DATE: (
        "updated", "updated date", "updated on", "update date", "last update",
        "last updated", "last updated on", "last updated date", "last modified",
        "last-modified", "modified", "modified date", "changed", "last changed",
        "domain last updated date", "domain record last updated",
        "domain datelastmodified", "last update of whois database",
    ),
    EXPIRED_DATE: (
        "expires", "expire", "expired", "expires on", "expire date",
        "expiry date", "expiration date", "expiration time", "expiry",
        "registry expiry date", "registrar registration expiration date",
        "domain expires", "domain expiration date", "domain expiry date",
        "paid-till", "valid until", "renewal date", "record expires on",
        "expires at", "free-date",
    ),
    REFERRAL_URL: (
        "referral url", "registrar url", "url", "referral", "registrar website",
        "registrar web",
    ),
    CONTACT_ID: (
        "registrant id", "registrant contact id", "registrant handle",
        "registrant iana id", "registrant nic handle", "registrant contact handle",
        "registrant ident",
    ),
    CONTACT_NAME: (
        "registrant name", "registrant contact name", "registrant person",
        "registrant contact", "registrant contact person",
        "registrant full name",
    ),
    CONTACT_ORGANIZATION: (
        "registrant organization", "registrant organisation", "registrant org",
        "registrant company", "registrant company name", "registrant organization name",
        "registrant contact organization", "registrant contact organisation",
    ),
    CONTACT_STREET: (
        "registrant street", "registrant street1", "registrant street2",
        "registrant street3", "registrant address", "registrant address1",
        "registrant address2", "registrant address3", "registrant street address",
        "registrant s address", "registrant contact address", "registrant postal address",
    ),
    CONTACT_CITY: (
        "registrant city", "registrant town", "registrant contact city",
    ),
    CONTACT_PROVINCE: (
        "registrant state province", "registrant stateprovince", "registrant state",
        "registrant province", "registrant contact state province",
    ),
    CONTACT_POSTAL_CODE: (
        "registrant postal code", "registrant postalcode", "registrant postcode",
        "registrant post code", "registrant zip", "registrant zip code",
        "registrant zipcode", "registrant contact postal code",
    ),
    CONTACT_COUNTRY: (
        "registrant country", "registrant country code", "registrant country economy",
        "registrant contact country",
    ),
    CONTACT_PHONE: (
        "registrant phone", "registrant phone number", "registrant telephone",
        "registrant tel", "registrant voice", "registrant contact phone",
        "registrant abuse contact phone",
    ),
    CONTACT_PHONE_EXT: (
        "registrant phone ext", "registrant phone extension", "registrant ext",
        "registrant telephone ext",
    ),
    CONTACT_FAX: (
        "registrant fax", "registrant fax number", "registrant facsimile",
        "registrant fax no", "registrant contact fax",
    ),
    CONTACT_FAX_EXT: (
        "registrant fax ext", "registrant fax extension",
    ),
    CONTACT_EMAIL: (
        "registrant email", "registrant e-mail", "registrant email address",
        "registrant mail", "registrant contact email", "registrant abuse contact email",
    ),
}

KEY_RULES = MappingProxyType({
    spelling: canonical
    for canonical, spellings in _KEY_SPELLINGS.items()
    for spelling in spellings
})

_SEPARATORS = re.compile(r"[_/\\',;:]")


def clear_key_name(key: str) -> str:
    """
    Fold a raw field label into its lookup form

    Anything from the first "(" on is dropped, dots are removed, the
    separators _ / \\ ' , ; : become spaces, whitespace is collapsed and the
    result is lower-cased.

    Args:
        key: Raw label as it appears before the colon

    Returns:
        Cleaned label
    """
    key = key.split("(", 1)[0]
    key = key.replace(".", "")
    key = _SEPARATORS.sub(" ", key)
    return " ".join(key.split()).lower()


def search_key_name(key: str) -> str:
    """Return the canonical key for a raw label, or the cleaned label when unknown"""
    key = clear_key_name(key)
    return KEY_RULES.get(key, key)
