import pytest

from core.errors import AsFieldMissingError, AsHandleMissingError, AsNumberMissingError
from parsers import parse_as_whois


def test_arin_as_record(arin_as_whois):
    as_info = parse_as_whois(arin_as_whois).as_info

    assert as_info.number == "7132"
    assert as_info.name == "SBIS-AS"
    assert as_info.handle == "AS7132"
    assert as_info.reg_date == "1996-09-13"
    assert as_info.updated == "2018-07-18"
    assert as_info.ref == "https://rdap.arin.net/registry/autnum/7132"


def test_arin_as_organization(arin_as_whois):
    organization = parse_as_whois(arin_as_whois).as_info.organization

    assert organization.organization == "AT&T Corp."
    assert organization.id == "AC-3280"
    assert organization.street == "7277 164th Ave NE\nAttn: IP Management"
    assert organization.city == "Redmond"
    assert organization.province == "WA"
    assert organization.postal_code == "98052"
    assert organization.country == "US"
    assert organization.registration_date == "2018-03-05"
    assert organization.updated == "2024-05-28"
    assert organization.comment == (
        "For policy abuse issues contact abuse@att.net\n"
        "For all subpoena, Internet, court order related matters and emergency requests contact\n"
        "11760 US Highway 1\n"
        "North Palm Beach, FL 33408\n"
        "Main Number: 800-635-6840\n"
        "Fax: 888-938-4715"
    )
    assert organization.referral_url == "https://rdap.arin.net/registry/entity/AC-3280"


def test_arin_as_role_contacts(arin_as_whois):
    as_info = parse_as_whois(arin_as_whois).as_info

    assert as_info.abuse.id == "ABUSE7-ARIN"
    assert as_info.abuse.name == "abuse"
    assert as_info.abuse.phone == "+1-919-319-8167"
    assert as_info.abuse.email == "abuse@att.net"
    assert as_info.routing.id == "ROUTI59-ARIN"
    assert as_info.routing.email == "routing@cbbtier3.att.net"
    assert as_info.technical.name == "IPAdmin-ATT Internet Services"
    assert as_info.technical.referral_url == "https://rdap.arin.net/registry/entity/ZS44-ARIN"


def test_partial_as_record(arin_as_partial_whois):
    as_info = parse_as_whois(arin_as_partial_whois).as_info

    assert as_info.number == "99999"
    assert as_info.organization.street == "456 Test Blvd"
    assert as_info.organization.comment == "This is a test AS."
    assert as_info.abuse.email == "abuse@test.org"
    assert as_info.routing is None
    assert as_info.technical is None


def test_as_prefix_is_stripped():
    as_info = parse_as_whois("aut-num: AS3333\nas-name: RIPE-NCC-AS\nASHandle: AS3333\n").as_info
    assert as_info.number == "3333"
    assert as_info.name == "RIPE-NCC-AS"


def test_role_contact_fields_apply_outside_their_section():
    text = (
        "ASNumber: 64500\nASHandle: AS64500\n"
        "OrgTechHandle: TECH-1\nOrgTechRef: https://rdap.example/tech\n"
        "OrgTechName: Network Team\n"
    )
    technical = parse_as_whois(text).as_info.technical
    assert technical.name == "Network Team"


def test_missing_number():
    with pytest.raises(AsNumberMissingError) as excinfo:
        parse_as_whois("This is not a valid AS WHOIS response")
    assert str(excinfo.value) == "ASNumber is missing"


def test_missing_handle():
    with pytest.raises(AsHandleMissingError):
        parse_as_whois("ASNumber: 64500\nASName: EXAMPLE\n")


def test_missing_fields_share_a_base_class():
    with pytest.raises(AsFieldMissingError):
        parse_as_whois("ASName: EXAMPLE\n")


def test_contacts_without_values_are_absent():
    as_info = parse_as_whois("ASNumber: 64500\nASHandle: AS64500\nOrgName:\nOrgAbuseHandle:\n").as_info

    assert as_info.organization is None
    assert as_info.abuse is None
    assert "organization" not in as_info.to_dict()


def test_contact_with_one_field_is_kept():
    as_info = parse_as_whois("ASNumber: 64500\nASHandle: AS64500\nOrgTechHandle: TECH-1\n").as_info

    assert as_info.technical.id == "TECH-1"
    assert as_info.technical.name == ""
    assert as_info.technical.to_dict() == {"id": "TECH-1"}


def test_org_id_only_inside_organization_block():
    text = (
        "ASNumber: 64500\nASHandle: AS64500\n"
        "OrgName: Example\nOrgAbuseHandle: AB-1\nOrgId: OTHER-1\n"
    )
    organization = parse_as_whois(text).as_info.organization

    assert organization.organization == "Example"
    assert organization.id == ""
