from core.models import RecordType
from parsers.classifier import classify, is_as_whois, is_ip_whois


def test_classify_as_response():
    assert classify("ASNumber: 7132\nASName: SBIS-AS") == RecordType.AS
    assert classify("ASNumber: 12345\nASName: TEST-AS\nASHandle: AS12345\nOrgName: Test Org") == RecordType.AS


def test_classify_ip_response():
    assert classify("NetRange: 192.168.0.0 - 192.168.255.255\nCIDR: 192.168.0.0/16") == RecordType.IP
    assert classify("inet6num:       2001:db8::/32\nnetname: EXAMPLE") == RecordType.IP


def test_classify_defaults_to_domain():
    assert classify("Domain Name: example.com\nRegistrar: X") == RecordType.DOMAIN
    assert classify("") == RecordType.DOMAIN


def test_as_labels_win_over_ip_labels():
    text = "NetRange: 10.0.0.0 - 10.255.255.255\nASNumber: 64512\nASHandle: AS64512"
    assert classify(text) == RecordType.AS


def test_signatures_are_case_sensitive():
    assert not is_as_whois("asnumber: 7132")
    assert not is_ip_whois("netrange: 10.0.0.0 - 10.0.0.255")


def test_ripe_aut_num_is_as(ripe_ip_whois):
    assert is_as_whois("aut-num:        AS3333")
    assert not is_as_whois(ripe_ip_whois)
    assert is_ip_whois(ripe_ip_whois)
