import pytest

ARIN_AS_WHOIS = """
# ARIN WHOIS data and services are subject to the Terms of Use
# available at: https://www.arin.net/resources/registry/whois/tou/
#
# If you see inaccuracies in the results, please report at
# https://www.arin.net/resources/registry/whois/inaccuracy_reporting/
#
# Copyright 1997-2024, American Registry for Internet Numbers, Ltd.
#

ASNumber:       7132
ASName:         SBIS-AS
ASHandle:       AS7132
RegDate:        1996-09-13
Updated:        2018-07-18
Ref:            https://rdap.arin.net/registry/autnum/7132


OrgName:        AT&T Corp.
OrgId:          AC-3280
Address:        7277 164th Ave NE
Address:        Attn: IP Management
City:           Redmond
StateProv:      WA
PostalCode:     98052
Country:        US
RegDate:        2018-03-05
Updated:        2024-05-28
Comment:        For policy abuse issues contact abuse@att.net
Comment:        For all subpoena, Internet, court order related matters and emergency requests contact
Comment:        11760 US Highway 1
Comment:        North Palm Beach, FL 33408
Comment:        Main Number: 800-635-6840
Comment:        Fax: 888-938-4715
Ref:            https://rdap.arin.net/registry/entity/AC-3280


OrgAbuseHandle: ABUSE7-ARIN
OrgAbuseName:   abuse
OrgAbusePhone:  +1-919-319-8167
OrgAbuseEmail:  abuse@att.net
OrgAbuseRef:    https://rdap.arin.net/registry/entity/ABUSE7-ARIN

OrgRoutingHandle: ROUTI59-ARIN
OrgRoutingName:   Routing POC
OrgRoutingPhone:  +1-999-999-9999
OrgRoutingEmail:  routing@cbbtier3.att.net
OrgRoutingRef:    https://rdap.arin.net/registry/entity/ROUTI59-ARIN

OrgTechHandle: ZS44-ARIN
OrgTechName:   IPAdmin-ATT Internet Services
OrgTechPhone:  +1-888-510-5545
OrgTechEmail:  ipadmin@semail.att.com
OrgTechRef:    https://rdap.arin.net/registry/entity/ZS44-ARIN


#
# ARIN WHOIS data and services are subject to the Terms of Use
# available at: https://www.arin.net/resources/registry/whois/tou/
#
# If you see inaccuracies in the results, please report at
# https://www.arin.net/resources/registry/whois/inaccuracy_reporting/
#
# Copyright 1997-2024, American Registry for Internet Numbers, Ltd.
#
"""

ARIN_AS_PARTIAL_WHOIS = """
ASNumber:       99999
ASName:         TEST-AS
ASHandle:       AS99999
RegDate:        2021-01-01
Updated:        2022-01-01
Ref:            https://rdap.arin.net/registry/autnum/99999

OrgName:        Test Organization
OrgId:          TO-5678
Address:        456 Test Blvd
City:           Testville
StateProv:      TS
PostalCode:     54321
Country:        US
RegDate:        2021-01-01
Updated:        2022-01-01
Comment:        This is a test AS.
Ref:            https://rdap.arin.net/registry/entity/TO-5678

OrgAbuseHandle: ABUSE9-ARIN
OrgAbuseName:   abuse-test
OrgAbusePhone:  +1-800-555-1234
OrgAbuseEmail:  abuse@test.org
OrgAbuseRef:    https://rdap.arin.net/registry/entity/ABUSE9-ARIN
"""

ARIN_IP_WHOIS = """
NetRange:       99.10.64.0 - 99.75.191.255
CIDR:           99.74.0.0/16, 99.75.0.0/17, 99.72.0.0/15, 99.16.0.0/12, 99.11.0.0/16, 99.64.0.0/13, 99.32.0.0/11, 99.75.128.0/18, 99.10.128.0/17, 99.12.0.0/14, 99.10.64.0/18
NetName:        SBCIS-SBIS
NetHandle:      NET-99-10-64-0-1
Parent:         NET99 (NET-99-0-0-0-0)
NetType:        Direct Allocation
OriginAS:       AS7132
Organization:   AT&T Corp. (AC-3280)
RegDate:        2008-02-25
Updated:        2018-07-19
Ref:            https://rdap.arin.net/registry/ip/99.10.64.0
"""

ARIN_IP_CONTACTS_WHOIS = """
NetRange:       192.0.2.0 - 192.0.2.255
CIDR:           192.0.2.0/24
NetName:        TEST-NET-1
NetHandle:      NET-192-0-2-0-1
Parent:         NET-192-0-0-0-0
NetType:        Direct Allocation
OriginAS:       AS99999
Organization:   Example Corp. (EX-1234)
RegDate:        2020-01-01
Updated:        2023-01-01
Ref:            https://rdap.arin.net/registry/ip/192.0.2.0

OrgName:        Example Corp.
OrgId:          EX-1234
Address:        123 Example Street
Address:        Suite 100
City:           Exampleville
StateProv:      EX
PostalCode:     12345
Country:        US
RegDate:        2020-01-01
Updated:        2023-01-01
Comment:        This is a test network.
Ref:            https://rdap.arin.net/registry/entity/EX-1234

OrgAbuseHandle: ABUSE1-ARIN
OrgAbuseName:   Abuse Team
OrgAbusePhone:  +1-800-123-4567
OrgAbuseEmail:  abuse@example.com
OrgAbuseRef:    https://rdap.arin.net/registry/entity/ABUSE1-ARIN

OrgRoutingHandle: ROUTE1-ARIN
OrgRoutingName:   Routing Department
OrgRoutingPhone:  +1-800-765-4321
OrgRoutingEmail:  routing@example.com
OrgRoutingRef:    https://rdap.arin.net/registry/entity/ROUTE1-ARIN

OrgTechHandle: TECH1-ARIN
OrgTechName:   Technical Support
OrgTechPhone:  +1-800-111-2222
OrgTechEmail:  tech@example.com
OrgTechRef:    https://rdap.arin.net/registry/entity/TECH1-ARIN
"""

RIPE_IP_WHOIS = """
% This is the RIPE Database query service.

inetnum:        193.0.0.0 - 193.0.7.255
netname:        RIPE-NCC
organization:   ORG-RIEN1-RIPE
country:        NL
"""

GTLD_DOMAIN_WHOIS = """Domain Name: EXAMPLE.COM
Registry Domain ID: 2336799_DOMAIN_COM-VRSN
Registrar WHOIS Server: whois.iana.org
Registrar URL: http://res-dom.iana.org
Updated Date: 2024-08-14T07:01:34Z
Creation Date: 1995-08-14T04:00:00Z
Registry Expiry Date: 2025-08-13T04:00:00Z
Registrar: RESERVED-Internet Assigned Numbers Authority
Registrar IANA ID: 376
Registrar Abuse Contact Email: ABUSE@IANA.ORG
Registrar Abuse Contact Phone: +1.3103015800
Domain Status: clientDeleteProhibited https://icann.org/epp#clientDeleteProhibited
Domain Status: clientTransferProhibited https://icann.org/epp#clientTransferProhibited
Domain Status: clientDeleteProhibited https://icann.org/epp#clientDeleteProhibited
Registrant Name: John Doe
Registrant Organization: Example Inc.
Registrant Street: 1 Main St
Registrant Street: Floor 2
Registrant City: Springfield
Registrant Country: US
Registrant Email: JOHN@EXAMPLE.COM
Admin Email: admin@example.com
Tech Name: Tech Person
Name Server: A.IANA-SERVERS.NET
Name Server: B.IANA-SERVERS.NET
Name Server: a.iana-servers.net.
DNSSEC: signedDelegation
>>> Last update of whois database: 2024-10-01T00:00:00Z <<<
"""

UK_DOMAIN_WHOIS = """
    Domain name:
        example.co.uk

    Registrant:
        Example Ltd

    Registrant's address:
        1 High Street
        London
        GB

    Registrar:
        Example Registrar Ltd [Tag = EXAMPLE]
        URL: https://registrar.example

    Relevant dates:
        Registered on: 01-Jan-2000
        Expiry date:  01-Jan-2030
        Last updated:  05-Feb-2024

    Registration status:
        Registered until expiry date.

    Name servers:
        ns1.example.co.uk
        ns2.example.co.uk

    WHOIS lookup made at 10:00:00 01-Oct-2024

This WHOIS information is provided for free by Nominet UK.
"""

JP_DOMAIN_WHOIS = """[ JPRS database provides information on network administration. ]

Domain Information:
a. [Domain Name]                EXAMPLE.JP
g. [Organization]               Example Co., Ltd.
l. [Organization Type]          Corporation
m. [Administrative Contact]     EX001JP
n. [Technical Contact]          EX002JP
p. [Name Server]                ns1.example.jp
p. [Name Server]                ns2.example.jp
s. [Signing Key]
[State]                         Connected (2025/03/31)
[Registered Date]               2001/03/22
[Connected Date]                2001/03/22
[Last Update]                   2024/04/01 01:05:01 (JST)
"""

EDU_DOMAIN_WHOIS = """Domain Name: EXAMPLE.EDU

Registrant:
\tExample University
\t1 College Ave
\tSpringfield, IL 62701
\tUSA

Administrative Contact:
\tJane Admin
\tExample University
\t1 College Ave
\tSpringfield, IL 62701
\tUSA
\t+1.2175550100
\tjane@example.edu

Name Servers:
\tNS1.EXAMPLE.EDU
\tNS2.EXAMPLE.EDU

Domain record activated:    01-Jan-1990
Domain record last updated: 15-Mar-2024
Domain expires:             31-Jul-2025
"""


@pytest.fixture
def arin_as_whois():
    return ARIN_AS_WHOIS


@pytest.fixture
def arin_as_partial_whois():
    return ARIN_AS_PARTIAL_WHOIS


@pytest.fixture
def arin_ip_whois():
    return ARIN_IP_WHOIS


@pytest.fixture
def arin_ip_contacts_whois():
    return ARIN_IP_CONTACTS_WHOIS


@pytest.fixture
def ripe_ip_whois():
    return RIPE_IP_WHOIS


@pytest.fixture
def gtld_domain_whois():
    return GTLD_DOMAIN_WHOIS


@pytest.fixture
def uk_domain_whois():
    return UK_DOMAIN_WHOIS


@pytest.fixture
def jp_domain_whois():
    return JP_DOMAIN_WHOIS


@pytest.fixture
def edu_domain_whois():
    return EDU_DOMAIN_WHOIS
