"""
Record type detection for raw whois responses
"""
from core.logger import get_module_logger
from core.models import RecordType

logger = get_module_logger("parsers.classifier")

# Checked before the IP labels: IP dumps may mention AS labels, never the reverse
AS_SIGNATURES = ("ASNumber:", "ASName:", "aut-num:")
IP_SIGNATURES = ("NetRange:", "CIDR:", "inetnum:", "inet6num:")


def is_as_whois(text: str) -> bool:
    return any(signature in text for signature in AS_SIGNATURES)


def is_ip_whois(text: str) -> bool:
    return any(signature in text for signature in IP_SIGNATURES)


def classify(text: str) -> RecordType:
    """
    Decide which parser handles a whois response

    Args:
        text: Raw whois response

    Returns:
        RecordType.AS, RecordType.IP, or RecordType.DOMAIN as the default
    """
    if is_as_whois(text):
        record_type = RecordType.AS
    elif is_ip_whois(text):
        record_type = RecordType.IP
    else:
        record_type = RecordType.DOMAIN

    logger.debug(f"Classified whois response as {record_type.value}")
    return record_type
