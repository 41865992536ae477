"""
Exception hierarchy for whoisparser

Every failure raised by the parsers derives from WhoisParserError so callers
can catch them with a single except clause.
"""
from typing import Optional


class WhoisParserError(Exception):
    """Base class for all whoisparser errors"""

    message = "whois data could not be parsed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    def __str__(self):
        return self.args[0]


class ConfigError(WhoisParserError):
    message = "invalid configuration"


class DomainError(WhoisParserError):
    message = "domain whois data could not be parsed"


class DomainNotFoundError(DomainError):
    message = "domain is not found"


class DomainReservedError(DomainError):
    message = "domain is reserved to register"


class DomainPremiumError(DomainError):
    message = "domain is available at premium price"


class DomainBlockedError(DomainError):
    message = "domain is blocked due to brand protection"


class DomainDataInvalidError(DomainError):
    message = "domain whois data is invalid"


class DomainLimitExceededError(DomainError):
    message = "domain query limit exceeded"


class AsFieldMissingError(WhoisParserError):
    message = "mandatory AS field is missing"


class AsNumberMissingError(AsFieldMissingError):
    message = "ASNumber is missing"


class AsHandleMissingError(AsFieldMissingError):
    message = "ASHandle is missing"
