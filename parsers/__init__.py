"""
whoisparser parsers package

Holds one parser per record type and the entry point that classifies a raw
whois response and hands it to the matching parser.
"""

from pathlib import Path
import importlib
import inspect
import pkgutil
from typing import Dict, Type

from core.logger import get_module_logger
from core.models import RecordType, WhoisResult
from parsers.base import ParserBase
from parsers.classifier import classify

logger = get_module_logger("parsers")


class ParserManager:
    """Registry of the available parsers, keyed by record type"""

    def __init__(self):
        self.parsers: Dict[RecordType, Type[ParserBase]] = {}
        self.loaded_parsers: Dict[RecordType, ParserBase] = {}

    def discover_parsers(self):
        """Import every module of this package and register its ParserBase subclasses"""
        parsers_path = Path(__file__).parent

        for _, module_name, is_pkg in pkgutil.iter_modules([str(parsers_path)]):
            if is_pkg:
                continue
            module = importlib.import_module(f"parsers.{module_name}")

            for _, item in inspect.getmembers(module, inspect.isclass):
                if (issubclass(item, ParserBase)
                        and item is not ParserBase
                        and item.__module__ == module.__name__
                        and item.record_type is not None):
                    self.parsers[item.record_type] = item
                    logger.debug(f"Discovered parser: {item.name} - {item.description}")

        return self.parsers

    def get_parser(self, record_type: RecordType) -> ParserBase:
        """Parser instance for a record type, created on first use"""
        record_type = RecordType(record_type)
        if record_type not in self.parsers:
            raise ValueError(f"No parser registered for {record_type.value} records")

        if record_type not in self.loaded_parsers:
            self.loaded_parsers[record_type] = self.parsers[record_type]()
        return self.loaded_parsers[record_type]

    def list_parsers(self):
        """Describe the registered parsers"""
        return {record_type.value: {
            "name": parser.name,
            "description": parser.description,
        } for record_type, parser in self.parsers.items()}

    def parse(self, text: str, record_type=None) -> WhoisResult:
        """
        Parse a whois response

        Args:
            text: Raw whois response
            record_type: Force a parser instead of classifying the text

        Returns:
            WhoisResult with exactly one branch populated

        Raises:
            WhoisParserError: The selected parser rejected the text
        """
        if record_type is None:
            record_type = classify(text)
        return self.get_parser(record_type).parse(text)


# Create a singleton parser manager instance
parser_manager = ParserManager()
parser_manager.discover_parsers()


def parse(text: str) -> WhoisResult:
    """Classify a whois response and parse it with the matching parser"""
    return parser_manager.parse(text)


def parse_domain_whois(text: str) -> WhoisResult:
    return parser_manager.parse(text, RecordType.DOMAIN)


def parse_ip_whois(text: str) -> WhoisResult:
    return parser_manager.parse(text, RecordType.IP)


def parse_as_whois(text: str) -> WhoisResult:
    return parser_manager.parse(text, RecordType.AS)


__all__ = [
    "ParserBase",
    "ParserManager",
    "RecordType",
    "classify",
    "parse",
    "parse_as_whois",
    "parse_domain_whois",
    "parse_ip_whois",
    "parser_manager",
]
