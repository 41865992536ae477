"""
Base class for the whois record parsers
"""
from typing import Iterator, Optional, Tuple

from core.models import RecordType, WhoisResult


class ParserBase:
    """Base class for all whois record parsers"""

    # Parser metadata
    name = "base"
    description = "Base parser class"
    record_type: Optional[RecordType] = None

    # Lines starting with these characters are registry banners or comments
    comment_prefixes = ("#",)

    # Shorter lines cannot hold a "label: value" pair worth reading
    min_line_length = 5

    def skip_line(self, line: str) -> bool:
        """True for lines that carry no field"""
        return (len(line) < self.min_line_length
                or ":" not in line
                or line.startswith(self.comment_prefixes))

    def iter_labels(self, text: str) -> Iterator[Tuple[str, str]]:
        """
        Yield (lower-cased label, value) for every field line

        Lines are taken one at a time; there is no continuation handling and
        empty values are kept.
        """
        for line in text.replace("\r\n", "\n").split("\n"):
            line = line.strip()
            if self.skip_line(line):
                continue
            label, value = line.split(":", 1)
            yield label.strip().lower(), value.strip()

    def run_handlers(self, text: str, state, handlers):
        """
        Feed every known label to its handler, tracking the section

        Args:
            text: Raw whois response
            state: Scan state passed to each handler
            handlers: Lower-cased label to handler returning the next section
        """
        for label, value in self.iter_labels(text):
            handler = handlers.get(label)
            if handler is not None:
                state.section = handler(state, value)

    def parse(self, text: str) -> WhoisResult:
        """
        Parse a whois response

        Args:
            text: Raw whois response

        Returns:
            WhoisResult with this parser's branch populated
        """
        raise NotImplementedError("Parsers must implement the parse method")
