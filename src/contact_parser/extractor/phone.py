"""Phone number extraction and formatting."""

import logging
import re

from contact_parser.extractor.base import FieldExtractor
from contact_parser.models.contact import ParsedPhoneNumber, candidate_id
from contact_parser.patterns import PHONE
from contact_parser.validators import is_valid_phone

logger = logging.getLogger(__name__)

# Words printed next to a number that tell what kind of line it is
_LABEL_PATTERNS = (
    ("mobile", re.compile(r"\b(?:mobile|cell)\b", re.IGNORECASE)),
    ("fax", re.compile(r"\bfax\b", re.IGNORECASE)),
    ("home", re.compile(r"\bhome\b", re.IGNORECASE)),
    ("main", re.compile(r"\bmain\b", re.IGNORECASE)),
    ("work", re.compile(r"\b(?:work|office|direct)\b", re.IGNORECASE)),
)


def format_phone(number: str) -> str:
    """
    Format a phone number for display.

    Ten digits become ``(555) 123-4567``, eleven digits starting with 1
    become ``+1 (555) 123-4567``. Anything else is returned unchanged.
    """
    digits = "".join(ch for ch in number if ch.isdigit())
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return number


def detect_phone_label(before: str, after: str, default: str = "work") -> str:
    """
    Guess the phone type from the text around a number on its line.

    The keyword closest before the number wins. When there is none, the
    text after the number is checked up to the next digit.
    """
    best: tuple[int, str] | None = None
    for label, pattern in _LABEL_PATTERNS:
        for m in pattern.finditer(before):
            if best is None or m.end() > best[0]:
                best = (m.end(), label)
    if best is not None:
        return best[1]

    trailing = re.split(r"\d", after, maxsplit=1)[0]
    for label, pattern in _LABEL_PATTERNS:
        if pattern.search(trailing):
            return label
    return default


class PhoneExtractor(FieldExtractor[list[ParsedPhoneNumber]]):
    """Extract phone numbers with a display format and a detected label."""

    @property
    def name(self) -> str:
        return "phone"

    def extract(self, text: str) -> list[ParsedPhoneNumber]:
        phones = []
        for index, match in enumerate(PHONE.find_all(text)):
            line_start = text.rfind("\n", 0, match.start) + 1
            line_end = text.find("\n", match.end)
            if line_end == -1:
                line_end = len(text)

            label = detect_phone_label(
                text[line_start:match.start],
                text[match.end:line_end],
                default=self._config.default_phone_label,
            )
            phones.append(
                ParsedPhoneNumber(
                    id=candidate_id(self.name, index, match.text),
                    number=match.text,
                    formatted_number=format_phone(match.text),
                    label=label,
                    confidence=self._config.phone_confidence,
                    is_valid=is_valid_phone(
                        match.text,
                        min_digits=self._config.phone_min_digits,
                        max_digits=self._config.phone_max_digits,
                    ),
                )
            )

        logger.debug("Found %d phone candidate(s)", len(phones))
        return phones
