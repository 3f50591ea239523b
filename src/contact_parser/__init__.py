"""Structured contact extraction from business card OCR text."""

from contact_parser.config import DEFAULT_CONFIG, ParserConfig, load_config
from contact_parser.models.contact import ParsedContact
from contact_parser.parser import ContactParser, parse

__version__ = "0.1.0"
__all__ = [
    "ContactParser",
    "DEFAULT_CONFIG",
    "ParsedContact",
    "ParserConfig",
    "load_config",
    "parse",
]
