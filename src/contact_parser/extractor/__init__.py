"""Field extractors that turn OCR text into contact candidates."""

from contact_parser.extractor.base import FieldExtractor
from contact_parser.extractor.email import EmailExtractor
from contact_parser.extractor.identity import Identity, IdentityExtractor
from contact_parser.extractor.phone import PhoneExtractor
from contact_parser.extractor.social import SocialExtractor
from contact_parser.extractor.url import UrlExtractor

__all__ = [
    "EmailExtractor",
    "FieldExtractor",
    "Identity",
    "IdentityExtractor",
    "PhoneExtractor",
    "SocialExtractor",
    "UrlExtractor",
]
