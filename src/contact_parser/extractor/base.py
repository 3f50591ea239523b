"""Abstract base class for field extractors."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from contact_parser.config import DEFAULT_CONFIG, ParserConfig

T = TypeVar("T")


class FieldExtractor(ABC, Generic[T]):
    """Pulls one kind of contact field out of raw OCR text."""

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this extractor."""
        ...

    @abstractmethod
    def extract(self, text: str) -> T:
        """
        Extract candidates from OCR text.

        Args:
            text: Full OCR text, newline-delimited.

        Returns:
            Extracted candidates. Empty or unset when nothing is found;
            extractors never raise on malformed input.
        """
        ...
