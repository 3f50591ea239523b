"""Email address extraction."""

import logging

from contact_parser.extractor.base import FieldExtractor
from contact_parser.models.contact import ParsedEmail, candidate_id
from contact_parser.patterns import EMAIL
from contact_parser.validators import is_valid_email

logger = logging.getLogger(__name__)


class EmailExtractor(FieldExtractor[list[ParsedEmail]]):
    """Extract every email address, lower-cased, duplicates included."""

    @property
    def name(self) -> str:
        return "email"

    def extract(self, text: str) -> list[ParsedEmail]:
        emails = []
        for index, match in enumerate(EMAIL.find_all(text)):
            address = match.text.lower()
            emails.append(
                ParsedEmail(
                    id=candidate_id(self.name, index, match.text),
                    address=address,
                    label=self._config.default_email_label,
                    confidence=self._config.email_confidence,
                    is_valid=is_valid_email(address),
                )
            )

        logger.debug("Found %d email candidate(s)", len(emails))
        return emails
