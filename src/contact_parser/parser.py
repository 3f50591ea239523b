"""Contact parser: raw OCR text in, structured contact out."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from contact_parser.config import DEFAULT_CONFIG, ParserConfig
from contact_parser.extractor import (
    EmailExtractor,
    IdentityExtractor,
    PhoneExtractor,
    SocialExtractor,
    UrlExtractor,
)
from contact_parser.models.contact import ParsedContact
from contact_parser.scoring import derive_validation_flags, score_confidence

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactParser:
    """Runs every field extractor over OCR text and assembles the result.

    Parsing has no I/O and no shared mutable state, so one instance can be
    used from several threads at once.
    """

    def __init__(
        self,
        config: ParserConfig = DEFAULT_CONFIG,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize the parser.

        Args:
            config: Confidence constants and keyword sets.
            clock: Source of the parse timestamp.
        """
        self._config = config
        self._clock = clock
        self._identity = IdentityExtractor(config)
        self._phones = PhoneExtractor(config)
        self._emails = EmailExtractor(config)
        self._urls = UrlExtractor(config)
        self._socials = SocialExtractor(config)

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, raw_text: str) -> ParsedContact:
        """
        Parse OCR text into a ParsedContact.

        Never raises for any string input. Text with nothing recognizable
        yields a contact with every field unset and an overall confidence
        of 0.0; callers check ``is_valid_for_saving`` to decide whether the
        user has to fill in the gaps.

        Args:
            raw_text: OCR text, newline-delimited.

        Returns:
            Immutable ParsedContact.
        """
        # Step 1: independent extraction
        identity = self._identity.extract(raw_text)
        phones = self._phones.extract(raw_text)
        emails = self._emails.extract(raw_text)
        urls = self._urls.extract(raw_text)
        socials = self._socials.extract(raw_text)

        # Step 2: aggregate
        scores = score_confidence(
            has_name=identity.has_name,
            phone_count=len(phones),
            email_count=len(emails),
            has_organization=identity.organization_name is not None,
            config=self._config,
        )
        flags = derive_validation_flags(
            has_name=identity.has_name,
            phones=phones,
            emails=emails,
        )

        # Step 3: assemble
        contact = ParsedContact(
            given_name=identity.given_name,
            family_name=identity.family_name,
            organization_name=identity.organization_name,
            job_title=identity.job_title,
            phone_numbers=tuple(phones),
            email_addresses=tuple(emails),
            urls=tuple(urls),
            social_profiles=tuple(socials),
            confidence_scores=scores,
            validation_flags=flags,
            raw_text=raw_text,
            parsed_at=self._clock(),
        )

        logger.debug(
            "Parsed contact %r: overall confidence %.2f, valid for saving: %s",
            contact.summary,
            scores.overall,
            contact.is_valid_for_saving,
        )
        return contact


_default_parser = ContactParser()


def parse(raw_text: str) -> ParsedContact:
    """Parse OCR text with the default configuration."""
    return _default_parser.parse(raw_text)
