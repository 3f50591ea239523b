"""Social network handle extraction."""

import logging

from contact_parser.config import DEFAULT_CONFIG, ParserConfig
from contact_parser.extractor.base import FieldExtractor
from contact_parser.models.contact import ParsedSocialProfile, candidate_id
from contact_parser.patterns import SOCIAL, RawMatch, SocialService

logger = logging.getLogger(__name__)


class SocialExtractor(FieldExtractor[list[ParsedSocialProfile]]):
    """Extract profile handles for every known social service."""

    def __init__(
        self,
        config: ParserConfig = DEFAULT_CONFIG,
        services: tuple[SocialService, ...] = SOCIAL,
    ):
        super().__init__(config)
        self._services = services

    @property
    def name(self) -> str:
        return "social"

    def extract(self, text: str) -> list[ParsedSocialProfile]:
        found: list[tuple[int, int, RawMatch, SocialService, str]] = []
        for order, service in enumerate(self._services):
            for match in service.matcher.find_all(text):
                if match.group is None:
                    continue
                handle = match.group.rstrip(".")
                if not handle:
                    continue
                found.append((match.start, order, match, service, handle))

        # Services are scanned one after another; restore source order.
        found.sort(key=lambda item: (item[0], item[1]))

        profiles = []
        for index, (_, _, match, service, handle) in enumerate(found):
            profiles.append(
                ParsedSocialProfile(
                    id=candidate_id(self.name, index, match.text),
                    raw=match.text,
                    service=service.name,
                    username=handle,
                    url=service.resolve(handle, match.kind),
                    confidence=self._config.social_confidence,
                    is_valid=True,
                )
            )

        logger.debug("Found %d social profile candidate(s)", len(profiles))
        return profiles
