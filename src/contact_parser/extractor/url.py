"""Website extraction."""

import logging
import re
from urllib.parse import urlsplit

from contact_parser.extractor.base import FieldExtractor
from contact_parser.models.contact import ParsedUrl, candidate_id
from contact_parser.patterns import SOCIAL, URL
from contact_parser.validators import is_valid_url

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Prefix ``https://`` when the URL has no scheme."""
    if _SCHEME.match(url):
        return url
    return f"https://{url}"


def detect_url_type(url: str) -> str:
    """Return the social service a URL points to, or ``website``."""
    try:
        host = urlsplit(url).hostname or ""
    except ValueError:
        return "website"

    for service in SOCIAL:
        for domain in service.domains:
            if host == domain or host.endswith(f".{domain}"):
                return service.name.lower()
    return "website"


class UrlExtractor(FieldExtractor[list[ParsedUrl]]):
    """Extract websites, skipping anything that is part of an email address."""

    @property
    def name(self) -> str:
        return "url"

    def extract(self, text: str) -> list[ParsedUrl]:
        urls = []
        for match in URL.find_all(text):
            if "@" in match.text:
                continue

            url = normalize_url(match.text)
            url_type = detect_url_type(url)
            urls.append(
                ParsedUrl(
                    id=candidate_id(self.name, len(urls), match.text),
                    raw=match.text,
                    url=url,
                    label=self._config.default_url_label if url_type == "website" else "social",
                    type=url_type,
                    confidence=self._config.url_confidence,
                    is_valid=is_valid_url(url),
                )
            )

        logger.debug("Found %d URL candidate(s)", len(urls))
        return urls
