"""Name, job title and organization extraction from line order."""

import logging
from dataclasses import dataclass

from contact_parser.config import DEFAULT_CONFIG, ParserConfig
from contact_parser.extractor.base import FieldExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Who the card belongs to and where they work."""

    given_name: str | None = None
    family_name: str | None = None
    job_title: str | None = None
    organization_name: str | None = None

    @property
    def has_name(self) -> bool:
        return self.given_name is not None or self.family_name is not None


def split_name(line: str) -> tuple[str | None, str | None]:
    """
    Split a name line into given and family name.

    One token is a given name only. With two or more tokens the first is
    the given name and the last is the family name; middle tokens are
    dropped.
    """
    tokens = line.split()
    if not tokens:
        return None, None
    if len(tokens) == 1:
        return tokens[0], None
    return tokens[0], tokens[-1]


class IdentityExtractor(FieldExtractor[Identity]):
    """Line-order heuristics for name, job title and organization.

    The first non-blank line is the name. Of the remaining lines, the first
    one containing a job-title keyword is the job title and the first other
    line is the organization.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        super().__init__(config)
        self._keywords = tuple(k.lower() for k in config.job_title_keywords)

    @property
    def name(self) -> str:
        return "identity"

    def extract(self, text: str) -> Identity:
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if not lines:
            return Identity()

        given_name, family_name = split_name(lines[0])
        job_title, organization = self._find_title_and_organization(lines[1:])

        logger.debug(
            "Name line %r, job title %r, organization %r",
            lines[0],
            job_title,
            organization,
        )
        return Identity(
            given_name=given_name,
            family_name=family_name,
            job_title=job_title,
            organization_name=organization,
        )

    def is_job_title(self, line: str) -> bool:
        lowered = line.lower()
        return any(keyword in lowered for keyword in self._keywords)

    def _find_title_and_organization(
        self, lines: list[str]
    ) -> tuple[str | None, str | None]:
        job_title = None
        organization = None

        for line in lines:
            if job_title is None and self.is_job_title(line):
                job_title = line
            elif organization is None:
                organization = line

            if job_title is not None and organization is not None:
                break

        return job_title, organization
