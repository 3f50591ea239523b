"""Compiled text matchers for contact fields found in OCR text."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RawMatch:
    """Single regex hit inside the source text."""

    text: str
    """Matched substring."""

    start: int
    """Offset of the first matched character."""

    end: int
    """Offset one past the last matched character."""

    group: str | None = None
    """The ``handle`` group, or the first capture group, if the pattern defines one."""

    kind: str | None = None
    """The ``kind`` group, if the pattern defines one and it took part in the match."""


class Matcher:
    """Named, precompiled regular expression with a find-all contract."""

    def __init__(self, name: str, pattern: str, flags: int = 0):
        self.name = name
        self._regex = re.compile(pattern, flags)

    def _group(self, m: re.Match) -> str | None:
        if "handle" in self._regex.groupindex:
            return m.group("handle")
        return m.group(1) if self._regex.groups else None

    def find_all(self, text: str) -> list[RawMatch]:
        """
        Find every non-overlapping match in text, in source order.

        Args:
            text: Text to scan.

        Returns:
            List of RawMatch, empty when nothing matches.
        """
        matches = []
        for m in self._regex.finditer(text):
            matches.append(
                RawMatch(
                    text=m.group(0),
                    start=m.start(),
                    end=m.end(),
                    group=self._group(m),
                    kind=m.groupdict().get("kind"),
                )
            )
        return matches

    def __repr__(self) -> str:
        return f"Matcher({self.name!r})"


# Separator allowed between phone digit groups. Newlines are excluded so a
# number never spans two card lines.
_SEP = r"[-.\t ]?"

EMAIL = Matcher(
    "email",
    r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}",
    re.IGNORECASE,
)

PHONE = Matcher(
    "phone",
    rf"(?<!\d)(?:\+?1{_SEP})?(?:\(?\d{{3}}\)?{_SEP})?\d{{3}}{_SEP}\d{{4}}(?!\d)",
)

# A URL never starts right after '@', '.', '/' or a word character, and its
# host never runs into '@' or another word, so the domain half of an email
# address cannot match on its own. A label glued on with a colon, as in
# "Web:acme.com", does not block a match.
URL = Matcher(
    "url",
    r"(?<![\w@./-])"
    r"(?:https?://)?(?:www\.)?"
    r"(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}"
    r"(?![\w@-]|\.\w)"
    r"(?:/[^\s]*)?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class SocialService:
    """Known social network with its handle matcher and profile URL layout."""

    name: str
    matcher: Matcher
    profile_url: str
    domains: tuple[str, ...]
    default_kind: str | None = None

    def resolve(self, handle: str, kind: str | None = None) -> str:
        """Build the public URL for a handle, e.g. a LinkedIn ``in`` or ``company`` page."""
        kind = (kind or self.default_kind or "").lower()
        return self.profile_url.format(handle=handle, kind=kind)


LINKEDIN = SocialService(
    name="LinkedIn",
    matcher=Matcher(
        "linkedin",
        r"(?:linkedin\.com/(?P<kind>in|company)/|@?linkedin:[ \t]*)(?P<handle>[\w-]+)",
        re.IGNORECASE,
    ),
    profile_url="https://www.linkedin.com/{kind}/{handle}",
    domains=("linkedin.com",),
    default_kind="in",
)

TWITTER = SocialService(
    name="Twitter",
    matcher=Matcher(
        "twitter",
        # The bare @handle form must not fire on an email's '@', on a path
        # such as medium.com/@jane, or on the '@ig:' / '@linkedin:' shorthands.
        r"(?:(?<![\w-])(?:twitter|x)\.com/|twitter:[ \t]*|(?<![\w.@/])@)(\w+)(?![\w:])",
        re.IGNORECASE,
    ),
    profile_url="https://twitter.com/{handle}",
    domains=("twitter.com", "x.com"),
)

INSTAGRAM = SocialService(
    name="Instagram",
    matcher=Matcher(
        "instagram",
        r"(?:instagram\.com/|@ig:[ \t]*|instagram:[ \t]*)([\w.]+)",
        re.IGNORECASE,
    ),
    profile_url="https://www.instagram.com/{handle}",
    domains=("instagram.com",),
)

FACEBOOK = SocialService(
    name="Facebook",
    matcher=Matcher(
        "facebook",
        r"(?:(?<![\w-])(?:facebook|fb)\.com/|facebook:[ \t]*)([\w.]+)",
        re.IGNORECASE,
    ),
    profile_url="https://www.facebook.com/{handle}",
    domains=("facebook.com", "fb.com"),
)

SOCIAL: tuple[SocialService, ...] = (LINKEDIN, TWITTER, INSTAGRAM, FACEBOOK)
