"""Pydantic models for parsed contact data."""

import hashlib
import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from contact_parser.validators import is_valid_address

# Namespace for candidate identifiers. Identifiers are derived from the
# candidate itself so that parsing stays a pure function of the input text.
_ID_NAMESPACE = uuid.UUID("6f1d3c0e-8a4b-4e57-9c2f-5b7d0a1e9c44")

UrlType = Literal["website", "linkedin", "twitter", "facebook", "instagram"]


def candidate_id(kind: str, index: int, raw: str) -> str:
    """Return a stable identifier for the index-th candidate of a kind.

    Same value as ``uuid.uuid5``, but lone surrogates in OCR text are
    encoded instead of raising.
    """
    name = f"{kind}:{index}:{raw}".encode("utf-8", "surrogatepass")
    digest = hashlib.sha1(_ID_NAMESPACE.bytes + name).digest()
    return str(uuid.UUID(bytes=digest[:16], version=5))


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ParsedPhoneNumber(_Frozen):
    """Phone number candidate."""

    id: str = Field(description="Stable candidate identifier")
    number: str = Field(description="Phone number as matched in the source text")
    formatted_number: str = Field(description="Normalized display form")
    label: str = Field(default="work", description="Phone type, e.g. work or mobile")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    is_valid: bool = False

    @property
    def digits(self) -> str:
        return "".join(ch for ch in self.number if ch.isdigit())


class ParsedEmail(_Frozen):
    """Email address candidate."""

    id: str = Field(description="Stable candidate identifier")
    address: str = Field(description="Lower-cased email address")
    label: str = Field(default="work", description="Email type")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    is_valid: bool = False


class ParsedUrl(_Frozen):
    """Website candidate."""

    id: str = Field(description="Stable candidate identifier")
    raw: str = Field(description="URL as matched in the source text")
    url: str = Field(description="URL with a scheme")
    label: str = Field(default="website", description="URL label")
    type: UrlType = Field(default="website", description="Known service the URL points to")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    is_valid: bool = False


class ParsedSocialProfile(_Frozen):
    """Social network handle."""

    id: str = Field(description="Stable candidate identifier")
    raw: str = Field(description="Text the handle was captured from")
    service: str = Field(description="Service name, e.g. LinkedIn")
    username: str = Field(description="Handle on the service")
    url: str | None = Field(default=None, description="Resolved profile URL")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    is_valid: bool = False


class ParsedAddress(_Frozen):
    """Postal address. Partial addresses are kept and flagged invalid."""

    id: str = Field(description="Stable candidate identifier")
    raw: str = Field(default="", description="Source text of the address")
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    label: str = Field(default="work", description="Address type")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    is_valid: bool = False

    @classmethod
    def create(cls, index: int = 0, raw: str = "", **fields) -> "ParsedAddress":
        """Build an address whose validity flag comes from the address validator."""
        return cls(
            id=candidate_id("address", index, raw),
            raw=raw,
            is_valid=is_valid_address(
                street=fields.get("street"),
                city=fields.get("city"),
                state=fields.get("state"),
                postal_code=fields.get("postal_code"),
            ),
            **fields,
        )


class ConfidenceScores(_Frozen):
    """Per-category extraction confidence."""

    name: float = Field(default=0.0, ge=0.0, le=1.0)
    phone: float = Field(default=0.0, ge=0.0, le=1.0)
    email: float = Field(default=0.0, ge=0.0, le=1.0)
    address: float = Field(default=0.0, ge=0.0, le=1.0)
    organization: float = Field(default=0.0, ge=0.0, le=1.0)

    @computed_field
    @property
    def overall(self) -> float:
        """Mean of the categories that found something; 0.0 when none did."""
        scores = [self.name, self.phone, self.email, self.address, self.organization]
        found = [s for s in scores if s > 0]
        if not found:
            return 0.0
        return sum(found) / len(found)


class ValidationFlags(_Frozen):
    """Structural correctness gates for a parsed contact."""

    has_valid_name: bool = False
    has_valid_phone: bool = False
    has_valid_email: bool = False
    has_valid_address: bool = False
    has_potential_duplicates: bool = False

    @computed_field
    @property
    def has_minimum_data(self) -> bool:
        """A name plus at least one way to reach the person."""
        return self.has_valid_name and (self.has_valid_phone or self.has_valid_email)


class ParsedContact(_Frozen):
    """Structured contact produced from one block of OCR text.

    Two contacts parsed from the same text compare equal; ``parsed_at`` is
    provenance and does not take part in equality.
    """

    # Name
    name_prefix: str | None = None
    given_name: str | None = None
    middle_name: str | None = None
    family_name: str | None = None
    name_suffix: str | None = None
    nickname: str | None = None

    # Organization
    organization_name: str | None = None
    job_title: str | None = None
    department: str | None = None

    # Contact methods, in order of appearance in the source text
    phone_numbers: tuple[ParsedPhoneNumber, ...] = ()
    email_addresses: tuple[ParsedEmail, ...] = ()
    urls: tuple[ParsedUrl, ...] = ()
    postal_addresses: tuple[ParsedAddress, ...] = ()
    social_profiles: tuple[ParsedSocialProfile, ...] = ()

    note: str | None = None

    confidence_scores: ConfidenceScores = Field(default_factory=ConfidenceScores)
    validation_flags: ValidationFlags = Field(default_factory=ValidationFlags)

    raw_text: str = Field(description="OCR text the contact was parsed from")
    parsed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the text was parsed",
    )

    @computed_field
    @property
    def is_valid_for_saving(self) -> bool:
        flags = self.validation_flags
        return flags.has_minimum_data and (
            flags.has_valid_name or flags.has_valid_phone or flags.has_valid_email
        )

    @property
    def full_name(self) -> str:
        parts = [
            self.name_prefix,
            self.given_name,
            self.middle_name,
            self.family_name,
            self.name_suffix,
        ]
        return " ".join(p for p in parts if p)

    @property
    def summary(self) -> str:
        """One-line description, e.g. ``Jane Doe (Acme) - 1 phone, 1 email``."""
        parts = []
        if self.given_name:
            parts.append(self.given_name)
        if self.family_name:
            parts.append(self.family_name)
        if self.organization_name:
            parts.append(f"({self.organization_name})")

        methods = []
        if self.phone_numbers:
            methods.append(f"{len(self.phone_numbers)} phone")
        if self.email_addresses:
            methods.append(f"{len(self.email_addresses)} email")
        if self.urls:
            methods.append(f"{len(self.urls)} URL")
        if methods:
            parts.append("- " + ", ".join(methods))

        return " ".join(parts)

    def _comparable(self) -> dict:
        return self.model_dump(exclude={"parsed_at"})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedContact):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __hash__(self) -> int:
        return hash(self.model_dump_json(exclude={"parsed_at"}))
