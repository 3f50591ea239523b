"""Confidence aggregation and validation gates."""

from collections.abc import Sequence

from contact_parser.config import DEFAULT_CONFIG, ParserConfig
from contact_parser.models.contact import (
    ConfidenceScores,
    ParsedAddress,
    ParsedEmail,
    ParsedPhoneNumber,
    ValidationFlags,
)


def score_confidence(
    *,
    has_name: bool,
    phone_count: int,
    email_count: int,
    has_organization: bool,
    config: ParserConfig = DEFAULT_CONFIG,
) -> ConfidenceScores:
    """
    Score each category by whether anything was extracted for it.

    Address scoring is reserved and always 0.0. The overall score on the
    returned object averages only the non-zero categories.

    Args:
        has_name: A given or family name was found.
        phone_count: Number of phone candidates.
        email_count: Number of email candidates.
        has_organization: Organization text was found.
        config: Category scores to assign.

    Returns:
        ConfidenceScores for the contact.
    """
    return ConfidenceScores(
        name=config.name_score if has_name else 0.0,
        phone=config.phone_score if phone_count > 0 else 0.0,
        email=config.email_score if email_count > 0 else 0.0,
        address=0.0,
        organization=config.organization_score if has_organization else 0.0,
    )


def derive_validation_flags(
    *,
    has_name: bool,
    phones: Sequence[ParsedPhoneNumber] = (),
    emails: Sequence[ParsedEmail] = (),
    addresses: Sequence[ParsedAddress] = (),
) -> ValidationFlags:
    """Build validation flags from the per-candidate validity of each list."""
    return ValidationFlags(
        has_valid_name=has_name,
        has_valid_phone=any(p.is_valid for p in phones),
        has_valid_email=any(e.is_valid for e in emails),
        has_valid_address=any(a.is_valid for a in addresses),
        has_potential_duplicates=False,
    )
