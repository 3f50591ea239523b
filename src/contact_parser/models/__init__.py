"""Data models for parsed contact information."""

from contact_parser.models.contact import (
    ConfidenceScores,
    ParsedAddress,
    ParsedContact,
    ParsedEmail,
    ParsedPhoneNumber,
    ParsedSocialProfile,
    ParsedUrl,
    ValidationFlags,
    candidate_id,
)

__all__ = [
    "ConfidenceScores",
    "ParsedAddress",
    "ParsedContact",
    "ParsedEmail",
    "ParsedPhoneNumber",
    "ParsedSocialProfile",
    "ParsedUrl",
    "ValidationFlags",
    "candidate_id",
]
