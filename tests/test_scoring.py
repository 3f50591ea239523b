"""Tests for confidence aggregation and validation flags."""

import pytest

from contact_parser.config import ParserConfig
from contact_parser.models.contact import ParsedAddress, ParsedEmail, ParsedPhoneNumber
from contact_parser.scoring import derive_validation_flags, score_confidence


def _phone(valid: bool) -> ParsedPhoneNumber:
    return ParsedPhoneNumber(id="p", number="555", formatted_number="555", is_valid=valid)


def _email(valid: bool) -> ParsedEmail:
    return ParsedEmail(id="e", address="jane@example.com", is_valid=valid)


class TestScoreConfidence:
    """Test score_confidence."""

    def test_email_only(self):
        """Test an email-only card is not penalized by empty categories."""
        scores = score_confidence(
            has_name=False, phone_count=0, email_count=1, has_organization=False
        )
        assert scores.model_dump() == {
            "name": 0.0,
            "phone": 0.0,
            "email": 0.9,
            "address": 0.0,
            "organization": 0.0,
            "overall": 0.9,
        }

    def test_nothing_found(self):
        """Test all-zero categories give zero overall."""
        scores = score_confidence(
            has_name=False, phone_count=0, email_count=0, has_organization=False
        )
        assert scores.overall == 0.0

    def test_everything_found(self):
        """Test all categories except address are scored."""
        scores = score_confidence(
            has_name=True, phone_count=2, email_count=1, has_organization=True
        )
        assert (scores.name, scores.phone, scores.email, scores.organization) == (
            0.9,
            0.85,
            0.9,
            0.7,
        )
        assert scores.address == 0.0
        assert scores.overall == pytest.approx(0.8375)

    def test_scores_from_config(self):
        """Test category scores come from the config."""
        config = ParserConfig(name_score=0.5)
        scores = score_confidence(
            has_name=True, phone_count=0, email_count=0, has_organization=False, config=config
        )
        assert scores.name == 0.5
        assert scores.overall == 0.5


class TestDeriveValidationFlags:
    """Test derive_validation_flags."""

    def test_name_and_email(self):
        """Test a valid name and email meet the minimum."""
        flags = derive_validation_flags(has_name=True, emails=[_email(True)])
        assert flags.has_valid_email
        assert not flags.has_valid_phone
        assert flags.has_minimum_data

    def test_invalid_candidates_do_not_count(self):
        """Test only valid candidates set the flags."""
        flags = derive_validation_flags(
            has_name=True, phones=[_phone(False)], emails=[_email(False)]
        )
        assert not flags.has_valid_phone
        assert not flags.has_valid_email
        assert not flags.has_minimum_data

    def test_any_valid_phone(self):
        """Test one valid phone among invalid ones is enough."""
        flags = derive_validation_flags(has_name=True, phones=[_phone(False), _phone(True)])
        assert flags.has_valid_phone
        assert flags.has_minimum_data

    def test_no_name(self):
        """Test contact methods without a name are not enough."""
        flags = derive_validation_flags(has_name=False, phones=[_phone(True)], emails=[_email(True)])
        assert not flags.has_minimum_data

    def test_addresses(self):
        """Test a valid address sets its flag."""
        address = ParsedAddress.create(city="Springfield", state="IL")
        assert derive_validation_flags(has_name=False, addresses=[address]).has_valid_address
        assert not derive_validation_flags(has_name=False).has_valid_address

    def test_never_flags_duplicates(self):
        """Test duplicate detection is not done at parse time."""
        flags = derive_validation_flags(has_name=True, emails=[_email(True), _email(True)])
        assert not flags.has_potential_duplicates
