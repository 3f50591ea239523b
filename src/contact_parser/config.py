"""Tunable constants for contact extraction."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_JOB_TITLE_KEYWORDS = (
    "CEO",
    "CTO",
    "CFO",
    "COO",
    "President",
    "VP",
    "Director",
    "Manager",
    "Engineer",
    "Developer",
    "Designer",
    "Analyst",
    "Consultant",
    "Specialist",
    "Lead",
    "Senior",
    "Junior",
    "Associate",
    "Principal",
    "Head",
)


class ParserConfig(BaseModel):
    """Constants shared by the extractors and the confidence aggregator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Base confidence assigned to every candidate of a given extractor
    email_confidence: float = Field(default=0.90, ge=0.0, le=1.0)
    phone_confidence: float = Field(default=0.85, ge=0.0, le=1.0)
    url_confidence: float = Field(default=0.80, ge=0.0, le=1.0)
    social_confidence: float = Field(default=0.75, ge=0.0, le=1.0)

    # Category scores used by the aggregator
    name_score: float = Field(default=0.9, ge=0.0, le=1.0)
    phone_score: float = Field(default=0.85, ge=0.0, le=1.0)
    email_score: float = Field(default=0.9, ge=0.0, le=1.0)
    organization_score: float = Field(default=0.7, ge=0.0, le=1.0)

    phone_min_digits: int = Field(default=10, ge=1)
    phone_max_digits: int = Field(default=15, ge=1)

    job_title_keywords: tuple[str, ...] = DEFAULT_JOB_TITLE_KEYWORDS

    default_phone_label: str = "work"
    default_email_label: str = "work"
    default_url_label: str = "website"


DEFAULT_CONFIG = ParserConfig()


def load_config(path: str | Path) -> ParserConfig:
    """
    Load a parser configuration from a JSON file.

    Keys missing from the file keep their defaults.

    Args:
        path: Path to a JSON object with ParserConfig fields.

    Returns:
        Validated ParserConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or fails validation.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    try:
        return ParserConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid parser config in {config_path}: {e}") from e
