"""Classification policy loading.

The keyword lists in ``keywords.py`` are the defaults. A JSON file with any
subset of the policy fields replaces the matching lists, so the policy can be
tuned without touching pipeline code:

    {
        "unsuitable_keywords": ["hair salon", "yoga"],
        "office_qualifiers": ["studio", "loft"]
    }
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from . import keywords

logger = logging.getLogger(__name__)


class ClassificationPolicy(BaseModel):
    """Keyword configuration for the residential and suitability filters."""

    residential_url_paths: list[str] = Field(
        default_factory=lambda: list(keywords.RESIDENTIAL_URL_PATHS),
        description="URL path fragments of residential categories",
    )
    residential_keywords: list[str] = Field(
        default_factory=lambda: list(keywords.RESIDENTIAL_KEYWORDS),
        description="Title fragments that mark a residential unit",
    )
    unsuitable_keywords: list[str] = Field(
        default_factory=lambda: list(keywords.UNSUITABLE_KEYWORDS),
        description="Title fragments of business types unsuited to studio use",
    )
    office_qualifiers: list[str] = Field(
        default_factory=lambda: list(keywords.OFFICE_QUALIFIERS),
        description="Terms that rescue an office listing",
    )
    min_title_length: int = Field(
        default=keywords.MIN_TITLE_LENGTH,
        ge=0,
        description="Shortest meaningful title",
    )

    @field_validator(
        "residential_url_paths",
        "residential_keywords",
        "unsuitable_keywords",
        "office_qualifiers",
    )
    @classmethod
    def _lowercase(cls, value: list[str]) -> list[str]:
        # Keep whitespace: "spa " and "bar " rely on it
        return [v.lower() for v in value if v]

    @classmethod
    def from_file(cls, path: Path) -> "ClassificationPolicy":
        """Load a policy from a JSON file, falling back to defaults per field."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        policy = cls.model_validate(data)
        logger.info(f"Loaded classification policy from {path}")
        return policy


DEFAULT_POLICY = ClassificationPolicy()


def load_policy(path: Optional[Path] = None) -> ClassificationPolicy:
    """Return the policy from ``path``, or the built-in defaults."""
    if path is None:
        return DEFAULT_POLICY
    return ClassificationPolicy.from_file(path)
