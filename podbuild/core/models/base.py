"""
Base Pydantic models for podbuild.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PodbuildBaseModel(BaseModel):
    """Base model for all podbuild Pydantic models.

    Configuration:
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(PodbuildBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
