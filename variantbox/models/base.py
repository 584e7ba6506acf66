"""Base model for all Variantbox Pydantic models.

This module provides a base model class that enforces consistent validation and
serialization behavior across all Variantbox models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VariantboxBaseModel(BaseModel):
    """Base model class for all Variantbox Pydantic models.

    Models are immutable once validated. Fields accept both their snake_case
    name and the camelCase spelling used by Gradle build scripts, and are
    serialized with the camelCase alias.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
