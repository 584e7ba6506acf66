"""Resolved build configuration handed to the packaging step."""

from enum import Enum
from typing import Any

from pydantic import Field, computed_field, model_validator

from .base import VariantboxBaseModel
from .descriptor import LanguageLevel, ShrinkingRuleSource


class SigningSource(str, Enum):
    """How the signing identity of a variant was chosen."""

    EXPLICIT = "explicit"
    DEFAULT = "default"


class ResolvedSigning(VariantboxBaseModel):
    """Signing identity after lookup in the registry."""

    identity: str
    source: SigningSource
    store_file: str
    key_alias: str
    store_password_env: str | None = None
    key_password_env: str | None = None
    development: bool = False

    @property
    def is_fallback(self) -> bool:
        return self.source == SigningSource.DEFAULT


class EffectiveBuildConfig(VariantboxBaseModel):
    """Fully resolved configuration of one variant of one application."""

    application_id: str
    namespace: str
    variant: str
    version_code: int
    version_name: str

    compile_level: LanguageLevel
    source_level: LanguageLevel
    target_level: LanguageLevel

    min_sdk: int
    target_sdk: int
    compile_sdk: int

    desugaring_enabled: bool
    desugaring_dependency: str | None = None

    minify: bool = Field(alias="minifyEnabled")
    shrink_resources: bool = Field(alias="shrinkResources")
    debuggable: bool
    toolkit_source: str
    rule_sources: tuple[ShrinkingRuleSource, ...]
    signing: ResolvedSigning

    @model_validator(mode="before")
    @classmethod
    def drop_derived_fields(cls, data: Any) -> Any:
        """Accept serialized configs, which carry the derived audit flag."""
        if isinstance(data, dict):
            data = {
                key: value
                for key, value in data.items()
                if key not in ("signingRequiresAudit", "signing_requires_audit")
            }
        return data

    @computed_field(alias="signingRequiresAudit")  # type: ignore[prop-decorator]
    @property
    def signing_requires_audit(self) -> bool:
        """A shippable artifact is signed by a fallback or development identity."""
        if self.debuggable:
            return False
        return self.signing.is_fallback or self.signing.development

    @property
    def rule_source_names(self) -> list[str]:
        return [source.name for source in self.rule_sources]
