"""Project descriptor and build variant models."""

import re
from enum import Enum
from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import VariantboxBaseModel
from .signing import DEBUG_SIGNING_REF, SigningIdentityRef


DEFAULT_MIN_SDK = 21
DEFAULT_DESUGARING_LIBRARY = "com.android.tools:desugar_jdk_libs"
DEFAULT_TOOLKIT_SOURCE = "../.."

# Rule files shipped with the Android Gradle plugin (getDefaultProguardFile)
PLATFORM_RULE_FILES = frozenset(
    {
        "proguard-android.txt",
        "proguard-android-optimize.txt",
    }
)

_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.-]+)?$")
_APPLICATION_ID_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*(?:\.[A-Za-z][A-Za-z0-9_]*)+$")
_VARIANT_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


class LanguageLevel(str, Enum):
    """Ordered Java/Kotlin language-compatibility tiers."""

    JAVA_8 = "1.8"
    JAVA_11 = "11"
    JAVA_17 = "17"
    JAVA_21 = "21"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def parse(cls, value: Any) -> "LanguageLevel":
        """Parse the spellings found in build scripts.

        Accepts ``"1.8"``, ``8``, ``1.8`` (YAML float), ``"17"`` and the
        ``JavaVersion.VERSION_17`` / ``VERSION_1_8`` / ``JVM_17`` forms.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        text = text.removeprefix("JavaVersion.").removeprefix("JvmTarget.")
        text = text.removeprefix("VERSION_").removeprefix("JVM_").replace("_", ".")
        if text == "8":
            text = "1.8"
        try:
            return cls(text)
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(
                f"unknown language level '{value}' (expected one of: {valid})"
            ) from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LanguageLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LanguageLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LanguageLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LanguageLevel):
            return NotImplemented
        return self.rank >= other.rank


class RuleSourceKind(str, Enum):
    """Where a shrinking rule file comes from."""

    PLATFORM = "platform"
    PROJECT = "project"


class ShrinkingRuleSource(VariantboxBaseModel):
    """Identifier of one shrinking/obfuscation rule file."""

    name: str = Field(min_length=1)
    kind: RuleSourceKind = RuleSourceKind.PROJECT

    @model_validator(mode="before")
    @classmethod
    def from_name(cls, data: Any) -> Any:
        """Allow a bare file name; known platform files get ``kind=platform``."""
        if isinstance(data, str):
            kind = (
                RuleSourceKind.PLATFORM
                if data.strip() in PLATFORM_RULE_FILES
                else RuleSourceKind.PROJECT
            )
            return {"name": data, "kind": kind}
        return data

    def __str__(self) -> str:
        return self.name


class BuildVariant(VariantboxBaseModel):
    """A named build configuration producing a distinct artifact."""

    name: str
    rule_sources: tuple[ShrinkingRuleSource, ...] = ()
    minify: bool = Field(default=False, alias="minifyEnabled")
    shrink_resources: bool = Field(default=False, alias="shrinkResources")
    debuggable: bool = False
    signing_identity: SigningIdentityRef | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not _VARIANT_NAME_RE.match(v):
            raise ValueError(f"invalid variant name '{v}'")
        return v

    @model_validator(mode="after")
    def check_shrink_resources(self) -> "BuildVariant":
        # Android refuses resource shrinking without code shrinking
        if self.shrink_resources and not self.minify:
            raise ValueError(
                f"variant '{self.name}': shrinkResources requires minifyEnabled"
            )
        return self

    @property
    def rule_source_names(self) -> list[str]:
        return [source.name for source in self.rule_sources]


def standard_variants() -> dict[str, BuildVariant]:
    """The debug/release pair every Android application module declares."""
    return {
        "debug": BuildVariant(name="debug", debuggable=True),
        "release": BuildVariant(name="release"),
    }


class ProjectDescriptor(VariantboxBaseModel):
    """Static description of one Android application module.

    SDK ordering and the desugaring/version pairing are deliberately not
    enforced here: they are checked by the resolver so that a malformed
    descriptor fails every variant with a resolution error.
    """

    application_id: str
    namespace: str | None = None
    version_code: int = Field(default=1, ge=1)
    version_name: str = "1.0"

    compile_level: LanguageLevel = LanguageLevel.JAVA_8
    source_level: LanguageLevel = LanguageLevel.JAVA_8
    target_level: LanguageLevel = LanguageLevel.JAVA_8

    min_sdk: int = Field(default=DEFAULT_MIN_SDK, ge=0)
    target_sdk: int = Field(ge=0)
    compile_sdk: int = Field(ge=0)

    desugaring_enabled: bool = False
    desugaring_library: str = DEFAULT_DESUGARING_LIBRARY
    desugaring_library_version: str | None = None

    toolkit_source: str = DEFAULT_TOOLKIT_SOURCE
    default_signing_identity: SigningIdentityRef = DEBUG_SIGNING_REF
    variants: dict[str, BuildVariant] = Field(default_factory=dict)

    @field_validator("application_id")
    @classmethod
    def validate_application_id(cls, v: str) -> str:
        if not _APPLICATION_ID_RE.match(v):
            raise ValueError(f"invalid application id '{v}'")
        return v

    @field_validator("compile_level", "source_level", "target_level", mode="before")
    @classmethod
    def parse_language_level(cls, v: Any) -> LanguageLevel:
        return LanguageLevel.parse(v)

    @field_validator("desugaring_library_version", mode="before")
    @classmethod
    def validate_desugaring_version(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        if not text:
            return None
        if not _SEMVER_RE.match(text):
            raise ValueError(f"'{text}' is not a semantic version")
        return text

    @field_validator("variants", mode="before")
    @classmethod
    def name_variants_from_keys(cls, v: Any) -> Any:
        """Fill in each variant's name from its mapping key."""
        if not isinstance(v, dict):
            return v
        named: dict[str, Any] = {}
        for key, entry in v.items():
            if entry is None:
                entry = {}
            if isinstance(entry, dict) and "name" not in entry:
                entry = {**entry, "name": key}
            named[key] = entry
        return named

    @model_validator(mode="after")
    def check_variant_keys(self) -> "ProjectDescriptor":
        for key, variant in self.variants.items():
            if key != variant.name:
                raise ValueError(
                    f"variant declared as '{key}' is named '{variant.name}'"
                )
        return self

    @property
    def effective_namespace(self) -> str:
        return self.namespace or self.application_id

    def variant_names(self) -> list[str]:
        return sorted(self.variants)
