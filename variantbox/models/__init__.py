"""Data models for Variantbox."""

from .base import VariantboxBaseModel
from .descriptor import (
    DEFAULT_DESUGARING_LIBRARY,
    DEFAULT_MIN_SDK,
    PLATFORM_RULE_FILES,
    BuildVariant,
    LanguageLevel,
    ProjectDescriptor,
    RuleSourceKind,
    ShrinkingRuleSource,
    standard_variants,
)
from .effective import EffectiveBuildConfig, ResolvedSigning, SigningSource
from .signing import (
    DEBUG_IDENTITY_NAME,
    DEBUG_SIGNING_IDENTITY,
    DEBUG_SIGNING_REF,
    SigningIdentity,
    SigningIdentityRef,
    SigningIdentityRegistry,
)


__all__ = [
    "BuildVariant",
    "DEBUG_IDENTITY_NAME",
    "DEBUG_SIGNING_IDENTITY",
    "DEBUG_SIGNING_REF",
    "DEFAULT_DESUGARING_LIBRARY",
    "DEFAULT_MIN_SDK",
    "EffectiveBuildConfig",
    "LanguageLevel",
    "PLATFORM_RULE_FILES",
    "ProjectDescriptor",
    "ResolvedSigning",
    "RuleSourceKind",
    "ShrinkingRuleSource",
    "SigningIdentity",
    "SigningIdentityRef",
    "SigningIdentityRegistry",
    "SigningSource",
    "VariantboxBaseModel",
    "standard_variants",
]
