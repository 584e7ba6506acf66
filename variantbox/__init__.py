"""Variantbox - Android build variant resolution."""

from importlib.metadata import distribution

from .core.errors import (
    ConfigError,
    DesugaringVersionMissingError,
    InvalidSdkRangeError,
    ResolutionError,
    UnexpectedDesugaringVersionError,
    UnknownVariantError,
    UnresolvedSigningIdentityError,
    VariantboxError,
)
from .models import (
    BuildVariant,
    EffectiveBuildConfig,
    LanguageLevel,
    ProjectDescriptor,
    ShrinkingRuleSource,
    SigningIdentity,
    SigningIdentityRef,
    SigningIdentityRegistry,
)
from .resolution import BuildVariantResolver, resolve_build_config


__version__ = distribution(__package__ or "variantbox").version

__all__ = [
    "BuildVariant",
    "BuildVariantResolver",
    "ConfigError",
    "DesugaringVersionMissingError",
    "EffectiveBuildConfig",
    "InvalidSdkRangeError",
    "LanguageLevel",
    "ProjectDescriptor",
    "ResolutionError",
    "ShrinkingRuleSource",
    "SigningIdentity",
    "SigningIdentityRef",
    "SigningIdentityRegistry",
    "UnexpectedDesugaringVersionError",
    "UnknownVariantError",
    "UnresolvedSigningIdentityError",
    "VariantboxError",
    "__version__",
    "resolve_build_config",
]
