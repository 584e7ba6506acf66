"""Core infrastructure for Variantbox: errors and logging."""

from variantbox.core.errors import (
    ConfigError,
    DesugaringVersionMissingError,
    InvalidSdkRangeError,
    ResolutionError,
    UnexpectedDesugaringVersionError,
    UnknownVariantError,
    UnresolvedSigningIdentityError,
    VariantboxError,
)
from variantbox.core.logging import get_struct_logger, setup_logging


__all__ = [
    "ConfigError",
    "DesugaringVersionMissingError",
    "InvalidSdkRangeError",
    "ResolutionError",
    "UnexpectedDesugaringVersionError",
    "UnknownVariantError",
    "UnresolvedSigningIdentityError",
    "VariantboxError",
    "get_struct_logger",
    "setup_logging",
]
