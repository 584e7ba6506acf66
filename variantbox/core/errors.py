"""Exception hierarchy for Variantbox."""

from typing import Any


class VariantboxError(Exception):
    """Base exception for all Variantbox errors."""


class ConfigError(VariantboxError):
    """Raised when a descriptor, registry or settings file cannot be loaded."""

    def __init__(self, message: str, path: Any = None) -> None:
        super().__init__(message)
        self.path = path


class ResolutionError(VariantboxError):
    """Base class for build-variant resolution failures.

    Resolution failures are static configuration defects. They carry the
    offending field and, where known, the variant and application id so the
    descriptor can be fixed.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        variant: str | None = None,
        application_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.variant = variant
        self.application_id = application_id

    def context(self) -> dict[str, str]:
        """Return the non-empty context attributes as a dictionary."""
        values = {
            "field": self.field,
            "variant": self.variant,
            "application_id": self.application_id,
        }
        return {key: value for key, value in values.items() if value is not None}


class UnknownVariantError(ResolutionError):
    """The requested variant is not declared by the descriptor."""

    def __init__(
        self,
        variant: str,
        declared: list[str],
        application_id: str | None = None,
    ) -> None:
        declared_text = ", ".join(declared) if declared else "none"
        super().__init__(
            f"Unknown build variant '{variant}' (declared: {declared_text})",
            field="variants",
            variant=variant,
            application_id=application_id,
        )
        self.declared = declared


class UnresolvedSigningIdentityError(ResolutionError):
    """A variant references a signing identity missing from the registry."""

    def __init__(
        self,
        identity: str,
        variant: str,
        field: str,
        application_id: str | None = None,
    ) -> None:
        super().__init__(
            f"Signing identity '{identity}' used by variant '{variant}' "
            f"is not in the signing registry",
            field=field,
            variant=variant,
            application_id=application_id,
        )
        self.identity = identity


class InvalidSdkRangeError(ResolutionError):
    """The SDK levels violate min_sdk <= target_sdk <= compile_sdk."""

    def __init__(
        self,
        message: str,
        field: str,
        application_id: str | None = None,
    ) -> None:
        super().__init__(message, field=field, application_id=application_id)


class DesugaringVersionMissingError(ResolutionError):
    """Desugaring is enabled but no desugaring library version is declared."""

    def __init__(self, application_id: str | None = None) -> None:
        super().__init__(
            "Core library desugaring is enabled but "
            "desugaringLibraryVersion is not set",
            field="desugaringLibraryVersion",
            application_id=application_id,
        )


class UnexpectedDesugaringVersionError(ResolutionError):
    """A desugaring library version is declared while desugaring is disabled."""

    def __init__(self, version: str, application_id: str | None = None) -> None:
        super().__init__(
            f"desugaringLibraryVersion '{version}' is set but "
            "core library desugaring is disabled",
            field="desugaringLibraryVersion",
            application_id=application_id,
        )
        self.version = version


__all__ = [
    "ConfigError",
    "DesugaringVersionMissingError",
    "InvalidSdkRangeError",
    "ResolutionError",
    "UnexpectedDesugaringVersionError",
    "UnknownVariantError",
    "UnresolvedSigningIdentityError",
    "VariantboxError",
]
