"""Resolution of a build variant into an effective build configuration."""

from variantbox.core.errors import (
    DesugaringVersionMissingError,
    InvalidSdkRangeError,
    UnexpectedDesugaringVersionError,
    UnknownVariantError,
    UnresolvedSigningIdentityError,
)
from variantbox.core.logging import get_struct_logger
from variantbox.models import (
    BuildVariant,
    EffectiveBuildConfig,
    ProjectDescriptor,
    ResolvedSigning,
    SigningIdentityRegistry,
    SigningSource,
)


logger = get_struct_logger(__name__)


class BuildVariantResolver:
    """Resolves named build variants of a project descriptor.

    The resolver keeps no state between calls and never mutates its inputs,
    so a single instance can resolve several variants concurrently.
    """

    def validate_descriptor(self, descriptor: ProjectDescriptor) -> None:
        """Check the variant-independent descriptor invariants.

        Raises:
            InvalidSdkRangeError: If min_sdk > target_sdk or target_sdk > compile_sdk
            DesugaringVersionMissingError: If desugaring is enabled without a version
            UnexpectedDesugaringVersionError: If a version is set with desugaring off
        """
        app_id = descriptor.application_id

        if descriptor.min_sdk > descriptor.target_sdk:
            raise InvalidSdkRangeError(
                f"minSdk ({descriptor.min_sdk}) is greater than "
                f"targetSdk ({descriptor.target_sdk})",
                field="minSdk",
                application_id=app_id,
            )
        if descriptor.target_sdk > descriptor.compile_sdk:
            raise InvalidSdkRangeError(
                f"targetSdk ({descriptor.target_sdk}) is greater than "
                f"compileSdk ({descriptor.compile_sdk})",
                field="targetSdk",
                application_id=app_id,
            )

        version = descriptor.desugaring_library_version
        if descriptor.desugaring_enabled and version is None:
            raise DesugaringVersionMissingError(application_id=app_id)
        if not descriptor.desugaring_enabled and version is not None:
            raise UnexpectedDesugaringVersionError(version, application_id=app_id)

    def resolve(
        self,
        descriptor: ProjectDescriptor,
        variant_name: str,
        registry: SigningIdentityRegistry,
    ) -> EffectiveBuildConfig:
        """Resolve ``variant_name`` of ``descriptor`` against ``registry``.

        Args:
            descriptor: The project descriptor
            variant_name: Name of a declared build variant
            registry: Registry of available signing identities

        Returns:
            The effective build configuration of the variant

        Raises:
            ResolutionError: On any descriptor, variant or signing defect. No
                partial configuration is ever returned.
        """
        self.validate_descriptor(descriptor)

        variant = descriptor.variants.get(variant_name)
        if variant is None:
            raise UnknownVariantError(
                variant_name,
                declared=descriptor.variant_names(),
                application_id=descriptor.application_id,
            )

        signing = self._resolve_signing(descriptor, variant, registry)

        desugaring_dependency = None
        if descriptor.desugaring_enabled:
            desugaring_dependency = (
                f"{descriptor.desugaring_library}:"
                f"{descriptor.desugaring_library_version}"
            )

        config = EffectiveBuildConfig(
            application_id=descriptor.application_id,
            namespace=descriptor.effective_namespace,
            variant=variant.name,
            version_code=descriptor.version_code,
            version_name=descriptor.version_name,
            compile_level=descriptor.compile_level,
            source_level=descriptor.source_level,
            target_level=descriptor.target_level,
            min_sdk=descriptor.min_sdk,
            target_sdk=descriptor.target_sdk,
            compile_sdk=descriptor.compile_sdk,
            desugaring_enabled=descriptor.desugaring_enabled,
            desugaring_dependency=desugaring_dependency,
            minify=variant.minify,
            shrink_resources=variant.shrink_resources,
            debuggable=variant.debuggable,
            rule_sources=tuple(variant.rule_sources),
            toolkit_source=descriptor.toolkit_source,
            signing=signing,
        )

        logger.debug(
            "variant_resolved",
            application_id=config.application_id,
            variant=config.variant,
            minify=config.minify,
            rule_sources=config.rule_source_names,
            signing_identity=signing.identity,
        )
        return config

    def resolve_all(
        self,
        descriptor: ProjectDescriptor,
        registry: SigningIdentityRegistry,
    ) -> list[EffectiveBuildConfig]:
        """Resolve every declared variant, ordered by variant name.

        Fails on the first defect, so a successful call guarantees that every
        signing reference used by any variant is present in the registry.
        """
        return [
            self.resolve(descriptor, name, registry)
            for name in descriptor.variant_names()
        ]

    def _resolve_signing(
        self,
        descriptor: ProjectDescriptor,
        variant: BuildVariant,
        registry: SigningIdentityRegistry,
    ) -> ResolvedSigning:
        if variant.signing_identity is not None:
            ref = variant.signing_identity
            source = SigningSource.EXPLICIT
            field = f"variants.{variant.name}.signingIdentity"
        else:
            ref = descriptor.default_signing_identity
            source = SigningSource.DEFAULT
            field = "defaultSigningIdentity"

        identity = registry.get(ref.name)
        if identity is None:
            raise UnresolvedSigningIdentityError(
                ref.name,
                variant=variant.name,
                field=field,
                application_id=descriptor.application_id,
            )

        if source == SigningSource.DEFAULT and not variant.debuggable:
            logger.warning(
                "signing_fallback_used",
                application_id=descriptor.application_id,
                variant=variant.name,
                signing_identity=identity.name,
                development=identity.development,
            )

        return ResolvedSigning(
            identity=identity.name,
            source=source,
            store_file=identity.store_file,
            key_alias=identity.key_alias,
            store_password_env=identity.store_password_env,
            key_password_env=identity.key_password_env,
            development=identity.development,
        )


def create_build_variant_resolver() -> BuildVariantResolver:
    """Create a BuildVariantResolver instance."""
    return BuildVariantResolver()


def resolve_build_config(
    descriptor: ProjectDescriptor,
    variant_name: str,
    registry: SigningIdentityRegistry,
) -> EffectiveBuildConfig:
    """Resolve one variant with a default resolver."""
    return create_build_variant_resolver().resolve(descriptor, variant_name, registry)
