"""
Descriptor and signing registry loading.

This module loads project descriptors and signing identity registries from
YAML files into typed, immutable models. Resolution itself never touches the
filesystem; everything it needs is loaded here first.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from variantbox.core.errors import ConfigError
from variantbox.core.logging import get_struct_logger
from variantbox.models import (
    DEBUG_IDENTITY_NAME,
    DEBUG_SIGNING_IDENTITY,
    ProjectDescriptor,
    SigningIdentityRegistry,
    standard_variants,
)


logger = get_struct_logger(__name__)


def _read_yaml_mapping(path: Path, kind: str) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping."""
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"{kind} file not found: {path}", path=path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {kind} file {path}: {e}", path=path) from e
    except OSError as e:
        raise ConfigError(f"Error reading {kind} file {path}: {e}", path=path) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Invalid {kind} format in {path}: expected a mapping", path=path
        )
    return raw


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def merge_variants(declared: Any, source: str | Path | None = None) -> dict[str, Any]:
    """Merge declared variants over the standard debug/release pair.

    Variants are replaced as a whole by name; declared names that are not
    standard are added.
    """
    merged: dict[str, Any] = dict(standard_variants())
    if declared is None:
        return merged
    if not isinstance(declared, dict):
        raise ConfigError(
            f"Invalid project descriptor {source or '<memory>'}: "
            "'variants' must be a mapping of variant name to settings",
            path=source,
        )
    for name, variant in declared.items():
        merged[str(name)] = variant if variant is not None else {}
    return merged


def parse_project_descriptor(
    data: dict[str, Any], source: str | Path = "<memory>"
) -> ProjectDescriptor:
    """Build a ProjectDescriptor from a raw mapping.

    Raises:
        ConfigError: If the data does not describe a valid descriptor
    """
    data = dict(data)
    data["variants"] = merge_variants(data.get("variants"), source=source)
    try:
        return ProjectDescriptor.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid project descriptor {source}: {_format_validation_error(e)}",
            path=source,
        ) from e


def load_project_descriptor(path: str | Path) -> ProjectDescriptor:
    """Load a project descriptor from a YAML file.

    Args:
        path: Path to the descriptor file

    Returns:
        Typed ProjectDescriptor object

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    descriptor = parse_project_descriptor(
        _read_yaml_mapping(path, "project descriptor"), source=path
    )
    logger.info(
        "descriptor_loaded",
        path=str(path),
        application_id=descriptor.application_id,
        variants=descriptor.variant_names(),
    )
    return descriptor


def load_project_descriptors(paths: Iterable[str | Path]) -> list[ProjectDescriptor]:
    """Load several independent descriptors.

    Raises:
        ConfigError: If any file fails to load or two files share an application id
    """
    descriptors: list[ProjectDescriptor] = []
    seen: dict[str, Path] = {}
    for raw_path in paths:
        path = Path(raw_path)
        descriptor = load_project_descriptor(path)
        previous = seen.get(descriptor.application_id)
        if previous is not None:
            raise ConfigError(
                f"Duplicate application id '{descriptor.application_id}' "
                f"in {previous} and {path}",
                path=path,
            )
        seen[descriptor.application_id] = path
        descriptors.append(descriptor)
    return descriptors


def parse_signing_registry(
    data: dict[str, Any],
    include_debug: bool = True,
    source: str | Path = "<memory>",
) -> SigningIdentityRegistry:
    """Build a SigningIdentityRegistry from a raw mapping.

    The standard Android debug identity is added unless ``include_debug`` is
    false or the data defines its own ``debug`` identity.
    """
    identities = data.get("identities") or {}
    if not isinstance(identities, dict):
        raise ConfigError(
            f"Invalid signing registry {source}: 'identities' must be a mapping",
            path=source,
        )
    try:
        registry = SigningIdentityRegistry.model_validate({"identities": identities})
    except ValidationError as e:
        raise ConfigError(
            f"Invalid signing registry {source}: {_format_validation_error(e)}",
            path=source,
        ) from e

    if include_debug and DEBUG_IDENTITY_NAME not in registry:
        registry = registry.with_identity(DEBUG_SIGNING_IDENTITY)
    return registry


def load_signing_registry(
    path: str | Path | None = None, include_debug: bool = True
) -> SigningIdentityRegistry:
    """Load a signing identity registry from a YAML file.

    Args:
        path: Registry file; when None only the debug identity is available
        include_debug: Add the standard debug identity if the file lacks one

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    if path is None:
        registry = parse_signing_registry({}, include_debug=include_debug)
        logger.debug("signing_registry_default", identities=registry.names())
        return registry

    path = Path(path)
    registry = parse_signing_registry(
        _read_yaml_mapping(path, "signing registry"),
        include_debug=include_debug,
        source=path,
    )
    logger.info("signing_registry_loaded", path=str(path), identities=registry.names())
    return registry
