"""Configuration loading for Variantbox."""

from .loader import (
    load_project_descriptor,
    load_project_descriptors,
    load_signing_registry,
    merge_variants,
    parse_project_descriptor,
    parse_signing_registry,
)
from .models import UserConfigData
from .user_config import UserConfig, create_user_config


__all__ = [
    "UserConfig",
    "UserConfigData",
    "create_user_config",
    "load_project_descriptor",
    "load_project_descriptors",
    "load_signing_registry",
    "merge_variants",
    "parse_project_descriptor",
    "parse_signing_registry",
]
