"""Build variant resolution and signing audit."""

from .audit import AuditFinding, AuditSeverity, audit_config, audit_configs
from .resolver import (
    BuildVariantResolver,
    create_build_variant_resolver,
    resolve_build_config,
)


__all__ = [
    "AuditFinding",
    "AuditSeverity",
    "BuildVariantResolver",
    "audit_config",
    "audit_configs",
    "create_build_variant_resolver",
    "resolve_build_config",
]
