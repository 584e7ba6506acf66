"""Audit of resolved signing identities.

Flags shippable (non-debuggable) variants that end up signed with the default
fallback identity or with a development-only identity.
"""

from collections.abc import Iterable
from enum import Enum

from variantbox.core.logging import get_struct_logger
from variantbox.models import EffectiveBuildConfig, SigningSource, VariantboxBaseModel


logger = get_struct_logger(__name__)


class AuditSeverity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class AuditFinding(VariantboxBaseModel):
    """One signing problem found in a resolved configuration."""

    application_id: str
    variant: str
    identity: str
    severity: AuditSeverity
    message: str


def audit_config(config: EffectiveBuildConfig) -> AuditFinding | None:
    """Return the finding for ``config``, or None if its signing is acceptable."""
    if not config.signing_requires_audit:
        return None

    signing = config.signing
    if signing.source == SigningSource.DEFAULT:
        # Observed placeholder setup: release builds silently inherit debug signing
        severity = AuditSeverity.WARNING
        message = (
            f"variant '{config.variant}' has no signing identity and falls back "
            f"to '{signing.identity}'"
        )
        if signing.development:
            message += " (development identity)"
    else:
        severity = AuditSeverity.ERROR
        message = (
            f"variant '{config.variant}' is explicitly signed with development "
            f"identity '{signing.identity}'"
        )

    return AuditFinding(
        application_id=config.application_id,
        variant=config.variant,
        identity=signing.identity,
        severity=severity,
        message=message,
    )


def audit_configs(configs: Iterable[EffectiveBuildConfig]) -> list[AuditFinding]:
    """Audit several resolved configurations, preserving their order."""
    findings = []
    for config in configs:
        finding = audit_config(config)
        if finding is None:
            continue
        logger.info(
            "signing_audit_finding",
            application_id=finding.application_id,
            variant=finding.variant,
            identity=finding.identity,
            severity=finding.severity.value,
        )
        findings.append(finding)
    return findings
