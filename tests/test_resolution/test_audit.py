"""Tests for the signing audit."""

from variantbox.models import (
    BuildVariant,
    SigningIdentity,
    standard_variants,
)
from variantbox.resolution import AuditSeverity, audit_config, audit_configs


def test_release_with_debug_fallback_is_reported(resolver, descriptor, registry):
    config = resolver.resolve(descriptor, "release", registry)

    finding = audit_config(config)

    assert finding is not None
    assert finding.severity == AuditSeverity.WARNING
    assert finding.variant == "release"
    assert finding.identity == "debug"
    assert finding.application_id == "com.example.ledgerlite"
    assert "falls back" in finding.message
    assert "development identity" in finding.message


def test_debug_variant_is_not_reported(resolver, descriptor, registry):
    assert audit_config(resolver.resolve(descriptor, "debug", registry)) is None


def test_explicit_production_identity_is_not_reported(
    resolver, make_descriptor, registry, upload_identity
):
    variants = standard_variants()
    variants["release"] = BuildVariant(name="release", signing_identity="upload")
    descriptor = make_descriptor(variants=variants)

    config = resolver.resolve(
        descriptor, "release", registry.with_identity(upload_identity)
    )

    assert audit_config(config) is None


def test_explicit_development_identity_is_an_error(resolver, make_descriptor, registry):
    variants = standard_variants()
    variants["release"] = BuildVariant(name="release", signing_identity="debug")
    descriptor = make_descriptor(variants=variants)

    finding = audit_config(resolver.resolve(descriptor, "release", registry))

    assert finding is not None
    assert finding.severity == AuditSeverity.ERROR
    assert "explicitly signed" in finding.message


def test_fallback_to_production_identity_is_a_warning(
    resolver, make_descriptor, registry
):
    production = SigningIdentity(name="play", store_file="play.jks", key_alias="play")
    descriptor = make_descriptor(default_signing_identity="play")

    finding = audit_config(
        resolver.resolve(descriptor, "release", registry.with_identity(production))
    )

    assert finding is not None
    assert finding.severity == AuditSeverity.WARNING
    assert "development identity" not in finding.message


def test_audit_configs_keeps_order(resolver, make_descriptor, registry):
    variants = standard_variants()
    variants["beta"] = BuildVariant(name="beta")
    descriptor = make_descriptor(variants=variants)

    findings = audit_configs(resolver.resolve_all(descriptor, registry))

    assert [finding.variant for finding in findings] == ["beta", "release"]


def test_audit_finding_serialization(resolver, descriptor, registry):
    finding = audit_config(resolver.resolve(descriptor, "release", registry))

    assert finding is not None
    data = finding.to_dict_full()
    assert data["applicationId"] == "com.example.ledgerlite"
    assert data["severity"] == "warning"
