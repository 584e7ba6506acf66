"""Core test fixtures for the variantbox project."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from typer.testing import CliRunner

from variantbox.models import (
    BuildVariant,
    ProjectDescriptor,
    SigningIdentity,
    SigningIdentityRegistry,
    standard_variants,
)
from variantbox.resolution import BuildVariantResolver


RELEASE_RULES = ["proguard-android-optimize.txt", "proguard-rules.pro"]


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def resolver() -> BuildVariantResolver:
    return BuildVariantResolver()


@pytest.fixture
def release_variant() -> BuildVariant:
    """Release variant as configured in the ledgerlite build script."""
    return BuildVariant(name="release", minify=True, rule_sources=RELEASE_RULES)


@pytest.fixture
def make_descriptor(
    release_variant: BuildVariant,
) -> Callable[..., ProjectDescriptor]:
    """Factory for descriptors based on the ledgerlite build script.

    Keyword arguments override descriptor fields.
    """

    def _make(**overrides: Any) -> ProjectDescriptor:
        variants = standard_variants()
        variants["release"] = release_variant
        data: dict[str, Any] = {
            "application_id": "com.example.ledgerlite",
            "min_sdk": 21,
            "target_sdk": 34,
            "compile_sdk": 36,
            "desugaring_enabled": True,
            "desugaring_library_version": "2.0.4",
            "variants": variants,
        }
        data.update(overrides)
        return ProjectDescriptor(**data)

    return _make


@pytest.fixture
def descriptor(make_descriptor: Callable[..., ProjectDescriptor]) -> ProjectDescriptor:
    return make_descriptor()


@pytest.fixture
def upload_identity() -> SigningIdentity:
    return SigningIdentity(
        name="upload",
        store_file="~/keystores/upload.jks",
        key_alias="upload",
        store_password_env="UPLOAD_STORE_PASSWORD",
    )


@pytest.fixture
def registry() -> SigningIdentityRegistry:
    """Registry holding only the Android debug identity."""
    return SigningIdentityRegistry.standard()


# ---- File Fixtures ----


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write data as YAML under tmp_path and return the file path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ledgerlite_data() -> dict[str, Any]:
    return {
        "applicationId": "com.example.ledgerlite",
        "compileSdk": 36,
        "minSdk": 21,
        "targetSdk": 34,
        "sourceLevel": "1.8",
        "targetLevel": "1.8",
        "compileLevel": "1.8",
        "desugaringEnabled": True,
        "desugaringLibraryVersion": "2.0.4",
        "variants": {
            "release": {"minifyEnabled": True, "ruleSources": list(RELEASE_RULES)}
        },
    }


# ---- Test Isolation Fixtures ----


@pytest.fixture
def isolated_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate user configuration lookup from the developer's environment."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in [
        "VARIANTBOX_LOG_LEVEL",
        "VARIANTBOX_LOG_JSON",
        "VARIANTBOX_REGISTRY_FILE",
        "VARIANTBOX_INCLUDE_DEBUG_IDENTITY",
        "VARIANTBOX_OUTPUT_FORMAT",
    ]:
        monkeypatch.delenv(key, raising=False)
    yield work_dir


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    yield
    logging.getLogger().handlers = []
    structlog.reset_defaults()
