"""Tests for the variantbox command-line interface."""

import json

import pytest

from variantbox.cli import app


@pytest.fixture
def descriptor_file(write_yaml, ledgerlite_data):
    return write_yaml("ledgerlite.yaml", ledgerlite_data)


@pytest.fixture
def registry_file(write_yaml):
    return write_yaml(
        "signing.yaml",
        {
            "identities": {
                "upload": {
                    "storeFile": "~/keystores/upload.jks",
                    "keyAlias": "upload",
                    "storePasswordEnv": "UPLOAD_STORE_PASSWORD",
                }
            }
        },
    )


@pytest.fixture
def signed_descriptor_file(write_yaml, ledgerlite_data):
    ledgerlite_data["variants"]["release"]["signingIdentity"] = "upload"
    return write_yaml("signed.yaml", ledgerlite_data)


def test_help_command(cli_runner, isolated_env):
    result = cli_runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ["resolve", "variants", "validate", "audit"]:
        assert command in result.output


def test_version(cli_runner, isolated_env):
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "Variantbox v" in result.output


class TestResolveCommand:
    def test_resolve_release_json(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "release", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["variant"] == "release"
        assert data["minifyEnabled"] is True
        assert [rule["name"] for rule in data["ruleSources"]] == [
            "proguard-android-optimize.txt",
            "proguard-rules.pro",
        ]
        assert data["signing"]["identity"] == "debug"
        assert data["signing"]["source"] == "default"
        assert data["signingRequiresAudit"] is True

    def test_resolve_table(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "release"])

        assert result.exit_code == 0, result.output
        assert "Signing identity" in result.stdout
        assert "requires audit" in result.stdout

    def test_resolve_all_json(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "--all", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [item["variant"] for item in data] == ["debug", "release"]

    def test_output_format_from_user_config(
        self, cli_runner, isolated_env, descriptor_file, monkeypatch
    ):
        monkeypatch.setenv("VARIANTBOX_OUTPUT_FORMAT", "json")

        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "debug"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["debuggable"] is True

    def test_explicit_identity_from_registry(
        self, cli_runner, isolated_env, signed_descriptor_file, registry_file
    ):
        result = cli_runner.invoke(
            app,
            [
                "resolve",
                str(signed_descriptor_file),
                "release",
                "--registry",
                str(registry_file),
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["signing"]["identity"] == "upload"
        assert data["signing"]["source"] == "explicit"
        assert data["signing"]["storePasswordEnv"] == "UPLOAD_STORE_PASSWORD"

    @pytest.mark.parametrize("verbosity", [[], ["-v"], ["-vv"]])
    def test_json_stdout_free_of_log_events(
        self, cli_runner, isolated_env, descriptor_file, verbosity
    ):
        result = cli_runner.invoke(
            app, [*verbosity, "resolve", str(descriptor_file), "release", "--json"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["variant"] == "release"

    def test_debug_events_logged_to_stderr(
        self, cli_runner, isolated_env, descriptor_file
    ):
        result = cli_runner.invoke(
            app, ["-vv", "resolve", str(descriptor_file), "release", "--json"]
        )

        assert result.exit_code == 0, result.output
        assert "variant_resolved" in result.stderr

    def test_log_json_renders_events_as_json(
        self, cli_runner, isolated_env, descriptor_file
    ):
        result = cli_runner.invoke(
            app,
            ["-vv", "--log-json", "resolve", str(descriptor_file), "release", "--json"],
        )

        assert result.exit_code == 0, result.output
        events = [json.loads(line) for line in result.stderr.splitlines() if line]
        assert "variant_resolved" in [event["event"] for event in events]
        assert json.loads(result.stdout)["toolkitSource"] == "../.."

    def test_log_json_from_environment(
        self, cli_runner, isolated_env, descriptor_file, monkeypatch
    ):
        monkeypatch.setenv("VARIANTBOX_LOG_JSON", "true")

        result = cli_runner.invoke(app, ["-v", "resolve", str(descriptor_file), "release"])

        assert result.exit_code == 0, result.output
        events = [json.loads(line) for line in result.stderr.splitlines() if line]
        assert "signing_fallback_used" in [event["event"] for event in events]

    def test_unknown_variant(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "staging"])

        assert result.exit_code == 1
        assert "Unknown build variant 'staging'" in result.output

    def test_unresolved_identity(self, cli_runner, isolated_env, signed_descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(signed_descriptor_file), "release"])

        assert result.exit_code == 1
        assert "Signing identity 'upload'" in result.output

    def test_invalid_sdk_range(self, cli_runner, isolated_env, write_yaml, ledgerlite_data):
        ledgerlite_data.update({"minSdk": 30, "targetSdk": 25})
        path = write_yaml("bad.yaml", ledgerlite_data)

        result = cli_runner.invoke(app, ["resolve", str(path), "debug"])

        assert result.exit_code == 1
        assert "minSdk (30) is greater than targetSdk (25)" in result.output

    def test_missing_descriptor(self, cli_runner, isolated_env, tmp_path):
        result = cli_runner.invoke(app, ["resolve", str(tmp_path / "nope.yaml"), "release"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_variant_or_all_required(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file)])
        assert result.exit_code == 2

    def test_variant_and_all_are_exclusive(
        self, cli_runner, isolated_env, descriptor_file
    ):
        result = cli_runner.invoke(app, ["resolve", str(descriptor_file), "release", "--all"])
        assert result.exit_code == 2


def test_variants_command(cli_runner, isolated_env, descriptor_file):
    result = cli_runner.invoke(app, ["variants", str(descriptor_file)])

    assert result.exit_code == 0, result.output
    assert "debug" in result.stdout
    assert "release" in result.stdout


class TestValidateCommand:
    def test_all_descriptors_resolve(
        self, cli_runner, isolated_env, descriptor_file, write_yaml, ledgerlite_data
    ):
        ledgerlite_data["applicationId"] = "com.example.fieldnotes"
        other = write_yaml("fieldnotes.yaml", ledgerlite_data)

        result = cli_runner.invoke(app, ["validate", str(descriptor_file), str(other)])

        assert result.exit_code == 0, result.output
        assert "com.example.ledgerlite: 2 variant(s) resolved" in result.stdout
        assert "com.example.fieldnotes: 2 variant(s) resolved" in result.stdout

    def test_missing_desugaring_version(
        self, cli_runner, isolated_env, write_yaml, ledgerlite_data
    ):
        del ledgerlite_data["desugaringLibraryVersion"]
        path = write_yaml("app.yaml", ledgerlite_data)

        result = cli_runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "desugaringLibraryVersion is not set" in result.output


class TestAuditCommand:
    def test_audit_reports_fallback(self, cli_runner, isolated_env, descriptor_file):
        result = cli_runner.invoke(app, ["audit", str(descriptor_file), "--json"])

        assert result.exit_code == 0, result.output
        findings = json.loads(result.stdout)
        assert len(findings) == 1
        assert findings[0]["variant"] == "release"
        assert findings[0]["identity"] == "debug"
        assert findings[0]["severity"] == "warning"

    def test_strict_audit_fails_on_findings(
        self, cli_runner, isolated_env, descriptor_file
    ):
        result = cli_runner.invoke(app, ["audit", str(descriptor_file), "--strict"])

        assert result.exit_code == 2
        assert "Signing audit" in result.stdout

    def test_strict_audit_passes_with_release_identity(
        self, cli_runner, isolated_env, signed_descriptor_file, registry_file
    ):
        result = cli_runner.invoke(
            app,
            [
                "audit",
                str(signed_descriptor_file),
                "--registry",
                str(registry_file),
                "--strict",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "No signing issues found" in result.stdout

    def test_registry_from_environment(
        self,
        cli_runner,
        isolated_env,
        signed_descriptor_file,
        registry_file,
        monkeypatch,
    ):
        monkeypatch.setenv("VARIANTBOX_REGISTRY_FILE", str(registry_file))

        result = cli_runner.invoke(app, ["audit", str(signed_descriptor_file), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == []
