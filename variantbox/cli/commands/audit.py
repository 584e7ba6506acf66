"""Signing audit command."""

from pathlib import Path
from typing import Annotated

import typer

from variantbox.cli.context import get_app_context
from variantbox.cli.decorators import handle_errors
from variantbox.cli.helpers import print_audit_findings, print_json
from variantbox.config import load_project_descriptors
from variantbox.resolution import audit_configs, create_build_variant_resolver


@handle_errors
def audit(
    ctx: typer.Context,
    descriptor_paths: Annotated[
        list[Path], typer.Argument(help="Project descriptor YAML files")
    ],
    registry_path: Annotated[
        Path | None,
        typer.Option("--registry", "-r", help="Signing identity registry YAML file"),
    ] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit with status 2 if issues are found")
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON output")] = False,
) -> None:
    """Report shippable variants signed with fallback or development identities."""
    app_ctx = get_app_context(ctx)
    descriptors = load_project_descriptors(descriptor_paths)
    registry = app_ctx.load_registry(registry_path)
    resolver = create_build_variant_resolver()

    configs = [
        config
        for descriptor in descriptors
        for config in resolver.resolve_all(descriptor, registry)
    ]
    findings = audit_configs(configs)

    if app_ctx.use_json(json_output):
        print_json([finding.to_dict_full() for finding in findings])
    else:
        print_audit_findings(findings)

    if strict and findings:
        raise typer.Exit(2)


def register_commands(app: typer.Typer) -> None:
    """Register the audit command with the main app."""
    app.command(name="audit")(audit)
