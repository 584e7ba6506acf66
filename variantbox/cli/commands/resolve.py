"""Variant resolution commands: resolve, variants and validate."""

from pathlib import Path
from typing import Annotated

import typer

from variantbox.cli.context import get_app_context
from variantbox.cli.decorators import handle_errors
from variantbox.cli.helpers import (
    print_build_config,
    print_json,
    print_success_message,
    print_variants,
)
from variantbox.config import load_project_descriptor, load_project_descriptors
from variantbox.core.logging import get_struct_logger
from variantbox.resolution import create_build_variant_resolver


logger = get_struct_logger(__name__)

DescriptorArgument = Annotated[
    Path, typer.Argument(help="Project descriptor YAML file", show_default=False)
]
RegistryOption = Annotated[
    Path | None,
    typer.Option("--registry", "-r", help="Signing identity registry YAML file"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON output")]


@handle_errors
def resolve(
    ctx: typer.Context,
    descriptor_path: DescriptorArgument,
    variant: Annotated[
        str | None, typer.Argument(help="Build variant to resolve (e.g. release)")
    ] = None,
    all_variants: Annotated[
        bool, typer.Option("--all", "-a", help="Resolve every declared variant")
    ] = False,
    registry_path: RegistryOption = None,
    json_output: JsonOption = False,
) -> None:
    """Resolve a build variant into its effective build configuration."""
    if variant is None and not all_variants:
        raise typer.BadParameter("give a VARIANT or use --all", param_hint="VARIANT")
    if variant is not None and all_variants:
        raise typer.BadParameter("VARIANT and --all are mutually exclusive")

    app_ctx = get_app_context(ctx)
    descriptor = load_project_descriptor(descriptor_path)
    registry = app_ctx.load_registry(registry_path)
    resolver = create_build_variant_resolver()

    if variant is None:
        configs = resolver.resolve_all(descriptor, registry)
    else:
        configs = [resolver.resolve(descriptor, variant, registry)]

    if app_ctx.use_json(json_output):
        data = [config.to_dict_full() for config in configs]
        print_json(data if all_variants else data[0])
        return

    for config in configs:
        print_build_config(config)


@handle_errors
def variants(ctx: typer.Context, descriptor_path: DescriptorArgument) -> None:
    """List the build variants declared by a descriptor."""
    descriptor = load_project_descriptor(descriptor_path)
    print_variants(descriptor)


@handle_errors
def validate(
    ctx: typer.Context,
    descriptor_paths: Annotated[
        list[Path], typer.Argument(help="Project descriptor YAML files")
    ],
    registry_path: RegistryOption = None,
) -> None:
    """Check that every variant of every descriptor resolves."""
    app_ctx = get_app_context(ctx)
    descriptors = load_project_descriptors(descriptor_paths)
    registry = app_ctx.load_registry(registry_path)
    resolver = create_build_variant_resolver()

    for descriptor in descriptors:
        configs = resolver.resolve_all(descriptor, registry)
        logger.info(
            "descriptor_validated",
            application_id=descriptor.application_id,
            variants=len(configs),
        )
        print_success_message(
            f"{descriptor.application_id}: {len(configs)} variant(s) resolved"
        )


def register_commands(app: typer.Typer) -> None:
    """Register resolution commands with the main app."""
    app.command(name="resolve")(resolve)
    app.command(name="variants")(variants)
    app.command(name="validate")(validate)
