"""Helper functions for CLI output formatting with Rich integration."""

import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table

from variantbox.models import EffectiveBuildConfig, ProjectDescriptor
from variantbox.resolution import AuditFinding, AuditSeverity


console = Console()


def print_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    print(json.dumps(data, indent=2))


def print_success_message(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def print_build_config(config: EffectiveBuildConfig) -> None:
    """Print one resolved configuration as a two-column table."""
    table = Table(
        title=f"{config.application_id} ({config.variant})",
        show_header=True,
        header_style="bold green",
    )
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Namespace", config.namespace)
    table.add_row("Version", f"{config.version_name} ({config.version_code})")
    table.add_row(
        "Language levels",
        f"source {config.source_level.value}, target {config.target_level.value}, "
        f"jvm {config.compile_level.value}",
    )
    table.add_row(
        "SDK",
        f"min {config.min_sdk}, target {config.target_sdk}, "
        f"compile {config.compile_sdk}",
    )
    table.add_row("Desugaring", config.desugaring_dependency or _yes_no(False))
    table.add_row("Minify", _yes_no(config.minify))
    table.add_row("Shrink resources", _yes_no(config.shrink_resources))
    table.add_row("Debuggable", _yes_no(config.debuggable))
    table.add_row("Toolkit source", config.toolkit_source)
    table.add_row(
        "Rule sources",
        "\n".join(
            f"{index}. {source.name} [dim]({source.kind.value})[/dim]"
            for index, source in enumerate(config.rule_sources, start=1)
        )
        or "[dim]none[/dim]",
    )

    signing = config.signing
    signing_text = f"{signing.identity} [dim]({signing.source.value})[/dim]"
    if config.signing_requires_audit:
        signing_text += " [yellow]requires audit[/yellow]"
    table.add_row("Signing identity", signing_text)
    table.add_row("Keystore", f"{signing.store_file} [dim]({signing.key_alias})[/dim]")

    console.print(table)


def print_variants(descriptor: ProjectDescriptor) -> None:
    """Print the declared variants of a descriptor."""
    table = Table(
        title=f"Variants of {descriptor.application_id}",
        show_header=True,
        header_style="bold green",
    )
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Minify")
    table.add_column("Debuggable")
    table.add_column("Rule sources")
    table.add_column("Signing")

    for name in descriptor.variant_names():
        variant = descriptor.variants[name]
        signing = (
            variant.signing_identity.name
            if variant.signing_identity is not None
            else f"[yellow]{descriptor.default_signing_identity.name} (default)[/yellow]"
        )
        table.add_row(
            name,
            _yes_no(variant.minify),
            _yes_no(variant.debuggable),
            ", ".join(variant.rule_source_names) or "[dim]none[/dim]",
            signing,
        )

    console.print(table)


def print_audit_findings(findings: Sequence[AuditFinding]) -> None:
    """Print signing audit findings."""
    if not findings:
        print_success_message("No signing issues found")
        return

    table = Table(title="Signing audit", show_header=True, header_style="bold yellow")
    table.add_column("Severity", no_wrap=True)
    table.add_column("Application", style="cyan")
    table.add_column("Variant", style="cyan")
    table.add_column("Message")

    for finding in findings:
        color = "red" if finding.severity == AuditSeverity.ERROR else "yellow"
        table.add_row(
            f"[{color}]{finding.severity.value}[/{color}]",
            finding.application_id,
            finding.variant,
            finding.message,
        )

    console.print(table)
