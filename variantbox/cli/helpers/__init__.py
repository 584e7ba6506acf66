"""CLI helper functions."""

from .output import (
    print_audit_findings,
    print_build_config,
    print_json,
    print_success_message,
    print_variants,
)


__all__ = [
    "print_audit_findings",
    "print_build_config",
    "print_json",
    "print_success_message",
    "print_variants",
]
