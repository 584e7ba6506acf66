"""Shared CLI state."""

from pathlib import Path

import typer

from variantbox.config import UserConfig, create_user_config, load_signing_registry
from variantbox.models import SigningIdentityRegistry


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self._user_config: UserConfig | None = None

    @property
    def user_config(self) -> UserConfig:
        if self._user_config is None:
            self._user_config = create_user_config(self.config_file)
        return self._user_config

    def load_registry(self, registry_path: Path | None) -> SigningIdentityRegistry:
        """Load the registry given on the command line or in the user config."""
        settings = self.user_config.data
        return load_signing_registry(
            registry_path or settings.registry_file,
            include_debug=settings.include_debug_identity,
        )

    def use_json(self, json_flag: bool) -> bool:
        return json_flag or self.user_config.data.output_format == "json"


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored on the Typer context, creating it if needed."""
    obj = ctx.ensure_object(AppContext)
    return obj
