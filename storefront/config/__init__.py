"""Configuration package."""

from .env_loader import (
    load_environment,
    get_required_env_var,
    get_optional_env_var,
    get_storefront_config,
    get_web_api_key,
    get_emulator_host,
    ensure_emulator_hosts,
    is_emulator,
)

__all__ = [
    "load_environment",
    "get_required_env_var",
    "get_optional_env_var",
    "get_storefront_config",
    "get_web_api_key",
    "get_emulator_host",
    "ensure_emulator_hosts",
    "is_emulator",
]
