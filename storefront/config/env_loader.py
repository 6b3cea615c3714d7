"""
Environment variable loader for the storefront backend.
Loads the .env file and exposes required/optional settings.
"""

import os
from pathlib import Path
from typing import Dict, Optional
from dotenv import load_dotenv

from storefront.exceptions import ConfigError
from storefront.util.logger import get_logger

logger = get_logger(__name__)

EMULATOR_HOST_VARS = {
    "firestore": "FIRESTORE_EMULATOR_HOST",
    "auth": "FIREBASE_AUTH_EMULATOR_HOST",
    "storage": "FIREBASE_STORAGE_EMULATOR_HOST",
}

DEFAULT_EMULATOR_HOSTS = {
    "FIRESTORE_EMULATOR_HOST": "localhost:8080",
    "FIREBASE_AUTH_EMULATOR_HOST": "localhost:9099",
    "FIREBASE_STORAGE_EMULATOR_HOST": "localhost:9199",
}


def load_environment(env_file: Optional[str] = None) -> None:
    """
    Load environment variables from a .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in the project root.
    """
    if env_file is None:
        env_path = Path(__file__).parent.parent.parent / ".env"
    else:
        env_path = Path(env_file)

    if env_path.exists():
        load_dotenv(env_path)
    else:
        # Deployed functions get their environment from the platform
        logger.warning(f".env file not found at {env_path}, assuming environment is set by the system")


def get_required_env_var(name: str, description: str = "") -> str:
    """
    Get a required environment variable.

    Args:
        name: Environment variable name
        description: Optional description for error messages

    Returns:
        Environment variable value

    Raises:
        ConfigError: If the environment variable is not set or empty
    """
    value = os.getenv(name)
    if not value:
        desc_part = f" ({description})" if description else ""

        guidance = ""
        if "API_KEY" in name:
            guidance = "\n  Hint: Copy the Web API key from the Firebase console project settings"
        elif "BUCKET" in name:
            guidance = "\n  Hint: Use the bucket name shown in the Firebase console Storage tab"

        raise ConfigError(f"Required environment variable {name}{desc_part} is not set{guidance}", variable=name)
    return value


def get_optional_env_var(name: str, default: str = "", description: str = "") -> str:
    """
    Get an optional environment variable with a default value.

    Args:
        name: Environment variable name
        default: Default value if not set
        description: Optional description, documentation only

    Returns:
        Environment variable value or default
    """
    return os.getenv(name, default)


def is_emulator() -> bool:
    return get_optional_env_var("FUNCTIONS_EMULATOR") == "true"


def ensure_emulator_hosts() -> None:
    """Fill in default emulator hosts when running inside the emulator suite."""
    if not is_emulator():
        return
    for name, default in DEFAULT_EMULATOR_HOSTS.items():
        if not os.getenv(name):
            os.environ[name] = default


def get_emulator_host(service: str) -> Optional[str]:
    """Return ``host:port`` of the emulator for a service, or None outside the emulator."""
    value = get_optional_env_var(EMULATOR_HOST_VARS[service])
    return value or None


def get_storefront_config() -> Dict[str, str]:
    """
    Get storefront configuration.

    Returns:
        Dictionary with env, storage_bucket, web_api_key and checkout_phone
        (optional values may be empty; env defaults to production)
    """
    return {
        "env": get_optional_env_var("ENV", "production"),
        "storage_bucket": get_optional_env_var("FIREBASE_STORAGE_BUCKET"),
        "web_api_key": get_optional_env_var("FIREBASE_WEB_API_KEY"),
        "checkout_phone": get_optional_env_var("CHECKOUT_PHONE_NUMBER", "1234567890"),
    }


def get_web_api_key() -> str:
    """Web API key for the Identity Toolkit password endpoint."""
    if get_emulator_host("auth"):
        # The auth emulator accepts any key
        return get_optional_env_var("FIREBASE_WEB_API_KEY", "fake-api-key")
    return get_required_env_var("FIREBASE_WEB_API_KEY", "Firebase Web API key for password sign-in")
