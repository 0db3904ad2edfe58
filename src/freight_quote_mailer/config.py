"""Configuration for the Freight Quote Mailer application."""
import logging
import os
import pathlib


def _get_list_env(var_name: str) -> list[str]:
    """Gets a comma-separated environment variable as a list, dropping blanks."""
    value = os.getenv(var_name, "")
    return [part.strip() for part in value.split(",") if part.strip()]


def _get_log_level_env(var_name: str, default: str = "INFO") -> str:
    """Gets a logging level name from the environment or raises a ValueError."""
    value = (os.getenv(var_name) or default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        raise ValueError(f"Invalid logging level in environment variable '{var_name}': '{value}'")
    return value


def apply_log_level() -> None:
    """Sets the root logger to the configured LOG_LEVEL."""
    logging.getLogger().setLevel(LOG_LEVEL)


# --- Template Settings ---
TEMPLATE_DIR: pathlib.Path = pathlib.Path(
    os.getenv("TEMPLATE_DIR") or pathlib.Path(__file__).parent / "templates"
)
TEMPLATE_FILE_NAME = "freight_quote_request.md.j2"

# --- Email Settings ---
DEFAULT_CC: list[str] = _get_list_env("DEFAULT_CC")

# --- Logging ---
LOG_LEVEL: str = _get_log_level_env("LOG_LEVEL")
