"""
Handles application configuration for the options2api daemon.

This module is responsible for:
- Configuring logging for the application.
- Determining the path of the option catalog, considering an environment override and
  the copy bundled with option_decoder.
- Providing FastAPI application settings (title, description, root_path).
- Providing vehicle API settings (base URL, token, timeout) from environment variables.
"""

import logging
import os

import coloredlogs

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

# Resolved path to the option catalog, populated by get_catalog_path().
ACTUAL_CATALOG_PATH: str | None = None

DEFAULT_VEHICLE_API_BASE_URL = "https://owner-api.teslamotors.com/api/1/"


def configure_logger():
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
        log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Handlers filter on their own level; the root logger passes everything through.
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers so repeated calls do not duplicate output.
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── Option catalog path ────────────────────────────────────────────────────
def get_catalog_path():
    """
    Determines the option catalog path the daemon will load.

    OPTION_CATALOG_PATH overrides the bundled catalog when it points at a readable
    file; otherwise the bundled default is used and a warning is logged. The result
    is cached in ACTUAL_CATALOG_PATH.

    Returns:
        str: path to the option catalog YAML file
    """
    global ACTUAL_CATALOG_PATH

    if ACTUAL_CATALOG_PATH is not None:
        return ACTUAL_CATALOG_PATH

    from option_decoder.decode import _default_catalog_path

    default_path = _default_catalog_path()
    catalog_path = default_path

    override = os.getenv("OPTION_CATALOG_PATH")
    if override:
        if os.path.exists(override) and os.access(override, os.R_OK):
            catalog_path = override
        else:
            module_logger.warning(
                f"Override option catalog path '{override}' is missing or unreadable. "
                f"Using bundled default: '{default_path}'"
            )

    ACTUAL_CATALOG_PATH = catalog_path
    module_logger.info(f"Option catalog in use: {ACTUAL_CATALOG_PATH}")
    return ACTUAL_CATALOG_PATH


# ── FastAPI Configuration ──────────────────────────────────────────────────
def get_fastapi_config():
    """
    Retrieves FastAPI application settings from environment variables.

    Returns:
        dict: A dictionary containing title, server_description, and root_path
              for the FastAPI application.
    """
    return {
        "title": os.getenv("OPTIONS2API_TITLE", "options2api"),
        "server_description": os.getenv(
            "OPTIONS2API_SERVER_DESCRIPTION", "Vehicle option decoding API"
        ),
        "root_path": os.getenv("OPTIONS2API_ROOT_PATH", ""),
    }


# ── Vehicle API Configuration ──────────────────────────────────────────────
def get_vehicle_api_config():
    """
    Retrieves vehicle API settings from environment variables.

    Returns:
        dict: A dictionary containing:
              - 'base_url': Base URL of the vehicle API, with a trailing slash.
              - 'token': Bearer token sent with every request (may be empty).
              - 'timeout': Request timeout in seconds, as a float.
    """
    base_url = os.getenv("VEHICLE_API_BASE_URL", DEFAULT_VEHICLE_API_BASE_URL)
    if not base_url.endswith("/"):
        base_url += "/"

    timeout_str = os.getenv("VEHICLE_API_TIMEOUT", "20")
    try:
        timeout = float(timeout_str)
    except ValueError:
        module_logger.warning(f"Invalid VEHICLE_API_TIMEOUT '{timeout_str}'. Defaulting to 20.")
        timeout = 20.0

    return {
        "base_url": base_url,
        "token": os.getenv("VEHICLE_API_TOKEN", ""),
        "timeout": timeout,
    }
