from __future__ import annotations

"""
Configuration Domain Management.

Provides the default host options and loads a host configuration document
(JSON) from disk. Only the keys consumed by the sidebar pipeline are given
defaults; everything else in the host document is passed through untouched.
"""

import json
import logging
import os
from typing import Any, Dict

from docsidebar.domain.constants import KEY_IGNORE, KEY_SRC_DIR
from docsidebar.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_options() -> Dict[str, Any]:
    """
    Generate the default host options consumed by the pipeline.

    Returns:
        Dict[str, Any]: Default option values.
    """
    return {
        KEY_SRC_DIR: None,
        KEY_IGNORE: [],
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_options(config_path: str) -> Dict[str, Any]:
    """
    Load a host configuration document from a JSON file.

    Args:
        config_path: Path to the JSON document.

    Returns:
        Dict[str, Any]: The parsed configuration mapping.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
                            or does not contain a JSON object.
    """
    abs_path = os.path.abspath(config_path)
    try:
        with open(abs_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError("config", f"Cannot read configuration file '{abs_path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError("config", f"Configuration file '{abs_path}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "config",
            f"Configuration file '{abs_path}' must contain a JSON object, got {type(data).__name__}.",
        )

    logger.debug(f"Loaded host configuration from {abs_path}")
    return data
