from __future__ import annotations

"""
Session Configuration Defaults.

Dict-based configuration driving a single command-line listing session.
"""

from typing import Any, Dict

from resutil.infra.logging.config import default_level


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "code_unit": "",
        "path": "",

        # Listing behaviour
        "recursive": False,
        "list_directories": False,
        "show_content": False,

        # Output
        "json_output": False,

        # Diagnostics
        "log_level": default_level(),
        "log_file": "",
    }
