from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
session configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the resutil CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="resutil",
        description=(
            "List the resource files shipped inside a Python package, "
            "whether it is installed as a directory or imported from a zip archive."
        ),
    )

    # --- Target ---
    p.add_argument(
        "code_unit",
        help="Importable module or package whose import root is searched (e.g. 'mypkg.sub').",
    )
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="'/'-separated resource path relative to the import root (default: the root).",
    )

    # --- Listing behaviour ---
    p.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Descend into subdirectories.",
    )
    p.add_argument(
        "--dirs",
        dest="list_directories",
        action="store_true",
        help="Print the immediate children, marking directories with a trailing '/'.",
    )
    p.add_argument(
        "--cat",
        dest="show_content",
        action="store_true",
        help="Print the content of the resource file at PATH.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit machine-readable JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "code_unit": args.code_unit,
        "path": args.path,
        "log_file": args.log_file,
    }

    if args.recursive:
        overrides["recursive"] = True
    if args.list_directories:
        overrides["list_directories"] = True
    if args.show_content:
        overrides["show_content"] = True
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
