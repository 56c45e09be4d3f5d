from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a listing session: logging bootstrap, configuration merging
and validation, the resource call itself, and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from resutil.core.resources.enumerator import get_all_files_in_resource, get_resource_listing
from resutil.core.resources.reader import get_resource_file_content
from resutil.core.validator import validate_config
from resutil.domain.config import get_default_config
from resutil.domain.errors import ResourceError
from resutil.infra.logging import LoggingConfig, configure_logging, get_logger
from resutil.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 2 if the resource was not found, 1 on failure.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig.from_session(conf))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Execution
    logger.debug(f"Targeting '{conf['path']}' under code unit '{conf['code_unit']}'")
    try:
        if conf["show_content"]:
            return _run_content(conf)
        if conf["list_directories"]:
            return _run_listing(conf)
        return _run_files(conf)
    except (ResourceError, OSError) as e:
        logger.critical(f"Resource enumeration failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_files(conf: Dict[str, Any]) -> int:
    files = get_all_files_in_resource(conf["code_unit"], conf["path"], conf["recursive"])
    if files is None:
        return _not_found(conf)

    ordered = sorted(files)
    if conf["json_output"]:
        payload = {
            "code_unit": conf["code_unit"],
            "path": conf["path"],
            "recursive": conf["recursive"],
            "files": ordered,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for name in ordered:
            print(name)
    return EXIT_OK


def _run_listing(conf: Dict[str, Any]) -> int:
    entries = get_resource_listing(conf["code_unit"], conf["path"])
    if entries is None:
        return _not_found(conf)

    ordered = sorted(entries, key=lambda e: (e.name, e.is_file))
    if conf["json_output"]:
        payload = [{"name": e.name, "is_file": e.is_file} for e in ordered]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for entry in ordered:
            print(entry.name if entry.is_file else entry.name + "/")
    return EXIT_OK


def _run_content(conf: Dict[str, Any]) -> int:
    content = get_resource_file_content(conf["code_unit"], conf["path"])
    if content is None:
        return _not_found(conf)

    if conf["json_output"]:
        print(json.dumps({"path": conf["path"], "content": content}, ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(content)
    return EXIT_OK


def _not_found(conf: Dict[str, Any]) -> int:
    msg = f"Resource path '{conf['path']}' does not exist under '{conf['code_unit']}'"
    logger.info(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return EXIT_NOT_FOUND

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values for known keys into the base.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out
