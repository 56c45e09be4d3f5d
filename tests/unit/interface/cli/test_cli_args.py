from __future__ import annotations

"""
Unit tests for CLI Argument Definition and Mapping.
"""

import pytest

from resutil.interface.cli.args import args_to_overrides, build_parser


def test_minimal_arguments() -> None:
    """Only the code unit is required."""
    args = build_parser().parse_args(["mypkg"])
    overrides = args_to_overrides(args)

    assert overrides == {"code_unit": "mypkg", "path": None, "log_file": None}


def test_all_flags_map_to_overrides() -> None:
    args = build_parser().parse_args(
        ["mypkg.sub", "mypkg/res", "-r", "--dirs", "--cat", "--json", "--debug", "--log-file", "/tmp/r.log"]
    )
    overrides = args_to_overrides(args)

    assert overrides["code_unit"] == "mypkg.sub"
    assert overrides["path"] == "mypkg/res"
    assert overrides["recursive"] is True
    assert overrides["list_directories"] is True
    assert overrides["show_content"] is True
    assert overrides["json_output"] is True
    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "/tmp/r.log"


def test_unset_flags_are_not_overrides() -> None:
    """Absent switches leave the defaults in charge."""
    overrides = args_to_overrides(build_parser().parse_args(["mypkg", "res"]))

    for key in ("recursive", "list_directories", "show_content", "json_output", "log_level"):
        assert key not in overrides


def test_dump_config_flag() -> None:
    assert build_parser().parse_args(["x", "--dump-config"]).dump_config is True


def test_missing_code_unit_exits() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
