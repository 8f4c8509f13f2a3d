"""Tests for the command-line program which finds and prints the intersection of two segments"""

import subprocess
import sys

import pytest

from intersect3d.configuration import PRECISION_KEY
from .utilities import CLI_SCRIPT_PATH


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run([sys.executable, str(CLI_SCRIPT_PATH), *args], capture_output=True, text=True)


def test_default_segments__print_origin():
    proc = run_cli()
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "0 0 0\n"


def test_crossing_diagonals__print_midpoint():
    proc = run_cli("--first", "0", "0", "0", "2", "2", "0", "--second", "0", "2", "0", "2", "0", "0")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "1 1 0\n"


@pytest.mark.parametrize("extra_args", [
    ["--precision", "1e-8"],
    ["--first", "3", "0", "1e-5", "1", "0", "0"],
    ["--second", "0", "1", "0", "1", "1", "0"],
    ])
def test_no_intersection__is_nonzero_exit_with_error_logged(extra_args):
    proc = run_cli(*extra_args)
    assert proc.returncode == 1
    assert proc.stdout == ""
    assert "Segments do not intersect" in proc.stderr or "parallel" in proc.stderr


def test_degenerate_segment__is_error():
    proc = run_cli("--first", "1", "1", "1", "1", "1", "1")
    assert proc.returncode != 0
    assert "DegenerateSegmentError" in proc.stderr


@pytest.mark.parametrize(["config_precision", "cli_args", "expected_returncode"], [
    (1e-8, [], 1),
    (1e-6, [], 0),
    (1e-8, ["--precision", "1e-6"], 0),
    ])
def test_precision_from_config_file__is_overridden_by_command_line(tmp_path, config_precision, cli_args, expected_returncode):
    config_file = tmp_path / "intersect3d.yaml"
    config_file.write_text(f"{PRECISION_KEY}: {config_precision:.1e}\n")
    proc = run_cli("--config", str(config_file), *cli_args)
    assert proc.returncode == expected_returncode, proc.stderr


@pytest.mark.parametrize(["precision", "expected_message"], [
    ("-1", "must be finite and positive: -1.0"),
    ("0", "must be finite and positive: 0.0"),
    ("nan", "must be finite and positive: nan"),
    ("inf", "must be finite and positive: inf"),
    ("tiny", "Precision isn't a number: tiny"),
    ])
def test_illegal_precision__is_usage_error(precision, expected_message):
    proc = run_cli("--precision", precision)
    assert proc.returncode == 2
    assert proc.stdout == ""
    assert expected_message in proc.stderr
    assert "Traceback" not in proc.stderr
