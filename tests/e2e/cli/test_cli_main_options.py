"""End-to-end tests for the top-level ``vctest`` options.

These tests exercise verbosity flags, logger-level overrides, debug
formatting and the in-memory flight recorder by running a small passing
test module under various CLI flags and environment variables. The test
report itself is unaffected by these options.
"""

import re
from pathlib import Path

import pytest

from tests.helpers.sample_modules import FATAL_MODULE, strip_ansi, write_module
from vctest import __version__
from vctest.entrypoints.cli.main import vctest

# pylint: disable=unused-argument


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def run_passing(runner, passing_tests, *options, env=None):
    """Invoke ``vctest <options> run <passing_tests>``."""
    return runner.invoke(
        vctest, ["--no-color", *options, "run", str(passing_tests)], env=env
    )


def test_version(runner):
    """--version prints the package version."""
    result = runner.invoke(vctest, ["--no-color", "--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_run(runner):
    """The group help lists the run subcommand."""
    result = runner.invoke(vctest, ["--no-color", "--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert_in_output(r"^\s+run\s+Load TARGETS", strip_ansi(result.output))


def test_default_hides_info(runner, passing_tests):
    """Default verbosity (WARNING) hides INFO records."""
    result = run_passing(runner, passing_tests)
    assert result.exit_code == 0
    assert_not_in_output("Running 2 case", result.output)


def test_verbose_shows_info(runner, passing_tests):
    """-v shows INFO records but not DEBUG ones."""
    result = run_passing(runner, passing_tests, "-v")
    assert result.exit_code == 0
    assert_in_output(r"Running 2 case\(s\) from 1 suite\(s\)", result.output)
    assert_not_in_output("This is a debug-level test message.", result.output)


def test_vv_shows_debug(runner, passing_tests):
    """-vv shows DEBUG records, including those logged inside test bodies."""
    result = run_passing(runner, passing_tests, "-vv")
    assert result.exit_code == 0
    assert_in_output("This is a debug-level test message.", result.output)
    assert_in_output(r"\[some\] This is a debug-level third-party", result.output)


def test_quiet_hides_abort_warning(runner, fs):
    """-q raises the threshold above WARNING."""
    write_module("test_setup.py", FATAL_MODULE)
    result = runner.invoke(vctest, ["--no-color", "-q", "run", "test_setup.py"])
    assert result.exit_code == 2
    assert_not_in_output("Run aborted", result.output)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"VCTEST_LOGGER_LEVEL": "some.thirdparty=INFO"}, ["-vv"]),
    ],
)
def test_logger_level_silences_debug(runner, passing_tests, env, cli_args):
    """Logger-level overrides silence third-party DEBUG while keeping INFO+."""
    result = run_passing(runner, passing_tests, *cli_args, env=env)
    assert result.exit_code == 0
    assert_not_in_output(
        "This is a debug-level third-party test message.", result.output
    )
    assert_in_output("This is an info-level third-party test message.", result.output)


def test_invalid_logger_level(runner, passing_tests):
    """A malformed -L value is rejected before anything runs."""
    result = run_passing(runner, passing_tests, "-L", "vctest=LOUD")
    assert result.exit_code == 2
    assert "Invalid log level" in result.output


def test_debug_mode_shows_paths(runner, passing_tests):
    """--debug includes file paths and line numbers in log output."""
    result = run_passing(runner, passing_tests, "--debug")
    assert result.exit_code == 0
    assert_in_output(r"runner\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(runner, passing_tests):
    """By default, file paths are not included in log output."""
    result = run_passing(runner, passing_tests, "-vv")
    assert result.exit_code == 0
    assert_not_in_output(r"runner\.py:\d+\b", result.output)


def test_flight_recorder_flush_on_warning(runner, fs):
    """The flight recorder writes buffered DEBUG records when a WARNING occurs."""
    write_module("test_setup.py", FATAL_MODULE)
    log_path = "flight_recorder.log"
    result = runner.invoke(
        vctest,
        ["--no-color", "--flight-recorder", "--log-path", log_path, "run", "test_setup.py"],
    )
    assert result.exit_code == 2

    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("DEBUG vctest.service_layer.runner:\\d+: Running Setup.Config", content)
    assert_in_output("WARNING .*Run aborted by fatal failure in Setup.Config", content)


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--force-flush"]), ({"VCTEST_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_force_flush(runner, passing_tests, env, cli_args):
    """With force-flush, a run without warnings still writes its records."""
    log_path = "flight_recorder.log"
    result = run_passing(
        runner,
        passing_tests,
        "--flight-recorder",
        "--log-path",
        log_path,
        *cli_args,
        env=env,
    )
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("This is a debug-level test message.", content)
    assert_in_output("2 passed, 0 failed", content)


def test_flight_recorder_without_warning_writes_nothing(runner, passing_tests):
    """Without a WARNING and without force-flush, no file is written."""
    log_path = "flight_recorder.log"
    result = run_passing(runner, passing_tests, "--flight-recorder", "--log-path", log_path)
    assert result.exit_code == 0
    assert not Path(log_path).exists()


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, []), ({"VCTEST_FLIGHT_RECORDER": "0"}, ["--force-flush"])],
    ids=["default", "env-var"],
)
def test_flight_recorder_disabled(runner, passing_tests, env, cli_args):
    """The flight recorder is off unless requested."""
    log_path = "flight_recorder.log"
    result = run_passing(runner, passing_tests, "--log-path", log_path, *cli_args, env=env)
    assert result.exit_code == 0
    assert not Path(log_path).exists()


def test_startup_logging(runner, passing_tests):
    """-v logs a one-line startup summary."""
    result = run_passing(runner, passing_tests, "-v")
    assert_in_output(f"VCTEST {re.escape(__version__)} - console=INFO", result.output)


def test_loaded_tests_summary(runner, passing_tests):
    """-v reports what discovery loaded and the registry size."""
    result = run_passing(runner, passing_tests, "-v")
    assert result.exit_code == 0
    assert_in_output(
        r"Loaded 1 module\(s\) from suite: 2 case\(s\) in 1 suite\(s\)",
        result.output,
    )
