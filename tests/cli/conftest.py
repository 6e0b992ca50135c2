# itsa:header:start
#
#   project      : itsa
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""CLI test helpers for running itsa through Click's test runner.

`run_cli()` invokes the top-level group with an optional set of environment
variables. Click's runner never presents a terminal, so ``auto`` color mode
always resolves to "off" unless ``ITSA_COLOR`` or ``--color`` says otherwise.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from itsa.cli.exit_codes import ExitCode
from itsa.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    env: Mapping[str, str | None] | None = None,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["echo", "#RED#x"]``.
        env (Mapping[str, str | None] | None): Environment overrides for the
            duration of the call; ``None`` values unset a variable.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["tax-year"], env={"ITSA_SET_DATE": "2024-04-06"})
        assert result.output == "2024-25\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
