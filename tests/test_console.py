import subprocess
from unittest import mock

import pytest

from mnistnet.console import clear_console


@pytest.mark.parametrize(
    "system, command",
    [("Linux", ["clear"]), ("Darwin", ["clear"]), ("Windows", ["cmd", "/c", "cls"])],
)
def test_clear_console_runs_platform_command(system, command):
    with mock.patch("platform.system", return_value=system), mock.patch(
        "subprocess.run"
    ) as run:
        result = clear_console()
    assert result is None
    run.assert_called_once()
    assert run.call_args.args[0] == command
    assert run.call_args.kwargs["stderr"] is subprocess.DEVNULL


def test_clear_console_unknown_platform_does_nothing():
    with mock.patch("platform.system", return_value="Plan9"), mock.patch(
        "subprocess.run"
    ) as run:
        result = clear_console()
    assert result is None
    assert run.call_count == 0


def test_clear_console_ignores_missing_command():
    with mock.patch("platform.system", return_value="Linux"), mock.patch(
        "subprocess.run", side_effect=FileNotFoundError("clear")
    ) as run:
        result = clear_console()
    assert run.call_count == 1
    assert result is None