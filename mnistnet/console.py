"""Terminal helpers."""

from __future__ import annotations

import platform
import subprocess


def clear_console() -> None:
    """Clear the terminal using the platform's own command, if it has one."""
    system = platform.system()
    if system in ("Linux", "Darwin"):
        command = ["clear"]
    elif system == "Windows":
        command = ["cmd", "/c", "cls"]
    else:
        return
    try:
        subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        pass