"""Copying text to the system clipboard through the platform's tools."""

from __future__ import annotations

import subprocess
import sys

_UNIX_COMMANDS = (
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)
_WINDOWS_COMMANDS = (["clip"],)


def _commands() -> tuple[list[str], ...]:
    if sys.platform.startswith("win"):
        return _WINDOWS_COMMANDS
    return _UNIX_COMMANDS


def copy_to_clipboard(text: str) -> bool:
    """Put ``text`` on the clipboard; return whether any clipboard tool accepted it."""
    for command in _commands():
        try:
            result = subprocess.run(
                command,
                input=text,
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            continue
        if result.returncode == 0:
            return True
    return False