"""Running external commands and capturing what they print."""

from __future__ import annotations

import subprocess


class CommandError(Exception):
    """An external command could not be started or exited with a failure."""

    def __init__(self, command: tuple[str, ...], reason: str, output: str = "") -> None:
        super().__init__(f"{' '.join(command)}: {reason}")
        self.command = command
        self.reason = reason
        self.output = output


def run_command(*args: str) -> str:
    """Run a command and return its standard output.

    Raises CommandError if the command cannot be started or exits non-zero;
    the captured output is kept on the error.
    """
    if not args:
        raise ValueError("no command given")
    command = tuple(args)
    try:
        result = subprocess.run(
            list(command), stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError as exc:
        raise CommandError(command, str(exc)) from exc
    output = result.stdout or ""
    if result.returncode != 0:
        raise CommandError(command, f"exit status {result.returncode}", output)
    return output