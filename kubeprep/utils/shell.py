"""Thin wrapper around subprocess for the provisioning steps."""

from __future__ import annotations

import subprocess

from kubeprep.errors import CommandError
from kubeprep.utils.logger import Logger


def run_command(
    args: list[str],
    *,
    check: bool = True,
    timeout: float | None = None,
    input_text: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing its output as text.

    Args:
        args: Command and arguments; never passed through a shell.
        check: Raise CommandError on a non-zero exit status.
        timeout: Maximum time to wait for the command (seconds).
        input_text: Data written to the command's stdin.

    Returns:
        The completed process.

    Raises:
        CommandError: If the command cannot be started, times out, or
            (with check=True) exits non-zero.
    """
    log = Logger.get("shell")
    log.debug(f"$ {' '.join(args)}")

    try:
        result = subprocess.run(
            args,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            input=input_text,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise CommandError(args, None, str(e)) from e

    if check and result.returncode != 0:
        raise CommandError(args, result.returncode, result.stderr or "")

    return result


def command_succeeds(args: list[str], timeout: float | None = None) -> bool:
    """Return True when the command runs and exits 0."""
    try:
        result = run_command(args, check=False, timeout=timeout)
    except CommandError:
        return False
    return result.returncode == 0
