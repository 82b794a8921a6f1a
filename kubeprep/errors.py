"""Exceptions raised while provisioning a host."""

from __future__ import annotations


class KubeprepError(Exception):
    """Base exception for all kubeprep errors."""


class PrivilegeError(KubeprepError):
    """Raised when a host-mutating step is attempted without root privileges."""

    def __init__(self, euid: int) -> None:
        self.euid = euid
        super().__init__(
            f"kubeprep must run as root (effective uid is {euid}). "
            "Re-run it with sudo or from a root shell."
        )


class CommandError(KubeprepError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, args: list[str], returncode: int | None, stderr: str = "") -> None:
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        if returncode is None:
            message = f"Could not run {' '.join(args)!r}{detail}"
        else:
            message = f"Command {' '.join(args)!r} exited with {returncode}{detail}"
        super().__init__(message)


class PromptError(KubeprepError):
    """Raised when an interactive question runs out of attempts."""

    def __init__(self, question: str, attempts: int) -> None:
        self.question = question
        self.attempts = attempts
        super().__init__(f"No valid answer to {question!r} after {attempts} attempt(s)")


class ProxyConfigurationError(KubeprepError):
    """Raised when no working proxy could be configured."""
