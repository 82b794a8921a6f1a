"""Environment variable helpers with logging.

The provisioning run reads its ambient context (invoking user, shell, home,
log level) from the environment and exports proxy settings back into it so
that child processes such as apt-get and the Docker install script inherit
them.

Usage:
    from kubeprep.utils.env import get_env, set_env

    level = get_env("KUBEPREP_LOG_LEVEL", default="INFO")
    set_env("http_proxy", "http://proxy.local:3128", log=True)
"""

from __future__ import annotations

import os


def _log_access(action: str, name: str, value: str) -> None:
    """Log environment variable access once the logger is configured."""
    from kubeprep.utils.logger import Logger

    if not Logger.is_configured():
        return

    Logger.get("env").debug(f"ENV {action.upper()} {name}={value}")


def get_env(name: str, *, default: str | None = None) -> str | None:
    """Get an environment variable.

    Empty values are treated as unset, since a blank ``SUDO_USER`` or
    ``SHELL`` is never a usable setting.

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset or empty.

    Examples:
        >>> get_env("KUBEPREP_LOG_LEVEL", default="INFO")
        'INFO'
    """
    value = os.environ.get(name)
    if value is None or value == "":
        return default

    return value


def set_env(name: str, value: str, *, log: bool = False) -> None:
    """Set an environment variable for this process and its children."""
    os.environ[name] = value

    if log:
        _log_access("set", name, value)
