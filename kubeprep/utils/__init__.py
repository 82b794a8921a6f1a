"""kubeprep utilities - shared helper functions."""

from kubeprep.utils.env import get_env, set_env
from kubeprep.utils.logger import Logger, LoggerNotConfiguredError

__all__ = [
    # Env
    "get_env",
    "set_env",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
]
