"""Base class for detecting tools the provisioning run installs."""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod

from kubeprep.errors import CommandError
from kubeprep.models.software_models import SoftwareInfo
from kubeprep.utils.shell import run_command


class SoftwareDetector(ABC):
    """Locate an executable on PATH and read its version.

    Subclasses name the executable and parse the version output; a tool
    that is missing or does not answer its version query is reported as
    not installed.
    """

    #: Arguments appended to the executable to print its version.
    version_args: tuple[str, ...] = ("--version",)

    @property
    @abstractmethod
    def software_name(self) -> str:
        """Return the canonical name of the software, e.g. 'docker'."""

    @abstractmethod
    def parse_version(self, output: str) -> str | None:
        """Extract the version from the output of the version command."""

    def detect(self) -> SoftwareInfo | None:
        """Detect the tool.

        Returns
        -------
            SoftwareInfo if installed, None otherwise.
        """
        path = shutil.which(self.software_name)
        if path is None:
            return None

        try:
            result = run_command([path, *self.version_args], check=False, timeout=5)
        except CommandError:
            return None
        if result.returncode != 0:
            return None

        output = (result.stdout or result.stderr or "").strip()
        return SoftwareInfo(
            name=self.software_name,
            installed=True,
            version=self.parse_version(output) if output else None,
            path=path,
        )
