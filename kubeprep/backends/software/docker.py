"""Docker CLI detection."""

from __future__ import annotations

import re

from kubeprep.backends.software.base import SoftwareDetector


class DockerDetector(SoftwareDetector):
    """Detect the presence of the Docker CLI."""

    @property
    def software_name(self) -> str:
        return "docker"

    def parse_version(self, output: str) -> str | None:
        """Parse ``Docker version 25.0.3, build deadbeef``."""
        match = re.search(r"Docker version ([^,\s]+)", output)
        if match:
            return match.group(1)
        return output


__all__ = ["DockerDetector"]
