"""Detection of the kubeadm tool set (kubeadm, kubelet, kubectl)."""

from __future__ import annotations

import re

from kubeprep.backends.software.base import SoftwareDetector

_VERSION_RE = re.compile(r"v?(\d+\.\d+\.\d+)")


class KubeToolDetector(SoftwareDetector):
    """Detect one Kubernetes binary and its version."""

    _VERSION_ARGS = {
        "kubeadm": ("version", "-o", "short"),
        "kubectl": ("version", "--client"),
        "kubelet": ("--version",),
    }

    def __init__(self, tool: str) -> None:
        if tool not in self._VERSION_ARGS:
            raise ValueError(f"Unknown Kubernetes tool: {tool}")
        self._tool = tool
        self.version_args = self._VERSION_ARGS[tool]

    @property
    def software_name(self) -> str:
        return self._tool

    def parse_version(self, output: str) -> str | None:
        match = _VERSION_RE.search(output)
        return match.group(1) if match else None


def installed_kube_tools(tools: tuple[str, ...]) -> dict[str, str | None]:
    """Map each installed tool among tools to its version."""
    found: dict[str, str | None] = {}
    for tool in tools:
        info = KubeToolDetector(tool).detect()
        if info is not None:
            found[tool] = info.version
    return found
