"""Software detection backends."""

from kubeprep.backends.software.base import SoftwareDetector
from kubeprep.backends.software.docker import DockerDetector
from kubeprep.backends.software.kubernetes import KubeToolDetector, installed_kube_tools
from kubeprep.models.software_models import SoftwareInfo

__all__ = [
    "DockerDetector",
    "KubeToolDetector",
    "SoftwareDetector",
    "SoftwareInfo",
    "installed_kube_tools",
]
