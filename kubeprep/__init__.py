"""kubeprep - prepare a Linux host for kubeadm-based Kubernetes."""

from kubeprep.version.kubeprep_version import KUBEPREP_VERSION, Version

__version__ = str(KUBEPREP_VERSION)
__version_info__ = KUBEPREP_VERSION

__all__ = [
    "KUBEPREP_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
