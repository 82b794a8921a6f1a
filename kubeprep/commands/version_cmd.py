"""
Version command - displays kubeprep version information
"""

from kubeprep.models.constants import DEFAULT_K8S_VERSION
from kubeprep.version.kubeprep_version import KUBEPREP_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display kubeprep version information.

    Args:
        verbose: If True, also show the release date and default Kubernetes version
    """
    if verbose:
        print(f"kubeprep version {KUBEPREP_VERSION.full_version()}")
        print(f"  Default Kubernetes: {DEFAULT_K8S_VERSION}")
    else:
        print(f"kubeprep {KUBEPREP_VERSION}")
