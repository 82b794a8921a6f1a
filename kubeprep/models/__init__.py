"""Pydantic models for structured results and run configuration."""

from kubeprep.models.config_models import HostPaths, ProvisionConfig
from kubeprep.models.network_models import InterfaceDetails, NetworkScan, ProbeResult

__all__ = [
    "HostPaths",
    "InterfaceDetails",
    "NetworkScan",
    "ProbeResult",
    "ProvisionConfig",
]
