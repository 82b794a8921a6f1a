"""Pydantic models for interface discovery and reachability results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubeprep.models.constants import CheckStatus, InterfaceState, Reachability


class InterfaceDetails(BaseModel):
    """State and address of one discovered interface."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name (e.g., 'eth0', 'enp0s3')")
    state: InterfaceState = Field(..., description="Administrative state")
    ip: str = Field(
        "", description="First IPv4 address; empty when down or unassigned"
    )
    internet: Reachability = Field(
        Reachability.UNKNOWN, description="Internet reachability classification"
    )

    @property
    def is_up(self) -> bool:
        """Whether the interface may be probed."""
        return self.state == InterfaceState.UP


class ProbeResult(BaseModel):
    """Outcome of the three reachability checks for one interface."""

    model_config = ConfigDict(frozen=True)

    interface: str = Field(..., description="Probed interface name")
    local_link: CheckStatus = Field(
        ..., description="Echo probe to the interface's own address"
    )
    internet: CheckStatus = Field(..., description="Echo probe to a public address")
    http_fallback: CheckStatus = Field(
        ..., description="HTTP fetch attempted when the internet probe failed"
    )
    reachability: Reachability = Field(..., description="Final classification")

    @property
    def reachable(self) -> bool:
        """Whether the interface joins the reachable set."""
        return self.reachability == Reachability.REACHABLE


class NetworkScan(BaseModel):
    """Snapshot produced by discovery, inspection and probing."""

    model_config = ConfigDict(frozen=True)

    interfaces: list[str] = Field(
        default_factory=list, description="Candidate interfaces, in OS order"
    )
    details: dict[str, InterfaceDetails] = Field(
        default_factory=dict, description="Per-interface details keyed by name"
    )
    reachable: list[str] = Field(
        default_factory=list, description="Interfaces with working internet access"
    )

    @property
    def has_connectivity(self) -> bool:
        """True when at least one interface reached the internet."""
        return len(self.reachable) > 0

    def addresses(self) -> list[str]:
        """IPv4 addresses of the up interfaces, in discovery order."""
        return [
            self.details[name].ip
            for name in self.interfaces
            if name in self.details and self.details[name].ip
        ]
