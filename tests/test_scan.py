"""Tests for the scan phase and the connectivity gate."""

from __future__ import annotations

import pytest

from kubeprep.commands import provision_cmd
from kubeprep.commands.provision_cmd import connectivity_gate
from kubeprep.commands.scan_cmd import print_scan, scan_network
from kubeprep.errors import ProxyConfigurationError
from kubeprep.models.constants import (
    CheckStatus,
    ExitCode,
    InterfaceState,
    Reachability,
)
from kubeprep.models.network_models import InterfaceDetails, NetworkScan, ProbeResult


class FakeNetwork:
    """Interfaces as (state, ip) pairs; lo is filtered like the real backend."""

    def __init__(self, interfaces: dict[str, tuple[InterfaceState, str]]):
        self.interfaces = interfaces
        self.inspected: list[str] = []

    def list_interfaces(self):
        return [name for name in self.interfaces if not name.startswith("lo")]

    def inspect(self, name):
        self.inspected.append(name)
        state, ip = self.interfaces[name]
        return InterfaceDetails(name=name, state=state, ip=ip)


class FakeProber:
    def __init__(self, reachable: set[str]):
        self.reachable = reachable
        self.probed: list[str] = []

    def probe(self, details):
        self.probed.append(details.name)
        ok = details.name in self.reachable
        return ProbeResult(
            interface=details.name,
            local_link=CheckStatus.PASSED,
            internet=CheckStatus.PASSED if ok else CheckStatus.FAILED,
            http_fallback=CheckStatus.SKIPPED if ok else CheckStatus.FAILED,
            reachability=Reachability.REACHABLE if ok else Reachability.UNREACHABLE,
        )


class FakeConfigurator:
    def __init__(self, outcomes: list[bool]):
        self.outcomes = outcomes
        self.calls = 0

    def configure(self):
        self.calls += 1
        if not self.outcomes.pop(0):
            raise ProxyConfigurationError("Shell profile proxy configuration failed")
        return "http://proxy.local:3128"


def answers(monkeypatch: pytest.MonkeyPatch, *replies: str) -> list[str]:
    """Feed replies to click.prompt, recording the questions asked."""
    queue = list(replies)
    asked: list[str] = []

    def fake_prompt(text, default=None, show_default=True):
        asked.append(text)
        reply = queue.pop(0)
        return reply if reply else default

    monkeypatch.setattr("click.prompt", fake_prompt)
    return asked


def test_scan_reachable_interface(config):
    network = FakeNetwork({"lo": (InterfaceState.UP, "127.0.0.1"), "eth0": (InterfaceState.UP, "10.0.0.5")})

    scan = scan_network(config, network=network, prober=FakeProber({"eth0"}))

    assert scan.interfaces == ["eth0"]
    assert scan.reachable == ["eth0"]
    assert scan.details["eth0"].internet == Reachability.REACHABLE
    assert scan.has_connectivity


def test_scan_never_probes_down_interfaces(config):
    network = FakeNetwork(
        {"eth0": (InterfaceState.DOWN, ""), "eth1": (InterfaceState.UP, "10.0.1.7")}
    )
    prober = FakeProber(set())

    scan = scan_network(config, network=network, prober=prober)

    assert prober.probed == ["eth1"]
    assert scan.details["eth0"].internet == Reachability.UNKNOWN
    assert scan.details["eth1"].internet == Reachability.UNREACHABLE
    assert scan.reachable == []


def test_scan_keeps_going_after_unreachable_interface(config):
    network = FakeNetwork(
        {"eth0": (InterfaceState.UP, "10.0.0.5"), "eth1": (InterfaceState.UP, "10.0.1.7")}
    )

    scan = scan_network(config, network=network, prober=FakeProber({"eth1"}))

    assert scan.reachable == ["eth1"]
    assert scan.addresses() == ["10.0.0.5", "10.0.1.7"]


def test_gate_skips_proxy_when_connected(config, monkeypatch: pytest.MonkeyPatch):
    asked = answers(monkeypatch)
    scan = NetworkScan(interfaces=["eth0"], reachable=["eth0"])

    assert connectivity_gate(scan, config, FakeConfigurator([])) == ExitCode.SUCCESS
    assert asked == []


def test_gate_declined_returns_no_connectivity(config, monkeypatch: pytest.MonkeyPatch):
    answers(monkeypatch, "n")
    configurator = FakeConfigurator([])

    code = connectivity_gate(NetworkScan(interfaces=["eth0"]), config, configurator)

    assert code == ExitCode.NO_CONNECTIVITY
    assert int(code) == 2
    assert configurator.calls == 0


def test_gate_default_answer_configures_proxy(config, monkeypatch: pytest.MonkeyPatch):
    asked = answers(monkeypatch, "")
    configurator = FakeConfigurator([True])

    assert connectivity_gate(NetworkScan(), config, configurator) == ExitCode.SUCCESS
    assert configurator.calls == 1
    assert asked == ["Do you want to configure a proxy? (Yn)"]


def test_gate_asks_again_after_failed_configuration(config, monkeypatch: pytest.MonkeyPatch):
    asked = answers(monkeypatch, "maybe", "oui", "y")
    configurator = FakeConfigurator([False, True])

    assert connectivity_gate(NetworkScan(), config, configurator) == ExitCode.SUCCESS
    assert configurator.calls == 2
    assert len(asked) == 3


def test_gate_gives_up(config, monkeypatch: pytest.MonkeyPatch):
    limited = config.model_copy(update={"max_prompt_attempts": 2})
    answers(monkeypatch, "y", "y")

    with pytest.raises(ProxyConfigurationError):
        connectivity_gate(NetworkScan(), limited, FakeConfigurator([False, False]))


def test_scenario_unreachable_and_declined(config, monkeypatch: pytest.MonkeyPatch):
    """eth0 up without internet, user declines the proxy: exit code 2."""
    network = FakeNetwork({"eth0": (InterfaceState.UP, "10.0.0.5")})
    scan = scan_network(config, network=network, prober=FakeProber(set()))
    answers(monkeypatch, "N")

    assert scan.reachable == []
    assert connectivity_gate(scan, config, FakeConfigurator([])) == 2


def test_print_scan(capsys):
    scan = NetworkScan(
        interfaces=["eth0", "eth1"],
        details={
            "eth0": InterfaceDetails(
                name="eth0", state=InterfaceState.UP, ip="10.0.0.5",
                internet=Reachability.REACHABLE,
            ),
            "eth1": InterfaceDetails(name="eth1", state=InterfaceState.DOWN),
        },
        reachable=["eth0"],
    )

    print_scan(scan)

    out = capsys.readouterr().out
    assert "10.0.0.5" in out
    assert "DOWN" in out
    assert "Internet reachable through: eth0" in out


def test_module_uses_proxy_configurator_by_default(config, monkeypatch: pytest.MonkeyPatch):
    built = []

    class Recorder(FakeConfigurator):
        def __init__(self, cfg):
            super().__init__([True])
            built.append(cfg)

    monkeypatch.setattr(provision_cmd, "ProxyConfigurator", Recorder)
    answers(monkeypatch, "y")

    assert connectivity_gate(NetworkScan(), config) == ExitCode.SUCCESS
    assert built == [config]
