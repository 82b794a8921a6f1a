"""Tests for interface discovery and inspection."""

from __future__ import annotations

import socket
import types

import psutil
import pytest

from kubeprep.backends.network import Network
from kubeprep.models.constants import InterfaceState


def _stats(**interfaces: bool) -> dict:
    return {name: types.SimpleNamespace(isup=isup) for name, isup in interfaces.items()}


def _addr(family, address):
    return types.SimpleNamespace(family=family, address=address)


@pytest.fixture
def fake_host(monkeypatch: pytest.MonkeyPatch):
    stats = {
        "lo": True,
        "eth0": True,
        "docker0": True,
        "br-1a2b3c": True,
        "virbr0": False,
        "veth12ab": True,
        "enp0s3": False,
        "wlan0": True,
    }
    addrs = {
        "lo": [_addr(socket.AF_INET, "127.0.0.1")],
        "eth0": [
            _addr(psutil.AF_LINK, "52:54:00:12:34:56"),
            _addr(socket.AF_INET6, "fe80::1"),
            _addr(socket.AF_INET, "10.0.0.5"),
            _addr(socket.AF_INET, "10.0.0.6"),
        ],
        "wlan0": [_addr(socket.AF_INET6, "fe80::2")],
    }
    monkeypatch.setattr("psutil.net_if_stats", lambda: _stats(**stats))
    monkeypatch.setattr("psutil.net_if_addrs", lambda: addrs)


def test_list_interfaces_excludes_virtual_devices(fake_host, log_output):
    """Loopback, bridge, libvirt, docker and veth devices are dropped, order kept."""
    assert Network().list_interfaces() == ["eth0", "enp0s3", "wlan0"]
    assert "FOUND 3 network interfaces (eth0 enp0s3 wlan0 ...)" in log_output.getvalue()


def test_list_interfaces_empty(monkeypatch: pytest.MonkeyPatch):
    """No candidate is a valid result, not an error."""
    monkeypatch.setattr("psutil.net_if_stats", lambda: _stats(lo=True, docker0=True))
    assert Network().list_interfaces() == []


@pytest.mark.parametrize(
    "name", ["lo", "br-0f3c", "virbr0", "docker0", "veth9f1"]
)
def test_is_candidate_rejects_excluded_prefixes(name):
    assert Network().is_candidate(name) is False


def test_inspect_up_interface_takes_first_ipv4(fake_host):
    details = Network().inspect("eth0")

    assert details.state == InterfaceState.UP
    assert details.ip == "10.0.0.5"


def test_inspect_up_interface_without_ipv4(fake_host):
    details = Network().inspect("wlan0")

    assert details.is_up
    assert details.ip == ""


def test_inspect_down_interface_skips_address_lookup(monkeypatch: pytest.MonkeyPatch):
    """A DOWN interface never reaches the address lookup."""
    monkeypatch.setattr("psutil.net_if_stats", lambda: _stats(enp0s3=False))

    def fail():
        raise AssertionError("address lookup on a DOWN interface")

    monkeypatch.setattr("psutil.net_if_addrs", fail)

    details = Network().inspect("enp0s3")
    assert details.state == InterfaceState.DOWN
    assert details.ip == ""


def test_inspect_unknown_interface(fake_host):
    details = Network().inspect("eth9")

    assert details.state == InterfaceState.UNKNOWN
    assert not details.is_up


def test_interfaces_with_prefix(fake_host):
    assert Network.interfaces_with_prefix("enp") == ["enp0s3"]
