"""Tests for the environment variable utility."""

import pytest

from kubeprep.utils.env import get_env, set_env


def test_get_env_basic(monkeypatch: pytest.MonkeyPatch):
    """Set, missing and empty variables."""
    monkeypatch.setenv("KUBEPREP_TEST_VAR", "value")
    monkeypatch.setenv("KUBEPREP_EMPTY", "")
    monkeypatch.delenv("KUBEPREP_MISSING", raising=False)

    assert get_env("KUBEPREP_TEST_VAR") == "value"
    assert get_env("KUBEPREP_MISSING", default="default") == "default"
    assert get_env("KUBEPREP_MISSING") is None
    assert get_env("KUBEPREP_EMPTY", default="fallback") == "fallback"


def test_set_env(monkeypatch: pytest.MonkeyPatch, log_output):
    """set_env overwrites the variable and logs when asked."""
    monkeypatch.setenv("http_proxy", "http://old:8080")

    set_env("http_proxy", "http://proxy.local:3128", log=True)

    assert get_env("http_proxy") == "http://proxy.local:3128"
    assert "ENV SET http_proxy=http://proxy.local:3128" in log_output.getvalue()


def test_set_env_quiet_by_default(monkeypatch: pytest.MonkeyPatch, log_output):
    monkeypatch.setenv("no_proxy", "")

    set_env("no_proxy", "localhost")

    assert get_env("no_proxy") == "localhost"
    assert "ENV SET" not in log_output.getvalue()
