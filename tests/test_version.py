"""Tests for the kubeprep version information."""

from datetime import datetime

from kubeprep.version.kubeprep_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(major=1, minor=2, patch=3, date=datetime(2023, 1, 1))

    assert str(v) == "1.2.3"
    assert v.date_string("%Y") == "2023"
    assert v.full_version() == "1.2.3 (released 2023-01-01)"


def test_kubeprep_version_instance():
    """The package exposes the current version."""
    import kubeprep
    from kubeprep.version.kubeprep_version import KUBEPREP_VERSION

    assert isinstance(KUBEPREP_VERSION, Version)
    assert kubeprep.__version__ == str(KUBEPREP_VERSION)
