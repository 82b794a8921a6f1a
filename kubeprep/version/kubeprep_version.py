from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for kubeprep.

    Major, minor and patch follow semver; the release date is kept for
    the verbose ``--version`` output.
    """
    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.3.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return the version with its release date."""
        return f"{self} (released {self.date_string()})"

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted release date."""
        return self.date.strftime(fmt)


# Current version instance
KUBEPREP_VERSION = Version(
    major=0,
    minor=3,
    patch=0,
    date=datetime(2026, 10, 19),
)
