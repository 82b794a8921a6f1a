"""Small file-editing helpers for host configuration files."""

from __future__ import annotations

from pathlib import Path


def write_if_changed(path: Path, content: str) -> bool:
    """Write content to path unless it already holds exactly that.

    Missing parent directories are created.

    Returns:
        True when the file was written.
    """
    if path.exists() and path.read_text() == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return True


def append_missing_lines(path: Path, lines: list[str]) -> list[str]:
    """Append the lines that path does not already contain.

    Returns:
        The lines actually appended.
    """
    existing = set(path.read_text().splitlines()) if path.exists() else set()
    missing = [line for line in lines if line not in existing]
    if not missing:
        return []

    path.parent.mkdir(parents=True, exist_ok=True)
    prefix = ""
    if path.exists():
        current = path.read_text()
        if current and not current.endswith("\n"):
            prefix = "\n"
    with path.open("a") as f:
        f.write(prefix + "\n".join(missing) + "\n")
    return missing
