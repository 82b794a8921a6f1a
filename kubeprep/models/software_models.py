"""Pydantic models describing installed host software."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SoftwareInfo(BaseModel):
    """A command-line tool found on the host."""

    name: str = Field(..., description="Canonical tool name (e.g., 'docker')")
    installed: bool = Field(..., description="Whether the executable is on PATH")
    version: str | None = Field(None, description="Detected version")
    path: str | None = Field(None, description="Path to the executable")
