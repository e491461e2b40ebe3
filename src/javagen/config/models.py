"""Pydantic model for the rendering style.

The defaults reproduce the canonical layout: tab indentation inside class and
method bodies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StyleConfig(BaseModel):
    """Whitespace settings applied when rendering entities."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: str = Field("\t", min_length=1, description="One level of body indentation")
