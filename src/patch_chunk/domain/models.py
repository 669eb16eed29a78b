"""Pydantic settings models for patch-chunk."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_MAX_OFFSET = 1000
"""Default number of positions searched on either side of a chunk's recorded position."""

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class VerifierConfig(BaseModel):
    """Bounds applied when searching for drifted chunk content."""

    max_offset: int = Field(default=DEFAULT_MAX_OFFSET, ge=0)


class LoggingConfig(BaseModel):
    """Structured logging output settings."""

    level: LogLevel = "INFO"
    format: Literal["json", "console"] = "console"


class Settings(BaseModel):
    """Root settings document."""

    verifier: VerifierConfig = Field(default_factory=VerifierConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
