"""Diff chunks and their drift-tolerant verification."""

from .base import MAX_SEARCH_OFFSET, Chunk
from .errors import ContentMismatchError, FailureKind, IncorrectChunkSizeError, PatchFailedError

__all__ = [
    "MAX_SEARCH_OFFSET",
    "Chunk",
    "ContentMismatchError",
    "FailureKind",
    "IncorrectChunkSizeError",
    "PatchFailedError",
]
