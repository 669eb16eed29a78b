"""Failure taxonomy raised when a chunk cannot be placed in a target sequence."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ContentMismatchError",
    "FailureKind",
    "IncorrectChunkSizeError",
    "PatchFailedError",
]


class FailureKind(str, Enum):
    """Why a chunk failed to verify."""

    INCORRECT_CHUNK_SIZE = "incorrect_chunk_size"
    CONTENT_MISMATCH = "content_mismatch"


class PatchFailedError(RuntimeError):
    """Raised when a chunk's recorded content does not apply to a target."""

    def __init__(
        self,
        reason: str,
        *,
        kind: FailureKind,
        position: int,
        chunk_size: int,
        target_size: int,
    ) -> None:
        """Record the diagnostic payload alongside a ``chunk at <position>`` message."""
        self.kind = kind
        self.position = position
        self.chunk_size = chunk_size
        self.target_size = target_size
        super().__init__(f"chunk at {position}: Incorrect Chunk: {reason}")


class IncorrectChunkSizeError(PatchFailedError):
    """The chunk holds more lines than the target sequence."""

    def __init__(self, *, position: int, chunk_size: int, target_size: int) -> None:
        """Build the error for a chunk that cannot fit in the target at all."""
        super().__init__(
            f"chunk size {chunk_size} > target size {target_size}",
            kind=FailureKind.INCORRECT_CHUNK_SIZE,
            position=position,
            chunk_size=chunk_size,
            target_size=target_size,
        )


class ContentMismatchError(PatchFailedError):
    """No offset within the search window reproduces the chunk content."""

    def __init__(self, *, position: int, chunk_size: int, target_size: int) -> None:
        """Build the error for a chunk whose content was not found near its position."""
        super().__init__(
            "the chunk content doesn't match the target",
            kind=FailureKind.CONTENT_MISMATCH,
            position=position,
            chunk_size=chunk_size,
            target_size=target_size,
        )
