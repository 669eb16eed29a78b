"""Recorded diff chunks and the drift-tolerant verifier that places them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patch_chunk.domain.models import DEFAULT_MAX_OFFSET
from patch_chunk.log import get_logger

from .errors import ContentMismatchError, IncorrectChunkSizeError, PatchFailedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from patch_chunk.domain.models import VerifierConfig

__all__ = ["MAX_SEARCH_OFFSET", "Chunk"]

MAX_SEARCH_OFFSET = DEFAULT_MAX_OFFSET
"""Furthest distance, in either direction, probed by :meth:`Chunk.verify`."""

logger = get_logger(__name__)


class Chunk[T]:
    """A contiguous slice of a sequence recorded at a known position.

    ``lines`` is copied on construction so later edits to the caller's buffer
    cannot change what the chunk expects to find. ``change_position`` is opaque
    caller data and takes no part in verification, equality or hashing.
    """

    __slots__ = ("_change_position", "_lines", "_position")

    def __init__(
        self,
        position: int,
        lines: Sequence[T],
        change_position: list[int] | None = None,
    ) -> None:
        """Store ``position`` and a private snapshot of ``lines``."""
        self._position = position
        self._lines: list[T] = list(lines)
        self._change_position = change_position

    @property
    def position(self) -> int:
        """Start index of the chunk in the original sequence."""
        return self._position

    @property
    def lines(self) -> list[T]:
        """The recorded content."""
        return self._lines

    @property
    def change_position(self) -> list[int] | None:
        """Positions of individually changed lines, as supplied by the caller."""
        return self._change_position

    @property
    def size(self) -> int:
        return len(self._lines)

    @property
    def last(self) -> int:
        """Index of the final covered element in the original sequence."""
        return self._position + self.size - 1

    def replace_lines(self, lines: Sequence[T]) -> None:
        """Swap the recorded content wholesale, keeping position and change data."""
        self._lines = list(lines)

    def verify(
        self,
        target: Sequence[T],
        *,
        max_offset: int | None = None,
        config: VerifierConfig | None = None,
    ) -> int:
        """Return the signed offset at which this chunk's content appears in ``target``.

        The recorded position is tried first. Failing that, offsets are probed
        outward by increasing magnitude (``-1, +1, -2, +2, ...``) up to
        ``max_offset`` positions away, so the result is the closest match and
        ties favour the earlier position. The window comes from ``max_offset``
        when given, then ``config.max_offset``, then :data:`MAX_SEARCH_OFFSET`.

        Raises:
            IncorrectChunkSizeError: the chunk is longer than ``target``.
            ContentMismatchError: no offset within the window matches.
            ValueError: ``max_offset`` is negative.
        """
        if max_offset is None:
            max_offset = config.max_offset if config is not None else MAX_SEARCH_OFFSET
        if max_offset < 0:
            message = "max_offset must be non-negative"
            raise ValueError(message)
        size = self.size
        target_size = len(target)
        if size > target_size:
            error = IncorrectChunkSizeError(position=self._position, chunk_size=size, target_size=target_size)
            self._log_failure(error)
            raise error

        if self._matches_at(0, target):
            return 0

        lower = min(self._position, max_offset)
        upper = min(max_offset, max(0, target_size - size - self._position))
        going_up = 0
        going_down = 0
        while going_up < lower or going_down < upper:
            if going_up < lower:
                going_up += 1
                if self._matches_at(-going_up, target):
                    return self._drifted(-going_up)
            if going_down < upper:
                going_down += 1
                if self._matches_at(going_down, target):
                    return self._drifted(going_down)

        error = ContentMismatchError(position=self._position, chunk_size=size, target_size=target_size)
        self._log_failure(error)
        raise error

    def _matches_at(self, offset: int, target: Sequence[T]) -> bool:
        start = self._position + offset
        # Out-of-range windows never match; negative indices would otherwise wrap.
        if start < 0 or start + len(self._lines) > len(target):
            return False
        return all(target[start + index] == line for index, line in enumerate(self._lines))

    def _drifted(self, offset: int) -> int:
        logger.debug("chunk.drift_detected", position=self._position, offset=offset, size=self.size)
        return offset

    def _log_failure(self, error: PatchFailedError) -> None:
        logger.warning(
            "chunk.verify_failed",
            position=error.position,
            kind=error.kind.value,
            chunk_size=error.chunk_size,
            target_size=error.target_size,
        )

    def __len__(self) -> int:
        return len(self._lines)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._position == other._position and self._lines == other._lines

    def __hash__(self) -> int:
        return hash((tuple(self._lines), self._position, self.size))

    def __repr__(self) -> str:
        return f"Chunk(position={self._position}, size={self.size}, lines={self._lines!r})"
