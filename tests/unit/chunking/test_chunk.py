"""Tests for chunk construction, accessors and value semantics."""

from __future__ import annotations

import pytest

from patch_chunk.chunking import Chunk


def test_chunk_exposes_size_and_last() -> None:
    """Derived accessors follow the recorded lines."""
    chunk = Chunk(4, ["a", "b", "c"])
    assert chunk.position == 4
    assert chunk.size == 3
    assert len(chunk) == 3
    assert chunk.last == 6
    assert chunk.change_position is None


def test_empty_chunk_last_precedes_position() -> None:
    """An empty chunk ends one before where it starts."""
    chunk: Chunk[str] = Chunk(5, [])
    assert chunk.size == 0
    assert chunk.last == 4


def test_chunk_snapshots_lines() -> None:
    """Mutating the caller's buffer does not change the chunk."""
    buffer = ["a", "b"]
    chunk = Chunk(0, buffer)
    buffer.append("c")
    buffer[0] = "z"
    assert chunk.lines == ["a", "b"]
    assert chunk.lines is not buffer


def test_chunk_accepts_tuples() -> None:
    """Any sequence is copied into a list."""
    chunk = Chunk(1, ("x", "y"))
    assert chunk.lines == ["x", "y"]
    assert isinstance(chunk.lines, list)


def test_change_position_is_passed_through() -> None:
    """Change positions are kept as given."""
    changes = [0, 2]
    chunk = Chunk(3, ["a", "b", "c"], changes)
    assert chunk.change_position is changes


def test_equality_ignores_change_position() -> None:
    """Chunks with the same lines and position are interchangeable."""
    first = Chunk(2, ["a", "b"], [0])
    second = Chunk(2, ("a", "b"), [1, 5])
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (Chunk(2, ["a", "b"]), Chunk(3, ["a", "b"])),
        (Chunk(2, ["a", "b"]), Chunk(2, ["a", "c"])),
        (Chunk(2, ["a", "b"]), Chunk(2, ["a"])),
    ],
)
def test_inequality_on_position_or_lines(left: Chunk[str], right: Chunk[str]) -> None:
    """Any difference in position or lines breaks equality."""
    assert left != right


def test_chunk_is_not_equal_to_other_types() -> None:
    """Comparison with unrelated objects is simply false."""
    assert Chunk(0, ["a"]) != ["a"]
    assert Chunk(0, ["a"]) != (0, ["a"])


def test_replace_lines_keeps_position_and_change_position() -> None:
    """Replacing lines swaps content only."""
    changes = [1]
    chunk = Chunk(2, ["b", "c"], changes)
    replacement = ["q"]
    chunk.replace_lines(replacement)
    replacement.append("r")
    assert chunk.lines == ["q"]
    assert chunk.position == 2
    assert chunk.change_position is changes
    assert chunk.size == 1
    assert chunk.last == 2


def test_repr_lists_position_size_and_lines() -> None:
    """The representation is useful in diagnostics."""
    assert repr(Chunk(7, ["a", "b"])) == "Chunk(position=7, size=2, lines=['a', 'b'])"
