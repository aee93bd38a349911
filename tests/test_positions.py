"""Tests for burrow.positions module."""

from pathlib import Path

from burrow.positions import Position, PositionMemory


class TestPositionMemory:
    def test_empty(self):
        memory = PositionMemory()
        assert memory.is_empty()
        assert memory.get(Path("/tmp")) is None

    def test_save_and_get(self):
        memory = PositionMemory()
        memory.save(Path("/a"), Position(1, 2, 3))
        assert memory.get(Path("/a")) == Position(1, 2, 3)
        assert Path("/a") in memory
        assert len(memory) == 1

    def test_save_overwrites(self):
        memory = PositionMemory()
        memory.save(Path("/a"), Position(1, 2, 3))
        memory.save(Path("/a"), Position(0, 0, 0))
        assert memory.get(Path("/a")) == Position(0, 0, 0)
        assert len(memory) == 1

    def test_clear(self):
        memory = PositionMemory()
        memory.save(Path("/a"), Position(1, 2, 3))
        memory.save(Path("/b"), Position(0, 1, 0))
        memory.clear()
        assert memory.is_empty()
        assert memory.get(Path("/b")) is None
