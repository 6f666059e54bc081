"""Queue of particles that must be sent to a neighbouring process."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SendQueueEntry:
    """A particle index in the processing vaults and the neighbour it goes to."""

    neighbor: int
    particle_index: int


@dataclass
class SendQueue:
    """Records which particles leave for which neighbour during tracking."""

    _entries: list[SendQueueEntry] = field(default_factory=list)

    def push(self, neighbor: int, particle_index: int) -> None:
        """Queue ``particle_index`` for sending to ``neighbor``."""
        self._entries.append(SendQueueEntry(neighbor, particle_index))

    def neighbor_size(self, neighbor: int) -> int:
        """Number of queued entries bound for ``neighbor``."""
        return sum(1 for entry in self._entries if entry.neighbor == neighbor)

    def get_tuple(self, index: int) -> SendQueueEntry:
        """Return the entry at ``index``; negative indices are rejected."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"send queue index {index} out of range")
        return self._entries[index]

    def clear(self) -> None:
        """Empty the queue."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)