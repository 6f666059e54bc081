"""Particles and the vaults that hold them."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Particle:
    """State of a particle stored in a vault."""

    coordinate: tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: tuple[float, float, float] = (0.0, 0.0, 0.0)
    direction_cosine: tuple[float, float, float] = (0.0, 0.0, 0.0)
    kinetic_energy: float = 0.0
    weight: float = 0.0
    time_to_census: float = 0.0
    num_mean_free_paths: float = 0.0
    random_number_seed: int = 0
    identifier: int = 0
    last_event: int = 0
    species: int = 0
    domain: int = 0
    cell: int = 0
    task: int = 0


class ParticleVault:
    """An ordered store of particles; stored particles are copies."""

    def __init__(self) -> None:
        self._particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __getitem__(self, index: int) -> Particle:
        return self._particles[index]

    def __setitem__(self, index: int, particle: Particle) -> None:
        self._particles[index] = copy.copy(particle)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def append(self, other: ParticleVault) -> None:
        """Copy every particle of ``other`` onto the end of this vault."""
        self._particles.extend(copy.copy(p) for p in other._particles)

    def collapse(self, fill_size: int, other: ParticleVault) -> None:
        """Move up to ``fill_size`` particles from ``other`` into this vault.

        If all of ``other`` fits it is moved whole; otherwise particles are
        taken from its end, at least one, until ``fill_size`` have moved or
        ``other`` is empty.
        """
        if len(other) < fill_size:
            self.append(other)
            other.clear()
            return
        moved = 0
        while other:
            self.push(other.pop())
            moved += 1
            if moved >= fill_size:
                break

    def clear(self) -> None:
        self._particles.clear()

    def push(self, particle: Particle) -> None:
        """Store a copy of ``particle`` at the end of the vault."""
        self._particles.append(copy.copy(particle))

    def pop(self) -> Particle:
        """Remove and return the last particle; ``IndexError`` if empty."""
        if not self._particles:
            raise IndexError("pop from an empty particle vault")
        return self._particles.pop()

    def get_comm(self, index: int) -> Particle:
        """Return a copy of the particle at ``index`` and mark it invalid in the vault."""
        self._check_index(index)
        particle = copy.copy(self._particles[index])
        self._particles[index].species = -1
        return particle

    def invalidate_particle(self, index: int) -> None:
        """Mark the particle at ``index`` as invalid."""
        self._check_index(index)
        self._particles[index].species = -1

    def erase_swap_particle(self, index: int) -> None:
        """Replace the particle at ``index`` with the last one and shrink the vault."""
        self._check_index(index)
        last = self._particles.pop()
        if index < len(self._particles):
            self._particles[index] = last

    def swap_vaults(self, other: ParticleVault) -> None:
        """Exchange the contents of this vault and ``other``."""
        self._particles, other._particles = other._particles, self._particles

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._particles):
            raise IndexError(f"particle index {index} out of range")