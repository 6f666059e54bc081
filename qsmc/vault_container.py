"""A set of particle vaults used to stage particles between tracking passes.

Particles still to be tracked sit in the *processing* vaults, particles
that reached census sit in the *processed* vaults, and particles created
during tracking land in a fixed number of *extra* vaults. A send queue
lists particles that must go to a neighbouring process.
"""

from __future__ import annotations

from typing import List

from qsmc.particle_vault import Particle, ParticleVault
from qsmc.send_queue import SendQueue


class ParticleVaultContainer:
    """Processing, processed and extra vaults of a fixed vault size."""

    def __init__(self, vault_size: int, num_vaults: int, num_extra_vaults: int) -> None:
        if vault_size <= 0:
            raise ValueError(f"vault size must be positive, got {vault_size}")
        if num_vaults < 0 or num_extra_vaults < 0:
            raise ValueError("vault counts must not be negative")
        self._vault_size = vault_size
        self._num_extra_vaults = num_extra_vaults
        self._extra_vault_index = 0
        self._processing: List[ParticleVault] = [ParticleVault() for _ in range(num_vaults)]
        self._processed: List[ParticleVault] = [ParticleVault() for _ in range(num_vaults)]
        self._extra: List[ParticleVault] = [ParticleVault() for _ in range(num_extra_vaults)]
        self._send_queue = SendQueue()

    @property
    def vault_size(self) -> int:
        """Capacity of each vault."""
        return self._vault_size

    @property
    def num_extra_vaults(self) -> int:
        """Number of extra vaults, fixed at construction."""
        return self._num_extra_vaults

    @property
    def num_processing_vaults(self) -> int:
        """Current number of processing vaults."""
        return len(self._processing)

    @property
    def num_processed_vaults(self) -> int:
        """Current number of processed vaults."""
        return len(self._processed)

    @property
    def send_queue(self) -> SendQueue:
        """Particles waiting to be sent to neighbouring processes."""
        return self._send_queue

    def processing_vault(self, index: int) -> ParticleVault:
        """The processing vault at ``index``."""
        return self._processing[index]

    def processed_vault(self, index: int) -> ParticleVault:
        """The processed vault at ``index``."""
        return self._processed[index]

    def first_empty_processed_vault(self) -> int:
        """Index of the first empty processed vault, adding a vault if all are in use."""
        if not self._processed:
            self._processed.append(ParticleVault())
        index = 0
        while len(self._processed[index]) != 0:
            index += 1
            if index == len(self._processed):
                self._processed.append(ParticleVault())
        return index

    def size_processing(self) -> int:
        """Total number of particles in the processing vaults."""
        return sum(len(vault) for vault in self._processing)

    def size_processed(self) -> int:
        """Total number of particles in the processed vaults."""
        return sum(len(vault) for vault in self._processed)

    def size_extra(self) -> int:
        """Total number of particles in the extra vaults."""
        return sum(len(vault) for vault in self._extra)

    def _fill_size(self, vault: ParticleVault, donor: ParticleVault) -> int:
        room = self._vault_size - len(vault)
        # An over-full vault takes everything the donor holds.
        return room if room >= 0 else len(donor) + 1

    def _collapse(self, vaults: List[ParticleVault]) -> None:
        if not vaults:
            return
        fill_index = 0
        from_index = len(vaults) - 1
        while fill_index < from_index:
            fill = vaults[fill_index]
            if len(fill) == self._vault_size:
                fill_index += 1
            elif len(vaults[from_index]) == 0:
                from_index -= 1
            else:
                donor = vaults[from_index]
                fill.collapse(self._fill_size(fill, donor), donor)

    def collapse_processing(self) -> None:
        """Pack processing particles into the fewest leading vaults."""
        self._collapse(self._processing)

    def collapse_processed(self) -> None:
        """Pack processed particles into the fewest leading vaults."""
        self._collapse(self._processed)

    def swap_processing_processed_vaults(self) -> None:
        """Move the filled processed vaults into the processing list.

        The processing vaults are expected to be empty; they take the
        places the processed vaults leave.
        """
        self.collapse_processed()
        if not self._processed:
            return
        index = 0
        need_to_swap = len(self._processed[index]) > 0
        while need_to_swap:
            self._processed[index], self._processing[index] = (
                self._processing[index],
                self._processed[index],
            )
            index += 1
            if index == len(self._processing):
                self._processing.append(ParticleVault())
            need_to_swap = index < len(self._processed) and len(self._processed[index]) > 0

    def add_processing_particle(self, particle: Particle, fill_vault_index: int) -> int:
        """Store ``particle`` in the first processing vault with room from ``fill_vault_index``.

        Vaults are added as needed. Returns the index of the vault used,
        which is where the next search should start.
        """
        if fill_vault_index < 0:
            raise IndexError(f"vault index {fill_vault_index} out of range")
        while fill_vault_index >= len(self._processing):
            self._processing.append(ParticleVault())
        while len(self._processing[fill_vault_index]) >= self._vault_size:
            fill_vault_index += 1
            if fill_vault_index >= len(self._processing):
                self._processing.append(ParticleVault())
        self._processing[fill_vault_index].push(particle)
        return fill_vault_index

    def add_extra_particle(self, particle: Particle) -> None:
        """Store a newly created particle in the next free slot of the extra vaults."""
        index = self._extra_vault_index
        vault = index // self._vault_size
        if vault >= len(self._extra):
            raise IndexError("extra particle vaults are full")
        self._extra_vault_index = index + 1
        self._extra[vault].push(particle)

    def clean_extra_vaults(self) -> None:
        """Move every particle from the extra vaults into the processing vaults."""
        size_extra = self.size_extra()
        if size_extra > 0:
            num_extra = min(-(-size_extra // self._vault_size), len(self._extra))
            extra_index = 0
            processing_index = 0
            while extra_index < num_extra:
                extra = self._extra[extra_index]
                if len(extra) == 0:
                    extra_index += 1
                elif processing_index == len(self._processing):
                    self._processing.append(ParticleVault())
                else:
                    target = self._processing[processing_index]
                    if len(target) >= self._vault_size:
                        processing_index += 1
                    else:
                        target.collapse(self._vault_size - len(target), extra)
        self._extra_vault_index = 0