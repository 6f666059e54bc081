"""Population control: splitting, Russian roulette and low-weight roulette."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass

from qsmc.rng import rng_sample, spawn_random_number_seed
from qsmc.vault_container import ParticleVaultContainer


@dataclass
class Balance:
    """Counts of particle gains and losses during a cycle."""

    start: int = 0
    source: int = 0
    produce: int = 0
    split: int = 0
    absorb: int = 0
    census: int = 0
    escape: int = 0
    rr: int = 0
    fission: int = 0

    @property
    def gains(self) -> int:
        """Particles that entered the simulation."""
        return self.start + self.source + self.produce + self.split

    @property
    def losses(self) -> int:
        """Particles that left the simulation."""
        return self.absorb + self.census + self.escape + self.rr + self.fission


def _split_rr_factor(
    local_num_particles: int,
    target_num_particles: int,
    load_balance: bool,
    num_processors: int,
) -> float:
    if load_balance:
        if num_processors <= 0:
            raise ValueError("number of processors must be positive")
        target = math.ceil(target_num_particles / num_processors)
        if local_num_particles == 0:
            return 1.0
        return target / local_num_particles
    if local_num_particles == 0:
        return 1.0
    return target_num_particles / local_num_particles


def _population_control_guts(
    split_rr_factor: float,
    current_num_particles: int,
    container: ParticleVaultContainer,
    balance: Balance,
) -> None:
    vault_size = container.vault_size
    fill_vault_index = current_num_particles // vault_size

    # Walk backwards so that killed particles do not disturb the indexing.
    for particle_index in range(current_num_particles - 1, -1, -1):
        vault = container.processing_vault(particle_index // vault_size)
        slot = particle_index % vault_size
        particle = vault[slot]
        particle.random_number_seed, random_number = rng_sample(particle.random_number_seed)

        if split_rr_factor < 1:
            if random_number > split_rr_factor:
                vault.erase_swap_particle(slot)
                balance.rr += 1
            else:
                particle.weight /= split_rr_factor
        elif split_rr_factor > 1:
            split_factor = math.floor(split_rr_factor)
            if random_number > split_rr_factor - split_factor:
                split_factor -= 1

            particle.weight /= split_rr_factor
            split_particle = copy.copy(particle)

            for _ in range(split_factor):
                balance.split += 1
                child_seed, particle.random_number_seed = spawn_random_number_seed(
                    particle.random_number_seed
                )
                split_particle.random_number_seed = child_seed
                split_particle.identifier = child_seed
                fill_vault_index = container.add_processing_particle(
                    split_particle, fill_vault_index
                )


def population_control(
    container: ParticleVaultContainer,
    target_num_particles: int,
    balance: Balance,
    load_balance: bool = False,
    num_processors: int = 1,
) -> float:
    """Split or roulette the processing particles towards the target count.

    With ``load_balance`` the target is shared evenly between
    ``num_processors`` processes. Particle weights are adjusted so the total
    weight is preserved on average. Returns the split/roulette factor used.
    """
    local_num_particles = container.size_processing()
    factor = _split_rr_factor(
        local_num_particles, target_num_particles, load_balance, num_processors
    )
    if factor != 1.0:
        _population_control_guts(factor, local_num_particles, container, balance)
    container.collapse_processing()
    return factor


def roulette_low_weight_particles(
    container: ParticleVaultContainer,
    low_weight_cutoff: float,
    source_particle_weight: float,
    balance: Balance,
) -> None:
    """Roulette particles whose weight is low relative to the source weight.

    A particle at or below ``low_weight_cutoff * source_particle_weight``
    survives with probability ``low_weight_cutoff`` and has its weight
    divided by it; otherwise it is killed.
    """
    if not low_weight_cutoff > 0.0:
        return

    current_num_particles = container.size_processing()
    vault_size = container.vault_size
    weight_cutoff = low_weight_cutoff * source_particle_weight

    for particle_index in range(current_num_particles - 1, -1, -1):
        vault = container.processing_vault(particle_index // vault_size)
        slot = particle_index % vault_size
        particle = vault[slot]
        if particle.weight <= weight_cutoff:
            particle.random_number_seed, random_number = rng_sample(
                particle.random_number_seed
            )
            if random_number <= low_weight_cutoff:
                particle.weight /= low_weight_cutoff
            else:
                vault.erase_swap_particle(slot)
                balance.rr += 1

    container.collapse_processing()