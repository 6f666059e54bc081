# qsmc

Building blocks for a Monte Carlo particle transport code, in plain Python
with no third-party dependencies.

## Modules

- **`qsmc.rng`** – a 64-bit linear congruential generator. Seeds are plain
  integers; `rng_sample(seed)` returns `(new_seed, sample)`, and
  `spawn_random_number_seed(parent)` returns `(child_seed, advanced_parent)`
  using the pseudo-DES hash (`pseudo_des`, `hash_state`).
- **`qsmc.particle_vault`** – the `Particle` dataclass and `ParticleVault`, an
  ordered store of particle copies with `push`, `pop`, `collapse`,
  `erase_swap_particle`, `invalidate_particle`, `get_comm` and `swap_vaults`.
- **`qsmc.vault_container`** – `ParticleVaultContainer`, which keeps
  processing, processed and extra vaults of a fixed size: adding particles,
  counting them, collapsing vaults, swapping processed into processing, and
  moving extra particles into the processing vaults. It also holds a
  `send_queue`.
- **`qsmc.send_queue`** – `SendQueue` of `SendQueueEntry` items recording which
  particle goes to which neighbour.
- **`qsmc.population_control`** – `population_control` splits or roulettes
  the processing particles towards a target count, and
  `roulette_low_weight_particles` roulettes low-weight particles. Gains and
  losses are counted in a `Balance`.
- **`qsmc.parameters`** – dataclasses for simulation, geometry, material and
  cross-section parameters with their defaults, `supply_defaults` for the
  default problem, and `format_parameters` to render them as text.
- **`qsmc.options`** – `parse_command_line`, the block scanners and
  `get_parameters`, which combine command-line options with input blocks.

## Examples

Random numbers and seed spawning:

```python
from qsmc.rng import rng_sample, spawn_random_number_seed

seed = 1029384756
seed, x = rng_sample(seed)              # x in [0, 1)
child, seed = spawn_random_number_seed(seed)
```

Vaults and population control:

```python
from qsmc.particle_vault import Particle
from qsmc.population_control import Balance, population_control
from qsmc.vault_container import ParticleVaultContainer

container = ParticleVaultContainer(vault_size=100, num_vaults=2, num_extra_vaults=1)
index = 0
for n in range(50):
    index = container.add_processing_particle(
        Particle(weight=1.0, random_number_seed=n + 1), index
    )

balance = Balance()
factor = population_control(container, 100, balance)   # 2.0: each particle is split
print(container.size_processing(), balance.split)
```

Neighbour send queue:

```python
from qsmc.send_queue import SendQueue

queue = SendQueue()
queue.push(3, 17)
queue.push(5, 18)
print(queue.neighbor_size(3), len(queue))  # 1 2
```

Parameters from command-line arguments and input blocks. An input block is a
`(name, values)` pair; the recognised names are `Simulation`, `Geometry`,
`Material` and `CrossSection`:

```python
from qsmc.options import get_parameters
from qsmc.parameters import format_parameters

params = get_parameters(
    ["--nParticles", "1000"],
    [("Material", {"name": "fuel", "sourceRate": "1e10"})],
)
print(format_parameters(params))
```

When no geometry is given, `get_parameters` adds the default problem: a brick
of `sourceMaterial` filling the `lx` × `ly` × `lz` box, with a `flat` cross
section. `-h`/`--help` prints the options and raises `SystemExit(2)`.

## What this package does not do

It has no nuclear data tables or cross-section evaluation, no mesh or
geometry tracking, no generation of source particles and no command that
runs a simulation. Input blocks must be supplied already parsed; no input
file reader is included. Everything runs in one process: neighbour send
queues are recorded but nothing is sent.

## Units

Lengths are in centimetres, times in seconds and particle energies in MeV.