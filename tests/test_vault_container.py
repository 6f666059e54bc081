import pytest

from qsmc.particle_vault import Particle
from qsmc.vault_container import ParticleVaultContainer


def _particles(count, start=0):
    return [Particle(identifier=start + n) for n in range(count)]


def _ids(vaults):
    return sorted(p.identifier for vault in vaults for p in vault)


def _processing(container):
    return [container.processing_vault(i) for i in range(container.num_processing_vaults)]


def _processed(container):
    return [container.processed_vault(i) for i in range(container.num_processed_vaults)]


def _assert_packed(vaults, vault_size):
    sizes = [len(v) for v in vaults]
    nonempty = [i for i, s in enumerate(sizes) if s]
    if nonempty:
        last = nonempty[-1]
        assert all(s == vault_size for s in sizes[:last])
        assert all(s == 0 for s in sizes[last + 1:])


def test_construction_sizes():
    container = ParticleVaultContainer(4, 3, 2)
    assert container.vault_size == 4
    assert container.num_extra_vaults == 2
    assert container.num_processing_vaults == 3
    assert container.num_processed_vaults == 3
    assert container.size_processing() == 0
    assert container.size_processed() == 0
    assert container.size_extra() == 0
    assert len(container.send_queue) == 0


def test_invalid_vault_size():
    with pytest.raises(ValueError):
        ParticleVaultContainer(0, 1, 1)


def test_vault_index_out_of_range():
    container = ParticleVaultContainer(2, 1, 1)
    with pytest.raises(IndexError):
        container.processing_vault(5)


def test_add_processing_particle_overflows_into_new_vaults():
    container = ParticleVaultContainer(2, 1, 1)
    index = 0
    for particle in _particles(5):
        index = container.add_processing_particle(particle, index)
    assert index == 2
    assert container.num_processing_vaults == 3
    assert container.size_processing() == 5
    assert [len(v) for v in _processing(container)] == [2, 2, 1]
    assert _ids(_processing(container)) == list(range(5))


def test_add_processing_particle_stores_copy():
    container = ParticleVaultContainer(2, 1, 1)
    particle = Particle(identifier=7)
    container.add_processing_particle(particle, 0)
    particle.identifier = 99
    assert container.processing_vault(0)[0].identifier == 7


def test_collapse_processing_packs_particles():
    container = ParticleVaultContainer(3, 3, 1)
    container.processing_vault(0).push(Particle(identifier=0))
    for particle in _particles(3, start=10):
        container.processing_vault(2).push(particle)
    before = _ids(_processing(container))
    container.collapse_processing()
    assert _ids(_processing(container)) == before
    assert container.size_processing() == 4
    _assert_packed(_processing(container), 3)
    assert len(container.processing_vault(0)) == 3


def test_collapse_processed_packs_particles():
    container = ParticleVaultContainer(2, 4, 1)
    container.processed_vault(1).push(Particle(identifier=1))
    container.processed_vault(3).push(Particle(identifier=2))
    container.processed_vault(3).push(Particle(identifier=3))
    container.collapse_processed()
    assert _ids(_processed(container)) == [1, 2, 3]
    _assert_packed(_processed(container), 2)


def test_first_empty_processed_vault():
    container = ParticleVaultContainer(2, 2, 1)
    assert container.first_empty_processed_vault() == 0
    container.processed_vault(0).push(Particle())
    assert container.first_empty_processed_vault() == 1
    container.processed_vault(1).push(Particle())
    index = container.first_empty_processed_vault()
    assert index == container.num_processed_vaults - 1
    assert len(container.processed_vault(index)) == 0


def test_swap_processing_processed_vaults():
    container = ParticleVaultContainer(2, 2, 1)
    for particle in _particles(3):
        container.processed_vault(0 if particle.identifier < 2 else 1).push(particle)
    container.swap_processing_processed_vaults()
    assert container.size_processed() == 0
    assert container.size_processing() == 3
    assert _ids(_processing(container)) == [0, 1, 2]


def test_swap_with_nothing_processed_changes_nothing():
    container = ParticleVaultContainer(2, 2, 1)
    container.processing_vault(0).push(Particle(identifier=4))
    container.swap_processing_processed_vaults()
    assert _ids(_processing(container)) == [4]
    assert container.num_processing_vaults == 2


def test_extra_particles_moved_to_processing():
    container = ParticleVaultContainer(2, 1, 3)
    for particle in _particles(5):
        container.add_extra_particle(particle)
    assert container.size_extra() == 5
    container.clean_extra_vaults()
    assert container.size_extra() == 0
    assert container.size_processing() == 5
    assert _ids(_processing(container)) == list(range(5))
    _assert_packed(_processing(container), 2)


def test_clean_extra_fills_partial_processing_vault():
    container = ParticleVaultContainer(3, 1, 2)
    container.processing_vault(0).push(Particle(identifier=100))
    for particle in _particles(2):
        container.add_extra_particle(particle)
    container.clean_extra_vaults()
    assert _ids(_processing(container)) == [0, 1, 100]
    assert len(container.processing_vault(0)) == 3


def test_extra_index_resets_after_clean():
    container = ParticleVaultContainer(1, 1, 1)
    container.add_extra_particle(Particle(identifier=1))
    container.clean_extra_vaults()
    container.add_extra_particle(Particle(identifier=2))
    assert container.size_extra() == 1


def test_extra_vaults_full_raises():
    container = ParticleVaultContainer(1, 1, 1)
    container.add_extra_particle(Particle())
    with pytest.raises(IndexError):
        container.add_extra_particle(Particle())