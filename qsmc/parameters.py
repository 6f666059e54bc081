"""Simulation, geometry, material and cross-section parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ParameterError(ValueError):
    """Raised when parameters are missing or inconsistent."""


class Shape(IntEnum):
    """Shape of a geometry region."""

    UNDEFINED = 0
    BRICK = 1
    SPHERE = 2


def _fmt(value: object) -> str:
    """Render a value the way a default-precision stream would."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _block(title: str, rows: list[tuple[str, object]]) -> str:
    lines = [f"{title}:\n"]
    lines.extend(f"   {key}: {_fmt(value)}\n" for key, value in rows)
    return "".join(lines)


@dataclass
class GeometryParameters:
    """A region of the problem filled with one material."""

    material_name: str = ""
    shape: Shape = Shape.UNDEFINED
    radius: float = 0.0
    x_center: float = 0.0
    y_center: float = 0.0
    z_center: float = 0.0
    x_min: float = 0.0
    y_min: float = 0.0
    z_min: float = 0.0
    x_max: float = 0.0
    y_max: float = 0.0
    z_max: float = 0.0

    def __str__(self) -> str:
        rows: list[tuple[str, object]] = [("material", self.material_name)]
        if self.shape is Shape.BRICK:
            rows += [
                ("shape", "brick"),
                ("xMax", self.x_max),
                ("xMin", self.x_min),
                ("yMax", self.y_max),
                ("yMin", self.y_min),
                ("zMax", self.z_max),
                ("zMin", self.z_min),
            ]
        elif self.shape is Shape.SPHERE:
            rows += [
                ("shape", "sphere"),
                ("xCenter", self.x_center),
                ("yCenter", self.y_center),
                ("zCenter", self.z_center),
            ]
        else:
            raise ParameterError("geometry shape must be brick or sphere")
        return _block("Geometry", rows) + "\n"


@dataclass
class MaterialParameters:
    """Composition and cross-section references of a material."""

    name: str = ""
    mass: float = 1000.0
    total_cross_section: float = 1.0
    n_isotopes: int = 10
    n_reactions: int = 9
    source_rate: float = 0.0
    scattering_cross_section: str = ""
    absorption_cross_section: str = ""
    fission_cross_section: str = ""
    scattering_cross_section_ratio: float = 1.0
    absorption_cross_section_ratio: float = 1.0
    fission_cross_section_ratio: float = 1.0

    def __str__(self) -> str:
        rows: list[tuple[str, object]] = [
            ("name", self.name),
            ("mass", self.mass),
            ("nIsotopes", self.n_isotopes),
            ("nReactions", self.n_reactions),
            ("sourceRate", self.source_rate),
            ("totalCrossSection", self.total_cross_section),
            ("absorptionCrossSection", self.absorption_cross_section),
            ("fissionCrossSection", self.fission_cross_section),
            ("scatteringCrossSection", self.scattering_cross_section),
            ("absorptionCrossSectionRatio", self.absorption_cross_section_ratio),
            ("fissionCrossSectionRatio", self.fission_cross_section_ratio),
            ("scatteringCrossSectionRatio", self.scattering_cross_section_ratio),
        ]
        return _block("Material", rows) + "\n"


@dataclass
class CrossSectionParameters:
    """Polynomial coefficients of a cross-section table and its nu-bar."""

    name: str = ""
    aa: float = 0.0
    bb: float = 0.0
    cc: float = 0.0
    dd: float = 0.0
    ee: float = 1.0
    nu_bar: float = 2.4

    def __str__(self) -> str:
        rows: list[tuple[str, object]] = [
            ("name", self.name),
            ("A", self.aa),
            ("B", self.bb),
            ("C", self.cc),
            ("D", self.dd),
            ("E", self.ee),
            ("nuBar", self.nu_bar),
        ]
        return _block("CrossSection", rows)


@dataclass
class SimulationParameters:
    """Global settings of a simulation run."""

    input_file: str = ""
    energy_spectrum: str = ""
    cross_sections_out: str = ""
    boundary_condition: str = "reflect"
    load_balance: int = 0
    cycle_timers: int = 0
    debug_threads: int = 0
    n_particles: int = 1000000
    batch_size: int = 0
    n_batches: int = 10
    n_steps: int = 10
    nx: int = 10
    ny: int = 10
    nz: int = 10
    seed: int = 1029384756
    x_dom: int = 0
    y_dom: int = 0
    z_dom: int = 0
    dt: float = 1e-8
    f_max: float = 0.1
    lx: float = 100.0
    ly: float = 100.0
    lz: float = 100.0
    e_min: float = 1e-9
    e_max: float = 20.0
    n_groups: int = 230
    low_weight_cutoff: float = 0.001
    balance_tally_replications: int = 1
    flux_tally_replications: int = 1
    cell_tally_replications: int = 1
    coral_benchmark: int = 0

    def __str__(self) -> str:
        rows: list[tuple[str, object]] = [
            ("dt", self.dt),
            ("fMax", self.f_max),
            ("inputFile", self.input_file),
            ("energySpectrum", self.energy_spectrum),
            ("boundaryCondition", self.boundary_condition),
            ("loadBalance", self.load_balance),
            ("cycleTimers", self.cycle_timers),
            ("debugThreads", self.debug_threads),
            ("lx", self.lx),
            ("ly", self.ly),
            ("lz", self.lz),
            ("nParticles", self.n_particles),
            ("batchSize", self.batch_size),
            ("nBatches", self.n_batches),
            ("nSteps", self.n_steps),
            ("nx", self.nx),
            ("ny", self.ny),
            ("nz", self.nz),
            ("seed", self.seed),
            ("xDom", self.x_dom),
            ("yDom", self.y_dom),
            ("zDom", self.z_dom),
            ("eMax", self.e_max),
            ("eMin", self.e_min),
            ("nGroups", self.n_groups),
            ("lowWeightCutoff", self.low_weight_cutoff),
            ("bTally", self.balance_tally_replications),
            ("fTally", self.flux_tally_replications),
            ("cTally", self.cell_tally_replications),
            ("coralBenchmark", self.coral_benchmark),
        ]
        text = _block("Simulation", rows)
        return text + f"   crossSectionsOut:{self.cross_sections_out}\n\n"


@dataclass
class Parameters:
    """All parameters of a problem."""

    simulation_params: SimulationParameters = field(default_factory=SimulationParameters)
    geometry_params: list[GeometryParameters] = field(default_factory=list)
    material_params: dict[str, MaterialParameters] = field(default_factory=dict)
    cross_section_params: dict[str, CrossSectionParameters] = field(default_factory=dict)


def supply_defaults(params: Parameters) -> None:
    """Add the default problem unless a geometry has been given.

    Once any geometry is specified the caller is responsible for a complete
    set of geometries, materials and cross sections.
    """
    if params.geometry_params:
        return

    flat = CrossSectionParameters(name="flat")
    params.cross_section_params[flat.name] = flat

    source_material = MaterialParameters(
        name="sourceMaterial",
        mass=1000.0,
        source_rate=1e10,
        scattering_cross_section="flat",
        absorption_cross_section="flat",
        fission_cross_section="flat",
        fission_cross_section_ratio=0.1,
    )
    params.material_params[source_material.name] = source_material

    sim = params.simulation_params
    params.geometry_params.append(
        GeometryParameters(
            material_name="sourceMaterial",
            shape=Shape.BRICK,
            x_max=sim.lx,
            y_max=sim.ly,
            z_max=sim.lz,
        )
    )


def format_parameters(params: Parameters) -> str:
    """Render every parameter block; materials and cross sections by name."""
    parts = [str(params.simulation_params)]
    parts.extend(str(geometry) for geometry in params.geometry_params)
    parts.extend(str(params.material_params[name]) for name in sorted(params.material_params))
    parts.extend(
        str(params.cross_section_params[name]) for name in sorted(params.cross_section_params)
    )
    return "".join(parts)