"""Build parameters from command-line arguments and parsed input blocks.

An input block is a ``(name, values)`` pair where ``values`` maps keyword
names to their values, usually as strings read from an input file. Keywords
are case sensitive, unknown keywords and blocks are ignored, and for repeated
keywords the last value wins.
"""

from __future__ import annotations

import argparse
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from qsmc.parameters import (
    CrossSectionParameters,
    GeometryParameters,
    MaterialParameters,
    ParameterError,
    Parameters,
    Shape,
    supply_defaults,
)

Block = Mapping[str, Any]

# (long name, short letter, attribute, value kind, help); kind None is a flag.
_ARGUMENTS: tuple[tuple[str, str, str, Optional[Callable[[str], Any]], str], ...] = (
    ("dt", "D", "dt", float, "time step (seconds)"),
    ("fMax", "f", "f_max", float, "max random mesh node displacement"),
    ("inputFile", "i", "input_file", str, "name of input file"),
    ("energySpectrum", "e", "energy_spectrum", str, "name of energy spectrum output file"),
    ("crossSectionsOut", "S", "cross_sections_out", str, "name of cross section output file"),
    ("loadBalance", "l", "load_balance", None, "enable/disable load balancing"),
    ("cycleTimers", "c", "cycle_timers", int, "enable/disable cycle timers"),
    ("debugThreads", "t", "debug_threads", int, "set thread debug level to 1, 2, 3"),
    ("lx", "X", "lx", float, "x-size of simulation (cm)"),
    ("ly", "Y", "ly", float, "y-size of simulation (cm)"),
    ("lz", "Z", "lz", float, "z-size of simulation (cm)"),
    ("nParticles", "n", "n_particles", int, "number of particles"),
    ("batchSize", "g", "batch_size", int, "number of particles in a vault/batch"),
    ("nBatches", "b", "n_batches", int,
     "number of vault/batch to start (sets batchSize automatically)"),
    ("nSteps", "N", "n_steps", int, "number of time steps"),
    ("nx", "x", "nx", int, "number of mesh elements in x"),
    ("ny", "y", "ny", int, "number of mesh elements in y"),
    ("nz", "z", "nz", int, "number of mesh elements in z"),
    ("seed", "s", "seed", int, "random number seed"),
    ("xDom", "I", "x_dom", int, "number of MPI ranks in x"),
    ("yDom", "J", "y_dom", int, "number of MPI ranks in y"),
    ("zDom", "K", "z_dom", int, "number of MPI ranks in z"),
    ("bTally", "B", "balance_tally_replications", int, "number of balance tally replications"),
    ("fTally", "F", "flux_tally_replications", int, "number of scalar flux tally replications"),
    ("cTally", "C", "cell_tally_replications", int, "number of scalar cell tally replications"),
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="print this message")
    for long_name, short, attribute, kind, text in _ARGUMENTS:
        flags = (f"-{short}", f"--{long_name}")
        if kind is None:
            parser.add_argument(*flags, dest=attribute, action="store_const",
                                const=1, default=None, help=text)
        else:
            parser.add_argument(*flags, dest=attribute, type=kind, default=None, help=text)
    return parser


def parse_command_line(argv: Optional[Sequence[str]] = None) -> Parameters:
    """Return parameters with command-line values applied over the defaults.

    ``-h``/``--help`` prints the option list and exits with status 2.
    """
    parser = _build_parser()
    namespace = parser.parse_args(argv)
    if namespace.help:
        parser.print_help()
        raise SystemExit(2)
    params = Parameters()
    sim = params.simulation_params
    for _, _, attribute, _, _ in _ARGUMENTS:
        value = getattr(namespace, attribute)
        if value is not None:
            setattr(sim, attribute, value)
    return params


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ParameterError(f"expected an integer, got {value!r}") from None


def _to_float(value: Any) -> float:
    try:
        return float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise ParameterError(f"expected a number, got {value!r}") from None


def _to_str(value: Any) -> str:
    return str(value)


def _apply(block: Block, target: Any, fields: Iterable[tuple[str, str, Callable[[Any], Any]]]) -> None:
    for key, attribute, convert in fields:
        if key in block:
            setattr(target, attribute, convert(block[key]))


_SIMULATION_FIELDS = (
    ("energySpectrum", "energy_spectrum", _to_str),
    ("crossSectionsOut", "cross_sections_out", _to_str),
    ("boundaryCondition", "boundary_condition", _to_str),
    ("dt", "dt", _to_float),
    ("fMax", "f_max", _to_float),
    ("loadBalance", "load_balance", _to_int),
    ("cycleTimers", "cycle_timers", _to_int),
    ("debugThreads", "debug_threads", _to_int),
    ("lx", "lx", _to_float),
    ("ly", "ly", _to_float),
    ("lz", "lz", _to_float),
    ("nParticles", "n_particles", _to_int),
    ("batchSize", "batch_size", _to_int),
    ("nBatches", "n_batches", _to_int),
    ("nSteps", "n_steps", _to_int),
    ("nx", "nx", _to_int),
    ("ny", "ny", _to_int),
    ("nz", "nz", _to_int),
    ("seed", "seed", _to_int),
    ("xDom", "x_dom", _to_int),
    ("yDom", "y_dom", _to_int),
    ("zDom", "z_dom", _to_int),
    ("eMax", "e_max", _to_float),
    ("eMin", "e_min", _to_float),
    ("nGroups", "n_groups", _to_int),
    ("lowWeightCutoff", "low_weight_cutoff", _to_float),
    ("bTally", "balance_tally_replications", _to_int),
    ("fTally", "flux_tally_replications", _to_int),
    ("cTally", "cell_tally_replications", _to_int),
    ("coralBenchmark", "coral_benchmark", _to_int),
)

_BRICK_FIELDS = (
    ("xMax", "x_max", _to_float),
    ("xMin", "x_min", _to_float),
    ("yMax", "y_max", _to_float),
    ("yMin", "y_min", _to_float),
    ("zMax", "z_max", _to_float),
    ("zMin", "z_min", _to_float),
)

_SPHERE_FIELDS = (
    ("radius", "radius", _to_float),
    ("xCenter", "x_center", _to_float),
    ("yCenter", "y_center", _to_float),
    ("zCenter", "z_center", _to_float),
)

_MATERIAL_FIELDS = (
    ("mass", "mass", _to_float),
    ("absorptionCrossSection", "absorption_cross_section", _to_str),
    ("absorptionCrossSectionRatio", "absorption_cross_section_ratio", _to_float),
    ("fissionCrossSection", "fission_cross_section", _to_str),
    ("fissionCrossSectionRatio", "fission_cross_section_ratio", _to_float),
    ("nIsotopes", "n_isotopes", _to_int),
    ("nReactions", "n_reactions", _to_int),
    ("totalCrossSection", "total_cross_section", _to_float),
    ("scatteringCrossSection", "scattering_cross_section", _to_str),
    ("scatteringCrossSectionRatio", "scattering_cross_section_ratio", _to_float),
    ("sourceRate", "source_rate", _to_float),
)

_CROSS_SECTION_FIELDS = (
    ("A", "aa", _to_float),
    ("B", "bb", _to_float),
    ("C", "cc", _to_float),
    ("D", "dd", _to_float),
    ("E", "ee", _to_float),
    ("nuBar", "nu_bar", _to_float),
)


def scan_simulation_block(block: Block, params: Parameters) -> None:
    """Apply a ``Simulation`` block to the simulation parameters."""
    _apply(block, params.simulation_params, _SIMULATION_FIELDS)


def scan_geometry_block(block: Block, params: Parameters) -> None:
    """Append the geometry described by a ``Geometry`` block.

    The shape must be ``brick`` or ``sphere``.
    """
    geometry = GeometryParameters()
    if "material" in block:
        geometry.material_name = _to_str(block["material"])
    shape = _to_str(block.get("shape", ""))
    if shape == "brick":
        geometry.shape = Shape.BRICK
        _apply(block, geometry, _BRICK_FIELDS)
    elif shape == "sphere":
        geometry.shape = Shape.SPHERE
        _apply(block, geometry, _SPHERE_FIELDS)
    else:
        raise ParameterError(f"geometry shape must be brick or sphere, got {shape!r}")
    params.geometry_params.append(geometry)


def scan_material_block(block: Block, params: Parameters) -> None:
    """Create or update the material named in a ``Material`` block."""
    name = _to_str(block.get("name", ""))
    if not name:
        raise ParameterError("material block has no name")
    material = params.material_params.setdefault(name, MaterialParameters())
    material.name = name
    _apply(block, material, _MATERIAL_FIELDS)


def scan_cross_section_block(block: Block, params: Parameters) -> None:
    """Create or update the cross section named in a ``CrossSection`` block."""
    name = _to_str(block.get("name", ""))
    if not name:
        raise ParameterError("cross section block has no name")
    cross_section = params.cross_section_params.setdefault(name, CrossSectionParameters())
    cross_section.name = name
    _apply(block, cross_section, _CROSS_SECTION_FIELDS)


_SCANNERS: dict[str, Callable[[Block, Parameters], None]] = {
    "Simulation": scan_simulation_block,
    "Geometry": scan_geometry_block,
    "Material": scan_material_block,
    "CrossSection": scan_cross_section_block,
}


def apply_blocks(blocks: Iterable[tuple[str, Block]], params: Parameters) -> None:
    """Apply ``(name, values)`` blocks in order; unknown block names are ignored."""
    for name, block in blocks:
        scanner = _SCANNERS.get(name)
        if scanner is not None:
            scanner(block, params)


def get_parameters(
    argv: Optional[Sequence[str]] = None,
    blocks: Optional[Iterable[tuple[str, Block]]] = None,
) -> Parameters:
    """Combine command line, input blocks and the default problem.

    Output file names given on the command line take precedence over those
    in the input blocks.
    """
    params = parse_command_line(argv)
    sim = params.simulation_params
    energy_name = sim.energy_spectrum
    cross_sections_out = sim.cross_sections_out
    if blocks is not None:
        apply_blocks(blocks, params)
    if energy_name:
        sim.energy_spectrum = energy_name
    if cross_sections_out:
        sim.cross_sections_out = cross_sections_out
    supply_defaults(params)
    return params