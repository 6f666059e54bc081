"""Monte Carlo particle transport building blocks: seeds, vaults, population control, parameters."""

__version__ = "0.1.0"