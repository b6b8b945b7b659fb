"""Security-checked upgrades of Stellar smart contracts via the stellar CLI."""

__version__ = "0.1.0"
__all__ = ["__version__"]