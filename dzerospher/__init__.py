"""Analysis of D0 production versus spherocity and multiplicity in simulated pp events."""

__version__ = "0.1.0"

__all__ = ["__version__"]