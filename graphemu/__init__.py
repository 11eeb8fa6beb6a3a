"""Interactive Cartesian graph window with click-to-plot points."""

__version__ = "0.1.0"
__all__ = ["font", "graph", "state", "utils"]