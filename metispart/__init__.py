"""Graph and mesh partitioning building blocks: inputs, dual graphs, contraction and balance measures."""

__version__ = "0.1.0"

__all__ = [
    "api",
    "balance",
    "components",
    "contract",
    "control",
    "graphdata",
    "imbalance",
    "mesh",
    "options",
    "selection",
]