"""Graph vertex colouring: greedy and tabu-search colourers, graph generation and DIMACS conversion."""

__version__ = "0.1.0"
__all__ = ["__version__"]