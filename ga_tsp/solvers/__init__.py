from .base import Gene, Point, SolveResult, path_length, to_genes
from .genome import MUTATION_SEVERITY, Chromosome

__all__ = [
    "Gene",
    "Point",
    "SolveResult",
    "path_length",
    "to_genes",
    "Chromosome",
    "MUTATION_SEVERITY",
]
