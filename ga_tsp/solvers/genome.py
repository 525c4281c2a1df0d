import random
from dataclasses import dataclass
from functools import cached_property
from typing import List, Sequence, Tuple

from ..errors import InvalidInputError
from .base import Gene, Point, path_length, to_genes


MUTATION_SEVERITY = 2


def _split(genes: Sequence[Gene]) -> Tuple[Sequence[Gene], Sequence[Gene]]:
    mid = len(genes) // 2
    return genes[:mid], genes[mid:]


def _fill(start: Sequence[Gene], *donors: Sequence[Gene]) -> List[Gene]:
    child = list(start)
    present = set(child)
    for donor in donors:
        for gene in donor:
            if gene not in present:
                child.append(gene)
                present.add(gene)
    return child


@dataclass(frozen=True)
class Chromosome:
    """
    One candidate tour: every city exactly once, in visiting order.
    Fitness is the open path length unless ``closed`` adds the edge home.
    """

    genes: Tuple[Gene, ...]
    closed: bool = False

    def __post_init__(self):
        object.__setattr__(self, "genes", tuple(self.genes))
        if len(set(self.genes)) != len(self.genes):
            raise InvalidInputError("A chromosome cannot visit the same city twice.")

    @staticmethod
    def create(points: Sequence, rng: random.Random, closed: bool = False) -> "Chromosome":
        genes = to_genes(points)
        rng.shuffle(genes)
        return Chromosome(genes=tuple(genes), closed=closed)

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self):
        return iter(self.genes)

    def calculate_distance(self) -> float:
        return path_length(self.genes, closed=self.closed)

    @cached_property
    def fitness(self) -> float:
        return self.calculate_distance()

    @property
    def points(self) -> List[Point]:
        return [gene.coords for gene in self.genes]

    def same_cities(self, other: "Chromosome") -> bool:
        return len(self.genes) == len(other.genes) and set(self.genes) == set(other.genes)

    def crossover(self, other: "Chromosome") -> Tuple["Chromosome", "Chromosome"]:
        if not self.same_cities(other):
            raise InvalidInputError("Crossover parents must be permutations of the same cities.")
        mine = _split(self.genes)
        theirs = _split(other.genes)
        first = _fill(mine[0], theirs[0], theirs[1])
        second = _fill(theirs[1], mine[0], mine[1])
        return (
            Chromosome(genes=tuple(first), closed=self.closed),
            Chromosome(genes=tuple(second), closed=self.closed),
        )

    def mutate(self, rng: random.Random, severity: int = MUTATION_SEVERITY) -> "Chromosome":
        genes = list(self.genes)
        n = len(genes)
        if n < 2:
            return Chromosome(genes=tuple(genes), closed=self.closed)
        for _ in range(severity):
            i = rng.randrange(n)
            j = rng.randrange(n)
            while i == j:
                i = rng.randrange(n)
                j = rng.randrange(n)
            genes[i], genes[j] = genes[j], genes[i]
        return Chromosome(genes=tuple(genes), closed=self.closed)

    def reversed(self) -> "Chromosome":
        return Chromosome(genes=tuple(reversed(self.genes)), closed=self.closed)

    def __str__(self) -> str:
        return " : ".join(str(gene) for gene in self.genes)
