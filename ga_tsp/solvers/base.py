import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from ..errors import InvalidInputError

if TYPE_CHECKING:
    from .genome import Chromosome


Point = Tuple[float, ...]


@dataclass(frozen=True)
class Gene:
    """A city: an immutable coordinate compared by value."""

    coords: Point

    def __post_init__(self):
        try:
            coords = tuple(float(c) for c in self.coords)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Invalid coordinates: {self.coords!r}") from exc
        if len(coords) < 2:
            raise InvalidInputError(f"A gene needs at least two coordinates, got {coords!r}")
        object.__setattr__(self, "coords", coords)

    @staticmethod
    def from_point(point) -> "Gene":
        if isinstance(point, Gene):
            return point
        return Gene(tuple(point))

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    def distance(self, other: "Gene") -> float:
        if len(self.coords) != len(other.coords):
            raise InvalidInputError(
                f"Cannot measure between {len(self.coords)}-D and {len(other.coords)}-D points"
            )
        return math.dist(self.coords, other.coords)

    def __str__(self) -> str:
        return "(" + ", ".join(f"{c:g}" for c in self.coords) + ")"


def to_genes(points: Iterable) -> List[Gene]:
    genes = [Gene.from_point(p) for p in points]
    if not genes:
        raise InvalidInputError("At least one point is required.")
    seen = set()
    for gene in genes:
        if gene in seen:
            raise InvalidInputError(f"Duplicate point {gene}")
        seen.add(gene)
    return genes


def path_length(genes: Sequence[Gene], closed: bool = False) -> float:
    dist = 0.0
    n = len(genes)
    for i in range(n - 1):
        dist += genes[i].distance(genes[i + 1])
    if closed and n > 1:
        dist += genes[-1].distance(genes[0])
    return float(dist)


@dataclass
class SolveResult:
    chromosome: "Chromosome"
    length: float
    generations: int
    optimum: Optional[float] = None

    @property
    def points(self) -> List[Point]:
        return self.chromosome.points

    @property
    def gap(self) -> float:
        if self.optimum is None or math.isclose(self.optimum, 0.0):
            return float("inf")
        return (self.length - self.optimum) / self.optimum
