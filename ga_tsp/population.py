import random
from typing import Iterable, Iterator, List, Sequence

from .errors import ConfigurationError, InvalidInputError
from .solvers.genome import Chromosome


SELECTION_SCHEMES = ("tournament", "truncation", "roulette")


class Population:
    """One generation of chromosomes. Lower fitness ranks first."""

    def __init__(self, chromosomes: Iterable[Chromosome]):
        self.chromosomes: List[Chromosome] = list(chromosomes)
        if not self.chromosomes:
            raise InvalidInputError("A population needs at least one chromosome.")

    @staticmethod
    def random(points: Sequence, size: int, rng: random.Random, closed: bool = False) -> "Population":
        return Population(Chromosome.create(points, rng, closed=closed) for _ in range(size))

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(self.chromosomes)

    def rank(self) -> List[Chromosome]:
        return sorted(self.chromosomes, key=lambda c: c.fitness)

    def best(self) -> Chromosome:
        return min(self.chromosomes, key=lambda c: c.fitness)

    def fitnesses(self) -> List[float]:
        return [c.fitness for c in self.chromosomes]

    def select_parents(
        self,
        count: int,
        rng: "random.Random",
        scheme: str = "tournament",
        tournament_size: int = 3,
        truncation: float = 0.5,
    ) -> List[Chromosome]:
        if scheme not in SELECTION_SCHEMES:
            raise ConfigurationError(f"Unknown selection scheme {scheme!r}; expected one of {SELECTION_SCHEMES}")
        if count <= 0:
            return []
        ranked = self.rank()
        if scheme == "tournament":
            k = min(tournament_size, len(ranked))
            # Lower index in the ranked list is fitter.
            return [ranked[min(rng.sample(range(len(ranked)), k))] for _ in range(count)]
        if scheme == "truncation":
            pool = ranked[: max(1, int(truncation * len(ranked)))]
            return [rng.choice(pool) for _ in range(count)]
        n = len(ranked)
        weights = [n - i for i in range(n)]
        return rng.choices(ranked, weights=weights, k=count)
