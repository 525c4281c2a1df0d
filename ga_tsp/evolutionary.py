import enum
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .errors import ConfigurationError
from .evaluation import GenerationStats, evaluate_population
from .population import SELECTION_SCHEMES, Population
from .solvers.base import SolveResult, to_genes
from .solvers.genome import MUTATION_SEVERITY, Chromosome


@dataclass
class EvolutionConfig:
    """
    ``plateau_window`` stops the run once the best-so-far length has not
    dropped more than ``plateau_tolerance`` below its value at the start of
    the window for that many generations. ``max_generations`` always applies.
    """

    population_size: int = 100
    mutation_rate: float = 0.1
    mutation_severity: int = MUTATION_SEVERITY
    max_generations: int = 500
    elitism: bool = True
    random_seed: Optional[int] = None
    selection: str = "tournament"
    tournament_size: int = 3
    truncation: float = 0.5
    plateau_window: Optional[int] = None
    plateau_tolerance: float = 0.0
    closed_tour: bool = False

    def validate(self) -> None:
        if self.population_size < 2:
            raise ConfigurationError("population_size must be at least 2 so crossover has two parents.")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError(f"mutation_rate must lie in [0, 1], got {self.mutation_rate}")
        if self.mutation_severity < 1:
            raise ConfigurationError("mutation_severity must be at least 1.")
        if self.max_generations < 0:
            raise ConfigurationError("max_generations cannot be negative.")
        if self.selection not in SELECTION_SCHEMES:
            raise ConfigurationError(f"selection must be one of {SELECTION_SCHEMES}, got {self.selection!r}")
        if self.tournament_size < 1:
            raise ConfigurationError("tournament_size must be at least 1.")
        if not 0.0 < self.truncation <= 1.0:
            raise ConfigurationError(f"truncation must lie in (0, 1], got {self.truncation}")
        if self.plateau_window is not None and self.plateau_window < 1:
            raise ConfigurationError("plateau_window must be at least 1 when set.")
        if self.plateau_tolerance < 0:
            raise ConfigurationError("plateau_tolerance cannot be negative.")


class RunState(enum.Enum):
    INITIALIZING = "initializing"
    EVOLVING = "evolving"
    TERMINATED = "terminated"


class EvolutionarySearch:
    """
    Generational GA over city orderings.

    Each generation ranks the population, draws a parent pool, breeds pairs
    through crossover, mutates children with probability ``mutation_rate``
    and replaces the population (keeping the best one when ``elitism`` is
    on). The best chromosome ever seen is tracked separately so it survives
    even without elitism.
    """

    def __init__(
        self,
        config: EvolutionConfig,
        points: Sequence,
        rng: random.Random = None,
        on_generation: Callable[[GenerationStats], None] = None,
        optimum: Optional[float] = None,
    ):
        config.validate()
        self.cfg = config
        self.genes = to_genes(points)
        self.rng = rng or random.Random(config.random_seed)
        self.on_generation = on_generation
        self.optimum = optimum
        self.state = RunState.INITIALIZING
        self.generation = 0
        self.population: Optional[Population] = None
        self.best_so_far: Optional[Chromosome] = None
        self.history: List[GenerationStats] = []
        self._stale = 0
        self._anchor: Optional[float] = None
        self._stop_requested = False

    def initialize(self) -> None:
        self.population = Population.random(
            self.genes, self.cfg.population_size, self.rng, closed=self.cfg.closed_tour
        )
        self.generation = 0
        self.best_so_far = None
        self.history = []
        self._stale = 0
        self._anchor = None
        self._record()
        self.state = RunState.EVOLVING

    def _record(self) -> None:
        candidate = self.population.best()
        if self.best_so_far is None or candidate.fitness < self.best_so_far.fitness:
            self.best_so_far = candidate
        self._track_plateau(self.best_so_far.fitness)
        stats = evaluate_population(self.population, self.generation, self.best_so_far.fitness)
        self.history.append(stats)
        if self.on_generation:
            self.on_generation(stats)

    def _track_plateau(self, best: float) -> None:
        # Improvement is measured from the best value when the window opened.
        if self._anchor is None or best < self._anchor - self.cfg.plateau_tolerance:
            self._anchor = best
            self._stale = 0
        else:
            self._stale += 1

    def _breed(self, needed: int) -> List[Chromosome]:
        pool_size = needed + (needed % 2)
        parents = self.population.select_parents(
            pool_size,
            self.rng,
            scheme=self.cfg.selection,
            tournament_size=self.cfg.tournament_size,
            truncation=self.cfg.truncation,
        )
        children: List[Chromosome] = []
        for a, b in zip(parents[0::2], parents[1::2]):
            for child in a.crossover(b):
                if self.rng.random() < self.cfg.mutation_rate:
                    child = child.mutate(self.rng, self.cfg.mutation_severity)
                children.append(child)
        return children[:needed]

    def step(self) -> None:
        if self.state is RunState.TERMINATED:
            raise RuntimeError("Search has terminated; build a new one to run again.")
        if self.state is RunState.INITIALIZING:
            self.initialize()
        ranked = self.population.rank()
        new_pop: List[Chromosome] = []
        if self.cfg.elitism:
            new_pop.append(ranked[0])
        new_pop.extend(self._breed(self.cfg.population_size - len(new_pop)))
        self.population = Population(new_pop)
        self.generation += 1
        self._record()

    def stop(self) -> None:
        """Request termination; takes effect between generations."""
        self._stop_requested = True

    def should_terminate(self) -> bool:
        if self._stop_requested or self.generation >= self.cfg.max_generations:
            return True
        window = self.cfg.plateau_window
        return window is not None and self._stale >= window

    def run(self) -> SolveResult:
        if self.state is RunState.INITIALIZING:
            self.initialize()
        while self.state is RunState.EVOLVING and not self.should_terminate():
            self.step()
        self.state = RunState.TERMINATED
        return self.result()

    def result(self) -> SolveResult:
        if self.best_so_far is None:
            raise RuntimeError("Search has not been initialized.")
        return SolveResult(
            chromosome=self.best_so_far,
            length=self.best_so_far.fitness,
            generations=self.generation,
            optimum=self.optimum,
        )

    def best(self) -> Chromosome:
        return self.best_so_far
