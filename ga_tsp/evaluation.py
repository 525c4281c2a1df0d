from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from .population import Population


@dataclass
class GenerationStats:
    generation: int
    best: float
    mean: float
    std: float
    best_so_far: float
    distinct: int


def evaluate_population(population: Population, generation: int, best_so_far: float) -> GenerationStats:
    fitness = np.asarray(population.fitnesses(), dtype=float)
    best = float(fitness.min())
    return GenerationStats(
        generation=generation,
        best=best,
        mean=float(fitness.mean()),
        std=float(fitness.std()),
        best_so_far=min(best, best_so_far),
        # Distinct tours; a low count signals diversity loss.
        distinct=len({c.genes for c in population}),
    )


def aggregate_stats(history: List[GenerationStats]) -> Dict[str, float]:
    if not history:
        return {"best": float("inf"), "mean": float("inf"), "improvement": 0.0, "generations": 0}
    bests = np.asarray([s.best_so_far for s in history], dtype=float)
    means = np.asarray([s.mean for s in history], dtype=float)
    return {
        "best": float(bests[-1]),
        "mean": float(means.mean()),
        "improvement": float(bests[0] - bests[-1]),
        "generations": history[-1].generation,
    }
