from ga_tsp.data import random_points
from ga_tsp.evolutionary import EvolutionConfig, EvolutionarySearch


def main():
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    cfg = EvolutionConfig(population_size=12, max_generations=20, random_seed=7)
    result = EvolutionarySearch(cfg, square).run()
    print(f"unit square: open path={result.length:.2f} tour={result.points}")

    cities = random_points(25, seed=3)
    cfg = EvolutionConfig(
        population_size=60,
        max_generations=300,
        mutation_rate=0.2,
        plateau_window=50,
        random_seed=3,
    )
    search = EvolutionarySearch(cfg, cities)
    result = search.run()
    for stats in search.history[::25]:
        print(f"gen {stats.generation}: best={stats.best:.2f} mean={stats.mean:.2f}")
    print(f"25 random cities: best={result.length:.2f} after {result.generations} generations")


if __name__ == "__main__":
    main()
