import argparse
import sys
import time
from pathlib import Path

from ga_tsp.data import load_instance, load_points, load_tsplib_instances, random_points
from ga_tsp.errors import GATSPError
from ga_tsp.evaluation import GenerationStats, aggregate_stats
from ga_tsp.evolutionary import EvolutionConfig, EvolutionarySearch
from ga_tsp.population import SELECTION_SCHEMES


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def _load_input(args):
    if args.tsp:
        inst = load_instance(Path(args.tsp))
        log(f"loaded TSPLIB instance {inst.name} ({len(inst.points)} cities, optimum={inst.optimum})")
        return inst.points, inst.optimum
    if args.points:
        points = load_points(Path(args.points))
        log(f"loaded {len(points)} points from {args.points}")
        return points, None
    points = random_points(args.random, seed=args.seed)
    log(f"generated {len(points)} random cities (seed={args.seed})")
    return points, None


def _config_from_args(args) -> EvolutionConfig:
    return EvolutionConfig(
        population_size=args.population_size,
        mutation_rate=args.mutation_rate,
        mutation_severity=args.mutation_severity,
        max_generations=args.generations,
        elitism=not args.no_elitism,
        random_seed=args.seed,
        selection=args.selection,
        tournament_size=args.tournament_size,
        plateau_window=args.plateau,
        closed_tour=args.closed,
    )


def run(args) -> None:
    t0 = time.perf_counter()
    points, optimum = _load_input(args)
    cfg = _config_from_args(args)

    def report(stats: GenerationStats) -> None:
        if stats.generation % max(1, args.report_every) == 0:
            log(
                f"gen {stats.generation}: best={stats.best:.2f} mean={stats.mean:.2f} "
                f"std={stats.std:.2f} best_so_far={stats.best_so_far:.2f} distinct={stats.distinct}"
            )

    search = EvolutionarySearch(cfg, points, on_generation=report, optimum=optimum)
    try:
        result = search.run()
    except KeyboardInterrupt:
        log("interrupted; reporting best tour so far.")
        result = search.result()
    summary = aggregate_stats(search.history)
    log(
        f"finished {result.generations} generations in {time.perf_counter() - t0:.2f}s, "
        f"improvement={summary['improvement']:.2f}"
    )
    kind = "closed tour" if cfg.closed_tour else "open path"
    print(f"best {kind} length: {result.length:.4f}")
    if result.optimum is not None:
        print(f"optimum: {result.optimum:.4f} gap: {result.gap:.2%}")
    print(result.chromosome)


def data(args) -> None:
    data_root = Path(args.data_root)
    instances = load_tsplib_instances(data_root, max_nodes=args.max_nodes)
    if not instances:
        print(f"No TSPLIB instances found in {data_root}.")
        return
    for inst in instances:
        opt = "unknown" if inst.optimum is None else f"{inst.optimum:.0f}"
        print(f"{inst.name}: {len(inst.points)} cities, optimum={opt}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Genetic algorithm TSP solver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Evolve a tour for a set of cities")
    source = run_parser.add_mutually_exclusive_group()
    source.add_argument("--points", help="Text file with one 'x y' point per line")
    source.add_argument("--tsp", help="TSPLIB .tsp file with node coordinates")
    source.add_argument("--random", type=int, default=30, help="Number of random cities (default source)")
    run_parser.add_argument("--population-size", type=int, default=100)
    run_parser.add_argument("--mutation-rate", type=float, default=0.1)
    run_parser.add_argument("--mutation-severity", type=int, default=2)
    run_parser.add_argument("--generations", type=int, default=500)
    run_parser.add_argument("--no-elitism", action="store_true")
    run_parser.add_argument("--selection", choices=SELECTION_SCHEMES, default="tournament")
    run_parser.add_argument("--tournament-size", type=int, default=3)
    run_parser.add_argument("--plateau", type=int, default=None, help="Stop after this many generations without improvement")
    run_parser.add_argument("--closed", action="store_true", help="Score tours including the edge back to the start")
    run_parser.add_argument("--seed", type=int, default=None)
    run_parser.add_argument("--report-every", type=int, default=10)
    run_parser.set_defaults(func=run)

    data_parser = subparsers.add_parser("data", help="List TSPLIB instances in a directory")
    data_parser.add_argument("--data-root", default="data/tsplib")
    data_parser.add_argument("--max-nodes", type=int, default=None)
    data_parser.set_defaults(func=data)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except GATSPError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
