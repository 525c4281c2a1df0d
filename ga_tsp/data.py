from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import networkx as nx
import numpy as np
import tsplib95
from tsplib95.exceptions import ParsingError

from .errors import InvalidInputError
from .solvers.base import Point


@dataclass
class Instance:
    name: str
    path: Path
    graph: nx.Graph
    points: List[Point]
    optimum: Optional[float]


def load_points(path: Path) -> List[Point]:
    """Read one point per line, whitespace or comma separated; ``#`` starts a comment."""
    path = Path(path)
    lines = path.read_text().splitlines()
    data_lines = [line for line in lines if line.strip() and not line.lstrip().startswith("#")]
    if not data_lines:
        raise InvalidInputError(f"{path}: no points found")
    delimiter = "," if "," in data_lines[0] else None
    try:
        arr = np.loadtxt(lines, comments="#", delimiter=delimiter, ndmin=2, dtype=float)
    except ValueError as exc:
        raise InvalidInputError(f"{path}: not a numeric point table ({exc})") from exc
    if arr.size == 0:
        raise InvalidInputError(f"{path}: no points found")
    if arr.shape[1] < 2:
        raise InvalidInputError(f"{path}: expected at least two columns, found {arr.shape[1]}")
    return [tuple(float(v) for v in row) for row in arr]


def random_points(count: int, seed: Optional[int] = None, scale: float = 100.0) -> List[Point]:
    if count < 1:
        raise InvalidInputError("count must be positive")
    rng = np.random.default_rng(seed)
    arr = rng.uniform(0.0, scale, size=(count, 2))
    return [(float(x), float(y)) for x, y in arr]


def tour_length(graph: nx.Graph, tour: Sequence[int]) -> float:
    dist = 0.0
    n = len(tour)
    for i in range(n):
        a = tour[i]
        b = tour[(i + 1) % n]
        dist += graph[a][b]["weight"]
    return float(dist)


def _solution_candidates(path: Path) -> Iterable[Path]:
    yield path.with_suffix(".opt.tour")
    for ext in (".opt.tour", ".opt", ".tour"):
        yield path.parent / "solutions" / f"{path.stem}{ext}"


def _read_dimension(path: Path) -> Optional[int]:
    with path.open("r") as f:
        for line in f:
            if "DIMENSION" in line.upper():
                parts = line.replace(":", " ").split()
                for token in parts:
                    if token.isdigit():
                        return int(token)
    return None


def _load_optimum(graph: nx.Graph, path: Path) -> Optional[float]:
    for candidate in _solution_candidates(path):
        if not candidate.exists():
            continue
        try:
            tour_file = tsplib95.parse(candidate.read_text())
            if not tour_file.tours:
                continue
            return tour_length(graph, list(tour_file.tours[0]))
        except (ParsingError, ValueError, KeyError, IndexError) as exc:
            raise InvalidInputError(f"{candidate}: malformed TSPLIB tour ({exc})") from exc
    return None


def load_instance(path: Path) -> Instance:
    path = Path(path)
    try:
        problem = tsplib95.load(path)
        coords = problem.node_coords
        if not coords:
            raise InvalidInputError(f"{path}: TSPLIB instance has no NODE_COORD_SECTION")
        points = [tuple(float(c) for c in coords[n]) for n in sorted(coords)]
        graph = problem.get_graph()
    except InvalidInputError:
        raise
    except (ParsingError, ValueError, KeyError, IndexError) as exc:
        raise InvalidInputError(f"{path}: malformed TSPLIB instance ({exc})") from exc
    optimum = _load_optimum(graph, path)
    return Instance(name=problem.name or path.stem, path=path, graph=graph, points=points, optimum=optimum)


def load_tsplib_instances(
    root: Path, max_nodes: Optional[int] = None, max_instances: Optional[int] = None
) -> List[Instance]:
    tsp_files = sorted(Path(root).glob("*.tsp"))
    instances: List[Instance] = []
    for p in tsp_files:
        if max_nodes is not None:
            dim = _read_dimension(p)
            if dim is not None and dim > max_nodes:
                continue
        instances.append(load_instance(p))
        if max_instances is not None and len(instances) >= max_instances:
            break
    return instances
