import heapq
import logging
import math
from itertools import count

# larger than any reachable path cost
INFINITY = math.inf


class GraphContractError(RuntimeError):
    """Raised when a path query is made against a graph that cannot answer it."""


class PathResult:
    def __init__(self, seed, target, path, cost, distances):
        self.seed = seed
        self.target = target
        self.path = path
        self.cost = cost
        self.distances = distances

    @property
    def found(self) -> bool:
        return bool(self.path)

    def describe(self) -> str:
        return " -> ".join(str(v) for v in self.path)

    def __repr__(self):
        return f"PathResult(found={self.found}, cost={self.cost}, hops={max(len(self.path) - 1, 0)})"


def _walk_predecessors(previous, target):
    path = []
    cur = target
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path


def dijkstra(graph, seed, target, on_relax=None) -> PathResult:
    """
    Lowest-cost path from seed to target over a LinkGraph.

    Heap entries are (distance, push sequence, vertex), so vertices with equal
    tentative distance come out in the order they were pushed. Entries made
    stale by a later improvement are skipped when popped; the heap never
    supports decrease-key. Only the seed is pushed up front, every other vertex
    reads as INFINITY until relaxed.

    on_relax(vertex, old_distance, new_distance) is called on each improvement.
    """
    if not len(graph):
        raise GraphContractError("cannot compute a path on an empty graph")
    if seed not in graph:
        raise GraphContractError(f"seed {seed.id!r} is not a node of the graph")

    distances = {seed: 0}
    previous = {seed: None}
    sequence = count()
    queue = [(0, next(sequence), seed)]
    settled = set()

    while queue:
        dist, _, current = heapq.heappop(queue)
        if dist == INFINITY:
            # every remaining entry is unreachable
            break
        if current in settled or dist > distances.get(current, INFINITY):
            continue
        settled.add(current)

        for neighbor, weight in graph.neighbors_of(current):
            candidate = dist + weight
            old = distances.get(neighbor, INFINITY)
            if candidate < old:
                distances[neighbor] = candidate
                previous[neighbor] = current
                if on_relax is not None:
                    on_relax(neighbor, old, candidate)
                heapq.heappush(queue, (candidate, next(sequence), neighbor))

    cost = distances.get(target, INFINITY)
    if cost == INFINITY:
        logging.info("No path from %s to %s among %d vertices", seed.id, target.id, len(graph))
        return PathResult(seed, target, [], INFINITY, distances)

    path = _walk_predecessors(previous, target)
    logging.info("Shortest path %s -> %s: cost=%s hops=%d", seed.id, target.id, cost, len(path) - 1)
    return PathResult(seed, target, path, cost, distances)
