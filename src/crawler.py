import logging
from logging.handlers import RotatingFileHandler
from collections import deque
from enum import Enum
from threading import BoundedSemaphore, Lock
from concurrent.futures import ThreadPoolExecutor, wait

from configs import DEFAULT_BATCH_SIZE, DEFAULT_CONCURRENCY, DEFAULT_EDGE_WEIGHT
from link_graph import LinkGraph
from shortest_path import dijkstra
from vertex import LinkVertex


FOUND = "found"
NO_PATH = "no_path"
EXHAUSTED = "exhausted"


def setup_logging(verbose=False, logfile=None):
    root_logger = logging.getLogger()
    # replace handlers installed by an earlier call
    for h in list(root_logger.handlers):
        if getattr(h, "_linkpath", False):
            root_logger.removeHandler(h)
            h.close()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    # console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch._linkpath = True
    root_logger.addHandler(ch)
    # file handler
    if logfile:
        fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(formatter)
        fh.setLevel(logging.DEBUG)
        fh._linkpath = True
        root_logger.addHandler(fh)


def as_vertex(candidate):
    """LinkVertex from a vertex, an (id, label) pair or a bare id; None otherwise."""
    if isinstance(candidate, LinkVertex):
        return candidate
    if isinstance(candidate, str):
        return LinkVertex(candidate) if candidate else None
    if isinstance(candidate, (tuple, list)) and len(candidate) == 2:
        vid, label = candidate
        if isinstance(vid, str) and vid:
            return LinkVertex(vid, label if isinstance(label, str) else "")
    return None


class ExpansionStatus(Enum):
    NEIGHBORS = "neighbors"
    NO_NEIGHBORS = "no_neighbors"
    FAILED = "failed"


class ExpansionOutcome:
    def __init__(self, vertex, status, discovered=None):
        self.vertex = vertex
        self.status = status
        # neighbours this expansion was first to see
        self.discovered = discovered or []

    def __repr__(self):
        return f"ExpansionOutcome({self.vertex.id!r}, {self.status.value}, discovered={len(self.discovered)})"


class DiscoveryResult:
    def __init__(self, status, seed, target, graph, rounds, visited, failed,
                 discovered_round, discovered_by):
        self.status = status
        self.seed = seed
        self.target = target
        self.graph = graph
        self.rounds = rounds
        self.visited = visited
        self.failed = failed
        self.discovered_round = discovered_round
        self.discovered_by = discovered_by

    @property
    def found(self) -> bool:
        return self.status == FOUND


class FrontierScheduler:
    """
    Round-based breadth-first discovery from a seed until a target id is seen.

    Each round takes up to batch_size vertices off the frontier and expands
    them on a thread pool. At most `concurrency` fetch/extract steps run at
    once for the lifetime of the scheduler, whatever the round. The round ends
    when every expansion in it has returned; only then is the target checked
    and the next batch taken.

    fetch(id) returns the document text, or None when it could not be
    retrieved. extract(content, base_id) returns candidates as LinkVertex
    objects or (id, label) pairs; anything else is logged and skipped.
    """

    def __init__(self, fetch, extract, batch_size=DEFAULT_BATCH_SIZE,
                 concurrency=DEFAULT_CONCURRENCY, edge_weight=DEFAULT_EDGE_WEIGHT):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        if isinstance(edge_weight, bool) or not isinstance(edge_weight, int) or edge_weight < 0:
            raise ValueError(f"edge_weight must be a non-negative integer, got {edge_weight!r}")
        self.fetch = fetch
        self.extract = extract
        self.batch_size = batch_size
        self.concurrency = concurrency
        self.edge_weight = edge_weight

        self.graph = LinkGraph()
        self.frontier = deque()
        self.visited = set()
        # guards visited, graph and frontier together
        self.lock = Lock()
        self.slots = BoundedSemaphore(concurrency)

        self.round = 0
        self.failed = []
        self.discovered_round = {}
        self.discovered_by = {}

    def _admit(self, vertex, parent):
        """Caller must hold self.lock."""
        if vertex.id in self.visited:
            return False
        self.visited.add(vertex.id)
        if parent is None:
            self.graph.add_node(vertex)
        else:
            self.graph.add_edge(parent, vertex, self.edge_weight)
        self.frontier.append(vertex)
        self.discovered_round[vertex.id] = self.round
        self.discovered_by[vertex.id] = parent.id if parent is not None else None
        return True

    def expand(self, vertex) -> ExpansionOutcome:
        with self.slots:
            logging.info("> %s", vertex.label or vertex.id)
            try:
                content = self.fetch(vertex.id)
            except Exception:
                logging.exception("Fetch raised for %s", vertex.id)
                content = None

            if content is None:
                with self.lock:
                    self.failed.append(vertex.id)
                logging.debug("Abandoning expansion of %s", vertex.id)
                return ExpansionOutcome(vertex, ExpansionStatus.FAILED)

            try:
                raw = list(self.extract(content, vertex.id) or [])
            except Exception:
                logging.exception("Link extraction failed for %s", vertex.id)
                raw = []

        candidates = []
        for item in raw:
            candidate = as_vertex(item)
            if candidate is None:
                logging.warning("Ignoring malformed link candidate from %s: %r", vertex.id, item)
                continue
            candidates.append(candidate)

        if not candidates:
            return ExpansionOutcome(vertex, ExpansionStatus.NO_NEIGHBORS)

        discovered = []
        with self.lock:
            for candidate in candidates:
                if self._admit(candidate, vertex):
                    discovered.append(candidate)
        logging.debug("%s: %d candidates, %d new", vertex.id, len(candidates), len(discovered))
        return ExpansionOutcome(vertex, ExpansionStatus.NEIGHBORS, discovered)

    def _next_batch(self):
        with self.lock:
            n = min(self.batch_size, len(self.frontier))
            return [self.frontier.popleft() for _ in range(n)]

    def run(self, seed, target) -> DiscoveryResult:
        if self.visited:
            raise RuntimeError("FrontierScheduler.run() can only be called once")

        with self.lock:
            self._admit(seed, None)
        found = target.id in self.visited

        with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
            while self.frontier and not found:
                self.round += 1
                batch = self._next_batch()
                logging.info("Round %d: expanding %d (frontier=%d, visited=%d)",
                             self.round, len(batch), len(self.frontier), len(self.visited))
                futures = [executor.submit(self.expand, v) for v in batch]
                wait(futures)
                for fut in futures:
                    # re-raise anything expand() did not turn into an outcome
                    fut.result()
                with self.lock:
                    found = target.id in self.visited

        status = FOUND if found else EXHAUSTED
        logging.info("Discovery %s after %d rounds: %d vertices, %d edges, %d failed fetches",
                     status, self.round, len(self.visited), self.graph.edge_count(), len(self.failed))
        return DiscoveryResult(status, seed, target, self.graph, self.round, len(self.visited),
                               list(self.failed), dict(self.discovered_round), dict(self.discovered_by))


class SearchOutcome:
    def __init__(self, status, discovery, path_result=None):
        self.status = status
        self.discovery = discovery
        self.path_result = path_result

    @property
    def found(self) -> bool:
        return self.status == FOUND

    @property
    def path(self):
        return self.path_result.path if self.path_result else []

    @property
    def cost(self):
        return self.path_result.cost if self.path_result and self.path_result.found else None


def find_path(seed, target, fetch, extract, batch_size=DEFAULT_BATCH_SIZE,
              concurrency=DEFAULT_CONCURRENCY, edge_weight=DEFAULT_EDGE_WEIGHT):
    scheduler = FrontierScheduler(fetch, extract, batch_size=batch_size,
                                  concurrency=concurrency, edge_weight=edge_weight)
    discovery = scheduler.run(seed, target)
    if not discovery.found:
        return SearchOutcome(EXHAUSTED, discovery)

    # expansion has fully quiesced; the graph is read-only from here
    result = dijkstra(discovery.graph, seed, target)
    return SearchOutcome(FOUND if result.found else NO_PATH, discovery, result)
