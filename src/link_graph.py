from vertex import LinkVertex


class LinkGraph:
    """Adjacency lists keyed by vertex, built up while crawling."""

    def __init__(self):
        self._adj = {}

    def add_node(self, vertex: LinkVertex):
        if vertex not in self._adj:
            self._adj[vertex] = []

    def add_edge(self, src: LinkVertex, dst: LinkVertex, weight: int = 1):
        # bool is an int subclass
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")
        self.add_node(src)
        self.add_node(dst)
        self._adj[src].append((dst, weight))

    def neighbors_of(self, vertex: LinkVertex):
        return tuple(self._adj.get(vertex, ()))

    def nodes(self):
        return list(self._adj)

    def edges(self):
        for src, out in self._adj.items():
            for dst, weight in out:
                yield src, dst, weight

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    def __contains__(self, vertex):
        return vertex in self._adj

    def __len__(self):
        return len(self._adj)
