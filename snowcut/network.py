# snowcut/network.py
import copy

import networkx as nx

UNIT_CAPACITY = 1


class GraphError(ValueError):
    pass


class FlowNetwork:
    """
    Unit-capacity residual network over dense node indices.

    Every undirected edge {u, v} is stored as two directed edges u->v and
    v->u, each with its own flow. reverse[e] is the index of the paired edge.
    Topology (labels, tails, heads, reverse, capacity, out_edges) is built once
    and shared between copies; only `flow` is per instance.
    """

    def __init__(self, labels, tails, heads, reverse, capacity, out_edges, flow=None, edge_of=None):
        self.labels = labels
        self.index = {label: i for i, label in enumerate(labels)}
        self.tails = tails
        self.heads = heads
        self.reverse = reverse
        self.capacity = capacity
        self.out_edges = out_edges
        self.edge_of = edge_of if edge_of is not None else {(t, h): e for e, (t, h) in enumerate(zip(tails, heads))}
        self.flow = list(flow) if flow is not None else [0] * len(heads)

    @classmethod
    def from_adjacency(cls, adjacency):
        labels = list(adjacency)
        if not labels:
            raise GraphError("Graph has no nodes")
        index = {label: i for i, label in enumerate(labels)}

        tails, heads = [], []
        out_edges = [[] for _ in labels]
        edge_of = {}

        def add_edge(u, v):
            e = len(heads)
            tails.append(u)
            heads.append(v)
            out_edges[u].append(e)
            edge_of[(u, v)] = e
            return e

        for label, neighbors in adjacency.items():
            u = index[label]
            if isinstance(neighbors, (str, bytes)) or not isinstance(neighbors, (list, tuple)):
                raise GraphError(f"Neighbors of {label!r} must be a list, got {type(neighbors).__name__}")
            for neighbor in neighbors:
                if neighbor not in index:
                    raise GraphError(f"Edge {label!r} -> {neighbor!r} references an unknown node")
                v = index[neighbor]
                if u == v:
                    raise GraphError(f"Self-loop on node {label!r}")
                if (u, v) not in edge_of:
                    add_edge(u, v)

        # Pair every directed edge with its opposite, adding the missing
        # direction when the adjacency only lists one side.
        reverse = [None] * len(heads)
        for e in range(len(heads)):
            if reverse[e] is not None:
                continue
            u, v = tails[e], heads[e]
            r = edge_of.get((v, u))
            if r is None:
                r = add_edge(v, u)
                reverse.append(None)
            reverse[e] = r
            reverse[r] = e

        return cls(
            labels=tuple(labels),
            tails=tuple(tails),
            heads=tuple(heads),
            reverse=tuple(reverse),
            capacity=(UNIT_CAPACITY,) * len(heads),
            out_edges=tuple(tuple(edges) for edges in out_edges),
            edge_of=edge_of,
        )

    @classmethod
    def from_graph(cls, graph):
        if graph.is_directed():
            raise GraphError("Expected an undirected graph")
        return cls.from_adjacency({node: list(graph.adj[node]) for node in graph.nodes})

    def __len__(self):
        return len(self.labels)

    def node(self, label):
        try:
            return self.index[label]
        except KeyError:
            raise GraphError(f"Unknown node {label!r}") from None

    def neighbors(self, label):
        return [self.labels[self.heads[e]] for e in self.out_edges[self.node(label)]]

    def edge_between(self, u, v):
        """Index of the directed edge u -> v (node indices)."""
        try:
            return self.edge_of[(u, v)]
        except KeyError:
            raise GraphError(f"No edge {self.labels[u]!r} -> {self.labels[v]!r}") from None

    def residual(self, e):
        return self.capacity[e] - self.flow[e]

    def add_flow(self, e, delta):
        self.flow[e] += delta
        self.flow[self.reverse[e]] -= delta

    def undirected_edges(self):
        for e in range(len(self.heads)):
            if e < self.reverse[e]:
                yield self.labels[self.tails[e]], self.labels[self.heads[e]]

    def to_graph(self):
        graph = nx.Graph()
        graph.add_nodes_from(self.labels)
        graph.add_edges_from(self.undirected_edges())
        return graph

    def copy(self):
        clone = copy.copy(self)
        clone.flow = list(self.flow)
        return clone

    def reset(self):
        self.flow = [0] * len(self.heads)
