# snowcut/mincut.py
from collections import deque, namedtuple

import networkx as nx

from snowcut.maxflow import edmonds_karp
from snowcut.network import FlowNetwork, GraphError

DEFAULT_CUT_SIZE = 3

Partition = namedtuple("Partition", ["source", "sink", "flow", "side", "other", "cut"])


class CutNotFoundError(RuntimeError):
    pass


class SplitError(GraphError):
    pass


def reachable_side(network, source):
    """Labels reachable from `source` through edges with residual capacity left."""
    start = network.node(source)
    seen = {start}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for e in network.out_edges[u]:
            v = network.heads[e]
            if v not in seen and network.residual(e) > 0:
                seen.add(v)
                queue.append(v)
    return frozenset(network.labels[i] for i in seen)


def cut_edges(network, side):
    """Undirected edges leaving `side`, as (inside, outside) label pairs."""
    crossing = []
    for u, label in enumerate(network.labels):
        if label not in side:
            continue
        for e in network.out_edges[u]:
            head = network.labels[network.heads[e]]
            if head not in side:
                crossing.append((label, head))
    return crossing


def components_after_cut(network, edges):
    graph = network.to_graph()
    graph.remove_edges_from(edges)
    return [set(component) for component in nx.connected_components(graph)]


def find_partition(network, cut_size=DEFAULT_CUT_SIZE):
    """
    Fix the first node as source and try every other node as sink until the
    max flow between them equals `cut_size`. Trials run on one working copy
    whose flows are zeroed before each sink, so `network` itself is never
    touched. The min cut is read off the residual state of the matching trial.
    """
    source = network.labels[0]
    trial = network.copy()
    for sink in network.labels[1:]:
        trial.reset()
        flow = edmonds_karp(trial, source, sink)
        if flow != cut_size:
            continue

        side = reachable_side(trial, source)
        other = frozenset(network.labels) - side
        cut = cut_edges(trial, side)
        if len(cut) != flow:
            raise GraphError(f"Cut of {len(cut)} edges does not match max flow {flow}")

        components = components_after_cut(trial, cut)
        if len(components) != 2:
            raise SplitError(
                f"Removing {len(cut)} edges leaves {len(components)} components, expected 2"
            )
        return Partition(source, sink, flow, side, other, cut)

    raise CutNotFoundError(
        f"No sink gives a max flow of {cut_size} from source {source!r} "
        f"({len(network) - 1} candidates tried)"
    )


def partition_product(adjacency, cut_size=DEFAULT_CUT_SIZE):
    partition = find_partition(FlowNetwork.from_adjacency(adjacency), cut_size)
    return len(partition.side) * len(partition.other)
