# snowcut/maxflow.py
from collections import deque

from snowcut.network import GraphError


def find_augmenting_path(network, source, sink):
    """
    Shortest source -> sink path (list of labels) through edges with positive
    residual capacity, or None when the network is saturated.
    """
    s = network.node(source)
    t = network.node(sink)
    if s == t:
        raise GraphError(f"Source and sink are the same node {source!r}")

    parent = {s: None}
    queue = deque([s])
    while queue:
        u = queue.popleft()
        if u == t:
            break
        for e in network.out_edges[u]:
            v = network.heads[e]
            if v not in parent and network.residual(e) > 0:
                parent[v] = u
                queue.append(v)

    if t not in parent:
        return None

    path = []
    node = t
    while node is not None:
        path.append(network.labels[node])
        node = parent[node]
    path.reverse()
    return path


def push_flow(network, path):
    """Push the bottleneck amount along `path`. Returns the amount pushed."""
    nodes = [network.node(label) for label in path]
    edges = [network.edge_between(u, v) for u, v in zip(nodes, nodes[1:])]
    if not edges:
        raise GraphError("Augmenting path needs at least two nodes")

    bottleneck = min(network.residual(e) for e in edges)
    for e in edges:
        # add_flow also takes the same amount off the paired reverse edge
        network.add_flow(e, bottleneck)
    return bottleneck


def edmonds_karp(network, source, sink):
    flow_value = 0
    while True:
        path = find_augmenting_path(network, source, sink)
        if path is None:
            return flow_value
        flow_value += push_flow(network, path)


def saturated_out_edges(network, source):
    return sum(1 for e in network.out_edges[network.node(source)] if network.residual(e) == 0)
