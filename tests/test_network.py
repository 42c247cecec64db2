# tests/test_network.py

import networkx as nx
import pytest

from snowcut.network import FlowNetwork, GraphError

def test_each_undirected_edge_becomes_a_pair():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": ["a", "c"], "c": ["b"]})
    assert len(network) == 3
    assert len(network.heads) == 4
    for e, r in enumerate(network.reverse):
        assert network.reverse[r] == e
        assert network.tails[e] == network.heads[r]
        assert network.heads[e] == network.tails[r]
        assert network.capacity[e] == 1
        assert network.flow[e] == 0

def test_one_sided_listing_adds_missing_direction():
    network = FlowNetwork.from_adjacency({"a": ["b", "c"], "b": [], "c": []})
    assert network.neighbors("a") == ["b", "c"]
    assert network.neighbors("b") == ["a"]
    assert network.neighbors("c") == ["a"]

def test_duplicate_listing_is_ignored():
    network = FlowNetwork.from_adjacency({"a": ["b", "b"], "b": ["a"]})
    assert len(network.heads) == 2

def test_neighbor_order_follows_input():
    network = FlowNetwork.from_adjacency({"a": ["c", "b"], "b": ["a"], "c": ["a"]})
    assert network.neighbors("a") == ["c", "b"]

def test_unknown_neighbor_is_fatal():
    with pytest.raises(GraphError):
        FlowNetwork.from_adjacency({"a": ["ghost"]})

def test_self_loop_is_fatal():
    with pytest.raises(GraphError):
        FlowNetwork.from_adjacency({"a": ["a"]})

def test_empty_graph_is_fatal():
    with pytest.raises(GraphError):
        FlowNetwork.from_adjacency({})

def test_unknown_label_lookup():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": []})
    with pytest.raises(GraphError):
        network.neighbors("zzz")

def test_add_flow_moves_paired_edge():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": []})
    e = network.edge_between(network.node("a"), network.node("b"))
    network.add_flow(e, 1)
    assert network.flow[e] == 1
    assert network.flow[network.reverse[e]] == -1
    assert network.residual(e) == 0
    assert network.residual(network.reverse[e]) == 2

def test_copy_does_not_share_flow():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": []})
    clone = network.copy()
    clone.add_flow(0, 1)
    assert network.flow == [0, 0]
    assert clone.flow == [1, -1]
    assert clone.heads is network.heads

def test_reset_zeroes_flow():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": []})
    network.add_flow(0, 1)
    network.reset()
    assert network.flow == [0, 0]

def test_round_trip_through_networkx(sample_adjacency):
    network = FlowNetwork.from_adjacency(sample_adjacency)
    graph = network.to_graph()
    assert graph.number_of_nodes() == 15
    assert graph.number_of_edges() == 33
    rebuilt = FlowNetwork.from_graph(graph)
    assert len(rebuilt.heads) == 66

def test_from_graph_rejects_directed():
    with pytest.raises(GraphError):
        FlowNetwork.from_graph(nx.DiGraph([(1, 2)]))

@pytest.mark.parametrize("neighbors", ["bc", {"b": 1}, 7])
def test_neighbors_must_be_a_list(neighbors):
    with pytest.raises(GraphError):
        FlowNetwork.from_adjacency({"a": neighbors, "b": [], "c": []})

def test_edge_map_is_shared_with_copies():
    network = FlowNetwork.from_adjacency({"a": ["b"], "b": ["c"], "c": []})
    assert network.edge_of == {(0, 1): 0, (1, 2): 1, (1, 0): 2, (2, 1): 3}
    assert network.copy().edge_of is network.edge_of
