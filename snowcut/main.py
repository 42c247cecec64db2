#!/usr/bin/env python
# snowcut/main.py
import sys
import json
import argparse

from snowcut.mincut import DEFAULT_CUT_SIZE, CutNotFoundError, find_partition
from snowcut.network import FlowNetwork, GraphError
from snowcut.parse import ParseError, parse_adjacency


def infeasible(reason):
    return {"status": "infeasible", "product": 0, "reason": reason}


def solve_cut(data):

    adjacency = data["adjacency"]
    cut_size = data.get("cut_size", DEFAULT_CUT_SIZE)
    if isinstance(cut_size, bool) or not isinstance(cut_size, int) or cut_size < 0:
        return infeasible(f"Cut size must be a non-negative integer, got {cut_size!r}")

    try:
        network = FlowNetwork.from_adjacency(adjacency)
        partition = find_partition(network, cut_size)
    except CutNotFoundError as e:
        return infeasible(str(e))
    except GraphError as e:
        return infeasible(f"Malformed graph: {e}")

    sizes = sorted([len(partition.side), len(partition.other)])

    return {
        "status": "ok",
        "product": sizes[0] * sizes[1],
        "sizes": sizes,
        "source": partition.source,
        "sink": partition.sink,
        "max_flow": partition.flow,
        "cut_edges": [list(edge) for edge in partition.cut],
        "side": sorted(partition.side),
    }


def read_input(stream, fmt, cut_size):
    if fmt == "json":
        data = json.load(stream)
        data.setdefault("cut_size", cut_size)
        return data
    return {"adjacency": parse_adjacency(stream.read()), "cut_size": cut_size}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Split a graph by its k-edge minimum cut.")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Input format on stdin.")
    parser.add_argument("-k", "--cut-size", type=int, default=DEFAULT_CUT_SIZE,
                        help="Number of edges in the cut.")
    args = parser.parse_args(argv)

    try:
        try:
            indata = read_input(sys.stdin, args.format, args.cut_size)
        except json.JSONDecodeError as e:
            sys.stderr.write(f"Error: Invalid JSON input. {e}\n")
            return
        except ParseError as e:
            sys.stderr.write(f"Error: Invalid adjacency list. {e}\n")
            json.dump(infeasible(str(e)), sys.stdout)
            return

        result = solve_cut(indata)
        if result["status"] != "ok":
            sys.stderr.write(f"Error: {result['reason']}\n")

        try:
            json.dump(result, sys.stdout, indent=None)
        except (IOError, TypeError) as e:
            sys.stderr.write(f"Error: Could not write JSON output. {e}\n")

    except Exception as e:
        sys.stderr.write(f"An unexpected error occurred: {e}\n")
        json.dump(infeasible(f"Error: {e}"), sys.stdout)

if __name__ == "__main__":
    main()
