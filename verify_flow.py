import argparse
import json
from collections import defaultdict
from fractions import Fraction
from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.optimize import linprog
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import maximum_flow

TOL = 1e-6

Edge = Tuple[int, int, float]


def load_json(path: str) -> Dict:
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def as_float(value) -> float:
    if isinstance(value, str):
        return float(Fraction(value))
    return float(value)


def parse_edges(input_data: Dict) -> List[Edge]:
    return [
        (int(edge["from"]), int(edge["to"]), as_float(edge.get("cap", 0)))
        for edge in input_data.get("edges", [])
    ]


def lp_max_flow(n: int, edges: Sequence[Edge], s: int, t: int) -> float:
    """Max flow as a linear program: one variable per edge plus the flow value."""
    if s == t:
        return 0.0
    num_edges = len(edges)
    A_eq = np.zeros((n, num_edges + 1))
    b_eq = np.zeros(n)
    for idx, (u, v, _) in enumerate(edges):
        A_eq[v, idx] += 1.0
        A_eq[u, idx] -= 1.0
    A_eq[s, num_edges] = 1.0
    A_eq[t, num_edges] = -1.0

    bounds = [(0.0, cap) for _, _, cap in edges]
    bounds.append((0.0, None))
    c = np.zeros(num_edges + 1)
    c[num_edges] = -1.0

    result = linprog(c=c, A_eq=A_eq, b_eq=b_eq, bounds=bounds, method="highs")
    if not result.success:
        raise AssertionError(f"LP reference failed: {result.message}")
    return float(-result.fun)


def csgraph_max_flow(n: int, edges: Sequence[Edge], s: int, t: int) -> int:
    """Integer max flow from scipy's csgraph solver; parallel edges are summed."""
    if s == t:
        return 0
    rows, cols, data = [], [], []
    for u, v, cap in edges:
        if u == v:
            continue
        rows.append(u)
        cols.append(v)
        data.append(int(cap))
    graph = csr_matrix(
        (np.array(data, dtype=np.int32), (np.array(rows, dtype=np.int32), np.array(cols, dtype=np.int32))),
        shape=(n, n),
    )
    graph.eliminate_zeros()
    return int(maximum_flow(graph, s, t, method="dinic").flow_value)


def check_ok(input_data: Dict, output_data: Dict) -> None:
    n = int(input_data["nodes"])
    source = int(input_data["source"])
    sink = int(input_data["sink"])
    edges = parse_edges(input_data)

    if output_data.get("status") != "ok":
        raise AssertionError(f"Unexpected status: {output_data.get('status')}")
    reported = as_float(output_data.get("max_flow", 0.0))

    flow_entries = output_data.get("flows", [])
    if len(flow_entries) != len(edges):
        raise AssertionError(f"Expected {len(edges)} flow entries, got {len(flow_entries)}.")

    node_in = defaultdict(float)
    node_out = defaultdict(float)
    flows = []
    for (u, v, cap), entry in zip(edges, flow_entries):
        if (int(entry["from"]), int(entry["to"])) != (u, v):
            raise AssertionError(f"Flow entry {entry} does not match edge {u}->{v}.")
        flow = as_float(entry["flow"])
        if flow < -TOL:
            raise AssertionError(f"Edge {u}->{v} carries negative flow {flow}.")
        if flow > cap + TOL:
            raise AssertionError(f"Edge {u}->{v} above capacity: {flow} > {cap}")
        node_out[u] += flow
        node_in[v] += flow
        flows.append(flow)

    for node in range(n):
        if node in (source, sink) and source != sink:
            continue
        if abs(node_in[node] - node_out[node]) > TOL:
            raise AssertionError(
                f"Conservation violated at {node}: in={node_in[node]}, out={node_out[node]}"
            )

    net_out = node_out[source] - node_in[source] if source != sink else 0.0
    if abs(net_out - reported) > TOL:
        raise AssertionError(f"max_flow mismatch: net source outflow {net_out}, reported {reported}")

    reachable = set(int(v) for v in output_data.get("cut_reachable", []))
    if source != sink:
        if source not in reachable or sink in reachable:
            raise AssertionError("cut_reachable does not separate source from sink.")
        cut_capacity = 0.0
        for (u, v, cap), flow in zip(edges, flows):
            if u in reachable and v not in reachable:
                cut_capacity += cap
            elif v in reachable and u not in reachable and flow > TOL:
                raise AssertionError(f"Edge {u}->{v} carries flow back across the cut.")
        if abs(cut_capacity - reported) > TOL:
            raise AssertionError(f"Cut capacity {cut_capacity} differs from flow {reported}.")

    expected = lp_max_flow(n, edges, source, sink)
    if abs(expected - reported) > TOL:
        raise AssertionError(f"max_flow {reported} is not optimal; LP optimum is {expected}.")


def main():
    parser = argparse.ArgumentParser(description="Validate max-flow solver output.")
    parser.add_argument("input_json", help="Path to the network input JSON.")
    parser.add_argument("output_json", help="Path to the solver output JSON.")
    args = parser.parse_args()

    input_data = load_json(args.input_json)
    output_data = load_json(args.output_json)
    check_ok(input_data, output_data)
    print("max-flow output valid.")


if __name__ == "__main__":
    main()
