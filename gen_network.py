import argparse
import json
import random
import sys
from typing import Dict, List, Tuple


def generate_network(
    num_nodes: int,
    num_edges: int,
    seed: int,
    max_cap: int = 20,
    parallel: float = 0.1,
) -> Dict:
    if num_nodes < 2:
        raise ValueError("Need at least a source and a sink.")

    rnd = random.Random(seed)
    source = 0
    sink = num_nodes - 1

    possible_pairs: List[Tuple[int, int]] = []
    for u in range(num_nodes):
        for v in range(num_nodes):
            if u == v:
                continue
            possible_pairs.append((u, v))
    rnd.shuffle(possible_pairs)
    if num_edges > len(possible_pairs):
        num_edges = len(possible_pairs)

    edges: List[Dict] = []
    for idx in range(num_edges):
        u, v = possible_pairs[idx]
        edges.append({"from": u, "to": v, "cap": rnd.randint(0, max_cap)})
        if rnd.random() < parallel:
            edges.append({"from": u, "to": v, "cap": rnd.randint(1, max_cap)})

    return {
        "nodes": num_nodes,
        "edges": edges,
        "source": source,
        "sink": sink,
    }


def main():
    parser = argparse.ArgumentParser(description="Generate a random max-flow instance.")
    parser.add_argument("--nodes", type=int, default=6, help="Number of vertices.")
    parser.add_argument("--edges", type=int, default=10, help="Number of distinct directed pairs.")
    parser.add_argument("--max-cap", type=int, default=20, help="Largest edge capacity.")
    parser.add_argument("--parallel", type=float, default=0.1, help="Chance of a parallel duplicate edge.")
    parser.add_argument("--seed", type=int, default=1, help="Random seed.")
    args = parser.parse_args()

    data = generate_network(args.nodes, args.edges, args.seed, args.max_cap, args.parallel)
    json.dump(data, fp=sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
