import json
import math
import numbers
import sys
from collections import deque
from fractions import Fraction
from typing import Dict, List, Tuple

import numpy as np


TOL = 1e-9

DTYPES = {
    "int": int,
    "float": float,
    "fraction": Fraction,
    "int64": np.int64,
    "float64": np.float64,
}


class PreconditionViolation(ValueError):
    """Raised when a vertex index falls outside ``[0, n)``."""


def round_for_output(value: float) -> float:
    if abs(value) < TOL:
        return 0.0
    return float(round(value + 0.0, 10))


class Arc:
    __slots__ = ("to", "rev", "cap", "init_cap")

    def __init__(self, to: int, rev: int, cap):
        self.to = to
        self.rev = rev
        self.cap = cap
        self.init_cap = cap


class FlowNetwork:
    """Directed multigraph with paired residual arcs, solved with Dinic's method.

    ``dtype`` is the capacity/flow type, fixed per instance. Arcs whose
    residual capacity is not above ``tol`` are treated as saturated.
    """

    def __init__(self, n: int, dtype=int, tol=0):
        if n < 0:
            raise PreconditionViolation(f"vertex count must be non-negative, got {n}")
        self.n = n
        self.dtype = dtype
        self.tol = tol
        self.graph: List[List[Arc]] = [[] for _ in range(n)]
        self.level = [0] * n
        self.ptr = [0] * n
        self.handles: List[Tuple[int, int]] = []

    def _check(self, *vertices: int):
        for v in vertices:
            if not isinstance(v, numbers.Integral):
                raise PreconditionViolation(f"vertex {v!r} is not an integer index")
            if not 0 <= v < self.n:
                raise PreconditionViolation(f"vertex {v} out of range [0, {self.n})")

    def add_edge(self, u: int, v: int, capacity) -> Tuple[int, int]:
        self._check(u, v)
        cap = self.dtype(capacity)
        # For a self loop both arcs land in graph[u]; the forward arc is
        # appended first, so the reverse arc sits one position later.
        pos_u = len(self.graph[u])
        pos_v = len(self.graph[v]) + (1 if u == v else 0)
        self.graph[u].append(Arc(v, pos_v, cap))
        self.graph[v].append(Arc(u, pos_u, self.dtype(0)))
        self.handles.append((u, pos_u))
        return u, pos_u

    def _push(self, u: int, i: int, d):
        arc = self.graph[u][i]
        arc.cap -= d
        self.graph[arc.to][arc.rev].cap += d

    def _flow_max(self, s: int):
        if isinstance(self.dtype, type) and issubclass(self.dtype, np.integer):
            return self.dtype(np.iinfo(self.dtype).max)
        if self.dtype is float or (
            isinstance(self.dtype, type) and issubclass(self.dtype, np.floating)
        ):
            return self.dtype(math.inf)
        # Exact unbounded types: nothing can leave s beyond its total residual.
        total = self.dtype(0)
        for arc in self.graph[s]:
            total += arc.cap
        return total

    def _assign_levels(self, s: int, t: int) -> int:
        level = self.level
        for i in range(self.n):
            level[i] = 0
        level[s] = 1
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for arc in self.graph[u]:
                if arc.cap > self.tol and not level[arc.to]:
                    level[arc.to] = level[u] + 1
                    queue.append(arc.to)
        return level[t]

    def _augment(self, s: int, t: int, limit):
        """Push flow along one path of the level graph, returning the amount.

        Iterative form of the recursive blocking-flow step: ``path`` holds the
        (vertex, arc position) hops taken so far. A vertex with no admissible
        arc left is a dead end for the rest of the phase, so its parent's
        cursor steps past the arc leading to it.
        """
        graph, level, ptr, tol = self.graph, self.level, self.ptr, self.tol
        path: List[Tuple[int, int]] = []
        u = s
        while True:
            if u == t:
                pushed = limit
                for v, i in path:
                    cap = graph[v][i].cap
                    if cap < pushed:
                        pushed = cap
                for v, i in path:
                    self._push(v, i, pushed)
                return pushed

            arcs = graph[u]
            i = ptr[u]
            while i < len(arcs):
                arc = arcs[i]
                if arc.cap > tol and level[arc.to] == level[u] + 1:
                    break
                i += 1
            ptr[u] = i

            if i < len(arcs):
                path.append((u, i))
                u = arcs[i].to
                continue

            if not path:
                return self.dtype(0)
            u, _ = path.pop()
            ptr[u] += 1

    def max_flow(self, s: int, t: int):
        self._check(s, t)
        total = self.dtype(0)
        if s == t:
            return total
        flow_max = self._flow_max(s)
        while self._assign_levels(s, t):
            for i in range(self.n):
                self.ptr[i] = 0
            while True:
                pushed = self._augment(s, t, flow_max)
                if not pushed:
                    break
                total += pushed
        return total

    def flow(self, handle: Tuple[int, int]):
        u, pos = handle
        arc = self.graph[u][pos]
        return arc.init_cap - arc.cap

    def edges(self) -> List[Tuple[int, int, object, object]]:
        """Every added edge as ``(u, v, capacity, flow)``, in insertion order."""
        result = []
        for u, pos in self.handles:
            arc = self.graph[u][pos]
            result.append((u, arc.to, arc.init_cap, arc.init_cap - arc.cap))
        return result

    def reachable(self, s: int) -> List[bool]:
        self._check(s)
        visited = [False] * self.n
        stack = [s]
        visited[s] = True
        while stack:
            v = stack.pop()
            for arc in self.graph[v]:
                if arc.cap > self.tol and not visited[arc.to]:
                    visited[arc.to] = True
                    stack.append(arc.to)
        return visited

    def min_cut(self, s: int) -> Tuple[List[int], List[Tuple[int, int]]]:
        """Source side and crossing edge handles of the cut left by ``max_flow``."""
        visited = self.reachable(s)
        side = [v for v in range(self.n) if visited[v]]
        cut_edges = []
        for u, pos in self.handles:
            if visited[u] and not visited[self.graph[u][pos].to]:
                cut_edges.append((u, pos))
        return side, cut_edges


def format_value(value):
    if isinstance(value, Fraction):
        return str(value)
    if isinstance(value, (float, np.floating)):
        return round_for_output(float(value))
    return int(value)


def parse_dtype(name: str):
    try:
        return DTYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown dtype {name!r}; expected one of {', '.join(sorted(DTYPES))}."
        ) from None


def is_integer_dtype(dtype) -> bool:
    return dtype is int or (isinstance(dtype, type) and issubclass(dtype, np.integer))


def build_network(data: Dict) -> FlowNetwork:
    for key in ("nodes", "source", "sink"):
        if data.get(key) is None:
            raise ValueError(f"Field {key!r} is required.")
    dtype = parse_dtype(data.get("dtype", "int"))
    tol = TOL if dtype in (float, np.float64) else 0
    network = FlowNetwork(int(data["nodes"]), dtype=dtype, tol=tol)
    for edge in data.get("edges", []):
        for key in ("from", "to"):
            if edge.get(key) is None:
                raise ValueError(f"Edge {edge} is missing field {key!r}.")
        src = int(edge["from"])
        dst = int(edge["to"])
        raw = edge.get("cap", 0)
        exact = Fraction(str(raw))
        if exact < 0:
            raise ValueError(f"Edge {src}->{dst} has negative capacity {raw}.")
        if is_integer_dtype(dtype) and exact.denominator != 1:
            raise ValueError(f"Edge {src}->{dst} has non-integer capacity {raw} for dtype {dtype.__name__}.")
        cap = dtype(int(exact)) if is_integer_dtype(dtype) else dtype(raw)
        network.add_edge(src, dst, cap)
    return network


def solve(data: Dict) -> Dict:
    network = build_network(data)
    source = int(data["source"])
    sink = int(data["sink"])
    value = network.max_flow(source, sink)
    reachable, _ = network.min_cut(source)
    flows = [
        {"from": u, "to": v, "flow": format_value(flow)}
        for u, v, _, flow in network.edges()
    ]
    return {
        "status": "ok",
        "max_flow": format_value(value),
        "flows": flows,
        "cut_reachable": reachable,
    }


def main():
    try:
        data = json.load(sys.stdin)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"invalid JSON input: {exc}") from exc

    result = solve(data)
    json.dump(result, sys.stdout, separators=(",", ":"))


if __name__ == "__main__":
    main()
