"""Coupling graph of a quantum device."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

UNREACHABLE = 2**32 - 1
"""Distance reported between qubits that no path connects."""


class Device:
    """Physical qubits and the undirected couplings between them."""

    def __init__(self, num_qubits: int, edges: Iterable[tuple[int, int]] = ()):
        if num_qubits < 0:
            raise ValueError("number of qubits must not be negative")
        self.num_qubits = num_qubits
        self._edges: list[tuple[int, int]] = []
        self._neighbors: list[set[int]] = [set() for _ in range(num_qubits)]
        for u, v in edges:
            self._check(u)
            self._check(v)
            if u == v:
                raise ValueError(f"self-loop on qubit {u} is not a coupling")
            if v in self._neighbors[u]:
                continue
            self._edges.append((u, v))
            self._neighbors[u].add(v)
            self._neighbors[v].add(u)
        self._distances: list[list[int]] | None = None

    @classmethod
    def path(cls, num_qubits: int) -> Device:
        """A device whose qubits form a line 0 - 1 - ... - (n-1)."""
        return cls(num_qubits, ((i, i + 1) for i in range(num_qubits - 1)))

    def num_edges(self) -> int:
        return len(self._edges)

    def edge(self, index: int) -> tuple[int, int]:
        return self._edges[index]

    def distance(self, u: int, v: int) -> int:
        """Length of the shortest path between two qubits."""
        self._check(u)
        self._check(v)
        if self._distances is None:
            self._distances = [self._bfs(src) for src in range(self.num_qubits)]
        return self._distances[u][v]

    def are_connected(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        return v in self._neighbors[u]

    def _bfs(self, source: int) -> list[int]:
        dist = [UNREACHABLE] * self.num_qubits
        dist[source] = 0
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for nxt in self._neighbors[node]:
                if dist[nxt] == UNREACHABLE:
                    dist[nxt] = dist[node] + 1
                    queue.append(nxt)
        return dist

    def _check(self, qubit: int) -> None:
        if not 0 <= qubit < self.num_qubits:
            raise IndexError(f"qubit {qubit} is not on the device")