"""Shortest paths in a weighted graph and topological ordering of a digraph."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

__all__ = ["dijkstra", "Graph"]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is not in range 0..{vertex_count - 1}")


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[float]:
    """Return the shortest distance from vertex 0 to every vertex.

    ``edges`` holds undirected ``(start, end, weight)`` triples. A later edge
    between the same pair replaces an earlier one, and a weight of zero means
    no edge. Unreachable vertices get ``math.inf``.

    Raises ValueError for a negative vertex count, a vertex out of range or a
    negative weight.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    adjacency: list[dict[int, float]] = [{} for _ in range(vertex_count)]
    for start, end, weight in edges:
        _check_vertex(start, vertex_count)
        _check_vertex(end, vertex_count)
        if weight < 0:
            raise ValueError(f"edge weights must be non-negative, got {weight}")
        adjacency[start][end] = weight
        adjacency[end][start] = weight

    cost: list[float] = [math.inf] * vertex_count
    if not vertex_count:
        return cost
    cost[0] = 0
    heap: list[tuple[float, int]] = [(0, 0)]
    done: set[int] = set()
    while heap:
        distance, vertex = heapq.heappop(heap)
        if vertex in done:
            continue
        done.add(vertex)
        for neighbour, weight in adjacency[vertex].items():
            if not weight or neighbour in done:
                continue
            candidate = distance + weight
            if candidate < cost[neighbour]:
                cost[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return cost


class Graph:
    """A directed graph on the vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        _check_vertex(v, self.vertex_count)
        _check_vertex(w, self.vertex_count)
        self._adjacency[v].append(w)

    def topological_sort(self) -> list[int]:
        """Return the vertices so that every edge points from earlier to later.

        Depth-first search is started from each unvisited vertex in ascending
        order; the result is the reverse of the order in which vertices finish.
        """
        visited = [False] * self.vertex_count
        finished: list[int] = []
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                vertex, neighbours = stack[-1]
                for neighbour in neighbours:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        return finished[::-1]