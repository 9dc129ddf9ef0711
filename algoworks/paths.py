"""Shortest paths: counting them by breadth-first search and measuring them by Dijkstra."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from algoworks.graphs import Graph, ListGraph


@dataclass(frozen=True)
class Edge:
    """An outgoing edge: where it leads and what it costs."""

    target: int
    weight: int


class WeightedGraph:
    """Directed graph with weighted edges, stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._lists: list[list[Edge]] = [[] for _ in range(vertex_count)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._lists):
                raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add an edge from ``source`` to ``target`` costing ``weight``."""
        self._check(source, target)
        self._lists[source].append(Edge(target, weight))

    def vertices_count(self) -> int:
        """Number of vertices."""
        return len(self._lists)

    def next_edges(self, vertex: int) -> list[Edge]:
        """Edges leaving ``vertex`` in the order they were added."""
        self._check(vertex)
        return list(self._lists[vertex])


def count_shortest_paths(graph: Graph, start: int, end: int) -> int:
    """Number of distinct shortest paths from ``start`` to ``end``.

    Returns 0 when either vertex is outside the graph or ``end`` is unreachable.
    """
    count = graph.vertices_count()
    if not (0 <= start < count and 0 <= end < count):
        return 0
    distances: list[int | None] = [None] * count
    paths = [0] * count
    distances[start] = 0
    paths[start] = 1
    queue = deque([start])
    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1  # type: ignore[operator]
        for neighbour in graph.next_vertices(current):
            if distances[neighbour] is None:
                distances[neighbour] = next_distance
                paths[neighbour] = paths[current]
                queue.append(neighbour)
            elif distances[neighbour] == next_distance:
                paths[neighbour] += paths[current]
    return paths[end]


def shortest_distance(graph: WeightedGraph, start: int, end: int) -> int | None:
    """Length of the cheapest path from ``start`` to ``end``.

    Returns None when either vertex is outside the graph or ``end`` is unreachable.
    """
    count = graph.vertices_count()
    if not (0 <= start < count and 0 <= end < count):
        return None
    distances: list[int | None] = [None] * count
    distances[start] = 0
    queue = [(0, start)]
    while queue:
        distance, vertex = heapq.heappop(queue)
        if distance > distances[vertex]:  # type: ignore[operator]
            continue
        for edge in graph.next_edges(vertex):
            candidate = distance + edge.weight
            known = distances[edge.target]
            if known is None or candidate < known:
                distances[edge.target] = candidate
                heapq.heappush(queue, (candidate, edge.target))
    return distances[end]


def _take(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("not enough numbers in input") from None


def solve_path_count(text: str) -> str:
    """Read an undirected graph and two vertices; print the number of shortest paths."""
    tokens = iter([int(token) for token in text.split()])
    vertex_count, edge_count = _take(tokens), _take(tokens)
    graph = ListGraph(vertex_count)
    for _ in range(edge_count):
        a, b = _take(tokens), _take(tokens)
        graph.add_edge(a, b)
        graph.add_edge(b, a)
    start, end = _take(tokens), _take(tokens)
    return f"{count_shortest_paths(graph, start, end)}\n"


def solve_dijkstra(text: str) -> str:
    """Read an undirected weighted graph and two vertices; print the distance or -1."""
    tokens = iter([int(token) for token in text.split()])
    vertex_count, edge_count = _take(tokens), _take(tokens)
    graph = WeightedGraph(vertex_count)
    for _ in range(edge_count):
        a, b, weight = _take(tokens), _take(tokens), _take(tokens)
        graph.add_edge(a, b, weight)
        graph.add_edge(b, a, weight)
    start, end = _take(tokens), _take(tokens)
    distance = shortest_distance(graph, start, end)
    return f"{-1 if distance is None else distance}\n"