"""Directed graphs on vertices 0..n-1 in four storage layouts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

G = TypeVar("G", bound="Graph")


class Graph(ABC):
    """Directed graph with a fixed number of vertices."""

    @abstractmethod
    def __init__(self, vertex_count: int) -> None:
        """Create a graph with ``vertex_count`` vertices and no edges."""

    @abstractmethod
    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""

    @abstractmethod
    def vertices_count(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def next_vertices(self, vertex: int) -> list[int]:
        """Targets of the edges leaving ``vertex``."""

    @abstractmethod
    def prev_vertices(self, vertex: int) -> list[int]:
        """Sources of the edges entering ``vertex``."""

    @classmethod
    def from_graph(cls: type[G], graph: Graph) -> G:
        """A graph of this layout with the same vertices and edges as ``graph``."""
        copy = cls(graph.vertices_count())
        for source in range(graph.vertices_count()):
            for target in graph.next_vertices(source):
                copy.add_edge(source, target)
        return copy

    def _check(self, *vertices: int) -> None:
        count = self.vertices_count()
        for vertex in vertices:
            if not 0 <= vertex < count:
                raise IndexError(f"vertex {vertex} is out of range")

    @staticmethod
    def _check_count(vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")


class ListGraph(Graph):
    """Graph stored as adjacency lists; parallel edges are kept."""

    def __init__(self, vertex_count: int) -> None:
        self._check_count(vertex_count)
        self._lists: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, source: int, target: int) -> None:
        self._check(source, target)
        self._lists[source].append(target)

    def vertices_count(self) -> int:
        return len(self._lists)

    def next_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return list(self._lists[vertex])

    def prev_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [source for source, targets in enumerate(self._lists) if vertex in targets]


class MatrixGraph(Graph):
    """Graph stored as an adjacency matrix; parallel edges collapse."""

    def __init__(self, vertex_count: int) -> None:
        self._check_count(vertex_count)
        self._matrix = [[False] * vertex_count for _ in range(vertex_count)]

    def add_edge(self, source: int, target: int) -> None:
        self._check(source, target)
        self._matrix[source][target] = True

    def vertices_count(self) -> int:
        return len(self._matrix)

    def next_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [target for target, linked in enumerate(self._matrix[vertex]) if linked]

    def prev_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [source for source, row in enumerate(self._matrix) if row[vertex]]


class SetGraph(Graph):
    """Graph stored as adjacency sets; parallel edges collapse."""

    def __init__(self, vertex_count: int) -> None:
        self._check_count(vertex_count)
        self._sets: list[set[int]] = [set() for _ in range(vertex_count)]

    def add_edge(self, source: int, target: int) -> None:
        self._check(source, target)
        self._sets[source].add(target)

    def vertices_count(self) -> int:
        return len(self._sets)

    def next_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return sorted(self._sets[vertex])

    def prev_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [source for source, targets in enumerate(self._sets) if vertex in targets]


class ArcGraph(Graph):
    """Graph stored as a list of edges in insertion order."""

    def __init__(self, vertex_count: int) -> None:
        self._check_count(vertex_count)
        self._vertex_count = vertex_count
        self._edges: list[tuple[int, int]] = []

    def add_edge(self, source: int, target: int) -> None:
        self._check(source, target)
        self._edges.append((source, target))

    def vertices_count(self) -> int:
        return self._vertex_count

    def next_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [target for source, target in self._edges if source == vertex]

    def prev_vertices(self, vertex: int) -> list[int]:
        self._check(vertex)
        return [source for source, target in self._edges if target == vertex]