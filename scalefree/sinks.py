"""
Capabilities the generators write through, plus networkx-backed defaults.

A generator only ever needs two narrow operations: a *sink* that accepts
vertices and edges, and a *vertex factory* that hands out fresh vertex
identities.  Any graph representation can be plugged in by implementing
these two protocols.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol, runtime_checkable

import networkx as nx


@runtime_checkable
class GraphSink(Protocol):
    """Mutable graph receiver."""

    def add_vertex(self, vertex: Any) -> None:
        ...

    def add_edge(self, source: Any, target: Any) -> Any:
        ...


@runtime_checkable
class VertexFactory(Protocol):
    """Produces a fresh, previously unused vertex identity on every call."""

    def create_vertex(self) -> Any:
        ...


class IntegerVertexFactory:
    """Hands out consecutive integers starting at *start*."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def create_vertex(self) -> int:
        vertex = self._next
        self._next += 1
        return vertex


class NetworkXSink:
    """
    Sink writing into a ``networkx`` graph.

    Parameters
    ----------
    graph : nx.Graph | None
        Graph to populate.  A new ``DiGraph`` (or ``Graph`` when
        *directed* is False) is created when omitted.  An undirected graph
        keeps the edges but drops their direction.
    directed : bool, default True
        Only consulted when *graph* is None.
    strict : bool, default True
        Reject duplicate vertices, duplicate edges, self-loops and edges
        whose endpoints were never added, instead of letting networkx
        silently merge or create them.
    """

    def __init__(
        self,
        graph: Optional[nx.Graph] = None,
        directed: bool = True,
        strict: bool = True,
    ) -> None:
        if graph is None:
            graph = nx.DiGraph() if directed else nx.Graph()
        self.graph = graph
        self.strict = strict
        self.added_edges: list[tuple[Hashable, Hashable]] = []

    @property
    def directed(self) -> bool:
        return self.graph.is_directed()

    def add_vertex(self, vertex: Hashable) -> None:
        if self.strict and vertex in self.graph:
            raise ValueError(f"Vertex {vertex!r} is already in the graph")
        self.graph.add_node(vertex)

    def add_edge(self, source: Hashable, target: Hashable) -> tuple[Hashable, Hashable]:
        if self.strict:
            if source == target:
                raise ValueError(f"Self-loop on {source!r} rejected")
            for endpoint in (source, target):
                if endpoint not in self.graph:
                    raise ValueError(f"Unknown vertex {endpoint!r}")
            if self.graph.has_edge(source, target):
                raise ValueError(f"Edge ({source!r}, {target!r}) already exists")
        self.graph.add_edge(source, target)
        self.added_edges.append((source, target))
        return source, target

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} nodes={self.graph.number_of_nodes()} "
            f"edges={self.graph.number_of_edges()}>"
        )
