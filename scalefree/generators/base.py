"""Abstract base class for all graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

import networkx as nx

from scalefree.sinks import GraphSink, IntegerVertexFactory, NetworkXSink, VertexFactory


class BaseGenerator(ABC):
    """
    Base class for graph generators.

    A generator is configured at construction and then writes into any
    :class:`~scalefree.sinks.GraphSink` via :meth:`generate`.  The helpers
    below run a generator into a fresh networkx graph and convert the
    result to the standardised graph dict::

        {
            "nodes": [0, 1, 2, ...],
            "edges": [
                {"source": 1, "target": 0, "weight": 1.0},
                ...
            ],
            "metadata": {
                "generator": "scale_free",
                "size": 100,
                "params": {"seed": 42, ...},
            }
        }
    """

    name: str = "base"
    size: int = 0

    @abstractmethod
    def generate(
        self,
        sink: GraphSink,
        vertex_factory: VertexFactory,
        result_map: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Populate *sink* with a generated graph.

        Parameters
        ----------
        sink : GraphSink
            Receives the new vertices and edges.  Existing content is left
            alone and never connected to the generated subgraph.
        vertex_factory : VertexFactory
            Called once per generated vertex.
        result_map : dict | None
            Optional output channel for named vertices; generators may
            ignore it.
        """

    @property
    def params(self) -> dict[str, Any]:
        """Generator-specific parameters recorded in instance metadata."""
        return {}

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    def generate_graph(self, directed: bool = True) -> nx.Graph:
        """Run the generator into a new networkx graph with integer vertices."""
        sink = NetworkXSink(directed=directed)
        self.generate(sink, IntegerVertexFactory())
        return sink.graph

    def generate_instance(self, directed: bool = True) -> dict:
        """Run the generator and return the standard graph dict."""
        sink = NetworkXSink(directed=directed)
        self.generate(sink, IntegerVertexFactory())
        params = {**self.params, "directed": directed}
        return self._nx_to_dict(
            sink.graph, self.name, self.size, params, edges=sink.added_edges,
        )

    @staticmethod
    def _nx_to_dict(
        G,  # noqa: N803  (networkx convention)
        generator_name: str,
        size: int,
        params: dict[str, Any],
        edges: Optional[Iterable[tuple]] = None,
    ) -> dict:
        """
        Convert a ``networkx`` graph to the standard dict format.

        *edges* fixes the edge order (e.g. creation order); the graph's own
        iteration order is used otherwise.
        """
        if edges is None:
            edges = G.edges()
        edge_dicts = []
        for u, v in edges:
            edge_dicts.append({
                "source": u,
                "target": v,
                "weight": G[u][v].get("weight", 1.0),
            })
        return {
            "nodes": list(G.nodes()),
            "edges": edge_dicts,
            "metadata": {
                "generator": generator_name,
                "size": size,
                "params": params,
            },
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} size={getattr(self, 'size', None)}>"
