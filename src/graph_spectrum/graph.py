"""
Graph value object and Laplacian producer.

A small index-based graph: nodes are 0..n-1, edges are unweighted. It
builds the adjacency, degree and Laplacian matrices consumed by the
eigenvalue calculator.

Directed graphs use out-degree, so their Laplacian is generally not
symmetric; the calculator accepts it but warns that the spectrum is
approximate.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Optional, cast

import numpy as np

from .types import Link, LinkLike
from .validation import InvalidLinkError, ValidationError, validate_link_indices


class Graph:
    """
    Index-based graph that produces its Laplacian matrix.

    Self-loops and duplicate edges are ignored. In an undirected graph
    (u, v) and (v, u) are the same edge.

    Example:
        graph = Graph(3, links=[(0, 1), (1, 2), (2, 0)])
        graph.laplacian()
        # [[ 2, -1, -1],
        #  [-1,  2, -1],
        #  [-1, -1,  2]]
    """

    def __init__(
        self,
        n_nodes: int = 0,
        links: Optional[Iterable[LinkLike]] = None,
        directed: bool = False,
    ) -> None:
        """
        Initialize graph.

        Args:
            n_nodes: Number of nodes
            links: Links as Link objects, (source, target) pairs or dicts
            directed: Whether edges are one-way

        Raises:
            ValidationError: If n_nodes is negative
            InvalidLinkError: If a link references a missing node
        """
        if n_nodes < 0:
            raise ValidationError(f"n_nodes must be >= 0, got {n_nodes}")
        self._n_nodes: int = int(n_nodes)
        self._directed: bool = bool(directed)
        self._links: list[Link] = []

        if links is not None:
            links = list(links)
            validate_link_indices(links, self._n_nodes, strict=True)
            for link in links:
                source, target = _endpoints(link)
                self.add_edge(source, target)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def n_nodes(self) -> int:
        """Get the number of nodes."""
        return self._n_nodes

    @property
    def n_edges(self) -> int:
        """Get the number of edges under the current direction setting."""
        return len(self._distinct_links())

    @property
    def links(self) -> list[Link]:
        """Get the edge list; reciprocal pairs count once when undirected."""
        return self._distinct_links()

    @property
    def directed(self) -> bool:
        """Get whether the graph is directed."""
        return self._directed

    @directed.setter
    def directed(self, value: bool) -> None:
        """
        Switch between directed and undirected interpretation of the edges.

        The stored edges are kept as added, so a reciprocal pair merged by
        switching to undirected reappears when switching back.
        """
        self._directed = bool(value)

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_node(self) -> int:
        """Add an isolated node and return its index."""
        self._n_nodes += 1
        return self._n_nodes - 1

    def add_edge(self, source: int, target: int) -> bool:
        """
        Add an edge.

        Returns:
            True if the edge was added, False for a self-loop or duplicate

        Raises:
            InvalidLinkError: If an endpoint is out of bounds
        """
        validate_link_indices([(source, target)], self._n_nodes, strict=True)
        if source == target:
            return False

        link = Link(int(source), int(target))
        if self.has_edge(link.source, link.target):
            return False

        self._links.append(link)
        return True

    def has_edge(self, source: int, target: int) -> bool:
        """Check whether an edge exists (either direction when undirected)."""
        probe = Link(source, target)
        return any(_same_edge(probe, link, self._directed) for link in self._links)

    def remove_edge(self, source: int, target: int) -> bool:
        """Remove an edge (both stored directions when undirected); return False if absent."""
        probe = Link(source, target)
        remaining = [link for link in self._links if not _same_edge(probe, link, self._directed)]
        removed = len(remaining) != len(self._links)
        self._links = remaining
        return removed

    def remove_node(self, index: int) -> None:
        """
        Remove a node and its edges; higher indices shift down by one.

        Raises:
            InvalidLinkError: If the index is out of bounds
        """
        if index < 0 or index >= self._n_nodes:
            raise InvalidLinkError(f"Node index {index} out of bounds [0, {self._n_nodes})")

        remaining: list[Link] = []
        for link in self._links:
            if link.source == index or link.target == index:
                continue
            source = link.source - 1 if link.source > index else link.source
            target = link.target - 1 if link.target > index else link.target
            remaining.append(Link(source, target))

        self._links = remaining
        self._n_nodes -= 1

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._n_nodes = 0
        self._links = []

    # -------------------------------------------------------------------------
    # Matrices
    # -------------------------------------------------------------------------

    def adjacency_matrix(self) -> np.ndarray:
        """0/1 adjacency matrix (symmetric when undirected)."""
        n = self._n_nodes
        A = np.zeros((n, n))

        for link in self._links:
            A[link.source, link.target] = 1.0
            if not self._directed:
                A[link.target, link.source] = 1.0  # Symmetric for undirected

        return cast(np.ndarray, A)

    def degrees(self) -> np.ndarray:
        """Row sums of the adjacency matrix (out-degree when directed)."""
        return cast(np.ndarray, np.sum(self.adjacency_matrix(), axis=1))

    def degree_matrix(self) -> np.ndarray:
        """Diagonal degree matrix."""
        return cast(np.ndarray, np.diag(self.degrees()))

    def laplacian(self) -> np.ndarray:
        """Graph Laplacian L = D - A."""
        A = self.adjacency_matrix()
        D = np.diag(np.sum(A, axis=1))
        return cast(np.ndarray, D - A)

    # -------------------------------------------------------------------------
    # Connectivity
    # -------------------------------------------------------------------------

    def connected_components(self) -> list[list[int]]:
        """
        Find connected components (weak components when directed).

        Returns:
            List of components, each a sorted list of node indices, in order
            of their smallest node.
        """
        n = self._n_nodes
        adj: list[list[int]] = [[] for _ in range(n)]
        for link in self._links:
            adj[link.source].append(link.target)
            adj[link.target].append(link.source)  # Always add reverse for connectivity

        visited = [False] * n
        components: list[list[int]] = []

        for start in range(n):
            if visited[start]:
                continue

            # BFS to find all nodes in this component
            component: list[int] = []
            queue: deque[int] = deque([start])
            visited[start] = True

            while queue:
                node = queue.popleft()
                component.append(node)
                for neighbor in adj[node]:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        queue.append(neighbor)

            components.append(sorted(component))

        return components

    def is_connected(self) -> bool:
        """Check whether the graph has at most one component."""
        return len(self.connected_components()) <= 1

    def is_isolated(self, index: int) -> bool:
        """Check whether a node has no incident edges."""
        return not any(link.source == index or link.target == index for link in self._links)

    def _distinct_links(self) -> list[Link]:
        if self._directed:
            return list(self._links)
        kept: list[Link] = []
        for link in self._links:
            if not any(_same_edge(link, other, directed=False) for other in kept):
                kept.append(link)
        return kept

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph(n_nodes={self._n_nodes}, n_edges={self.n_edges}, {kind})"


def _endpoints(link: Any) -> tuple[int, int]:
    """Extract (source, target) from a Link, pair or dict."""
    if isinstance(link, dict):
        return int(link["source"]), int(link["target"])
    if isinstance(link, (tuple, list)):
        return int(link[0]), int(link[1])
    return int(link.source), int(link.target)


def _same_edge(a: Link, b: Link, directed: bool) -> bool:
    if a.source == b.source and a.target == b.target:
        return True
    return not directed and a.source == b.target and a.target == b.source


__all__ = ["Graph"]
