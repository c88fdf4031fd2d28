"""
Single-source shortest-path trees over the vertex-only network.

Sites play no part here: edges are weighted by their full length and the
tree is grown from one vertex with Dijkstra's algorithm on a decrease-key
heap.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from .entities import Edge, Vertex
from .priority_queue import PriorityQueue

logger = structlog.get_logger()

Adjacency = Dict[Vertex, List[Tuple[Vertex, Edge]]]


def build_adjacency(vertices: Iterable[Vertex], edges: Iterable[Edge]) -> Adjacency:
    """
    Build per-vertex neighbour lists.

    Every vertex gets an entry, isolated ones included. The length of a
    vertex's list is its degree.
    """
    adjacency: Adjacency = {vertex: [] for vertex in vertices}
    for edge in edges:
        adjacency[edge.from_vertex].append((edge.to_vertex, edge))
        adjacency[edge.to_vertex].append((edge.from_vertex, edge))
    return adjacency


@dataclass
class ShortestPathTree:
    """Distances and parent pointers from a fixed root vertex."""

    root: Vertex
    distances: Dict[Vertex, float]
    parents: Dict[Vertex, Optional[Vertex]]

    def distance(self, vertex: Vertex) -> float:
        return self.distances.get(vertex, math.inf)

    def parent(self, vertex: Vertex) -> Optional[Vertex]:
        return self.parents.get(vertex)

    def is_reachable(self, vertex: Vertex) -> bool:
        return self.distance(vertex) < math.inf

    def first_on_path(self, vertex: Vertex) -> Optional[Vertex]:
        """
        Return the child of the root that starts the tree path to ``vertex``.

        The root itself lies on no branch and yields None.
        """
        if vertex is self.root:
            return None
        if not self.is_reachable(vertex):
            raise ValueError("Vertex is not reachable from the tree root")

        node = vertex
        while self.parents[node] is not self.root:
            node = self.parents[node]
        return node

    def path_to(self, vertex: Vertex) -> List[Vertex]:
        """Vertices on the tree path from the root to ``vertex``, inclusive."""
        if not self.is_reachable(vertex):
            raise ValueError("Vertex is not reachable from the tree root")

        path = [vertex]
        while path[-1] is not self.root:
            path.append(self.parents[path[-1]])
        path.reverse()
        return path


def build_shortest_path_tree(root: Vertex, adjacency: Adjacency) -> ShortestPathTree:
    """
    Grow a shortest-path tree from ``root``.

    Args:
        root: Source vertex
        adjacency: Neighbour lists from build_adjacency()

    Returns:
        ShortestPathTree; unreachable vertices keep an infinite distance and
        no parent
    """
    distances = {vertex: math.inf for vertex in adjacency}
    parents: Dict[Vertex, Optional[Vertex]] = {vertex: None for vertex in adjacency}
    distances[root] = 0.0

    queue = PriorityQueue()
    queue.push(root, 0.0)

    while queue:
        current, current_distance = queue.pop()

        for neighbor, edge in adjacency[current]:
            candidate = current_distance + edge.length
            if distances[neighbor] <= candidate:
                continue

            distances[neighbor] = candidate
            parents[neighbor] = current

            if neighbor in queue:
                queue.decrease_priority(neighbor, candidate)
            else:
                queue.push(neighbor, candidate)

    logger.debug("Shortest-path tree built", root=root.label,
                 reachable=sum(1 for d in distances.values() if d < math.inf))

    return ShortestPathTree(root=root, distances=distances, parents=parents)
