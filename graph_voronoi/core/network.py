"""
Mutable network container.

The Network owns players, vertices, edges and sites. Every mutation ends
with exactly one call to recompute(), which runs the distance engine and then
the boundary engine over the whole graph, stores the results on the
entities and only then notifies listeners.
"""

from operator import attrgetter
from typing import Callable, List, Optional, Sequence, Tuple

import structlog

from ..config import settings
from .boundaries import VertexHook, recompute_boundaries
from .distances import recompute_distances
from .entities import BoundaryPoint, Edge, Player, Site, Vertex, VertexOwner, validate_fraction

logger = structlog.get_logger()

Listener = Callable[["Network"], None]


class Network:
    """Weighted network with player sites and derived ownership."""

    def __init__(
        self,
        players: Sequence[Player],
        calculations_disabled: Optional[bool] = None,
        vertex_hook: Optional[VertexHook] = None,
    ):
        """
        Initialize an empty network.

        Args:
            players: Players allowed to place sites
            calculations_disabled: Start with computation switched off;
                defaults to the inverse of settings.calculations_enabled
            vertex_hook: Per-vertex callback run during every boundary pass
        """
        self._players: Tuple[Player, ...] = tuple(players)
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._sites: List[Site] = []
        self._listeners: List[Listener] = []
        self._vertex_hook = vertex_hook

        if calculations_disabled is None:
            calculations_disabled = not settings.calculations_enabled
        self._calculations_disabled = calculations_disabled

    # Read access

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def sites(self) -> Tuple[Site, ...]:
        return tuple(self._sites)

    def degree(self, vertex: Vertex) -> int:
        """Number of incident edges; a loop counts twice."""
        self._require(self._vertices, vertex, "Vertex")
        return sum((edge.from_vertex is vertex) + (edge.to_vertex is vertex)
                   for edge in self._edges)

    def owner_of(self, vertex: Vertex) -> Optional[VertexOwner]:
        self._require(self._vertices, vertex, "Vertex")
        return vertex.owner

    def boundary_points(self, edge: Edge) -> List[BoundaryPoint]:
        self._require(self._edges, edge, "Edge")
        return list(edge.boundary_points)

    # Calculation toggle

    @property
    def calculations_disabled(self) -> bool:
        return self._calculations_disabled

    @calculations_disabled.setter
    def calculations_disabled(self, value: bool) -> None:
        self._calculations_disabled = value
        self.recompute()

    # Listeners

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every completed recomputation."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # Vertices

    def add_vertex(self, x: float, y: float, label: Optional[str] = None) -> Vertex:
        vertex = Vertex(x=x, y=y, label=label)
        self._vertices.append(vertex)
        self.recompute()
        return vertex

    def move_vertex(self, vertex: Vertex, x: float, y: float) -> None:
        """Move a vertex; edges with derived lengths follow the new position."""
        self._require(self._vertices, vertex, "Vertex")

        moved = Vertex(x=x, y=y)
        for edge in self._edges:
            if edge.fixed_length is not None or not edge.touches(vertex):
                continue
            if not moved.distance_to(edge.other(vertex)) > 0:
                raise ValueError("Move would give an incident edge zero length")

        vertex.x = x
        vertex.y = y
        self.recompute()

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex together with its incident edges and their sites."""
        self._require(self._vertices, vertex, "Vertex")

        incident = [edge for edge in self._edges if edge.touches(vertex)]
        self._sites = [site for site in self._sites
                       if not any(site.edge is edge for edge in incident)]
        self._edges = [edge for edge in self._edges if not edge.touches(vertex)]
        for edge in incident:
            edge.sites.clear()
            edge.boundary_points = []
        self._vertices.remove(vertex)
        vertex.owner = None

        self.recompute()

    # Edges

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex,
                 length: Optional[float] = None) -> Edge:
        """
        Connect two vertices.

        Args:
            from_vertex: Endpoint at t = 0
            to_vertex: Endpoint at t = 1
            length: Explicit weight; defaults to the Euclidean distance

        Raises:
            ValueError: On unknown endpoints or a non-positive length
        """
        self._require(self._vertices, from_vertex, "Vertex")
        self._require(self._vertices, to_vertex, "Vertex")

        edge = Edge(from_vertex=from_vertex, to_vertex=to_vertex, fixed_length=length)
        self._edges.append(edge)
        self.recompute()
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """Remove an edge and every site placed on it."""
        self._require(self._edges, edge, "Edge")

        self._sites = [site for site in self._sites if site.edge is not edge]
        self._edges.remove(edge)
        edge.sites.clear()
        edge.boundary_points = []

        self.recompute()

    # Sites

    def add_site(self, player: Player, edge: Edge, t: float) -> Site:
        self._require(self._players, player, "Player")
        self._require(self._edges, edge, "Edge")

        site = Site(player=player, edge=edge, t=t)
        self._sites.append(site)
        edge.sites.append(site)
        edge.sites.sort(key=attrgetter("t"))

        self.recompute()
        return site

    def move_site(self, site: Site, t: float) -> None:
        self._require(self._sites, site, "Site")
        site.t = validate_fraction(t)
        site.edge.sites.sort(key=attrgetter("t"))
        self.recompute()

    def remove_site(self, site: Site) -> None:
        self._require(self._sites, site, "Site")
        self._sites.remove(site)
        site.edge.sites.remove(site)
        self.recompute()

    # Recomputation

    def recompute(self) -> None:
        """Rebuild owners and boundary points, then notify listeners."""
        enabled = not self._calculations_disabled

        owners = recompute_distances(self._vertices, self._edges, self._sites, enabled=enabled)
        for vertex, owner in owners.items():
            vertex.owner = owner

        boundaries = recompute_boundaries(self._vertices, self._edges, self._sites,
                                          vertex_hook=self._vertex_hook, enabled=enabled)
        for edge, points in boundaries.items():
            edge.boundary_points = points

        logger.debug("Network recomputed", enabled=enabled, listeners=len(self._listeners))

        for listener in list(self._listeners):
            listener(self)

    @staticmethod
    def _require(collection, item, kind: str) -> None:
        if not any(member is item for member in collection):
            raise ValueError(f"{kind} is not part of this network")
