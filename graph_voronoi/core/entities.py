"""
Network entities and derived ownership records.

Vertices, edges and sites compare and hash by identity so they can key the
per-pass index maps built by the engines. Owners and boundary points are
immutable records produced by a recomputation pass.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class BoundaryKind(str, Enum):
    """Why an ownership boundary exists at a point."""

    SITE = "site"
    PATH_EQUAL_LENGTH = "path_equal_length"
    MARKER_EQUAL_DISTANCE = "marker_equal_distance"


class BoundaryDirection(str, Enum):
    """Side of a marker-distance crossing, relative to the edge's t axis."""

    NONE = "none"
    INCREASING = "increasing"
    DECREASING = "decreasing"


@dataclass(frozen=True)
class Player:
    """A competitor owning sites."""

    name: str
    color: str = "#808080"


@dataclass(eq=False)
class Vertex:
    """Network vertex.

    The position is only used to derive default edge lengths; ownership is
    stored here by the host after each pass.
    """

    x: float
    y: float
    label: Optional[str] = None
    owner: Optional["VertexOwner"] = field(default=None, repr=False)

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def distance_to(self, other: "Vertex") -> float:
        """Euclidean distance between vertex positions."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(eq=False)
class Edge:
    """Undirected weighted edge between two vertices.

    When ``fixed_length`` is None the length follows the Euclidean distance
    between the endpoints.
    """

    from_vertex: Vertex
    to_vertex: Vertex
    fixed_length: Optional[float] = None
    sites: List["Site"] = field(default_factory=list, repr=False)
    boundary_points: List["BoundaryPoint"] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.length > 0:
            raise ValueError(f"Edge length must be strictly positive, got {self.length}")

    @property
    def length(self) -> float:
        if self.fixed_length is not None:
            return self.fixed_length
        return self.from_vertex.distance_to(self.to_vertex)

    @property
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self.from_vertex, self.to_vertex

    def touches(self, vertex: Vertex) -> bool:
        return vertex is self.from_vertex or vertex is self.to_vertex

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to ``vertex``."""
        if vertex is self.from_vertex:
            return self.to_vertex
        if vertex is self.to_vertex:
            return self.from_vertex
        raise ValueError("Vertex is not an endpoint of this edge")


@dataclass(eq=False)
class Site:
    """A player's marker placed at fraction ``t`` along its host edge.

    ``t`` is validated on every assignment. Sites held by a Network should be
    moved with Network.move_site(), which also keeps ``edge.sites`` ordered
    and recomputes ownership.
    """

    player: Player
    edge: Edge
    t: float

    def __setattr__(self, name, value):
        if name == "t":
            validate_fraction(value)
        super().__setattr__(name, value)

    @property
    def distance_from_start(self) -> float:
        """Distance to the edge's from endpoint."""
        return self.t * self.edge.length

    @property
    def distance_from_end(self) -> float:
        """Distance to the edge's to endpoint."""
        return (1 - self.t) * self.edge.length


@dataclass(frozen=True)
class VertexOwner:
    """Nearest site of a vertex and the shortest-path distance to it."""

    site: Site
    distance: float

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError(f"Owner distance must be non-negative, got {self.distance}")

    @property
    def player(self) -> Player:
        return self.site.player


@dataclass(frozen=True)
class BoundaryPoint:
    """A point along an edge where network ownership changes.

    ``vertex`` is the branching vertex whose shortest-path tree produced the
    point and ``site`` the site it relates to; either may be None.
    """

    edge: Edge
    t: float
    kind: BoundaryKind
    direction: BoundaryDirection = BoundaryDirection.NONE
    vertex: Optional[Vertex] = None
    site: Optional[Site] = None

    def __post_init__(self):
        validate_fraction(self.t)

    @property
    def distance_from_start(self) -> float:
        return self.t * self.edge.length


def validate_fraction(t: float) -> float:
    """Raise ValueError unless ``t`` lies in [0, 1]."""
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"Edge fraction must lie in [0, 1], got {t}")
    return t


def clamp_fraction(t: float) -> float:
    """Pull a computed fraction back into [0, 1] after rounding drift."""
    return min(1.0, max(0.0, t))
