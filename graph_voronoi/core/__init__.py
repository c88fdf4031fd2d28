"""
Core ownership engines and network model.
"""

from .entities import (
    BoundaryDirection, BoundaryKind, BoundaryPoint, Edge, Player, Site, Vertex, VertexOwner
)
from .distances import recompute_distances
from .boundaries import recompute_boundaries
from .network import Network

__all__ = ['BoundaryDirection', 'BoundaryKind', 'BoundaryPoint', 'Edge', 'Player', 'Site',
           'Vertex', 'VertexOwner', 'recompute_distances', 'recompute_boundaries', 'Network']
