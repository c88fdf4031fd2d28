"""
Distance engine: nearest-site ownership for every vertex.

Sites are added to the network as virtual nodes joined to the two endpoints
of their host edge, and all-pairs shortest paths are relaxed over the
combined {sites, vertices} matrix. Sites sharing an edge are not linked to
each other directly; they only meet through the edge endpoints.
"""

from typing import Dict, Iterable, Optional, Tuple

import numpy as np
import structlog

from .entities import Edge, Site, Vertex, VertexOwner

logger = structlog.get_logger()


def _connect(matrix: np.ndarray, i: int, j: int, weight: float) -> None:
    """Set a symmetric link, keeping the shorter one for parallel links."""
    if weight < matrix[i, j]:
        matrix[i, j] = matrix[j, i] = weight


def build_distance_matrix(
    vertices: Iterable[Vertex], edges: Iterable[Edge], sites: Iterable[Site]
) -> Tuple[np.ndarray, Dict[Site, int], Dict[Vertex, int]]:
    """
    Build the direct-link matrix over sites and vertices.

    Sites take indices [0, |M|) and vertices [|M|, n). The index maps are
    rebuilt on every call.

    Returns:
        Tuple of (matrix, site_index, vertex_index)
    """
    site_index = {site: i for i, site in enumerate(sites)}
    offset = len(site_index)
    vertex_index = {vertex: offset + i for i, vertex in enumerate(vertices)}

    n = offset + len(vertex_index)
    matrix = np.full((n, n), np.inf)
    np.fill_diagonal(matrix, 0.0)

    for edge in edges:
        _connect(matrix, vertex_index[edge.from_vertex],
                 vertex_index[edge.to_vertex], edge.length)

    for site, m in site_index.items():
        edge = site.edge
        _connect(matrix, vertex_index[edge.from_vertex], m, site.distance_from_start)
        _connect(matrix, vertex_index[edge.to_vertex], m, site.distance_from_end)

    return matrix, site_index, vertex_index


def all_pairs_shortest_paths(matrix: np.ndarray) -> np.ndarray:
    """
    Floyd-Warshall relaxation over a non-negative link matrix.

    Each pivot relaxes the whole matrix at once; row and column k do not
    change while k is the pivot. Disconnected pairs stay at +inf.
    """
    distances = matrix.copy()
    for k in range(len(distances)):
        np.minimum(distances,
                   distances[:, k, np.newaxis] + distances[np.newaxis, k, :],
                   out=distances)
    return distances


def recompute_distances(
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    sites: Iterable[Site],
    enabled: bool = True,
) -> Dict[Vertex, Optional[VertexOwner]]:
    """
    Assign every vertex its nearest site.

    Args:
        vertices: All network vertices
        edges: All network edges
        sites: All placed sites
        enabled: When False nothing is computed and every owner is unset

    Returns:
        Mapping of each vertex to its VertexOwner, or None when no site is
        reachable
    """
    vertices = list(vertices)
    edges = list(edges)
    sites = list(sites)

    owners: Dict[Vertex, Optional[VertexOwner]] = {vertex: None for vertex in vertices}
    if not enabled or not sites or not vertices:
        return owners

    logger.info("Recomputing distances", vertices=len(vertices),
                edges=len(edges), sites=len(sites))

    matrix, site_index, vertex_index = build_distance_matrix(vertices, edges, sites)
    distances = all_pairs_shortest_paths(matrix)

    # Rows: vertices, columns: sites
    offset = len(site_index)
    site_block = distances[offset:, :offset]
    nearest = np.argmin(site_block, axis=1)

    for vertex, row in vertex_index.items():
        column = int(nearest[row - offset])
        distance = float(site_block[row - offset, column])
        if np.isinf(distance):
            continue
        owners[vertex] = VertexOwner(site=sites[column], distance=distance)

    logger.info("Distances recomputed",
                owned=sum(1 for owner in owners.values() if owner is not None))
    return owners
