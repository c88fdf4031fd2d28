"""
Boundary engine: points along edges where ownership changes.

Three kinds of points are derived:

- SITE: every site starts its own region.
- PATH_EQUAL_LENGTH: on an edge outside a branching vertex's shortest-path
  tree, the point where the two paths from that vertex (one through each
  endpoint) have equal length.
- MARKER_EQUAL_DISTANCE: where the distance sphere around a branching
  vertex, with the radius of its nearest site, crosses an edge reached via
  another branch of the vertex.

Only vertices with more than two incident edges are analysed for the last
two kinds.
"""

import math
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional

import structlog

from .entities import (
    BoundaryDirection,
    BoundaryKind,
    BoundaryPoint,
    Edge,
    Site,
    Vertex,
    clamp_fraction,
)
from .shortest_path_tree import ShortestPathTree, build_adjacency, build_shortest_path_tree

logger = structlog.get_logger()

VertexHook = Callable[[Vertex], None]


class SiteApproach(NamedTuple):
    """Nearest site seen from a tree root and the endpoint it is reached through."""

    site: Site
    distance: float
    via: Vertex


def site_boundary_point(site: Site) -> BoundaryPoint:
    return BoundaryPoint(edge=site.edge, t=site.t, kind=BoundaryKind.SITE, site=site)


def path_equal_length_points(
    tree: ShortestPathTree, edges: Iterable[Edge]
) -> Iterator[BoundaryPoint]:
    """Yield tie points on every reachable edge that is not a tree edge."""
    for edge in edges:
        start, end = edge.endpoints
        if not tree.is_reachable(start):
            continue
        if tree.parent(start) is end or tree.parent(end) is start:
            continue

        t = 0.5 + 0.5 * (tree.distance(end) - tree.distance(start)) / edge.length
        yield BoundaryPoint(
            edge=edge,
            t=clamp_fraction(t),
            kind=BoundaryKind.PATH_EQUAL_LENGTH,
            vertex=tree.root,
        )


def nearest_site(tree: ShortestPathTree, sites: Iterable[Site]) -> Optional[SiteApproach]:
    """
    Find the site closest to the tree root.

    A site is reached through one of its edge's endpoints; the to endpoint
    wins ties. The first site with the strictly smallest distance is kept.
    """
    closest: Optional[SiteApproach] = None
    closest_distance = math.inf

    for site in sites:
        start, end = site.edge.endpoints
        via_start = tree.distance(start) + site.distance_from_start
        via_end = tree.distance(end) + site.distance_from_end

        distance = min(via_start, via_end)
        if distance >= closest_distance:
            continue
        closest_distance = distance
        closest = SiteApproach(site, distance, start if via_start < via_end else end)

    return closest


def _on_other_branch(marker_branch: Optional[Vertex], cross_branch: Optional[Vertex]) -> bool:
    # A marker reached through the root itself is on a branch of its own.
    return marker_branch is None or cross_branch is not marker_branch


def _within_reach(tree: ShortestPathTree, vertex: Vertex, radius: float, length: float) -> bool:
    distance = tree.distance(vertex)
    return distance <= radius <= distance + length


def marker_equal_distance_points(
    tree: ShortestPathTree, edges: Iterable[Edge], approach: SiteApproach
) -> Iterator[BoundaryPoint]:
    """
    Yield the points at the nearest site's distance from the tree root.

    Only edges entered from a branch other than the one leading to the
    nearest site are considered; the site's own edge is skipped.
    """
    radius = approach.distance
    marker_branch = tree.first_on_path(approach.via)

    for edge in edges:
        if edge is approach.site.edge:
            continue

        start, end = edge.endpoints
        length = edge.length

        if (_within_reach(tree, start, radius, length) and tree.parent(start) is not end
                and _on_other_branch(marker_branch, tree.first_on_path(start))):
            yield BoundaryPoint(
                edge=edge,
                t=clamp_fraction((radius - tree.distance(start)) / length),
                kind=BoundaryKind.MARKER_EQUAL_DISTANCE,
                direction=BoundaryDirection.INCREASING,
                vertex=tree.root,
                site=approach.site,
            )

        if (_within_reach(tree, end, radius, length) and tree.parent(end) is not start
                and _on_other_branch(marker_branch, tree.first_on_path(end))):
            yield BoundaryPoint(
                edge=edge,
                t=clamp_fraction(1 - (radius - tree.distance(end)) / length),
                kind=BoundaryKind.MARKER_EQUAL_DISTANCE,
                direction=BoundaryDirection.DECREASING,
                vertex=tree.root,
                site=approach.site,
            )


def recompute_boundaries(
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    sites: Iterable[Site],
    vertex_hook: Optional[VertexHook] = None,
    enabled: bool = True,
) -> Dict[Edge, List[BoundaryPoint]]:
    """
    Derive every boundary point of the network.

    Args:
        vertices: All network vertices
        edges: All network edges
        sites: All placed sites
        vertex_hook: Called once per vertex before points are derived; may
            read the vertex's current owner
        enabled: When False nothing is computed and every edge gets no points

    Returns:
        Mapping of each edge to its boundary points, sorted by t
    """
    vertices = list(vertices)
    edges = list(edges)
    sites = list(sites)

    points: Dict[Edge, List[BoundaryPoint]] = {edge: [] for edge in edges}
    if not enabled or not vertices:
        return points

    logger.info("Recomputing boundaries", vertices=len(vertices),
                edges=len(edges), sites=len(sites))

    if vertex_hook is not None:
        for vertex in vertices:
            vertex_hook(vertex)

    for site in sites:
        points[site.edge].append(site_boundary_point(site))

    adjacency = build_adjacency(vertices, edges)
    branching = [vertex for vertex in vertices if len(adjacency[vertex]) > 2]

    for vertex in branching:
        tree = build_shortest_path_tree(vertex, adjacency)

        for point in path_equal_length_points(tree, edges):
            points[point.edge].append(point)

        approach = nearest_site(tree, sites)
        if approach is None:
            logger.debug("No reachable site from branching vertex", vertex=vertex.label)
            continue

        for point in marker_equal_distance_points(tree, edges, approach):
            points[point.edge].append(point)

    for edge_points in points.values():
        edge_points.sort(key=lambda point: point.t)

    logger.info("Boundaries recomputed", branching_vertices=len(branching),
                boundary_points=sum(len(p) for p in points.values()))
    return points
