"""Shared network builders for engine tests."""

from types import SimpleNamespace

import numpy as np
import pytest

from graph_voronoi.core.entities import Edge, Player, Site, Vertex


@pytest.fixture
def players():
    return Player("P1", "#9e2a2b"), Player("P2", "#4682b4")


@pytest.fixture
def path_graph(players):
    """A-B-C with lengths 3 and 4, one P1 site halfway along A-B."""
    a, b, c = Vertex(0, 0, "A"), Vertex(3, 0, "B"), Vertex(7, 0, "C")
    ab = Edge(a, b, 3.0)
    bc = Edge(b, c, 4.0)
    site = Site(players[0], ab, 0.5)
    return SimpleNamespace(vertices=[a, b, c], edges=[ab, bc], sites=[site],
                           a=a, b=b, c=c, ab=ab, bc=bc, site=site)


@pytest.fixture
def star_graph(players):
    """Centre v with unit edges to X, Y, Z; P1 at 0.9 on v-X, P2 at 0.1 on v-Y."""
    v = Vertex(0, 0, "v")
    x, y, z = Vertex(1, 0, "X"), Vertex(0, 1, "Y"), Vertex(-1, 0, "Z")
    vx, vy, vz = Edge(v, x, 1.0), Edge(v, y, 1.0), Edge(v, z, 1.0)
    p1 = Site(players[0], vx, 0.9)
    p2 = Site(players[1], vy, 0.1)
    return SimpleNamespace(vertices=[v, x, y, z], edges=[vx, vy, vz], sites=[p1, p2],
                           v=v, x=x, y=y, z=z, vx=vx, vy=vy, vz=vz, p1=p1, p2=p2)


@pytest.fixture
def triangle_graph():
    """Branching A with pendant D and a triangle A-B-C; B-C is not a tree edge from A."""
    a, b, c, d = Vertex(0, 0, "A"), Vertex(1, 0, "B"), Vertex(0, 2, "C"), Vertex(-1, 0, "D")
    ab, ac, bc, ad = Edge(a, b, 1.0), Edge(a, c, 2.0), Edge(b, c, 2.0), Edge(a, d, 1.0)
    return SimpleNamespace(vertices=[a, b, c, d], edges=[ab, ac, bc, ad], sites=[],
                           a=a, b=b, c=c, d=d, ab=ab, ac=ac, bc=bc, ad=ad)


def random_network(seed, players=(Player("R1"), Player("R2"), Player("R3"))):
    """
    Random, possibly disconnected, network with parallel edges allowed.

    Site fractions avoid the edge ends so no link has zero weight.
    """
    rng = np.random.default_rng(seed)
    vertices = [Vertex(float(rng.uniform(0, 10)), float(rng.uniform(0, 10)), f"v{i}")
                for i in range(int(rng.integers(2, 10)))]

    edges = []
    for _ in range(int(rng.integers(0, 14))):
        i, j = rng.choice(len(vertices), size=2, replace=False)
        edges.append(Edge(vertices[i], vertices[j], float(rng.uniform(0.5, 5.0))))

    sites = []
    if edges:
        for _ in range(int(rng.integers(0, 5))):
            edge = edges[int(rng.integers(len(edges)))]
            player = players[int(rng.integers(len(players)))]
            sites.append(Site(player, edge, float(rng.uniform(0.05, 0.95))))

    return vertices, edges, sites
