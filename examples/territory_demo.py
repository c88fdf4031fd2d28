"""
Example demonstrating ownership and boundary points on a small star network.
"""

from graph_voronoi.core import Network, Player
from graph_voronoi.utils.logging_setup import configure_logging


def main():
    configure_logging()

    red = Player("Red", "#9e2a2b")
    blue = Player("Blue", "#4682b4")
    network = Network([red, blue], calculations_disabled=False)

    # Centre with three unit arms
    centre = network.add_vertex(0, 0, "centre")
    east = network.add_vertex(1, 0, "east")
    north = network.add_vertex(0, 1, "north")
    west = network.add_vertex(-1, 0, "west")

    to_east = network.add_edge(centre, east)
    to_north = network.add_edge(centre, north)
    network.add_edge(centre, west)

    network.add_site(red, to_east, 0.9)
    network.add_site(blue, to_north, 0.1)

    print("Owners:")
    for vertex in network.vertices:
        owner = network.owner_of(vertex)
        if owner is None:
            print(f"  {vertex.label:>7}: unowned")
        else:
            print(f"  {vertex.label:>7}: {owner.player.name} at {owner.distance:.3f}")

    print("Boundary points:")
    for edge in network.edges:
        name = f"{edge.from_vertex.label}-{edge.to_vertex.label}"
        for point in network.boundary_points(edge):
            print(f"  {name:>14} t={point.t:.3f} {point.kind.value} ({point.direction.value})")


if __name__ == "__main__":
    main()
