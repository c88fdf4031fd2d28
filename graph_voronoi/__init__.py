"""
Geodesic territory control on weighted networks.

Sites owned by players sit at fractional positions along edges; every point
of the network belongs to the nearest site by shortest-path distance.
"""

__version__ = "0.1.0"
