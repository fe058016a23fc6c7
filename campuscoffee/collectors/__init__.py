"""
Data collectors for CampusCoffee

- OsmFetcher: Single point-of-interest nodes from OpenStreetMap
"""

from .osm import OsmFetcher, OsmNode

__all__ = [
    "OsmFetcher",
    "OsmNode",
]
