"""
OpenStreetMap node import module

Components:
- API client: OSM v0.6 API communication
- Models: Data structures (OsmNode)
- Parser: Hardened XML parsing and tag lookup
- Collector: OsmFetcher, fetch + parse of a single node
"""

from .models import OsmNode
from .collector import OsmFetcher

__all__ = [
    "OsmNode",
    "OsmFetcher",
]
