"""
OSM data models

Data class for the OSM node fields relevant to a point of sale
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class OsmNode:
    """
    An OpenStreetMap node reduced to the tags a point of sale needs.

    Optional fields are either None or a non-blank, trimmed string. Blank
    values are dropped by the parser when tags are read.
    """
    node_id: int
    name: Optional[str] = None
    amenity: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    street: Optional[str] = None
    house_number: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    opening_hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    shop: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation, e.g. for JSON output"""
        return asdict(self)
