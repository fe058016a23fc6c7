"""
OSM response parser

Parses the XML document of the OSM node endpoint into an OsmNode
"""

from typing import Dict, Optional
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring
from loguru import logger

from .models import OsmNode
from ...exceptions import OsmNodeNotFoundError, OsmParseError


def first_non_blank(tags: Dict[str, str], *keys: str) -> Optional[str]:
    """Return the trimmed value of the first key with a non-blank value"""
    for key in keys:
        value = tags.get(key)
        if value is not None:
            trimmed = value.strip()
            if trimmed:
                return trimmed
    return None


class OsmNodeParser:
    """Parses OSM node XML documents"""

    @staticmethod
    def parse_node(node_id: int, body: bytes) -> OsmNode:
        """
        Parse an OSM API response into an OsmNode

        DTDs, entity declarations and external references are rejected
        before any of them is processed. Any DOCTYPE is refused, including
        a purely internal one; OSM API responses never carry one.

        Args:
            node_id: The requested node ID (kept even if the document differs)
            body: Raw XML document

        Returns:
            OsmNode with tag values looked up in fallback order

        Raises:
            OsmParseError: If the document is malformed or uses forbidden XML features
            OsmNodeNotFoundError: If the document contains no <node> element
        """
        try:
            root = fromstring(body, forbid_dtd=True, forbid_entities=True, forbid_external=True)
        except DefusedXmlException as e:
            raise OsmParseError(node_id, f"Rejected unsafe XML in OSM node {node_id}: {e}") from e
        except ParseError as e:
            raise OsmParseError(node_id) from e

        node_element = root if root.tag == "node" else root.find(".//node")
        if node_element is None:
            raise OsmNodeNotFoundError(node_id)

        tags = OsmNodeParser.extract_tags(node_element)
        logger.debug(f"OSM node {node_id}: {len(tags)} tags")

        return OsmNode(
            node_id=node_id,
            name=first_non_blank(tags, "name", "name:en", "name:de"),
            amenity=first_non_blank(tags, "amenity"),
            description=first_non_blank(tags, "description", "note"),
            latitude=OsmNodeParser.parse_float_attribute(node_element, "lat"),
            longitude=OsmNodeParser.parse_float_attribute(node_element, "lon"),
            street=first_non_blank(tags, "addr:street"),
            house_number=first_non_blank(tags, "addr:housenumber"),
            postal_code=first_non_blank(tags, "addr:postcode"),
            city=first_non_blank(tags, "addr:city"),
            opening_hours=first_non_blank(tags, "opening_hours"),
            phone=first_non_blank(tags, "phone", "contact:phone"),
            website=first_non_blank(tags, "website", "contact:website"),
            shop=first_non_blank(tags, "shop"),
        )

    @staticmethod
    def extract_tags(node_element: Element) -> Dict[str, str]:
        """Collect <tag k=".." v=".."/> children; later duplicates win, empty keys are skipped"""
        tags = {}
        for tag in node_element.iter("tag"):
            key = tag.get("k", "")
            if key:
                tags[key] = tag.get("v", "")
        return tags

    @staticmethod
    def parse_float_attribute(element: Element, name: str) -> Optional[float]:
        raw_value = element.get(name)
        if raw_value is None or not raw_value.strip():
            return None
        try:
            value = float(raw_value)
        except ValueError:
            value = None
        # float() also takes digit separators, which are not valid coordinates
        if value is None or "_" in raw_value:
            logger.warning(f"Unable to parse '{name}' attribute '{raw_value}' as float")
            return None
        return value
