"""
POS import pipeline

Turns an OpenStreetMap node into a CampusCoffee point of sale:

  1. Fetch node XML from the OSM API (OsmFetcher)
  2. Validate and normalize the required address fields
  3. Resolve POS type (amenity / shop tags) and campus (postal code)
  4. Upsert through the storage port

Also exposes the plain POS operations (get, list, upsert, clear) that
delegate to storage.
"""

import math
import re
from decimal import Decimal
from typing import List, Optional
from loguru import logger

from .collectors.osm import OsmFetcher, OsmNode
from .config import ImportConfig, get_config
from .exceptions import DuplicatePosNameError, OsmNodeMissingFieldsError
from .models import CampusType, Pos, PosType
from .ports import OsmDataService, PosDataService


# Optional sign followed by decimal digits (any script), stored as a 32-bit int
POSTAL_CODE_PATTERN = re.compile(r"[+-]?\d+")
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

# Amenity values checked before the shop tag, in this order
AMENITY_POS_TYPES = (
    ("canteen", PosType.CAFETERIA),
    ("vending_machine", PosType.VENDING_MACHINE),
    ("cafe", PosType.CAFE),
)


def normalize(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def required(value: Optional[str], tag: str, node_id: int) -> str:
    """Return the trimmed value or fail naming the OSM tag that is missing"""
    normalized = normalize(value)
    if normalized is None:
        raise OsmNodeMissingFieldsError(node_id, f"missing {tag}")
    return normalized


def resolve_pos_type(amenity: Optional[str], shop: Optional[str]) -> PosType:
    """Amenity wins over shop; unknown values fall back to CAFE"""
    normalized_amenity = normalize(amenity)
    if normalized_amenity is not None:
        for value, pos_type in AMENITY_POS_TYPES:
            if normalized_amenity.lower() == value:
                return pos_type

    normalized_shop = normalize(shop)
    if normalized_shop is not None and normalized_shop.lower() == "bakery":
        return PosType.BAKERY
    return PosType.CAFE


def resolve_campus(postal_code: Optional[int], import_config: Optional[ImportConfig] = None) -> CampusType:
    import_config = import_config or get_config().importer
    if postal_code is None:
        return import_config.default_campus
    # Unknown postal codes are assigned to the default campus rather than rejected
    return import_config.campus_by_postal_code.get(postal_code, import_config.default_campus)


def parse_postal_code(value: str) -> Optional[int]:
    """Signed decimal integer within the 32-bit range, else None"""
    if not POSTAL_CODE_PATTERN.fullmatch(value):
        return None
    postal_code = int(value)
    if postal_code < INT32_MIN or postal_code > INT32_MAX:
        return None
    return postal_code


def format_coordinate(value: float) -> str:
    """
    Render a coordinate as plain decimal for 1e-3 <= |value| < 1e7, otherwise scientific
    notation such as 1.0E-4 or 1.5E7 (shortest round-trip digits)
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude == 0 or 1e-3 <= magnitude < 1e7:
        return repr(value)

    _, digits, exponent = Decimal(repr(magnitude)).as_tuple()
    digit_text = "".join(str(d) for d in digits).rstrip("0") or "0"
    scientific_exponent = exponent + len(digits) - 1
    mantissa = digit_text[0] + "." + (digit_text[1:] or "0")
    sign = "-" if value < 0 else ""
    return f"{sign}{mantissa}E{scientific_exponent}"


def default_description(osm_node: OsmNode) -> str:
    description = f"Imported from OSM node {osm_node.node_id}"
    if osm_node.latitude is not None and osm_node.longitude is not None:
        description += f" (lat={format_coordinate(osm_node.latitude)}, lon={format_coordinate(osm_node.longitude)})"
    return description


def convert_osm_node_to_pos(osm_node: OsmNode, import_config: Optional[ImportConfig] = None) -> Pos:
    """
    Build a new (unsaved) POS from an OSM node

    Args:
        osm_node: Parsed OSM node
        import_config: Campus mapping, defaults to the global config

    Returns:
        Pos without an ID

    Raises:
        OsmNodeMissingFieldsError: If name or address data is missing, or the
            postal code is not numeric
    """
    node_id = osm_node.node_id

    name = required(osm_node.name, "name", node_id)
    street = required(osm_node.street, "addr:street", node_id)
    house_number = required(osm_node.house_number, "addr:housenumber", node_id)
    city = required(osm_node.city, "addr:city", node_id)
    postal_code_raw = required(osm_node.postal_code, "addr:postcode", node_id)

    postal_code = parse_postal_code(postal_code_raw)
    if postal_code is None:
        raise OsmNodeMissingFieldsError(node_id, "postal code must be numeric")

    description = normalize(osm_node.description) or default_description(osm_node)

    return Pos(
        name=name,
        description=description,
        type=resolve_pos_type(osm_node.amenity, osm_node.shop),
        campus=resolve_campus(postal_code, import_config),
        street=street,
        house_number=house_number,
        postal_code=postal_code,
        city=city,
    )


class PosImporter:
    """
    POS service: OSM import plus the basic POS operations

    Usage:
        importer = PosImporter(pos_data_service)
        pos = importer.import_from_osm_node(5589879349)
    """

    def __init__(
        self,
        pos_data_service: PosDataService,
        osm_data_service: Optional[OsmDataService] = None,
        import_config: Optional[ImportConfig] = None,
    ):
        self.pos_data_service = pos_data_service
        self.osm_data_service = osm_data_service or OsmFetcher()
        self.import_config = import_config or get_config().importer

    def clear(self) -> None:
        logger.warning("Clearing all POS data")
        self.pos_data_service.clear()

    def get_all(self) -> List[Pos]:
        logger.debug("Retrieving all POS")
        return self.pos_data_service.get_all()

    def get_by_id(self, pos_id: int) -> Pos:
        logger.debug(f"Retrieving POS with ID: {pos_id}")
        return self.pos_data_service.get_by_id(pos_id)

    def upsert(self, pos: Pos) -> Pos:
        """
        Create a POS without ID, or update an existing one

        Raises:
            PosNotFoundError: If the POS has an ID that is not in storage
            DuplicatePosNameError: If the name is taken by another POS
        """
        if pos.id is None:
            logger.info(f"Creating new POS: {pos.name}")
        else:
            logger.info(f"Updating POS with ID: {pos.id}")
            # Must exist before the update
            self.pos_data_service.get_by_id(pos.id)
        return self._perform_upsert(pos)

    def import_from_osm_node(self, node_id: int) -> Pos:
        """
        Fetch an OSM node, convert it and store it as a POS

        Raises:
            InvalidArgumentError: If node_id is not positive
            OsmNodeNotFoundError: If the node does not exist
            OsmFetchError: On network, status or XML errors
            OsmNodeMissingFieldsError: If the node lacks required data
            DuplicatePosNameError: If a POS with the same name exists
        """
        logger.info(f"Importing POS from OpenStreetMap node {node_id}...")

        osm_node = self.osm_data_service.fetch(node_id)
        saved_pos = self.upsert(self.convert(osm_node))

        logger.info(f"Successfully imported POS '{saved_pos.name}' from OSM node {node_id}")
        return saved_pos

    def convert(self, osm_node: OsmNode) -> Pos:
        return convert_osm_node_to_pos(osm_node, self.import_config)

    def _perform_upsert(self, pos: Pos) -> Pos:
        try:
            upserted = self.pos_data_service.upsert(pos)
        except DuplicatePosNameError as e:
            logger.error(f"Error upserting POS '{pos.name}': {e}")
            raise
        logger.info(f"Successfully upserted POS with ID: {upserted.id}")
        return upserted
