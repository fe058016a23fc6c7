"""
Exceptions raised by the CampusCoffee importer
"""

from typing import Optional


class CampusCoffeeError(Exception):
    """Base class for all importer errors"""
    pass


class InvalidArgumentError(CampusCoffeeError, ValueError):
    """Caller supplied an invalid argument (e.g. a non-positive node ID)"""
    pass


class NotFoundError(CampusCoffeeError):
    """Requested resource does not exist"""
    pass


class OsmNodeNotFoundError(NotFoundError):
    """OSM node does not exist upstream"""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node {node_id} not found")


class PosNotFoundError(NotFoundError):
    """No POS with the given ID in storage"""

    def __init__(self, pos_id: int):
        self.pos_id = pos_id
        super().__init__(f"POS with ID {pos_id} not found")


class OsmFetchError(CampusCoffeeError):
    """
    Fetching an OSM node failed (network error or unexpected HTTP status).

    Transient in most cases; retrying is left to the caller.
    """

    def __init__(self, node_id: int, message: str, status_code: Optional[int] = None):
        self.node_id = node_id
        self.status_code = status_code
        super().__init__(message)


class OsmParseError(OsmFetchError):
    """OSM response body is not acceptable XML"""

    def __init__(self, node_id: int, message: Optional[str] = None):
        super().__init__(node_id, message or f"Failed to parse OSM node {node_id}")


class OsmNodeMissingFieldsError(CampusCoffeeError):
    """OSM node lacks data required to build a POS"""

    def __init__(self, node_id: int, reason: str):
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"OpenStreetMap node {node_id} cannot be imported: {reason}")


class DuplicatePosNameError(CampusCoffeeError):
    """Another POS already uses this name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"POS with name '{name}' already exists")
