"""
Ports to the collaborators of the POS service

The import pipeline depends only on these structural contracts, not on a
specific HTTP client or storage technology.
"""

from typing import List, Protocol, runtime_checkable

from .collectors.osm.models import OsmNode
from .models import Pos


@runtime_checkable
class OsmDataService(Protocol):
    """Source of OSM node data, implemented by OsmFetcher"""

    def fetch(self, node_id: int) -> OsmNode:
        """
        Raises:
            InvalidArgumentError: node_id <= 0
            OsmNodeNotFoundError: node does not exist
            OsmFetchError: network, protocol or parse failure
        """
        ...


@runtime_checkable
class PosDataService(Protocol):
    """Storage of POS entities"""

    def get_by_id(self, pos_id: int) -> Pos:
        """Raises PosNotFoundError if no POS has this ID"""
        ...

    def upsert(self, pos: Pos) -> Pos:
        """
        Create the POS if it has no ID, otherwise update it.

        Returns the stored POS with its ID (and timestamps) set.

        Raises:
            DuplicatePosNameError: name is used by another POS
            PosNotFoundError: ID is set but unknown
        """
        ...

    def get_all(self) -> List[Pos]:
        ...

    def clear(self) -> None:
        ...
