"""
Main OSM node fetcher

Combines the API client and the XML parser into the single-node fetch
used by the POS import
"""

from typing import Optional
from loguru import logger

from .api_client import OsmApiClient
from .models import OsmNode
from .parser import OsmNodeParser
from ...config import APIConfig
from ...exceptions import InvalidArgumentError


class OsmFetcher:
    """
    Fetch a single node from the OpenStreetMap API

    Usage:
        fetcher = OsmFetcher()
        node = fetcher.fetch(5589879349)
    """

    def __init__(self, api_config: Optional[APIConfig] = None, api_client: Optional[OsmApiClient] = None):
        self.api_client = api_client or OsmApiClient(api_config)
        self.parser = OsmNodeParser()

    def fetch(self, node_id: int) -> OsmNode:
        """
        Fetch and parse an OSM node

        Args:
            node_id: Positive OSM node ID

        Returns:
            Parsed OsmNode

        Raises:
            InvalidArgumentError: If node_id is not a positive integer
            OsmNodeNotFoundError: If the node does not exist upstream
            OsmFetchError: On network errors, unexpected statuses or unparsable XML
        """
        if isinstance(node_id, bool) or not isinstance(node_id, int) or node_id <= 0:
            raise InvalidArgumentError("The OpenStreetMap node ID must be positive.")

        logger.debug(f"Fetching OSM node {node_id}")
        body = self.api_client.get_node_xml(node_id)
        return self.parser.parse_node(node_id, body)
