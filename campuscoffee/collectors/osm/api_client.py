"""
OpenStreetMap API client

Handles communication with the OSM v0.6 API:
- Single node requests
- Status code interpretation
- Error handling

No retries are attempted; retry policy belongs to the caller.
"""

import requests
from typing import Optional
from loguru import logger

from ...config import APIConfig, get_config
from ...exceptions import OsmFetchError, OsmNodeNotFoundError


class OsmApiClient:
    """Client for fetching single nodes from the OSM API"""

    def __init__(self, api_config: Optional[APIConfig] = None, session: Optional[requests.Session] = None):
        self.api_config = api_config or get_config().api
        self.base_url = self.api_config.osm_base_url.rstrip("/")
        self.timeout = (self.api_config.connect_timeout, self.api_config.read_timeout)
        self.session = session or requests.Session()

    def node_url(self, node_id: int) -> str:
        return f"{self.base_url}/node/{node_id}"

    def get_node_xml(self, node_id: int) -> bytes:
        """
        Fetch the raw XML document of an OSM node

        Args:
            node_id: Positive OSM node ID

        Returns:
            Response body as bytes

        Raises:
            OsmNodeNotFoundError: If the API answers 404
            OsmFetchError: On any other non-2xx status or a network failure
        """
        url = self.node_url(node_id)
        headers = {
            "Accept": "application/xml",
            "User-Agent": self.api_config.user_agent,
        }

        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"OSM API timeout while fetching node {node_id}: {e}")
            raise OsmFetchError(node_id, f"Timed out while fetching OSM node {node_id}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"OSM API request failed for node {node_id}: {e}")
            raise OsmFetchError(node_id, f"Failed to fetch OSM node {node_id}") from e

        status = response.status_code
        if status == 404:
            raise OsmNodeNotFoundError(node_id)
        if status < 200 or status >= 300:
            logger.error(f"OSM API returned HTTP {status} for node {node_id}")
            raise OsmFetchError(
                node_id,
                f"Unexpected status {status} while fetching OSM node {node_id}",
                status_code=status,
            )

        return response.content
