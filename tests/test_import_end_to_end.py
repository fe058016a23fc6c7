from unittest.mock import MagicMock

import requests

from campuscoffee.collectors.osm import OsmFetcher
from campuscoffee.collectors.osm.api_client import OsmApiClient
from campuscoffee.config import APIConfig, ImportConfig
from campuscoffee.models import CampusType, PosType
from campuscoffee.pipeline import PosImporter
from campuscoffee.storage import InMemoryPosDataService

RADA_XML = """<osm version="0.6">
  <node id="5589879349" lat="49.4122362" lon="8.7077883">
    <tag k="name" v="Rada Coffee &amp; Rösterei"/>
    <tag k="amenity" v="cafe"/>
    <tag k="addr:street" v="Untere Straße"/>
    <tag k="addr:housenumber" v="21"/>
    <tag k="addr:postcode" v="69117"/>
    <tag k="addr:city" v="Heidelberg"/>
  </node>
</osm>""".encode("utf-8")


def test_import_rada_coffee(make_response):
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(200, RADA_XML)
    store = InMemoryPosDataService()
    importer = PosImporter(
        store,
        OsmFetcher(api_client=OsmApiClient(APIConfig(), session=session)),
        ImportConfig(),
    )

    pos = importer.import_from_osm_node(5589879349)

    assert pos.id == 1
    assert pos.name == "Rada Coffee & Rösterei"
    assert pos.type == PosType.CAFE
    assert pos.campus == CampusType.ALTSTADT
    assert pos.street == "Untere Straße"
    assert pos.house_number == "21"
    assert pos.postal_code == 69117
    assert pos.city == "Heidelberg"
    assert pos.description == "Imported from OSM node 5589879349 (lat=49.4122362, lon=8.7077883)"
    assert pos.created_at is not None
    assert importer.get_all() == [pos]
