import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="openstreetmap-cgimap">
  <node id="5589879349" visible="true" version="7" lat="49.4122362" lon="8.7077883">
    <tag k="name" v="Rada Coffee &amp; Rösterei"/>
    <tag k="amenity" v="cafe"/>
    <tag k="description" v="Caffé und Rösterei"/>
    <tag k="addr:street" v="Untere Straße"/>
    <tag k="addr:housenumber" v="21"/>
    <tag k="addr:postcode" v="69117"/>
    <tag k="addr:city" v="Heidelberg"/>
    <tag k="opening_hours" v="Mo-Fr 11:00-18:00"/>
    <tag k="phone" v="+49 6221 1805585"/>
    <tag k="website" v="https://rada-roesterei.com/"/>
  </node>
</osm>
""".encode("utf-8")


def _make_response(status_code=200, content=b""):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects"""
    return _make_response
