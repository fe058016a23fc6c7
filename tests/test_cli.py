import json
from unittest.mock import patch

import pytest

import cli
from campuscoffee.collectors.osm import OsmNode
from campuscoffee.exceptions import OsmNodeNotFoundError

RADA = OsmNode(
    node_id=5589879349,
    name="Rada Coffee & Rösterei",
    amenity="cafe",
    street="Untere Straße",
    house_number="21",
    postal_code="69117",
    city="Heidelberg",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)


def test_no_command_prints_help():
    assert cli.main([]) == 1


@patch("cli.OsmFetcher.fetch", return_value=RADA)
def test_fetch_prints_node(mock_fetch, capsys):
    assert cli.main(["fetch", "5589879349"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["node_id"] == 5589879349
    assert output["house_number"] == "21"
    mock_fetch.assert_called_once_with(5589879349)


@patch("cli.OsmFetcher.fetch", return_value=RADA)
def test_convert_prints_pos(mock_fetch, capsys):
    assert cli.main(["convert", "5589879349"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["type"] == "CAFE"
    assert output["campus"] == "ALTSTADT"
    assert output["postal_code"] == 69117
    assert "id" not in output


@patch("cli.OsmFetcher.fetch")
def test_import_reports_failures(mock_fetch, capsys):
    mock_fetch.side_effect = [RADA, OsmNodeNotFoundError(2)]

    assert cli.main(["import", "5589879349", "2"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert [pos["name"] for pos in output] == ["Rada Coffee & Rösterei"]
    assert output[0]["id"] == 1


@patch("cli.OsmFetcher.fetch", side_effect=OsmNodeNotFoundError(3))
def test_fetch_failure_exit_code(mock_fetch):
    assert cli.main(["fetch", "3"]) == 1
