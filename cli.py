#!/usr/bin/env python
"""
Command-line interface for the CampusCoffee OSM importer

Usage:
    python cli.py fetch 5589879349
    python cli.py convert 5589879349
    python cli.py import 5589879349 1234567890
"""

import sys
import json
import argparse

from loguru import logger

from campuscoffee.config import load_config
from campuscoffee.collectors.osm import OsmFetcher
from campuscoffee.exceptions import CampusCoffeeError
from campuscoffee.pipeline import PosImporter, convert_osm_node_to_pos
from campuscoffee.storage import InMemoryPosDataService


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def cmd_fetch(args):
    """Print the parsed OSM node as JSON"""
    config = load_config(args.env_file)
    fetcher = OsmFetcher(config.api)

    try:
        osm_node = fetcher.fetch(args.node_id)
    except CampusCoffeeError as e:
        logger.error(f"Failed to fetch OSM node {args.node_id}: {e}")
        return 1

    print(json.dumps(osm_node.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_convert(args):
    """Print the POS an import would create, without storing it"""
    config = load_config(args.env_file)
    fetcher = OsmFetcher(config.api)

    try:
        pos = convert_osm_node_to_pos(fetcher.fetch(args.node_id), config.importer)
    except CampusCoffeeError as e:
        logger.error(f"Failed to convert OSM node {args.node_id}: {e}")
        return 1

    print(json.dumps(pos.model_dump(mode="json", exclude_none=True), indent=2, ensure_ascii=False))
    return 0


def cmd_import(args):
    """Import one or more OSM nodes into an in-memory store, one after another"""
    config = load_config(args.env_file)
    importer = PosImporter(
        InMemoryPosDataService(),
        OsmFetcher(config.api),
        config.importer,
    )

    failed = 0
    for node_id in args.node_ids:
        try:
            pos = importer.import_from_osm_node(node_id)
            logger.info(f"✓ Imported node {node_id} as POS {pos.id} ({pos.type.value}, {pos.campus.value})")
        except CampusCoffeeError as e:
            logger.error(f"✗ Node {node_id}: {e}")
            failed += 1

    stored = [pos.model_dump(mode="json") for pos in importer.get_all()]
    print(json.dumps(stored, indent=2, ensure_ascii=False))

    logger.info(f"Imported {len(args.node_ids) - failed}/{len(args.node_ids)} nodes")
    return 1 if failed else 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="CampusCoffee OSM importer CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Show the tags of an OSM node:
    python cli.py fetch 5589879349

  Preview the POS built from a node:
    python cli.py convert 5589879349

  Import several nodes:
    python cli.py import 5589879349 1234567890
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--env-file", help="Path to a .env file with CAMPUSCOFFEE_* settings")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and print an OSM node")
    fetch_parser.add_argument("node_id", type=int, help="OSM node ID")
    fetch_parser.set_defaults(func=cmd_fetch)

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert an OSM node to a POS (dry run)")
    convert_parser.add_argument("node_id", type=int, help="OSM node ID")
    convert_parser.set_defaults(func=cmd_convert)

    # Import command
    import_parser = subparsers.add_parser("import", help="Import OSM nodes as POS")
    import_parser.add_argument("node_ids", type=int, nargs="+", help="OSM node IDs")
    import_parser.set_defaults(func=cmd_import)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
