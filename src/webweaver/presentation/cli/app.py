"""Command-line front end: project a decoded save and print it."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from webweaver.core.logging_config import setup_logging
from webweaver.data.errors import DataError
from webweaver.presentation.cli import config as cli_config
from webweaver.presentation.cli.render import render_snapshot
from webweaver.services.errors import SaveLoadError
from webweaver.services.save_loader import load_decoded_save
from webweaver.services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webweaver",
        description="Summarize a decrypted Silksong save (JSON) by category.",
    )
    parser.add_argument("save", type=Path, help="path to the decrypted save JSON")
    parser.add_argument("--json", dest="output_format", action="store_const", const="json",
                        help="print the projected snapshot as JSON")
    parser.add_argument("--show-other", dest="show_other_tools", action="store_true", default=None,
                        help="also list tools that do not count towards completion")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--config", type=Path, help="alternate config file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    args = build_parser().parse_args(argv)
    options = cli_config.load_config(args.config)
    setup_logging(args.log_level or options["log_level"])

    output_format = args.output_format or options["output_format"]
    show_other = options["show_other_tools"] if args.show_other_tools is None else args.show_other_tools

    try:
        record = load_decoded_save(args.save)
        snapshot = SnapshotService().project_all(record)
    except SaveLoadError as exc:
        logger.error("Could not load save: %s", exc)
        print(f"Failed to analyze save file: {exc}")
        return 1
    except DataError as exc:
        logger.error("Definition data is invalid: %s", exc)
        print(f"Definition data is invalid: {exc}")
        return 1

    assert snapshot is not None
    if output_format == "json":
        print(json.dumps(snapshot.to_dict(), indent=2))
    else:
        render_snapshot(snapshot, show_other=show_other)
    return 0
