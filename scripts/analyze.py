"""CLI for analyzing a JSON file of book records and printing the full report as JSON"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from shelfgraph.config import settings
from shelfgraph.engine import AnalysisEngine


def main(
    in_file: str,
    seed: int | None,
    filter_tags: list[str],
    focus_tag: str | None,
    node_id: str | None,
    out_file: str | None = None,
) -> None:
    with open(Path(in_file), "r", encoding="utf-8") as f:
        records = json.load(f)

    engine = AnalysisEngine.seeded(seed)
    report = engine.analyze(
        records,
        active_filter_tags=filter_tags,
        focus_tag=focus_tag,
        node_id=node_id,
    )

    output = report.model_dump_json(by_alias=True, indent=2)
    if out_file:
        Path(out_file).write_text(output, encoding="utf-8")
        logger.info(f"Wrote report to {out_file}")
    else:
        print(output)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-file", type=str, required=True, help="JSON file containing a list of book records"
    )
    parser.add_argument(
        "--seed", type=int, required=False, help="Seed for reproducible resonance edges"
    )
    parser.add_argument(
        "--filter-tag",
        type=str,
        action="append",
        default=[],
        help="Restrict the edge population to books with this tag (repeatable)",
    )
    parser.add_argument("--focus-tag", type=str, required=False, help="Tag to strengthen")
    parser.add_argument("--node-id", type=str, required=False, help="Book to explain")
    parser.add_argument("--out-file", type=str, required=False, help="Write the report here")

    args = parser.parse_args()

    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])
    main(
        in_file=args.in_file,
        seed=args.seed,
        filter_tags=args.filter_tag,
        focus_tag=args.focus_tag,
        node_id=args.node_id,
        out_file=args.out_file,
    )
