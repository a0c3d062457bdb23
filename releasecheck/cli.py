# -*- coding: utf-8 -*-
import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from releasecheck.catalog.catalog_loader import CatalogError, fetch_catalog, load_catalog
from releasecheck.pipeline.pipeline import scan_file


def _default_out_path(results_dir: str, job_file: str) -> Path:
    ts = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
    job_stem = Path(job_file).stem
    return Path(results_dir) / f"{job_stem}_{ts}.json"


def main(argv=None):
    p = argparse.ArgumentParser(description="Release Check: flag and fix impossible years-of-experience claims.")
    p.add_argument("--job", required=True, help="Job description file path (.txt/.pdf/.docx)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--catalog", help="Technology catalog path (.yaml/.json)")
    src.add_argument("--fetch", action="store_true", help="Fetch the catalog from the upstream sources")
    p.add_argument("--year", type=int, default=None, help="Current year (defaults to today)")
    p.add_argument("--results-dir", default="releasecheck/results", help="Where to save JSON outputs")
    p.add_argument("--out", default=None, help="Optional explicit output JSON path")
    p.add_argument("--corrected-only", action="store_true", help="Print only the corrected job description")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = fetch_catalog() if args.fetch else load_catalog(args.catalog)
        output = scan_file(job_file=args.job, catalog=catalog, current_year=args.year)
    except (FileNotFoundError, CatalogError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    js = json.dumps(output, indent=2, ensure_ascii=False)
    print(output["corrected_text"] if args.corrected_only else js)

    results_dir = Path(args.results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    out_path = Path(args.out) if args.out else _default_out_path(str(results_dir), args.job)
    out_path.write_text(js, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
