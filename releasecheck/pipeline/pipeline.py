# -*- coding: utf-8 -*-
import random
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from releasecheck.catalog.catalog_loader import Technology, load_catalog
from releasecheck.core.commentary import pick_commentary
from releasecheck.core.corrector import correct
from releasecheck.core.locator import locate
from releasecheck.core.normalize import current_year as wall_clock_year
from releasecheck.io.extractors import extract_job_text


def scan_job_description(
    text: str,
    catalog: List[Technology],
    current_year: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    year = wall_clock_year() if current_year is None else int(current_year)

    requirements = locate(text, catalog, year)
    correction = correct(text, requirements)

    invalid = [r for r in requirements if not r.is_valid]

    return {
        "engine": "ReleaseCheck",
        "timestamp": datetime.utcnow().isoformat(),
        "current_year": year,
        "summary": {
            "requirements_found": len(requirements),
            "invalid_requirements": len(invalid),
            "corrections_made": len(correction.changelog),
        },
        "requirements": [
            {
                **r.to_dict(),
                "commentary": pick_commentary(
                    r.is_valid, r.technology.name, r.requested_years, r.max_possible_years, rng=rng
                ),
            }
            for r in requirements
        ],
        "corrected_text": correction.corrected_text,
        "changelog": [e.to_dict() for e in correction.changelog],
    }


def scan_file(
    job_file: str,
    catalog_path: Optional[str] = None,
    catalog: Optional[List[Technology]] = None,
    current_year: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    if catalog is None:
        if not catalog_path:
            raise ValueError("Either a catalog or a catalog path is required.")
        catalog = load_catalog(catalog_path)

    text = extract_job_text(job_file)
    report = scan_job_description(text, catalog, current_year=current_year, rng=rng)
    report["job_file"] = Path(job_file).name
    return report
