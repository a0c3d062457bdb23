# -*- coding: utf-8 -*-
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from releasecheck.catalog.catalog_loader import Technology, find_technology, search_catalog
from releasecheck.core.normalize import max_possible_years, norm

# "langchain 10", "react 5"
CLAIM_PATTERN = re.compile(r"^(.+?)\s+([0-9]+)$")


@dataclass(frozen=True)
class ValidationResult:
    technology: Technology
    requested_years: int
    max_possible_years: int
    is_valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technology": self.technology.name,
            "release_year": self.technology.release_year,
            "requested_years": self.requested_years,
            "max_possible_years": self.max_possible_years,
            "is_valid": self.is_valid,
        }


@dataclass(frozen=True)
class QuickCheckResult:
    matches: List[Technology] = field(default_factory=list)
    validation: Optional[ValidationResult] = None


def parse_claim(query: str) -> Optional[Tuple[str, int]]:
    m = CLAIM_PATTERN.match(norm(query))
    if not m:
        return None
    return m.group(1).strip(), int(m.group(2))


def technology_age(technology: Technology, current_year: int) -> int:
    return max_possible_years(technology.release_year, current_year)


def check_claim(query: str, catalog: List[Technology], current_year: int) -> QuickCheckResult:
    """
    Search box semantics: "<tech> <years>" validates one claim against the
    first matching technology, anything else filters the catalog.
    """
    if not norm(query):
        return QuickCheckResult(matches=list(catalog))

    claim = parse_claim(query)
    if claim:
        tech_query, years = claim
        tech = find_technology(catalog, tech_query)
        if tech is not None:
            max_years = technology_age(tech, current_year)
            return QuickCheckResult(
                matches=[tech],
                validation=ValidationResult(
                    technology=tech,
                    requested_years=years,
                    max_possible_years=max_years,
                    is_valid=years <= max_years,
                ),
            )

    return QuickCheckResult(matches=search_catalog(catalog, query))
