# -*- coding: utf-8 -*-
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import requests
import yaml

from releasecheck.core.normalize import norm

logger = logging.getLogger("releasecheck.catalog")

_DB_BASE = "https://raw.githubusercontent.com/Araise25/Release-Check-DB/master/tech-essentials"

CATEGORY_SOURCES: Dict[str, str] = {
    "AI/ML": f"{_DB_BASE}/ai-ml.json",
    "Backend": f"{_DB_BASE}/backend.json",
    "Build Tools": f"{_DB_BASE}/build-tools.json",
    "CSS": f"{_DB_BASE}/css.json",
    "Database": f"{_DB_BASE}/databases.json",
    "DevOps": f"{_DB_BASE}/devops.json",
    "Frontend": f"{_DB_BASE}/frontend.json",
    "Language": f"{_DB_BASE}/languages.json",
    "Mobile": f"{_DB_BASE}/mobile.json",
    "Package Manager": f"{_DB_BASE}/package-managers.json",
    "Testing": f"{_DB_BASE}/testing.json",
    "Web": f"{_DB_BASE}/web.json",
}


class CatalogError(ValueError):
    """Raised when a catalog file does not have the expected structure."""


@dataclass(frozen=True)
class Technology:
    name: str
    release_year: int
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    category: str = ""
    link: str = ""

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,) + tuple(self.aliases)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "release_year": self.release_year,
            "aliases": list(self.aliases),
            "category": self.category,
            "link": self.link,
        }


def _as_list(x: Any) -> List[Any]:
    if x is None:
        return []
    return x if isinstance(x, list) else [x]


def _year(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def technology_from_record(record: Mapping[str, Any], category: str) -> Optional[Technology]:
    """
    Converts one upstream record ({tool_name, year, alias, link, release_date})
    into a Technology. Local catalog files may also use name/release_year/aliases.
    Returns None when the record has no name or no usable year.
    """
    if not isinstance(record, Mapping):
        return None

    name = str(record.get("tool_name") or record.get("name") or "").strip()
    if not name:
        return None

    year = _year(record.get("year", record.get("release_year")))
    if year is None:
        return None

    raw_aliases = record.get("aliases") if "aliases" in record else record.get("alias")
    aliases = tuple(str(a).strip() for a in _as_list(raw_aliases) if str(a or "").strip())

    return Technology(
        name=name,
        release_year=year,
        aliases=aliases,
        category=str(record.get("category") or category),
        link=str(record.get("link") or ""),
    )


def merge_catalogs(partitions: Iterable[List[Technology]]) -> List[Technology]:
    """
    Flattens category partitions in order and dedupes by name.
    The last occurrence wins, but keeps the slot of the name's first appearance.
    """
    merged: Dict[str, Technology] = {}
    for techs in partitions:
        for tech in techs:
            merged[tech.name] = tech
    return list(merged.values())


def _partition(records: Any, category: str) -> List[Technology]:
    out: List[Technology] = []
    for rec in _as_list(records):
        tech = technology_from_record(rec, category)
        if tech is None:
            logger.debug(f"Skipping malformed record in '{category}': {rec!r}")
            continue
        out.append(tech)
    return out


def fetch_catalog(
    sources: Optional[Mapping[str, str]] = None,
    session: Optional[requests.Session] = None,
    timeout: float = 15.0,
) -> List[Technology]:
    """
    Downloads every category source and merges them into one catalog.
    A failing source is logged and contributes nothing.
    """
    sources = CATEGORY_SOURCES if sources is None else sources
    http = session or requests.Session()
    partitions: List[List[Technology]] = []

    for category, url in sources.items():
        try:
            resp = http.get(url, timeout=timeout)
            resp.raise_for_status()
            records = resp.json()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {category} from {url}: {e}")
            partitions.append([])
            continue
        except ValueError as e:
            logger.error(f"Invalid JSON for {category} from {url}: {e}")
            partitions.append([])
            continue

        techs = _partition(records, category)
        logger.info(f"Fetched {len(techs)} technologies for '{category}'.")
        partitions.append(techs)

    catalog = merge_catalogs(partitions)
    logger.info(f"Catalog ready: {len(catalog)} unique technologies.")
    return catalog


def _read_raw(p: Path) -> Any:
    text = p.read_text(encoding="utf-8", errors="ignore")
    if p.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog YAML could not be parsed: {e}") from e
    if p.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog JSON could not be parsed: {e}") from e
    raise CatalogError(f"Unsupported catalog type: {p.suffix}. Only .yaml, .yml and .json are supported.")


def load_catalog(path: str) -> List[Technology]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"catalog not found: {path}")

    raw = _read_raw(p)

    if isinstance(raw, list):
        return merge_catalogs([_partition(raw, "")])

    if not isinstance(raw, dict):
        raise CatalogError("Catalog must be a list of records or a mapping of categories.")

    categories = raw.get("categories", raw)
    if not isinstance(categories, dict):
        raise CatalogError("Catalog 'categories' must be a mapping of category -> records.")

    partitions: List[List[Technology]] = []
    for category, records in categories.items():
        if records is not None and not isinstance(records, list):
            raise CatalogError(f"Category '{category}' must hold a list of records.")
        partitions.append(_partition(records, str(category)))

    catalog = merge_catalogs(partitions)
    logger.info(f"Loaded {len(catalog)} technologies from {p.name}.")
    return catalog


def search_catalog(catalog: List[Technology], query: str) -> List[Technology]:
    q = norm(query)
    if not q:
        return list(catalog)
    return [t for t in catalog if any(q in n.lower() for n in t.names)]


def find_technology(catalog: List[Technology], query: str) -> Optional[Technology]:
    q = norm(query)
    if not q:
        return None
    for t in catalog:
        if any(q in n.lower() for n in t.names):
            return t
    return None
