# -*- coding: utf-8 -*-
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from releasecheck.catalog.catalog_loader import Technology
from releasecheck.core.normalize import DURATION_PATTERN, boundary_pattern, max_possible_years

# Mentions of the same technology closer than this are one occurrence
# (a name and its alias matching at the same spot). Tunable heuristic.
MENTION_PROXIMITY = 10

WINDOW_RADIUS = 50

DELIMITERS_BEFORE = (",", ";", "\n", ".")
DELIMITERS_AFTER = (",", ";", "\n", ".", " and ", " or ")


@dataclass(frozen=True)
class Mention:
    technology: Technology
    position: int
    matched_text: str


@dataclass(frozen=True)
class ParsedRequirement:
    technology: Technology
    requested_years: int
    found_index: int
    max_possible_years: int
    is_valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technology": self.technology.name,
            "release_year": self.technology.release_year,
            "category": self.technology.category,
            "requested_years": self.requested_years,
            "max_possible_years": self.max_possible_years,
            "found_index": self.found_index,
            "is_valid": self.is_valid,
        }


def find_mentions(text: str, catalog: List[Technology]) -> List[Mention]:
    mentions: List[Mention] = []
    for tech in catalog:
        for name in tech.names:
            if not name:
                continue
            pat = re.compile(boundary_pattern(name), flags=re.IGNORECASE)
            for m in pat.finditer(text):
                mentions.append(Mention(tech, m.start(), m.group(0)))
    return mentions


def dedupe_mentions(mentions: List[Mention]) -> List[Mention]:
    unique: List[Mention] = []
    for i, m in enumerate(mentions):
        first = next(
            j for j, other in enumerate(mentions)
            if other.technology.name == m.technology.name
            and abs(other.position - m.position) < MENTION_PROXIMITY
        )
        if first == i:
            unique.append(m)
    return unique


def search_window(text: str, mention: Mention) -> Tuple[int, int]:
    """
    Window of WINDOW_RADIUS chars around the mention, cut at the nearest
    list delimiter on each side so a neighbour's duration is not picked up.
    """
    end_of_mention = mention.position + len(mention.matched_text)
    start = max(0, mention.position - WINDOW_RADIUS)
    end = min(len(text), end_of_mention + WINDOW_RADIUS)

    before = text[start:mention.position]
    for i in range(len(before) - 1, -1, -1):
        if before[i] in DELIMITERS_BEFORE:
            start = start + i + 1
            break

    after = text[end_of_mention:end]
    for i in range(len(after)):
        if after.startswith(DELIMITERS_AFTER, i):
            end = end_of_mention + i
            break

    return start, end


def closest_duration(text: str, mention: Mention) -> Optional[int]:
    start, end = search_window(text, mention)
    window = text[start:end]
    anchor = mention.position - start

    best: Optional[Tuple[int, int]] = None
    for m in DURATION_PATTERN.finditer(window):
        distance = abs(m.start() - anchor)
        if best is None or distance < best[0]:
            best = (distance, int(m.group(1)))

    return best[1] if best else None


def locate(text: str, catalog: List[Technology], current_year: int) -> List[ParsedRequirement]:
    """
    Two passes: find every technology mention, then attach the closest
    duration expression inside its window and judge it against the release year.
    One requirement per technology name, the highest requested duration wins;
    results follow catalog order.
    """
    text = text or ""
    results: Dict[str, ParsedRequirement] = {}

    for mention in dedupe_mentions(find_mentions(text, catalog)):
        years = closest_duration(text, mention)
        if years is None:
            continue

        tech = mention.technology
        max_years = max_possible_years(tech.release_year, current_year)
        req = ParsedRequirement(
            technology=tech,
            requested_years=years,
            found_index=mention.position,
            max_possible_years=max_years,
            is_valid=years <= max_years,
        )

        prev = results.get(tech.name)
        if prev is None or req.requested_years > prev.requested_years:
            results[tech.name] = req

    return list(results.values())
