# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from releasecheck.core.locator import WINDOW_RADIUS, ParsedRequirement
from releasecheck.core.normalize import duration_pattern_for


@dataclass(frozen=True)
class ChangelogEntry:
    technology: str
    original: int
    corrected: int
    position: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technology": self.technology,
            "original": self.original,
            "corrected": self.corrected,
            "position": self.position,
        }


@dataclass(frozen=True)
class Correction:
    corrected_text: str
    changelog: List[ChangelogEntry] = field(default_factory=list)

    def __iter__(self):
        # text, changelog = correct(...)
        return iter((self.corrected_text, self.changelog))

    def changelog_in_reading_order(self) -> List[ChangelogEntry]:
        return sorted(self.changelog, key=lambda e: e.position)


def _rewrite_first(window: str, requested: int, corrected: int) -> Tuple[str, bool]:
    m = duration_pattern_for(requested).search(window)
    if not m:
        return window, False
    fixed = m.group(0).replace(str(requested), str(corrected), 1)
    return window[:m.start()] + fixed + window[m.end():], True


def correct(text: str, requirements: List[ParsedRequirement]) -> Correction:
    """
    Rewrites every impossible duration to the maximum possible one.

    Edits run right to left by anchor so earlier anchors stay valid
    without remapping. Requirements whose duration cannot be found again
    near the anchor are left alone.
    """
    corrected_text = text or ""
    changelog: List[ChangelogEntry] = []

    invalid = sorted(
        (r for r in requirements if not r.is_valid),
        key=lambda r: r.found_index,
        reverse=True,
    )

    for req in invalid:
        start = max(0, req.found_index - WINDOW_RADIUS)
        end = min(len(corrected_text), req.found_index + len(req.technology.name) + WINDOW_RADIUS)

        window, replaced = _rewrite_first(
            corrected_text[start:end], req.requested_years, req.max_possible_years
        )
        if not replaced:
            continue

        corrected_text = corrected_text[:start] + window + corrected_text[end:]
        changelog.append(
            ChangelogEntry(
                technology=req.technology.name,
                original=req.requested_years,
                corrected=req.max_possible_years,
                position=req.found_index,
            )
        )

    return Correction(corrected_text=corrected_text, changelog=changelog)
