# -*- coding: utf-8 -*-
import re
from datetime import datetime

UNIT_PATTERN = r"(?:years?|yrs?|yoe)"

# ASCII word characters; `\w` and `\d` would also accept non-Latin letters and digits
ASCII_WORD = "A-Za-z0-9_"

# "15 years", "10+ years", "8 yrs", "3yoe"
DURATION_PATTERN = re.compile(rf"([0-9]+)\+?\s*{UNIT_PATTERN}", flags=re.IGNORECASE)


def norm(text: str) -> str:
    t = (text or "").lower()
    t = t.replace("\u00a0", " ")
    t = re.sub(r"\s+", " ", t).strip()
    return t


def boundary_pattern(needle: str) -> str:
    return rf"(?<![{ASCII_WORD}]){re.escape(needle)}(?![{ASCII_WORD}])"


def duration_pattern_for(years: int) -> re.Pattern:
    return re.compile(rf"(?<![{ASCII_WORD}]){int(years)}\+?\s*{UNIT_PATTERN}", flags=re.IGNORECASE)


def max_possible_years(release_year: int, current_year: int) -> int:
    return int(current_year) - int(release_year)


def current_year() -> int:
    return datetime.now().year
