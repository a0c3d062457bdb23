# -*- coding: utf-8 -*-
import random
from typing import List, Optional

VALID_MESSAGES = [
    "Checks out. Somebody at HR actually did the math.",
    "Physically possible. A rare sight in a job posting.",
    "Reasonable ask. Nothing to see here.",
    "The timeline holds up. Carry on.",
]


def invalid_messages(tech_name: str, requested: int, max_years: int) -> List[str]:
    over = requested - max_years
    return [
        f"{tech_name} has existed for {max_years} years. They want {requested}. Time travel not included.",
        f"Asking for {requested} years of {tech_name} means starting {over} years before it was released.",
        f"{requested} years of {tech_name}? Even its creators don't qualify.",
        f"Only {max_years} years of {tech_name} are available on this planet.",
    ]


def pick_commentary(
    is_valid: bool,
    tech_name: str,
    requested: int,
    max_years: int,
    rng: Optional[random.Random] = None,
) -> str:
    choices = VALID_MESSAGES if is_valid else invalid_messages(tech_name, requested, max_years)
    return (rng or random).choice(choices)
