# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import random
from typing import Optional, Sequence

from companion.models.categories import ProblemCategory
from companion.utils.prompt_templates import (
    RESPONSE_TEMPLATES,
    GENERAL_TEMPLATES,
    FOLLOW_UP_PROMPTS,
)

# Follow-ups only once the conversation has some history
FOLLOW_UP_MIN_TURNS = 2
FOLLOW_UP_CHANCE = 0.5


def generate_response(
    message: str,
    detected_issues: Sequence[ProblemCategory],
    prior_turn_count: int,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Picks a template for the first detected issue (or a general one) and,
    past the first couple of turns, sometimes appends a follow-up question.
    """
    rng = rng or random.Random()

    if detected_issues:
        templates = RESPONSE_TEMPLATES[ProblemCategory(detected_issues[0]).value]
    else:
        templates = GENERAL_TEMPLATES
    response = rng.choice(templates)

    if prior_turn_count > FOLLOW_UP_MIN_TURNS and rng.random() < FOLLOW_UP_CHANCE:
        response += " " + rng.choice(FOLLOW_UP_PROMPTS)

    return response
