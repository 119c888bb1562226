# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import List

from companion.models.categories import ProblemCategory
from companion.utils.keyword_tables import PROBLEM_KEYWORDS


def detect_problems(message: str) -> List[ProblemCategory]:
    """
    Returns every category whose keyword list has a substring hit in the message,
    in keyword-table order. Each category appears at most once.
    """
    msg = message.lower()
    detected = []
    for category, keywords in PROBLEM_KEYWORDS.items():
        if any(keyword in msg for keyword in keywords):
            detected.append(ProblemCategory(category))
    return detected
