# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


# Substring matching, not word matching: "anxiet" covers "anxiety" and "anxieties".
# Category order here is the order detect_problems() reports matches in.
PROBLEM_KEYWORDS = {
    "anxiety": (
        "anxious",
        "worry",
        "panic",
        "nervous",
        "fear",
        "scared",
        "stress",
        "overwhelmed",
        "anxiet",
    ),
    "depression": (
        "sad",
        "depressed",
        "hopeless",
        "empty",
        "worthless",
        "giving up",
        "give up",
        "suicide",
        "die",
        "nothing matters",
        "no point",
    ),
    "stress": (
        "stressed",
        "pressure",
        "exhausted",
        "tired",
        "burnout",
        "overwhelm",
    ),
    "existential": (
        "meaning",
        "purpose",
        "why exist",
        "pointless",
        "existence",
        "life meaningless",
        "why am i here",
    ),
}
