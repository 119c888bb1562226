# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from companion.models.categories import ProblemCategory
from companion.services.problem_detector import detect_problems


def test_depression_only():
    assert detect_problems("I feel so sad and empty") == [ProblemCategory.depression]


def test_anxious_and_overwhelmed_reports_both_in_table_order():
    # "overwhelmed" hits both the anxiety and the stress lists
    assert detect_problems("I feel so anxious and overwhelmed") == ["anxiety", "stress"]


def test_each_category_reported_once():
    detected = detect_problems("panic, worry, fear, nervous, scared")
    assert detected == ["anxiety"]


def test_table_order_not_message_order():
    assert detect_problems("What is the meaning of all this? I am so tired") == ["stress", "existential"]


def test_case_insensitive():
    assert detect_problems("PANIC ATTACKS every night") == ["anxiety"]


def test_partial_keyword_matches():
    assert detect_problems("my anxieties keep growing") == ["anxiety"]
    assert detect_problems("I am stressed") == ["anxiety", "stress"]


def test_substring_matches_inside_unrelated_words():
    # "studied" contains "die"; plain containment is kept on purpose
    assert detect_problems("I studied all night") == ["depression"]


def test_no_keywords():
    assert detect_problems("Hello there, nice weather today") == []
    assert detect_problems("") == []


def test_all_categories():
    detected = detect_problems("anxious, hopeless, burnout and no purpose")
    assert detected == ["anxiety", "depression", "stress", "existential"]
