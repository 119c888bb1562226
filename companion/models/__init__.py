# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from .categories import ProblemCategory, Sender
from .message import ChatMessage, SessionState
from .entries import MoodEntry, JournalEntry
from .resources import ConditionInfo, CrisisResource
