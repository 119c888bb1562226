# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional
from pydantic import BaseModel, Field

from companion.utils.mood_utils import get_mood_emoji, get_mood_color


class MoodEntry(BaseModel):
    id: Optional[str] = None  # store key, never written into the record itself
    mood: int = Field(ge=1, le=10)
    notes: str
    date: str
    time: str
    timestamp: int  # epoch milliseconds

    @property
    def emoji(self) -> str:
        return get_mood_emoji(self.mood)

    @property
    def color(self) -> str:
        return get_mood_color(self.mood)

    def to_record(self) -> dict:
        return self.model_dump(exclude={"id"})


class JournalEntry(BaseModel):
    id: Optional[str] = None
    title: str
    content: str
    date: str
    time: str
    timestamp: int

    def to_record(self) -> dict:
        return self.model_dump(exclude={"id"})
