# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from companion.models.categories import ProblemCategory, Sender


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: Sender
    text: str
    timestamp: datetime
    detected_issues: Optional[Tuple[ProblemCategory, ...]] = Field(default=None, alias="detectedIssues")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SessionState(BaseModel):
    """
    Immutable snapshot of a chat session. Transitions build a new snapshot
    with model_copy(); nothing mutates one in place.
    """
    model_config = ConfigDict(frozen=True)

    is_open: bool = False
    transcript: Tuple[ChatMessage, ...] = ()
    input_text: str = ""
    busy: bool = False
    detected_issues: Tuple[ProblemCategory, ...] = ()

    @property
    def status(self) -> str:
        if self.busy:
            return "awaiting_reply"
        return "opened" if self.is_open else "idle"
