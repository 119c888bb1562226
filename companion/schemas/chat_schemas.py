# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import datetime
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field

from companion.models.categories import ProblemCategory


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    # Only the length is used; items are left unvalidated
    conversation_history: List[Any] = Field(default_factory=list, alias="conversationHistory")


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    detected_issues: List[ProblemCategory] = Field(default_factory=list, alias="detectedIssues")
    timestamp: datetime
