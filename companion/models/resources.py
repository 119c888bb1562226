# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class ConditionInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    symptoms: Tuple[str, ...]
    coping_strategies: Tuple[str, ...] = Field(alias="copingStrategies")
    when_to_seek_help: str = Field(alias="whenToSeekHelp")


class CrisisResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    contact: str
    available: str
    description: str
