# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import List
from pydantic import BaseModel

from companion.models.resources import CrisisResource


class CrisisResourceList(BaseModel):
    resources: List[CrisisResource]


class ErrorResponse(BaseModel):
    error: str
