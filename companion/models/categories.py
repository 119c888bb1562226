# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import enum


class ProblemCategory(str, enum.Enum):
    anxiety = "anxiety"
    depression = "depression"
    stress = "stress"
    existential = "existential"


class Sender(str, enum.Enum):
    user = "user"
    bot = "bot"
