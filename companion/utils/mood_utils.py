# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.



def get_mood_emoji(mood: int) -> str:
    if mood <= 2:
        return "😢"
    if mood <= 4:
        return "😐"
    if mood <= 7:
        return "🙂"
    return "😊"


def get_mood_color(mood: int) -> str:
    if mood <= 2:
        return "#ef4444"
    if mood <= 4:
        return "#f59e0b"
    if mood <= 7:
        return "#10b981"
    return "#00d9ff"
