# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from companion.models.categories import ProblemCategory, Sender
from companion.models.message import ChatMessage, SessionState
from companion.models.resources import ConditionInfo
from companion.schemas.chat_schemas import ChatResponse
from companion.utils.prompt_templates import WELCOME_MESSAGE, CLIENT_FALLBACK_REPLY

logger = logging.getLogger(__name__)


# ---------------------- PURE TRANSITIONS ----------------------

def open_chat(state: SessionState, now: datetime) -> SessionState:
    if state.transcript:
        return state.model_copy(update={"is_open": True})
    welcome = ChatMessage(sender=Sender.bot, text=WELCOME_MESSAGE, timestamp=now)
    return state.model_copy(update={"is_open": True, "transcript": (welcome,)})


def close_chat(state: SessionState) -> SessionState:
    # Transcript and busy flag survive a close; reopening resumes the same chat.
    return state.model_copy(update={"is_open": False})


def set_input(state: SessionState, text: str) -> SessionState:
    return state.model_copy(update={"input_text": text})


def can_submit(state: SessionState) -> bool:
    return bool(state.input_text.strip()) and not state.busy


def begin_turn(state: SessionState, now: datetime) -> SessionState:
    if not can_submit(state):
        return state
    user_message = ChatMessage(sender=Sender.user, text=state.input_text, timestamp=now)
    return state.model_copy(update={
        "transcript": state.transcript + (user_message,),
        "input_text": "",
        "busy": True,
    })


def receive_reply(state: SessionState, reply: ChatResponse, now: datetime) -> SessionState:
    issues = tuple(reply.detected_issues)
    bot_message = ChatMessage(
        sender=Sender.bot,
        text=reply.reply,
        timestamp=now,
        detected_issues=issues,
    )
    update = {"transcript": state.transcript + (bot_message,), "busy": False}
    if issues:
        update["detected_issues"] = issues
    return state.model_copy(update=update)


def fail_turn(state: SessionState, now: datetime) -> SessionState:
    apology = ChatMessage(sender=Sender.bot, text=CLIENT_FALLBACK_REPLY, timestamp=now)
    return state.model_copy(update={"transcript": state.transcript + (apology,), "busy": False})


def release_busy(state: SessionState) -> SessionState:
    if not state.busy:
        return state
    return state.model_copy(update={"busy": False})


# ---------------------- CONTROLLER ----------------------

class ChatSession:
    """
    Owns one chat transcript and runs turns against a transport exposing
    send_chat(message, history) -> ChatResponse (normally ChatApiClient).

    Only one turn is in flight at a time; the busy flag is always released,
    whether the round-trip succeeds or fails.
    """

    def __init__(self, transport, clock: Callable[[], datetime] = datetime.now):
        self._transport = transport
        self._clock = clock
        self._state = SessionState()
        self.selected_condition: Optional[str] = None
        self.condition_info: Optional[ConditionInfo] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def transcript(self) -> Tuple[ChatMessage, ...]:
        return self._state.transcript

    @property
    def busy(self) -> bool:
        return self._state.busy

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def detected_issues(self) -> Tuple[ProblemCategory, ...]:
        return self._state.detected_issues

    @property
    def info_trigger(self) -> Optional[ProblemCategory]:
        """The issue a "learn more" prompt should point at, if any."""
        return self._state.detected_issues[0] if self._state.detected_issues else None

    def open(self):
        self._state = open_chat(self._state, self._clock())

    def close(self):
        self._state = close_chat(self._state)

    def set_input(self, text: str):
        self._state = set_input(self._state, text)

    def submit(self) -> bool:
        """
        Runs one chat turn. Returns False when the input is blank or a turn
        is already in flight, in which case nothing changes.
        """
        if not can_submit(self._state):
            return False

        history = self._state.transcript
        self._state = begin_turn(self._state, self._clock())
        message = self._state.transcript[-1].text

        try:
            reply = self._transport.send_chat(message, history)
            self._state = receive_reply(self._state, reply, self._clock())
        except Exception as e:
            logger.warning(f"❌ Error sending message: {e}")
            self._state = fail_turn(self._state, self._clock())
        finally:
            self._state = release_busy(self._state)

        return True

    def show_issue_info(self, client) -> Optional[ConditionInfo]:
        """
        Closes the chat and loads the info record for the current detected
        issue. An unknown tag clears the info panel; a failed fetch is logged
        and leaves the panel as it was.
        """
        condition = self.info_trigger
        if condition is None:
            return None
        self.close()
        return self.show_condition(client, condition.value)

    def show_condition(self, client, condition: str) -> Optional[ConditionInfo]:
        try:
            info = client.get_condition_info(condition)
        except Exception as e:
            logger.warning(f"⚠️ Error fetching condition info for {condition}: {e}")
            return None

        if info is None:
            self.selected_condition = None
            self.condition_info = None
            return None
        self.selected_condition = condition
        self.condition_info = info
        return info
