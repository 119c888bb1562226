# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from typing import List, Optional, Sequence
import requests
from pydantic import ValidationError

from companion.models.message import ChatMessage
from companion.models.resources import ConditionInfo, CrisisResource
from companion.schemas.chat_schemas import ChatResponse
from companion.schemas.info_schemas import CrisisResourceList
from companion.utils import config

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class ChatTransportError(Exception):
    """The chat round-trip could not produce a usable reply."""


class ChatApiClient:
    """
    Thin requests wrapper over the companion HTTP API.
    """

    def __init__(self, base_url: str = None, timeout: float = None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    def send_chat(self, message: str, history: Sequence[ChatMessage] = ()) -> ChatResponse:
        payload = {
            "message": message,
            "conversationHistory": [m.to_wire() for m in history],
        }
        try:
            response = requests.post(
                f"{self.base_url}/api/chat",
                headers=HEADERS,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return ChatResponse.model_validate(response.json())
        except (requests.RequestException, ValueError, ValidationError) as e:
            raise ChatTransportError(f"Chat request failed: {e}") from e

    def get_condition_info(self, condition: str) -> Optional[ConditionInfo]:
        """
        Returns None for conditions the server does not know (404).
        Other HTTP failures propagate as requests exceptions.
        """
        response = requests.get(
            f"{self.base_url}/api/mental-health-info/{condition}",
            timeout=self.timeout,
        )
        if response.status_code == 404:
            logger.info(f"ℹ️ No info available for condition '{condition}'")
            return None
        response.raise_for_status()
        return ConditionInfo.model_validate(response.json())

    def get_crisis_resources(self) -> List[CrisisResource]:
        response = requests.get(f"{self.base_url}/api/crisis-resources", timeout=self.timeout)
        response.raise_for_status()
        return CrisisResourceList.model_validate(response.json()).resources
