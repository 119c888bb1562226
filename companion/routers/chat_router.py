# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import random
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request

from companion.schemas.chat_schemas import ChatRequest, ChatResponse
from companion.services.problem_detector import detect_problems
from companion.services.response_generator import generate_response
from companion.utils.config import CHAT_RATE_LIMIT
from companion.utils.prompt_templates import SERVER_FALLBACK_REPLY
from companion.utils.rate_limit_utils import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])

_rng = random.Random()

CHAT_REQUEST_SCHEMA = ChatRequest.model_json_schema(by_alias=True)


def get_rng() -> random.Random:
    return _rng


@router.post(
    "/chat",
    response_model=ChatResponse,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": CHAT_REQUEST_SCHEMA}}}},
)
@limiter.limit(CHAT_RATE_LIMIT)
async def chat(
    request: Request,
    rng: random.Random = Depends(get_rng),
):
    """
    Keyword-based empathetic reply. Never fails: a malformed body or any
    other error yields the fallback reply.
    """
    try:
        # Parsed here rather than as a body parameter so bad input never becomes a 422
        payload = ChatRequest.model_validate(await request.json())
        logger.info(f"📨 Received message: {payload.message}")

        detected_issues = detect_problems(payload.message)
        if detected_issues:
            logger.info(f"🔍 Detected issues: {', '.join(issue.value for issue in detected_issues)}")

        reply = generate_response(
            payload.message,
            detected_issues,
            len(payload.conversation_history),
            rng=rng,
        )

        logger.info("✅ Sending response")
        return ChatResponse(
            reply=reply,
            detected_issues=detected_issues,
            timestamp=datetime.now(timezone.utc),
        )

    except Exception as e:
        logger.error(f"❌ Error processing chat: {e}")
        return ChatResponse(
            reply=SERVER_FALLBACK_REPLY,
            detected_issues=[],
            timestamp=datetime.now(timezone.utc),
        )
