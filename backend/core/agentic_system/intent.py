"""
Intent routing for chat messages.

A session mode hint wins; otherwise the classifier model decides. The
classifier is fail-open: any error or unrecognized label routes to GENERAL.

Dependencies: backend.core.agentic_system.generation
System role: Chooses which agent handles a message
"""

import logging
from enum import Enum
from typing import Sequence

from backend.core.agentic_system.generation import CodeGenerationClient

logger = logging.getLogger(__name__)

CONTEXT_MESSAGE_COUNT = 4


class Intent(str, Enum):
    """Agent a message is routed to."""

    ANALYSIS = "ANALYSIS"
    PREPARATION = "PREPARATION"
    GENERAL = "GENERAL"


_MODE_TO_INTENT = {
    "data-analysis": Intent.ANALYSIS,
    "data-preparation": Intent.PREPARATION,
}


def intent_from_mode(mode: str | None) -> Intent | None:
    """Intent forced by a session mode hint, None for default or unknown modes."""
    if not mode:
        return None
    return _MODE_TO_INTENT.get(mode)


def build_conversation_context(messages: Sequence) -> str:
    """
    Render the last few messages as "role: content" lines.

    Args:
        messages: Message records (attributes role/content), oldest first

    Returns:
        str: Newline-joined lines, empty when there are no messages
    """
    recent = list(messages)[-CONTEXT_MESSAGE_COUNT:]
    return "\n".join(f"{m.role}: {m.content}" for m in recent)


async def classify_intent(
    client: CodeGenerationClient,
    message: str,
    context: str = "",
) -> Intent:
    """
    Classify a message. Never raises.

    ANALYSIS is checked before PREPARATION, so a label naming both routes
    to ANALYSIS.
    """
    try:
        label = (await client.classify(message, context)).upper()
    except Exception as e:
        logger.error(f"{__name__}:classify_intent - Classification failed: {e}")
        return Intent.GENERAL

    if Intent.ANALYSIS.value in label:
        return Intent.ANALYSIS
    if Intent.PREPARATION.value in label:
        return Intent.PREPARATION
    return Intent.GENERAL


async def resolve_intent(
    client: CodeGenerationClient,
    message: str,
    mode: str | None = None,
    context: str = "",
) -> Intent:
    """Mode hint first; the classifier runs only when the hint is not recognized."""
    hinted = intent_from_mode(mode)
    if hinted is not None:
        logger.info(f"{__name__}:resolve_intent - Using mode hint {mode} -> {hinted.value}")
        return hinted

    intent = await classify_intent(client, message, context)
    logger.info(f"{__name__}:resolve_intent - Classified intent: {intent.value}")
    return intent
