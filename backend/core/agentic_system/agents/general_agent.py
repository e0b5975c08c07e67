"""
General agent.

Conversational replies using the recent message history.

Dependencies: backend.core.agentic_system.generation
System role: Handles GENERAL requests
"""

import logging

from backend.core.agentic_system.agents.schema import AgentDependencies, AgentResult

logger = logging.getLogger(__name__)

HISTORY_MESSAGE_COUNT = 10
ERROR_MESSAGE = "I'm sorry, I encountered an error processing your request. Please try again."


async def run_general_agent(
    deps: AgentDependencies,
    session_id: str,
    message: str,
) -> AgentResult:
    """Reply conversationally; history load failures are ignored."""
    history: list[dict[str, str]] = []
    try:
        messages = await deps.persistence.get_session_messages(session_id)
        history = [
            {"role": m.role, "content": m.content}
            for m in messages[-HISTORY_MESSAGE_COUNT:]
        ]
    except Exception as e:
        logger.warning(f"{__name__}:run_general_agent - Could not load history: {e}")

    try:
        logger.info(f"{__name__}:run_general_agent - Generating reply with {len(history)} history messages")
        reply = await deps.codegen.generate_chat_response(message, history)
        return AgentResult(message=reply, success=True)
    except Exception as e:
        logger.error(f"{__name__}:run_general_agent - Error: {e}")
        return AgentResult(message=ERROR_MESSAGE, success=False)
