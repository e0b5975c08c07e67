"""
Agent dispatch.

Dependencies: backend.core.agentic_system.agents, backend.core.agentic_system.intent
System role: Runs exactly one agent per chat message
"""

import logging

from backend.core.agentic_system.agents.analysis_agent import run_analysis_agent
from backend.core.agentic_system.agents.general_agent import run_general_agent
from backend.core.agentic_system.agents.preparation_agent import run_preparation_agent
from backend.core.agentic_system.agents.schema import AgentDependencies, AgentResult
from backend.core.agentic_system.intent import Intent

logger = logging.getLogger(__name__)

_AGENTS = {
    Intent.ANALYSIS: run_analysis_agent,
    Intent.PREPARATION: run_preparation_agent,
    Intent.GENERAL: run_general_agent,
}


async def dispatch(
    intent: Intent | str,
    deps: AgentDependencies,
    session_id: str,
    message: str,
) -> tuple[Intent, AgentResult]:
    """
    Run the agent for an intent.

    Args:
        intent: Resolved intent; unrecognized values route to GENERAL
        deps: Agent dependencies
        session_id: Target session
        message: User message

    Returns:
        tuple[Intent, AgentResult]: The intent actually served and its result
    """
    try:
        resolved = Intent(intent)
    except ValueError:
        logger.warning(f"{__name__}:dispatch - Unknown intent {intent!r}, using GENERAL")
        resolved = Intent.GENERAL

    result = await _AGENTS[resolved](deps, session_id, message)
    return resolved, result
