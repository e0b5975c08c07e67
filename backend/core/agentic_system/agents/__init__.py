"""
Data agents and their dispatcher.

Exports: AgentResult, AgentDependencies, run_analysis_agent,
run_preparation_agent, run_general_agent, dispatch
"""

from backend.core.agentic_system.agents.analysis_agent import run_analysis_agent
from backend.core.agentic_system.agents.dispatcher import dispatch
from backend.core.agentic_system.agents.general_agent import run_general_agent
from backend.core.agentic_system.agents.preparation_agent import run_preparation_agent
from backend.core.agentic_system.agents.schema import AgentDependencies, AgentResult

__all__ = [
    "AgentResult",
    "AgentDependencies",
    "run_analysis_agent",
    "run_preparation_agent",
    "run_general_agent",
    "dispatch",
]
