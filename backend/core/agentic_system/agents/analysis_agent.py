"""
Analysis agent.

Generates a plotting script for the session's latest dataset, runs it in a
sandbox and returns the rendered PNG base64 encoded.

Dependencies: backend.core.agentic_system.generation, backend.boundary.sandbox
System role: Handles ANALYSIS (visualization) requests
"""

import base64
import logging

from backend.core.agentic_system.agents.schema import AgentDependencies, AgentResult
from backend.core.agentic_system.generation import PLOT_OUTPUT_PATH
from backend.observability.log_utils import truncate

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = (
    "📊 I'd love to help you visualize your data! But first, please upload a CSV "
    "file using the upload button. Once you do, I can create charts, graphs, and "
    "plots for you."
)
SUCCESS_MESSAGE = (
    "📊 Here's your visualization! I created this chart based on your data. "
    "Let me know if you'd like any modifications or a different type of chart."
)
ERROR_MESSAGE = (
    "I encountered an error while creating your visualization. "
    "Please try again or rephrase your request."
)


def failure_message(error_details: str) -> str:
    return (
        "I tried to create the visualization but encountered an issue. This might be "
        "due to the data format or the type of chart requested.\n\n"
        f"**Error details:**\n```\n{truncate(error_details, 300)}\n```\n\n"
        "Could you try rephrasing your request or check if your data has the "
        "columns you're referring to?"
    )


async def run_analysis_agent(
    deps: AgentDependencies,
    session_id: str,
    message: str,
) -> AgentResult:
    """
    Create a visualization for the session's latest data version.

    Args:
        deps: Persistence, code generation and sandbox handles
        session_id: Session whose data is plotted
        message: User's visualization request

    Returns:
        AgentResult: image_base64 set on success
    """
    logger.info(f"{__name__}:run_analysis_agent - Starting analysis for session {session_id}")

    try:
        latest = await deps.persistence.get_latest_data_version(session_id)
        if latest is None:
            return AgentResult(message=NO_DATA_MESSAGE, success=False)

        code = await deps.codegen.generate_plot_code(
            message,
            latest.file_url,
            f"File: {latest.file_name}",
        )
        logger.info(f"{__name__}:run_analysis_agent - Generated code: {truncate(code, 200)}...")

        result = await deps.sandbox.execute_with_file(code, PLOT_OUTPUT_PATH, deps.timeout)

        if result.success and result.file_content:
            image_base64 = base64.b64encode(result.file_content).decode("ascii")
            return AgentResult(message=SUCCESS_MESSAGE, success=True, image_base64=image_base64)

        error_details = result.stderr or result.stdout or "Unknown error"
        logger.error(f"{__name__}:run_analysis_agent - Execution failed: {truncate(error_details, 300)}")
        return AgentResult(message=failure_message(error_details), success=False)

    except Exception as e:
        logger.error(f"{__name__}:run_analysis_agent - Error: {e}", exc_info=True)
        return AgentResult(message=ERROR_MESSAGE, success=False)
