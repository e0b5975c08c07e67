"""
Preparation agent.

Generates a cleaning script for the session's latest dataset, runs it in a
sandbox and stores the cleaned CSV as the session's next data version.

Dependencies: backend.core.agentic_system.generation, backend.boundary.sandbox
System role: Handles PREPARATION (cleaning and transformation) requests
"""

import logging

from backend.core.agentic_system.agents.schema import AgentDependencies, AgentResult
from backend.core.agentic_system.generation import CLEANED_OUTPUT_PATH
from backend.observability.log_utils import truncate

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = (
    "🧹 I can help you clean and transform your data! But first, please upload a "
    "CSV file. Once uploaded, I can help you:\n\n"
    "• Remove duplicates\n"
    "• Handle missing values\n"
    "• Filter rows\n"
    "• Transform columns\n"
    "• And much more!"
)
ERROR_MESSAGE = (
    "I encountered an error while processing your data. "
    "Please try again or rephrase your request."
)
DEFAULT_SUMMARY = "Data cleaning completed successfully."


def success_message(version: str, summary: str) -> str:
    return (
        "✅ **Data Cleaned Successfully!**\n\n"
        f"I've processed your data and created a new version (**{version}**).\n\n"
        f"**Summary:**\n{summary}\n\n"
        "📥 You can download the cleaned data using the link below. Future analysis "
        "requests will automatically use this cleaned version."
    )


def failure_message(error_details: str) -> str:
    return (
        "I tried to clean your data but encountered an issue.\n\n"
        f"**Error details:**\n```\n{truncate(error_details, 300)}\n```\n\n"
        "Could you try being more specific about what you'd like to do with the data?"
    )


async def run_preparation_agent(
    deps: AgentDependencies,
    session_id: str,
    message: str,
) -> AgentResult:
    """
    Clean the session's latest data version into a new version.

    The next label is v<number of existing versions>. Counting and the
    latest-version lookup are separate queries, so concurrent requests on
    one session can pick the same label.

    Args:
        deps: Persistence, code generation and sandbox handles
        session_id: Session whose data is cleaned
        message: User's cleaning request

    Returns:
        AgentResult: file_url and file_name set on success
    """
    logger.info(f"{__name__}:run_preparation_agent - Starting preparation for session {session_id}")

    try:
        latest = await deps.persistence.get_latest_data_version(session_id)
        if latest is None:
            return AgentResult(message=NO_DATA_MESSAGE, success=False)

        code = await deps.codegen.generate_cleaning_code(
            message,
            latest.file_url,
            f"File: {latest.file_name}",
        )
        logger.info(f"{__name__}:run_preparation_agent - Generated code: {truncate(code, 200)}...")

        result = await deps.sandbox.execute_with_file(code, CLEANED_OUTPUT_PATH, deps.timeout)

        if not (result.success and result.file_content):
            error_details = result.stderr or result.stdout or "Unknown error"
            logger.error(
                f"{__name__}:run_preparation_agent - Execution failed: {truncate(error_details, 300)}"
            )
            return AgentResult(message=failure_message(error_details), success=False)

        version_count = await deps.persistence.count_data_versions(session_id)
        new_version = f"v{version_count}"
        cleaned_name = f"cleaned_{latest.file_name}"

        stored = await deps.persistence.upload_file(
            session_id,
            cleaned_name,
            result.file_content,
            new_version,
        )
        await deps.persistence.create_data_version(
            session_id,
            new_version,
            cleaned_name,
            stored.file_url,
            file_size=len(result.file_content),
            description=f"Cleaned data: {message[:100]}",
        )

        summary = result.stdout or DEFAULT_SUMMARY
        return AgentResult(
            message=success_message(new_version, summary),
            success=True,
            file_url=stored.file_url,
            file_name=cleaned_name,
        )

    except Exception as e:
        logger.error(f"{__name__}:run_preparation_agent - Error: {e}", exc_info=True)
        return AgentResult(message=ERROR_MESSAGE, success=False)
