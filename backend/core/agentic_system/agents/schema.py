"""
Agent result and dependency bundle.

Dependencies: pydantic
System role: Uniform contract between the agents and the chat service
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from backend.boundary.sandbox import SandboxExecutor
from backend.core.agentic_system.generation import CodeGenerationClient

if TYPE_CHECKING:
    from backend.application.services.persistence import PersistenceClient


class AgentResult(BaseModel):
    """Outcome of one agent run."""

    message: str = Field(..., description="User-facing reply text")
    success: bool = Field(..., description="False for guidance, failed runs and errors")
    image_base64: str | None = Field(default=None, description="Rendered chart (analysis)")
    file_url: str | None = Field(default=None, description="Cleaned file URL (preparation)")
    file_name: str | None = Field(default=None, description="Cleaned file name (preparation)")


@dataclass(frozen=True)
class AgentDependencies:
    """Service handles every agent receives."""

    persistence: "PersistenceClient"
    codegen: CodeGenerationClient
    sandbox: SandboxExecutor
    timeout: float = 90.0
