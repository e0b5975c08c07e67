"""
Sandbox execution schemas and capability.

Dependencies: pydantic
System role: Contract between agents and the code execution backend
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class ExecutionResult(BaseModel):
    """Outcome of running one script in a sandbox."""

    model_config = ConfigDict(frozen=True)

    stdout: str = Field(default="", description="Captured standard output")
    stderr: str = Field(default="", description="Captured standard error or infrastructure error text")
    success: bool = Field(..., description="True iff the script exited with code 0")
    exit_code: int | None = Field(default=None, description="Process exit code when the script ran")
    file_content: bytes | None = Field(
        default=None,
        description="Bytes of the requested output file, None when absent",
    )


class SandboxExecutor(Protocol):
    """Runs untrusted Python code in an isolated, disposable environment."""

    async def execute(self, code: str, timeout: float | None = None) -> ExecutionResult:
        ...

    async def execute_with_file(
        self,
        code: str,
        output_path: str,
        timeout: float | None = None,
    ) -> ExecutionResult:
        ...
