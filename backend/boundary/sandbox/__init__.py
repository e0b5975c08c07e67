"""
Code sandbox boundary.

Exports: E2BSandboxClient, ExecutionResult, SandboxExecutor
"""

from .e2b_client import E2BSandboxClient
from .schema import ExecutionResult, SandboxExecutor

__all__ = ["E2BSandboxClient", "ExecutionResult", "SandboxExecutor"]
