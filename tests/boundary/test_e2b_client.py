"""
Test suite for E2BSandboxClient.

AsyncSandbox.create is patched; the sandbox double records commands, file
writes and kills.

System role: Verification of sandbox lifecycle and result mapping
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from backend.boundary.sandbox import E2BSandboxClient, ExecutionResult
from backend.configs.sandbox import SandboxSettings

MODULE = "backend.boundary.sandbox.e2b_client"


class FakeCommandExit(Exception):
    """Stand-in for CommandExitException carrying the run output."""

    def __init__(self, stdout: str, stderr: str, exit_code: int) -> None:
        super().__init__(stderr)
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code


@pytest.fixture
def settings() -> SandboxSettings:
    return SandboxSettings(
        api_key="e2b-test",
        packages=["pandas", "matplotlib"],
        install_timeout=30.0,
        default_timeout=60.0,
        script_path="/tmp/script.py",
    )


@pytest.fixture
def sandbox() -> MagicMock:
    """Sandbox double whose script run succeeds."""
    sb = MagicMock()
    sb.commands.run = AsyncMock(
        side_effect=[
            SimpleNamespace(stdout="installed", stderr="", exit_code=0),
            SimpleNamespace(stdout="PLOT_SAVED\n", stderr="", exit_code=0),
        ]
    )
    sb.files.write = AsyncMock()
    sb.files.read = AsyncMock(return_value=bytearray(b"png-bytes"))
    sb.kill = AsyncMock()
    return sb


@pytest.fixture
def client(settings) -> E2BSandboxClient:
    return E2BSandboxClient(settings)


class TestExecute:
    """Test suite for execute and execute_with_file."""

    @pytest.mark.asyncio
    async def test_success_installs_writes_runs_and_kills(self, client, sandbox) -> None:
        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)) as create:
            result = await client.execute("print('hi')", timeout=15)

        assert result == ExecutionResult(stdout="PLOT_SAVED\n", stderr="", success=True, exit_code=0)
        create.assert_awaited_once_with(api_key="e2b-test")

        install_call, run_call = sandbox.commands.run.await_args_list
        assert install_call.args == ("pip install pandas matplotlib",)
        assert install_call.kwargs == {"timeout": 30.0}
        assert run_call.args == ("python /tmp/script.py",)
        assert run_call.kwargs == {"timeout": 15}
        sandbox.files.write.assert_awaited_once_with("/tmp/script.py", "print('hi')")
        sandbox.kill.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_default_timeout_used_when_none(self, client, sandbox) -> None:
        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)):
            await client.execute("x = 1")

        assert sandbox.commands.run.await_args_list[1].kwargs == {"timeout": 60.0}

    @pytest.mark.asyncio
    async def test_execute_with_file_reads_output(self, client, sandbox) -> None:
        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)):
            result = await client.execute_with_file("plot()", "/tmp/plot.png")

        assert result.success is True
        assert result.file_content == b"png-bytes"
        sandbox.files.read.assert_awaited_once_with("/tmp/plot.png", format="bytes")
        sandbox.kill.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_output_file_gives_none(self, client, sandbox) -> None:
        sandbox.files.read.side_effect = FileNotFoundError("/tmp/plot.png")

        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)):
            result = await client.execute_with_file("plot()", "/tmp/plot.png")

        assert result.success is True
        assert result.file_content is None

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_failed_run_and_sandbox_killed(self, client, sandbox) -> None:
        sandbox.commands.run.side_effect = [
            SimpleNamespace(stdout="installed", stderr="", exit_code=0),
            FakeCommandExit(stdout="partial", stderr="Traceback: KeyError", exit_code=1),
        ]

        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)), patch(
            f"{MODULE}.CommandExitException", FakeCommandExit
        ):
            result = await client.execute_with_file("boom()", "/tmp/plot.png")

        assert result.success is False
        assert result.exit_code == 1
        assert result.stdout == "partial"
        assert result.stderr == "Traceback: KeyError"
        sandbox.kill.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_infrastructure_error_becomes_failed_result(self, client, sandbox) -> None:
        sandbox.files.write.side_effect = RuntimeError("sandbox unreachable")

        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)):
            result = await client.execute("x = 1")

        assert result.success is False
        assert result.stdout == ""
        assert result.stderr == "sandbox unreachable"
        sandbox.kill.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_failure_never_raises(self, client) -> None:
        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(side_effect=RuntimeError())):
            result = await client.execute("x = 1")

        assert result.success is False
        assert result.stderr == "Unknown error"

    @pytest.mark.asyncio
    async def test_kill_failure_is_swallowed(self, client, sandbox) -> None:
        sandbox.kill.side_effect = RuntimeError("already gone")

        with patch(f"{MODULE}.AsyncSandbox.create", new=AsyncMock(return_value=sandbox)):
            result = await client.execute("x = 1")

        assert result.success is True
