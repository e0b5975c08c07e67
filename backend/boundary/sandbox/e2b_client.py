"""
E2B sandbox client.

Each call gets a fresh remote sandbox: install the analysis packages, write
the script, run it, optionally read one output file back, and kill the
sandbox. Nothing here raises; every failure becomes an unsuccessful
ExecutionResult.

Dependencies: e2b_code_interpreter
System role: Remote execution of generated analysis and cleaning scripts
"""

import logging
import time

from e2b_code_interpreter import AsyncSandbox, CommandExitException

from backend.boundary.sandbox.schema import ExecutionResult
from backend.configs.sandbox import SandboxSettings
from backend.observability.log_utils import truncate

logger = logging.getLogger(__name__)


class E2BSandboxClient:
    """SandboxExecutor backed by E2B AsyncSandbox."""

    def __init__(self, settings: SandboxSettings) -> None:
        """
        Initialize the client.

        Args:
            settings: API key, template, package list and timeouts
        """
        self._settings = settings

    @property
    def install_command(self) -> str:
        return "pip install " + " ".join(self._settings.packages)

    async def _create_sandbox(self) -> AsyncSandbox:
        kwargs = {"api_key": self._settings.api_key}
        if self._settings.template:
            kwargs["template"] = self._settings.template
        return await AsyncSandbox.create(**kwargs)

    async def _kill(self, sandbox: AsyncSandbox) -> None:
        try:
            await sandbox.kill()
        except Exception as e:
            logger.warning(f"{__name__}:_kill - Failed to kill sandbox: {e}")

    async def _run_script(self, sandbox: AsyncSandbox, code: str, timeout: float) -> ExecutionResult:
        await sandbox.commands.run(
            self.install_command,
            timeout=self._settings.install_timeout,
        )
        await sandbox.files.write(self._settings.script_path, code)

        try:
            result = await sandbox.commands.run(
                f"python {self._settings.script_path}",
                timeout=timeout,
            )
        except CommandExitException as e:
            # Non-zero exit is a failed run, not an infrastructure error
            return ExecutionResult(
                stdout=e.stdout or "",
                stderr=e.stderr or "",
                success=False,
                exit_code=e.exit_code,
            )

        return ExecutionResult(
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            success=result.exit_code == 0,
            exit_code=result.exit_code,
        )

    async def _read_output(self, sandbox: AsyncSandbox, output_path: str) -> bytes | None:
        try:
            data = await sandbox.files.read(output_path, format="bytes")
        except Exception as e:
            logger.warning(f"{__name__}:_read_output - Could not read {output_path}: {e}")
            return None
        return bytes(data)

    async def execute(self, code: str, timeout: float | None = None) -> ExecutionResult:
        """
        Run a Python script in a fresh sandbox.

        Args:
            code: Python source
            timeout: Script timeout in seconds (settings default if None)

        Returns:
            ExecutionResult: stdout, stderr and success flag
        """
        return await self._execute(code, output_path=None, timeout=timeout)

    async def execute_with_file(
        self,
        code: str,
        output_path: str,
        timeout: float | None = None,
    ) -> ExecutionResult:
        """
        Run a Python script and read back a file it produced.

        Args:
            code: Python source
            output_path: Absolute path inside the sandbox to read after the run
            timeout: Script timeout in seconds (settings default if None)

        Returns:
            ExecutionResult: file_content is None when the file does not exist
        """
        return await self._execute(code, output_path=output_path, timeout=timeout)

    async def _execute(
        self,
        code: str,
        output_path: str | None,
        timeout: float | None,
    ) -> ExecutionResult:
        timeout = timeout or self._settings.default_timeout
        sandbox: AsyncSandbox | None = None
        start = time.time()

        try:
            sandbox = await self._create_sandbox()
            result = await self._run_script(sandbox, code, timeout)

            if output_path:
                file_content = await self._read_output(sandbox, output_path)
                result = result.model_copy(update={"file_content": file_content})

            logger.info(
                f"{__name__}:_execute - Script finished success={result.success} "
                f"exit_code={result.exit_code} in {time.time() - start:.1f}s"
            )
            if not result.success:
                logger.warning(
                    f"{__name__}:_execute - stderr: {truncate(result.stderr, 300)}"
                )
            return result

        except Exception as e:
            logger.error(f"{__name__}:_execute - Sandbox execution failed: {e}")
            return ExecutionResult(stdout="", stderr=str(e) or "Unknown error", success=False)

        finally:
            if sandbox is not None:
                await self._kill(sandbox)
