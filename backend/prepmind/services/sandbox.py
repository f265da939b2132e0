"""
Code execution for coding-interview test cases.

Only JavaScript is actually executed. Each call starts a fresh Node.js process
with a CPU limit, a heap cap, no writable files, an empty environment and a
wall-clock timeout; inside that process the candidate's source runs in a `vm`
context that has no `require` or `process`. Every other language gets the
fixed mock result the front-end was built against.
"""
import asyncio
import json
import logging
import math
import re
import resource
import shutil
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from prepmind.config import settings
from prepmind.models.result import Err, ErrorKind, Ok, Result
from prepmind.models.schemas import TestCase, TestResult

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED_ERROR = "Language execution not implemented yet"
MOCK_WRONG_OUTPUT = "Wrong output"

# Node itself (thread stacks, code space, malloc arenas) on top of the heap cap
RUNTIME_OVERHEAD_MB = 256

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Runs inside the child process. Reads {source, entryPoint, input, timeoutMs}
# from stdin and writes {ok, output} or {ok, error} to stdout.
NODE_HARNESS = r"""
const vm = require('vm');
let raw = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', (chunk) => { raw += chunk; });
process.stdin.on('end', () => {
  let reply;
  try {
    const req = JSON.parse(raw);
    const context = vm.createContext(Object.create(null));
    const options = { timeout: req.timeoutMs };
    vm.runInContext('var console = { log() {}, info() {}, warn() {}, error() {} };', context, options);
    const script = req.source + '\n;' + req.entryPoint + '(' + req.input + ');';
    const result = vm.runInContext(script, context, options);
    reply = { ok: true, output: String(result) };
  } catch (err) {
    reply = { ok: false, error: (err && err.message) ? err.message : String(err) };
  }
  process.stdout.write(JSON.stringify(reply));
});
"""


class CodeExecutor(ABC):
    """Runs a single entry-point call against one literal input."""

    language: str

    @abstractmethod
    async def execute(self, source: str, entry_point: str, input: str) -> Result[str]:
        ...


class NodeExecutor(CodeExecutor):
    language = "javascript"

    def __init__(
        self,
        node_binary: Optional[str] = None,
        timeout: Optional[float] = None,
        memory_limit_mb: Optional[int] = None,
    ):
        self.node_binary = node_binary or settings.SANDBOX_NODE_BINARY
        self.timeout = timeout or settings.SANDBOX_TIMEOUT_SECONDS
        self.memory_limit_mb = memory_limit_mb or settings.SANDBOX_MEMORY_LIMIT_MB

    def _limit_resources(self):
        # Runs in the child between fork and exec
        cpu_seconds = math.ceil(self.timeout) + 1
        resource.setrlimit(resource.RLIMIT_CPU, (cpu_seconds, cpu_seconds))
        resource.setrlimit(resource.RLIMIT_FSIZE, (0, 0))
        resource.setrlimit(resource.RLIMIT_CORE, (0, 0))
        # RLIMIT_DATA covers private anonymous mappings, so ArrayBuffers outside the V8 heap count too
        data_bytes = (self.memory_limit_mb + RUNTIME_OVERHEAD_MB) * 1024 * 1024
        resource.setrlimit(resource.RLIMIT_DATA, (data_bytes, data_bytes))

    async def execute(self, source: str, entry_point: str, input: str) -> Result[str]:
        if not _IDENTIFIER.match(entry_point):
            return Err(ErrorKind.VALIDATION, f"Invalid entry point: {entry_point!r}")

        binary = shutil.which(self.node_binary)
        if binary is None:
            logger.error("Node.js binary %r not found; cannot execute JavaScript", self.node_binary)
            return Err(ErrorKind.EXECUTION, "JavaScript runtime is not available")

        request = json.dumps({
            "source": source,
            "entryPoint": entry_point,
            "input": input,
            "timeoutMs": int(self.timeout * 1000),
        }).encode()

        try:
            process = await asyncio.create_subprocess_exec(
                binary,
                f"--max-old-space-size={self.memory_limit_mb}",
                "-e",
                NODE_HARNESS,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env={},
                preexec_fn=self._limit_resources,
            )
        except OSError as e:
            logger.error("Failed to start Node.js sandbox: %s", e)
            return Err(ErrorKind.EXECUTION, "JavaScript runtime could not be started")
        try:
            # Process start-up counts against the budget too
            stdout, stderr = await asyncio.wait_for(process.communicate(request), timeout=self.timeout + 2)
        except asyncio.TimeoutError:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()
            return Err(ErrorKind.EXECUTION, f"Execution timed out after {self.timeout:g} seconds")

        try:
            reply = json.loads(stdout.decode() or "null")
        except ValueError:
            reply = None
        if not isinstance(reply, dict):
            detail = stderr.decode(errors="replace").strip().splitlines()
            message = detail[-1] if detail else f"Process exited with code {process.returncode}"
            return Err(ErrorKind.EXECUTION, message)

        if reply.get("ok"):
            return Ok(str(reply.get("output", "")))
        return Err(ErrorKind.EXECUTION, str(reply.get("error") or "Execution failed"))


class SandboxService:
    def __init__(self, executors: Optional[List[CodeExecutor]] = None):
        executors = executors if executors is not None else [NodeExecutor()]
        self.executors: Dict[str, CodeExecutor] = {e.language: e for e in executors}

    async def run_test_cases(
        self,
        source: str,
        language: str,
        test_cases: List[TestCase],
        entry_point: str = "solution",
    ) -> List[TestResult]:
        """Run every test case; faults become failed results, never exceptions."""
        executor = self.executors.get(language)
        if executor is None:
            return mock_results(test_cases)

        results = []
        for case in test_cases:
            outcome = await executor.execute(source, entry_point, case.input)
            if outcome.ok:
                actual = outcome.value
                results.append(TestResult(
                    passed=actual.strip() == case.expected_output.strip(),
                    input=case.input,
                    expected_output=case.expected_output,
                    actual_output=actual,
                ))
            else:
                results.append(TestResult(
                    passed=False,
                    input=case.input,
                    expected_output=case.expected_output,
                    actual_output="",
                    error=outcome.message,
                ))
        return results


def mock_results(test_cases: List[TestCase]) -> List[TestResult]:
    """Fixed result for languages without an executor: only the first case passes."""
    return [
        TestResult(
            passed=index == 0,
            input=case.input,
            expected_output=case.expected_output,
            actual_output=case.expected_output if index == 0 else MOCK_WRONG_OUTPUT,
            error=None if index == 0 else NOT_IMPLEMENTED_ERROR,
        )
        for index, case in enumerate(test_cases)
    ]


# Global instance
sandbox_service = SandboxService()
