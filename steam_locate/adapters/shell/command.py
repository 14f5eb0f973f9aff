"""
Command runner — spawn an OS command with a bounded timeout.

Every external query (reg, which, pgrep, tasklist, powershell) goes
through here. A timeout, a missing binary, or a non-zero exit all come
back as a failed Receipt; nothing is raised.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import time

from steam_locate.core.models.receipt import Receipt
from steam_locate.core.models.settings import DEFAULT_COMMAND_TIMEOUT

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run argv lists and capture their output.

    Args:
        timeout: Default timeout in seconds for each command.
    """

    def __init__(self, timeout: float = DEFAULT_COMMAND_TIMEOUT):
        self.timeout = timeout

    def run(self, args: list[str], timeout: float | None = None) -> Receipt:
        """Run a command and return a receipt.

        The receipt is ok only when the command exits 0; its ``output``
        is the stripped stdout.
        """
        timeout = timeout if timeout is not None else self.timeout
        source = args[0] if args else "command"
        command = " ".join(args)

        logger.debug("Executing: %s (timeout=%ss)", command, timeout)
        start = time.monotonic()

        kwargs: dict = {}
        if sys.platform == "win32":
            # Keep console windows from flashing up (windowsHide)
            kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                **kwargs,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Command timed out after %ss: %s", timeout, command)
            return Receipt.failure(
                source=source,
                error=f"Command timed out after {timeout}s",
                metadata={"command": command, "timeout": timeout},
            )
        except OSError as e:
            # FileNotFoundError when the binary is not on PATH
            logger.debug("Command could not start: %s (%s)", command, e)
            return Receipt.failure(
                source=source,
                error=f"Command execution error: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()

        if result.returncode == 0:
            return Receipt.success(
                source=source,
                output=output,
                duration_ms=elapsed_ms,
                metadata={"command": command, "return_code": 0, "stderr": stderr},
            )

        logger.debug("Command exited %d: %s", result.returncode, command)
        return Receipt.failure(
            source=source,
            error=stderr or f"Command exited with code {result.returncode}",
            duration_ms=elapsed_ms,
            metadata={"command": command, "return_code": result.returncode, "stdout": output},
        )
