"""Subprocess helpers for the integration layer."""

import subprocess
from collections.abc import Mapping, Sequence


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute a command, re-raising failures as RuntimeError with context.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation,
            used as "Failed to <operation_context>"
        env: Full environment for the child process (inherits ours if None)

    Returns:
        CompletedProcess with captured text output

    Raises:
        RuntimeError: If the command exits non-zero or the binary is missing
    """
    try:
        return subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            env=dict(env) if env is not None else None,
        )
    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
