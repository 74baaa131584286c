"""Shell execution utilities.

Provides fire-and-forget process spawning with proper error handling.
"""

import logging
import os
import shutil
import subprocess

logger = logging.getLogger(__name__)


def spawn_detached(args: list[str], *, cwd: str | None = None) -> bool:
    """Start a command without waiting for it.

    Output is discarded and, on POSIX, the child runs in its own
    session so it outlives the caller.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        True if the process was started, False if it could not be spawned.
    """
    try:
        subprocess.Popen(  # nosec: B603
            args,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=os.name == "posix",
        )
    except (FileNotFoundError, OSError) as e:
        logger.error("Failed to start %s: %s", args[0] if args else "<empty>", e)
        return False

    logger.debug("Started %s", " ".join(args))
    return True


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
