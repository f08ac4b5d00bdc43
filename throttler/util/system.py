import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger("throttler")


def get_cache_directory() -> Path | None:
    """
    Return the cache directory, creating it if needed. None if it can't be created.
    """
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        cache_dir = Path(xdg_cache) / "throttler"
    else:
        cache_dir = Path.home() / ".cache/throttler"

    if not os.path.exists(cache_dir):
        try:
            os.makedirs(cache_dir, mode=0o700)
        except OSError:
            return None

    return cache_dir


def run_action(action: str, shell: bool = True) -> int:
    """
    Run the action synchronously, inheriting stdin, stdout and stderr.

    Args:
        action (str): The command line, handed to /bin/sh untouched when shell=True.
        shell (bool): If False, split the action with shlex and run it directly.

    Returns:
        The return code of the action. It is only ever logged.
    """
    # The action writes to the same terminal
    sys.stdout.flush()

    if shell:
        logger.info(f"running action via shell: {action!r}")
        rc = subprocess.run(action, shell=True).returncode
    else:
        argv = shlex.split(action)
        if not argv:
            logger.info("no action configured, nothing to run")
            return 0
        logger.info(f"running action without shell: {argv}")
        try:
            rc = subprocess.run(argv).returncode
        except FileNotFoundError as e:
            logger.warning(f"action could not be started: {e}")
            return 127

    if rc != 0:
        logger.warning(f"action exited with {rc}")
    else:
        logger.debug("action exited with 0")

    return rc
