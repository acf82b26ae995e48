from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def probe_host(host: str, *, attempts: int = 5, dry_run: bool = False) -> bool:
    """Ping `host` once per attempt; True on the first answered probe."""

    for attempt in range(1, attempts + 1):
        r = run_cmd(["ping", "-c", "1", "-W", "2", host], check=False, dry_run=dry_run)
        if r.returncode == 0:
            logger.info("Host %s reachable (attempt %d/%d)", host, attempt, attempts)
            return True
        logger.debug("No reply from %s (attempt %d/%d)", host, attempt, attempts)
    return False
