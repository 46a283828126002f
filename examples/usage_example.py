"""Report usage statistics for the current billing period."""

import logging
import sys

from pxshot import Client, PxshotError
from pxshot.application.settings import get_pxshot_settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger("pxshot.examples.usage")


def _percent(used: int, limit: int) -> float:
    return used * 100.0 / limit if limit > 0 else 0.0


def main() -> int:
    try:
        with Client(get_pxshot_settings().to_client_config()) as client:
            usage = client.usage()
    except PxshotError as exc:
        logger.error("Error: %s", exc)
        return 1

    logger.info("Billing period: %s to %s", usage.period_start, usage.period_end)
    logger.info(
        "Screenshots: %d / %d (%.1f%%)",
        usage.screenshots_taken,
        usage.screenshots_limit,
        _percent(usage.screenshots_taken, usage.screenshots_limit),
    )
    logger.info(
        "Storage:     %d / %d bytes (%.1f%%)",
        usage.storage_bytes_used,
        usage.storage_bytes_limit,
        _percent(usage.storage_bytes_used, usage.storage_bytes_limit),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
