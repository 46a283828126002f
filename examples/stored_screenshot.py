"""Capture a screenshot and let the service host it."""

import logging
import sys

from pxshot import Client, PxshotError, ScreenshotOptions
from pxshot.application.settings import get_pxshot_settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger("pxshot.examples.stored")


def main() -> int:
    try:
        with Client(get_pxshot_settings().to_client_config()) as client:
            logger.info("Taking screenshot with storage...")
            result = client.screenshot(ScreenshotOptions(url="https://example.com", store=True))
    except PxshotError as exc:
        logger.error("Error: %s", exc)
        return 1

    logger.info("Screenshot stored!")
    logger.info("  URL:        %s", result.url)
    logger.info("  Expires:    %s", result.expires_at)
    logger.info("  Dimensions: %dx%d", result.width, result.height)
    logger.info("  Size:       %d bytes", result.size_bytes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
