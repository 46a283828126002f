"""Full-page JPEG capture exercising every rendering option."""

import logging
import sys

from pxshot import (
    Client,
    ClientConfig,
    Format,
    PxshotError,
    ScreenshotOptions,
    WaitUntil,
)
from pxshot.application.settings import get_pxshot_settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger("pxshot.examples.full_options")


def main() -> int:
    settings = get_pxshot_settings()
    if not settings.api_key:
        logger.error("PXSHOT_API_KEY environment variable not set")
        return 1

    config = ClientConfig(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout_seconds=120,
        user_agent="MyApp/1.0",
    )
    options = ScreenshotOptions(
        url="https://news.ycombinator.com",
        format=Format.jpeg,
        quality=85,
        width=1920,
        height=1080,
        full_page=True,
        wait_until=WaitUntil.networkidle,
        wait_for_timeout=1000,
        device_scale_factor=2.0,
    )
    try:
        with Client(config) as client:
            logger.info("Taking full-page screenshot with all options...")
            result = client.screenshot(options)
            result.save("full_page.jpg")
            logger.info("Full-page screenshot saved to full_page.jpg (%d bytes)", len(result.bytes))
    except PxshotError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
