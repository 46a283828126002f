"""Capture a screenshot of example.com and save it to screenshot.png."""

import logging
import sys

from pxshot import ApiError, Client, HttpError, PxshotError, ScreenshotOptions, ValidationError
from pxshot.application.settings import get_pxshot_settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger("pxshot.examples.basic")


def main() -> int:
    try:
        config = get_pxshot_settings().to_client_config()
    except ValidationError as exc:
        logger.error("%s", exc)
        return 1

    try:
        with Client(config) as client:
            logger.info("Taking screenshot of https://example.com...")
            result = client.screenshot(ScreenshotOptions(url="https://example.com"))
            path = result.save("screenshot.png")
            logger.info("Screenshot saved to %s (%d bytes)", path, len(result.bytes))
    except ApiError as exc:
        logger.error("API Error [%s]: %s", exc.error_code, exc)
        return 1
    except HttpError as exc:
        logger.error("HTTP Error (%s): %s", exc.status_code, exc)
        return 1
    except PxshotError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
