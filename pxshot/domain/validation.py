from __future__ import annotations

import math

from pxshot.adapters.schemas import ScreenshotOptions
from pxshot.domain.errors import ValidationError


def validate_screenshot_options(options: ScreenshotOptions) -> None:
    if not options.url:
        raise ValidationError("URL is required")
    if options.quality is not None and not 0 <= options.quality <= 100:
        raise ValidationError("Quality must be between 0 and 100")
    if options.width is not None and options.width <= 0:
        raise ValidationError("Width must be positive")
    if options.height is not None and options.height <= 0:
        raise ValidationError("Height must be positive")
    if options.device_scale_factor is not None and not math.isfinite(options.device_scale_factor):
        raise ValidationError("Device scale factor must be a finite number")
