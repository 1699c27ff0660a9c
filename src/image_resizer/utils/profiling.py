"""Timing for the Pillow pipeline steps."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec

from loguru import logger
from PIL import Image

P = ParamSpec("P")


def timed(step: Callable[P, Image.Image]) -> Callable[P, Image.Image]:
    """Log the duration of a pipeline step and the size of the image it produced.

    Failed steps are logged with their duration and the error is re-raised.

    Usage:
        @timed
        def scale_image(image, width, height):
            ...
    """

    @wraps(step)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Image.Image:
        start_time = time.perf_counter()
        try:
            image = step(*args, **kwargs)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(f"[PROFILE] {step.__name__} failed after {elapsed_ms:.1f}ms: {exc}")
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"[PROFILE] {step.__name__} -> {image.width}x{image.height} {image.mode} "
            + f"in {elapsed_ms:.1f}ms"
        )
        return image

    return wrapper
