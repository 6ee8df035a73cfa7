"""
HD compliance rules.

Checks run in a fixed order (width, height, then frame rate) and the first
failing check supplies the reason, so messages stay stable across runs.
"""
from . import config
from .models import ClassificationResult, ImageFormat, VideoFormat
from .utils import format_rate


def _check_geometry(width: int, height: int) -> ClassificationResult:
    if width != config.HD_WIDTH:
        return ClassificationResult.non_compliant(f"Invalid width size({width})")
    if height != config.HD_HEIGHT:
        return ClassificationResult.non_compliant(f"Invalid height size({height})")
    return ClassificationResult.compliant()


def classify_video(fmt: VideoFormat) -> ClassificationResult:
    """1920x1080 at exactly 60 or 59.94 fps. No tolerance on the rate."""
    result = _check_geometry(fmt.width, fmt.height)
    if not result.is_compliant:
        return result
    if fmt.framerate not in config.HD_FRAMERATES:
        return ClassificationResult.non_compliant(f"Invalid frame rate({format_rate(fmt.framerate)})")
    return result


def classify_image(fmt: ImageFormat) -> ClassificationResult:
    return _check_geometry(fmt.width, fmt.height)
