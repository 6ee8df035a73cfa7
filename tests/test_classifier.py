import pytest

from hd_scanner.classifier import classify_image, classify_video
from hd_scanner.models import ImageFormat, Outcome, VideoFormat
from hd_scanner.utils import format_rate


@pytest.mark.parametrize("fps", [60, 60.0, 59.94])
def test_hd_video_is_compliant(fps):
    res = classify_video(VideoFormat(1920, 1080, fps, 12_000_000))
    assert res.outcome is Outcome.COMPLIANT
    assert res.reason is None


@pytest.mark.parametrize(
    "fmt,reason",
    [
        (VideoFormat(1280, 1080, 60.0, 0), "Invalid width size(1280)"),
        (VideoFormat(1920, 720, 60.0, 0), "Invalid height size(720)"),
        (VideoFormat(1920, 1080, 30.0, 0), "Invalid frame rate(30)"),
        (VideoFormat(1920, 1080, 29.97, 0), "Invalid frame rate(29.97)"),
    ],
)
def test_single_violation_names_that_field(fmt, reason):
    res = classify_video(fmt)
    assert res.outcome is Outcome.NON_COMPLIANT
    assert res.reason == reason


def test_width_is_reported_before_height_and_rate():
    res = classify_video(VideoFormat(1280, 720, 30.0, 0))
    assert res.reason == "Invalid width size(1280)"


def test_height_is_reported_before_rate():
    res = classify_video(VideoFormat(1920, 720, 30.0, 0))
    assert res.reason == "Invalid height size(720)"


@pytest.mark.parametrize("fps", [59.941, 59.939, 60000 / 1001, 60.0001])
def test_framerate_uses_exact_equality(fps):
    # No tolerance band: near misses of 59.94 are not HD
    res = classify_video(VideoFormat(1920, 1080, fps, 0))
    assert res.outcome is Outcome.NON_COMPLIANT
    assert res.reason == f"Invalid frame rate({format_rate(fps)})"


def test_bitrate_is_not_classified():
    assert classify_video(VideoFormat(1920, 1080, 60.0, 0)).is_compliant


def test_image_rules():
    assert classify_image(ImageFormat(1920, 1080)).outcome is Outcome.COMPLIANT
    assert classify_image(ImageFormat(1080, 1920)).reason == "Invalid width size(1080)"
    assert classify_image(ImageFormat(1920, 1200)).reason == "Invalid height size(1200)"


def test_format_rate():
    assert format_rate(30.0) == "30"
    assert format_rate(60) == "60"
    assert format_rate(59.94) == "59.94"
    assert format_rate(59.941) == "59.941"
