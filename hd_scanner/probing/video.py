import logging
import shutil
import subprocess
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from pymediainfo import MediaInfo

from .. import config
from ..exceptions import (
    MediaInfoNotFoundError,
    ProbeError,
    ProbeTimeoutError,
    UnknownVideoTypeError,
)
from ..models import VideoFormat
from ..utils import normalize_path


def locate_mediainfo(binary: str = config.MEDIAINFO_BIN) -> str:
    """
    Resolves the mediainfo executable on PATH.
    Missing mediainfo is a startup failure, not a per-file one.
    """
    resolved = shutil.which(binary)
    if resolved is None:
        raise MediaInfoNotFoundError(
            f"'{binary}' was not found on PATH. Install MediaInfo CLI (https://mediaarea.net) and retry."
        )
    return resolved


class VideoProbe:
    """
    Extracts video geometry and rate by running the MediaInfo CLI out of
    process and mapping its XML report with pymediainfo.

    Every invocation carries a deadline so one stuck file cannot hang its
    worker forever.
    """

    def __init__(self, binary: str = config.MEDIAINFO_BIN, timeout: float = config.PROBE_TIMEOUT_SEC):
        self.binary = binary
        self.timeout = timeout

    def probe(self, path: Union[str, Path]) -> VideoFormat:
        path = normalize_path(path)
        mi = self._run_mediainfo(path)

        video_tracks = mi.video_tracks
        if len(video_tracks) != 1:
            raise UnknownVideoTypeError(f"Unknown video type ({len(video_tracks)} video tracks)")
        video = video_tracks[0]
        general = mi.general_tracks[0] if mi.general_tracks else None

        width = self._as_int(video.width)
        height = self._as_int(video.height)
        # Frame rate: container-level first, then the stream itself
        framerate = self._as_float(general.frame_rate if general else None)
        if framerate is None:
            framerate = self._as_float(video.frame_rate)

        if width is None or height is None or framerate is None:
            raise ProbeError(
                f"Incomplete video metadata (width={video.width}, height={video.height}, frame_rate={framerate})"
            )

        bitrate = self._as_int(video.bit_rate)
        if bitrate is None and general is not None:
            bitrate = self._as_int(general.overall_bit_rate)

        return VideoFormat(
            width=width,
            height=height,
            framerate=framerate,
            bitrate=bitrate or 0,
        )

    # --- Internal Helpers ---

    def _run_mediainfo(self, path: Path) -> MediaInfo:
        """Runs the CLI and parses its OLDXML report (the layout pymediainfo reads)."""
        cmd = [self.binary, *config.MEDIAINFO_ARGS, str(path)]
        logging.debug(f"Running {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeTimeoutError(f"mediainfo timed out after {self.timeout:g}s") from e
        except FileNotFoundError as e:
            raise ProbeError(f"mediainfo not found: {self.binary}") from e
        except OSError as e:
            raise ProbeError(f"mediainfo exec error: {e}") from e

        if proc.returncode != 0:
            # Crashes surface as odd exit codes (e.g. 3221225477 on Windows)
            stderr = (proc.stderr or "").strip()
            raise ProbeError(stderr or f"mediainfo exited {proc.returncode}")

        try:
            return MediaInfo(proc.stdout)
        except ET.ParseError as e:
            raise ProbeError(f"mediainfo output was not valid XML: {e}") from e

    @staticmethod
    def _as_int(value) -> Optional[int]:
        try:
            if value is None:
                return None
            return int(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _as_float(value) -> Optional[float]:
        try:
            if value is None:
                return None
            return float(value)
        except (TypeError, ValueError):
            return None
