import logging
from pathlib import Path
from typing import Optional, Union

from . import config
from .exceptions import InvalidSearchRootError
from .models import ScanSummary
from .probing import ImageProbe, VideoProbe, locate_mediainfo
from .reporting import log_summary
from .scanning.filesystem import AssetScanner
from .utils import normalize_path


def resolve_search_root(raw: Optional[Union[str, Path]]) -> Path:
    """Normalizes the requested root; it must be non-empty and absolute."""
    if raw is None or str(raw).strip() == "":
        raise InvalidSearchRootError("Invalid searchPath(): no directory given")
    root = normalize_path(str(raw).strip())
    if not root.is_absolute():
        raise InvalidSearchRootError(f"Invalid searchPath({root}): path must be absolute")
    return root


class HDScannerApp:
    """
    Checks startup preconditions, then runs one scan over an explicit root.
    """

    def __init__(self,
                 mediainfo_bin: str = config.MEDIAINFO_BIN,
                 probe_timeout: float = config.PROBE_TIMEOUT_SEC,
                 max_workers: int = config.DEFAULT_MAX_WORKERS,
                 show_progress: bool = True):
        # Fails fast before anything is walked
        resolved_bin = locate_mediainfo(mediainfo_bin)
        logging.debug(f"Using mediainfo at {resolved_bin}")

        self.scanner = AssetScanner(
            video_probe=VideoProbe(binary=resolved_bin, timeout=probe_timeout),
            image_probe=ImageProbe(),
            max_workers=max_workers,
            show_progress=show_progress,
        )

    def run(self, search_root: Union[str, Path]) -> ScanSummary:
        root = resolve_search_root(search_root)
        logging.info(f"searchPath : {root}")
        summary = self.scanner.scan(root)
        log_summary(summary)
        return summary
