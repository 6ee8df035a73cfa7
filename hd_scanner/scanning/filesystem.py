import os
import logging
from pathlib import Path
from typing import Iterator, Optional
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from tqdm import tqdm

from .. import config
from ..classifier import classify_image, classify_video
from ..exceptions import ProbeError, WalkError
from ..models import AssetResult, ClassificationResult, ScanSummary
from ..probing import ImageProbe, VideoProbe
from ..reporting import log_result
from .dispatch import asset_kinds


class AssetScanner:
    def __init__(self,
                 video_probe: Optional[VideoProbe] = None,
                 image_probe: Optional[ImageProbe] = None,
                 max_workers: int = config.DEFAULT_MAX_WORKERS,
                 show_progress: bool = True):
        self.video_probe = video_probe or VideoProbe()
        self.image_probe = image_probe or ImageProbe()
        self.max_workers = max(1, max_workers)
        self.show_progress = show_progress

    def scan(self, root: Path) -> ScanSummary:
        """
        Walks root, probes and classifies every recognized asset, and returns
        once every submitted task has finished.

        Tasks run on a fixed-size pool and are submitted while the walk is in
        progress; the wait for completion only starts after the walk is done.

        Raises:
            WalkError: the tree could not be traversed. Queued tasks are
                       cancelled; tasks already running are awaited first.
        """
        summary = ScanSummary(root=root)
        futures: dict[Future, tuple[Path, str]] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="probe") as executor:
            try:
                for path in self.iter_entries(root):
                    for kind in asset_kinds(path):
                        future = executor.submit(self._process_asset, path, kind)
                        futures[future] = (path, kind)
            except WalkError:
                executor.shutdown(wait=True, cancel_futures=True)
                raise

            logging.info(f"Walk complete: {len(futures)} assets queued, {self.max_workers} workers")

            # Join barrier
            for future in tqdm(as_completed(futures), total=len(futures),
                               desc="Probing", disable=not self.show_progress):
                path, kind = futures[future]
                try:
                    summary.add(future.result())
                except Exception as e:
                    logging.error(f"Failed to process {path}: {e}")
                    summary.add(AssetResult(path, kind, ClassificationResult.probe_failed(str(e))))

        return summary

    def _process_asset(self, path: Path, kind: str) -> AssetResult:
        """Probe -> classify -> report for one asset. Probe errors stay in here."""
        try:
            if kind == 'video':
                result = classify_video(self.video_probe.probe(path))
            else:
                result = classify_image(self.image_probe.probe(path))
        except ProbeError as e:
            result = ClassificationResult.probe_failed(str(e))

        asset = AssetResult(path=path, kind=kind, result=result)
        log_result(asset)
        return asset

    def iter_entries(self, root: Path) -> Iterator[Path]:
        """
        Depth-first walker using os.scandir, lexical order at each level
        (a subdirectory is descended into where its name sorts).
        Yields every non-directory entry. Directory symlinks are not followed.
        Any listing failure, including a missing root, is fatal for the walk.
        """
        stack = [self._list_dir(root)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            if entry.is_dir(follow_symlinks=False):
                stack.append(self._list_dir(Path(entry.path)))
            else:
                yield Path(entry.path)

    def _list_dir(self, directory: Path) -> Iterator[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise WalkError(f"Cannot read directory {directory}: {e}") from e
        entries.sort(key=lambda e: e.name)
        return iter(entries)
