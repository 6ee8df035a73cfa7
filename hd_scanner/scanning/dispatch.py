import logging
from pathlib import Path
from typing import List

from .. import config
from ..utils import file_extension


def asset_kinds(path: Path) -> List[str]:
    """
    Returns the media families ('video', 'image') a path should be probed as.

    Directories, files without a dot and unknown extensions map to an empty
    list and are skipped without a log line. Matching is exact against the
    configured extension sets, case-insensitive.
    """
    if path.is_dir():
        return []
    ext = file_extension(path)
    if not ext:
        return []
    kinds = list(config.EXT_TO_TYPES.get(ext, ()))
    if kinds:
        logging.debug(f"Dispatching {path.name} as {'/'.join(kinds)} ({ext})")
    return kinds
