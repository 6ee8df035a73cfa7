import os
from pathlib import Path
from typing import Union


def normalize_path(path: Union[str, Path]) -> Path:
    """Lexically cleans a path: collapses '.', '..' and trailing separators."""
    return Path(os.path.normpath(os.fspath(path)))


def format_rate(value: float) -> str:
    """Renders a frame rate as '30' or '59.941' (no trailing '.0')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def file_extension(path: Union[str, Path]) -> str:
    """
    Lowercased text from the last dot of the file name, dot included.
    Unlike Path.suffix, '.mp4' has extension '.mp4'. No dot gives ''.
    """
    name = Path(path).name
    dot = name.rfind('.')
    if dot < 0:
        return ''
    return name[dot:].lower()
