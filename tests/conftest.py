import subprocess

import pytest
from PIL import Image

from hd_scanner.models import ImageFormat, VideoFormat


def mediainfo_xml(general=None, videos=()):
    """Builds a minimal OLDXML report like `mediainfo --Full --Output=OLDXML`."""
    def track(kind, fields):
        body = "".join(f"<{k}>{v}</{k}>" for k, v in fields.items())
        return f'<track type="{kind}">{body}</track>'

    tracks = [track("General", general or {})]
    tracks += [track("Video", v) for v in videos]
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<Mediainfo version="24.01"><File>' + "".join(tracks) + "</File></Mediainfo>"
    )


@pytest.fixture
def fake_mediainfo(monkeypatch):
    """
    Replaces subprocess.run with a stub answering with a fixed report.
    Returns the list of recorded (command, kwargs) pairs.
    """
    calls = []

    def install(stdout="", returncode=0, stderr="", exc=None):
        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            if exc is not None:
                raise exc
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)
        monkeypatch.setattr(subprocess, "run", fake_run)
        return calls

    return install


@pytest.fixture
def make_image(tmp_path):
    """Writes a real image of the given size; `fmt` defaults from the suffix."""
    def _make(name, size=(1920, 1080), fmt=None, directory=None, mode="RGB"):
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color=0 if mode == "1" else (10, 20, 30)).save(path, format=fmt)
        return path
    return _make


class StubVideoProbe:
    def __init__(self, fmt=None, error=None):
        self.fmt = fmt or VideoFormat(1920, 1080, 60.0, 8_000_000)
        self.error = error
        self.calls = []

    def probe(self, path):
        self.calls.append(path)
        if self.error:
            raise self.error
        return self.fmt


class StubImageProbe:
    def __init__(self, fmt=None, error=None):
        self.fmt = fmt or ImageFormat(1920, 1080)
        self.error = error
        self.calls = []

    def probe(self, path):
        self.calls.append(path)
        if self.error:
            raise self.error
        return self.fmt
