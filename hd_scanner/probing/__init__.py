from .image import ImageProbe
from .video import VideoProbe, locate_mediainfo

__all__ = ["ImageProbe", "VideoProbe", "locate_mediainfo"]
