from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from .. import config
from ..exceptions import AssetIOError, ImageDecodeError, UnsupportedFormatError
from ..models import ImageFormat
from ..utils import file_extension, normalize_path

# Oversized images are classified from their header instead of rejected
Image.MAX_IMAGE_PIXELS = None


class ImageProbe:
    """
    Reads pixel dimensions of still images with Pillow.

    The decoder is chosen from the file extension alone (config.IMAGE_DECODERS),
    so a PNG renamed to .jpg is a decode failure rather than a silent success.
    """

    def probe(self, path: Union[str, Path]) -> ImageFormat:
        path = normalize_path(path)
        ext = file_extension(path)
        decoder = config.IMAGE_DECODERS.get(ext)
        if decoder is None:
            raise UnsupportedFormatError(f"No image decoder for extension '{ext}'")

        try:
            f = path.open('rb')
        except OSError as e:
            raise AssetIOError(f"Cannot open {path}: {e}") from e

        with f:
            try:
                with Image.open(f, formats=[decoder]) as im:
                    width, height = im.size
                    # Force a full decode so truncated files fail here
                    if width * height <= config.IMAGE_FULL_DECODE_MAX_PIXELS:
                        im.load()
            except UnidentifiedImageError as e:
                raise ImageDecodeError(f"Not a valid {decoder} image: {path.name}") from e
            except Exception as e:
                # Pillow surfaces truncation as OSError, SyntaxError or struct.error
                raise ImageDecodeError(f"{decoder} decode failed: {e}") from e

        return ImageFormat(width=width, height=height)
