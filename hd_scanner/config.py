"""
Configuration constants for the HD asset scanner.
"""
import os

# --- File Type Definitions ---
VIDEO_EXTS = {
    '.avi', '.wmv', '.asf', '.mpg', '.vob', '.mkv', '.dvr-ms', '.mp4',
    '.mov', '.dat', '.m2ts', '.mts', '.qt', '.mxf', '.m4v', '.gif',
}

# Image decoders are selected purely by extension. IMAGE_EXTS is derived from
# this table so the dispatcher and the image probe can never disagree.
IMAGE_DECODERS = {
    '.jpg': 'JPEG',
    '.jpeg': 'JPEG',
    '.png': 'PNG',
    '.tiff': 'TIFF',
    '.bmp': 'BMP',
}
IMAGE_EXTS = set(IMAGE_DECODERS)

# Above this many pixels only the image header is read (Pillow default limit)
IMAGE_FULL_DECODE_MAX_PIXELS = 89_478_485

# Extension to asset families. A list, because an extension present in both
# sets is processed once per family.
EXT_TO_TYPES = {}
for ext in sorted(VIDEO_EXTS): EXT_TO_TYPES.setdefault(ext, []).append('video')
for ext in sorted(IMAGE_EXTS): EXT_TO_TYPES.setdefault(ext, []).append('image')

# --- HD Compliance Thresholds ---
HD_WIDTH = 1920
HD_HEIGHT = 1080
# Compared with strict equality; 60000/1001 is NOT 59.94.
HD_FRAMERATES = (60.0, 59.94)

# --- MediaInfo ---
MEDIAINFO_BIN = "mediainfo"
MEDIAINFO_ARGS = ["--Full", "--Output=OLDXML"]
PROBE_TIMEOUT_SEC = 60.0

# --- Concurrency ---
DEFAULT_MAX_WORKERS = min(32, (os.cpu_count() or 1) + 4)
