import os
import logging

import piexif
from pymediainfo import MediaInfo

logger = logging.getLogger(__name__)

EXIF_EXTENSIONS = [".jpg", ".jpeg", ".tiff"]


def get_exif_bytes(file_path):
    """Return the source's EXIF block ready to be written again, or None."""
    ext = os.path.splitext(file_path)[1].lower()
    if ext not in EXIF_EXTENSIONS:
        return None
    try:
        exif_dict = piexif.load(file_path)
    except piexif.InvalidImageDataError:
        logger.warning(f"No EXIF data found for {file_path}.")
        return None
    # Thumbnails frequently fail to round-trip through piexif.dump
    exif_dict["thumbnail"] = None
    try:
        return piexif.dump(exif_dict)
    except Exception as e:
        logger.warning(f"Failed to dump EXIF data for {file_path}: {e}")
        return None


def get_video_duration(file_path):
    """Duration of the first General track in seconds, or None if unknown."""
    if not os.path.isfile(file_path):
        logger.warning(f"get_video_duration: File not found: {file_path}")
        return None
    try:
        media_info = MediaInfo.parse(file_path)
    except Exception as e:
        logger.warning(f"MediaInfo could not parse {file_path}: {e}")
        return None
    for track in media_info.tracks:
        if track.track_type == "General" and track.duration:
            # MediaInfo reports milliseconds
            return float(track.duration) / 1000
    return None
