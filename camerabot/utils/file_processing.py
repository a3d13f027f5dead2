# camerabot/utils/file_processing.py

import os
import subprocess
import logging

from PIL import Image, ImageEnhance, ImageStat

from camerabot.config import (
    AUTO_FLASH_THRESHOLD,
    DEFAULT_QUALITY_PRESET,
    FFMPEG_BINARY,
    FLASH_BRIGHTNESS,
    QUALITY_PRESETS,
)
from camerabot.sessions import FlashMode
from camerabot.utils.metadata import get_exif_bytes, get_video_duration

logger = logging.getLogger(__name__)


class VideoProcessingError(Exception):
    """Raised when ffmpeg cannot apply the requested video settings."""

    def __init__(self, message, stderr=""):
        super().__init__(message)
        self.stderr = stderr


def average_brightness(image):
    # Red channel mean as a cheap brightness proxy
    return ImageStat.Stat(image.convert("RGB")).mean[0]


def needs_flash(image, flash_mode):
    if flash_mode == FlashMode.ON:
        return True
    if flash_mode == FlashMode.AUTO:
        return average_brightness(image) < AUTO_FLASH_THRESHOLD
    return False


def process_photo(input_path, output_path, flash_mode):
    """Apply the flash setting and return the path of the file to deliver.

    Any failure falls back to the untouched source so the user still gets
    their photo back.
    """
    try:
        with Image.open(input_path) as source:
            image = source.copy()
            image_format = source.format
        if needs_flash(image, flash_mode):
            logger.info(f"Applying flash ({flash_mode}) to {input_path}")
            image = ImageEnhance.Brightness(image).enhance(FLASH_BRIGHTNESS)
        exif_bytes = get_exif_bytes(input_path)
        save_kwargs = {"format": image_format} if image_format else {}
        if exif_bytes:
            save_kwargs["exif"] = exif_bytes
        image.save(output_path, **save_kwargs)
        logger.info(f"Photo saved: {output_path}")
        return output_path
    except Exception as e:
        logger.error(f"Photo processing failed, returning original: {e}", exc_info=True)
        return input_path


def quality_preset(video_quality):
    return QUALITY_PRESETS.get(video_quality, DEFAULT_QUALITY_PRESET)


def build_video_command(input_path, output_path, video_quality, max_duration):
    preset = quality_preset(video_quality)
    width, height = preset["resolution"].split("x")
    return [
        FFMPEG_BINARY,
        "-y",  # Overwrite output files without asking
        "-i", input_path,
        "-vf", f"scale={width}:{height}",
        "-b:v", preset["bitrate"],
        "-t", str(max_duration),  # Trims longer input, never pads shorter input
        output_path,
    ]


def process_video(input_path, output_path, video_quality, max_duration):
    source_duration = get_video_duration(input_path)
    if source_duration is not None and source_duration > max_duration:
        logger.info(f"Trimming {input_path} from {source_duration:.1f}s to {max_duration}s")

    cmd = build_video_command(input_path, output_path, video_quality, max_duration)
    logger.info(f"Running FFmpeg command: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        logger.error(f"Could not start FFmpeg: {e}")
        raise VideoProcessingError(f"Could not start FFmpeg: {e}") from e
    if result.returncode != 0:
        logger.error("FFmpeg failed!")
        logger.error(f"Command: {' '.join(cmd)}")
        logger.error(f"stderr: {result.stderr}")
        raise VideoProcessingError(f"FFmpeg exited with code {result.returncode}", stderr=result.stderr)
    if not os.path.isfile(output_path):
        raise VideoProcessingError(f"FFmpeg produced no output at {output_path}")
    logger.info(f"Video processed successfully: {output_path}")
    return output_path
