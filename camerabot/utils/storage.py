import os
import time
import logging

from camerabot.config import PROCESSED_DIR, UPLOADS_DIR

logger = logging.getLogger(__name__)


def ensure_directories(*directories):
    for directory in directories or (UPLOADS_DIR, PROCESSED_DIR):
        if not os.path.isdir(directory):
            os.makedirs(directory, exist_ok=True)
            logger.info(f"Created directory: {directory}")


async def download_file(bot, file_id, uploads_dir):
    """Download a Telegram file into ``uploads_dir`` under a unique name."""
    file_obj = await bot.get_file(file_id)
    remote_name = os.path.basename(file_obj.file_path or "") or file_id
    # Millisecond prefix keeps concurrent uploads from colliding
    file_name = f"{int(time.time() * 1000)}_{remote_name}"
    dest_path = os.path.join(uploads_dir, file_name)
    await file_obj.download_to_drive(dest_path)
    logger.info(f"File downloaded to {dest_path}")
    return dest_path


def processed_path_for(source_path, processed_dir):
    return os.path.join(processed_dir, f"processed_{os.path.basename(source_path)}")


def cleanup_file(file_path):
    try:
        os.remove(file_path)
        logger.info(f"Removed {file_path}")
    except OSError as e:
        logger.error(f"Error cleaning up file {file_path}: {e}")


def release_files(*paths):
    """Remove each existing path once, skipping ``None`` and duplicates."""
    for path in dict.fromkeys(p for p in paths if p):
        if os.path.exists(path):
            cleanup_file(path)
