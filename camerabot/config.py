import os

BOT_TOKEN = os.getenv("BOT_TOKEN")
PORT = int(os.getenv("PORT", "3000"))
RUN_MODE = os.getenv("RUN_MODE", "polling")

UPLOADS_DIR = os.getenv("UPLOADS_DIR", "uploads")
PROCESSED_DIR = os.getenv("PROCESSED_DIR", "processed")
LOG_FILE = os.getenv("LOG_FILE", "bot.log")

FFMPEG_BINARY = os.getenv("FFMPEG_BINARY", "ffmpeg")

VIDEO_DURATIONS = [10, 15, 30, 60]

QUALITY_PRESETS = {
    "720p": {
        "resolution": "1280x720",
        "bitrate": "2500k"
    },
    "1080p": {
        "resolution": "1920x1080",
        "bitrate": "5000k"
    }
}
DEFAULT_QUALITY_PRESET = QUALITY_PRESETS["720p"]

FLASH_BRIGHTNESS = 1.2
AUTO_FLASH_THRESHOLD = 80

# Seconds
SETTINGS_REFRESH_DELAY = 0.5
COUNTDOWN_PAUSE = 1.0


def require_bot_token():
    if not BOT_TOKEN:
        raise ValueError("BOT_TOKEN environment variable not set")
    return BOT_TOKEN
