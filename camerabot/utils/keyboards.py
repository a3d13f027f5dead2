# camerabot/utils/keyboards.py

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup

from camerabot.config import VIDEO_DURATIONS
from camerabot.sessions import Mode, Session

# Reply keyboard labels
PHOTO_MODE_BUTTON = "📷 Photo Mode"
VIDEO_MODE_BUTTON = "🎥 Video Mode"
SETTINGS_BUTTON = "⚙️ Settings"
HELP_BUTTON = "❓ Help"
TAKE_PHOTO_BUTTON = "📸 Take Photo"
TOGGLE_FLASH_BUTTON = "⚡ Toggle Flash"
TOGGLE_TIMER_BUTTON = "⏱️ Toggle Timer"
RECORD_VIDEO_BUTTON = "🎬 Record Video"
SET_DURATION_BUTTON = "🎞️ Set Duration"
CHANGE_QUALITY_BUTTON = "🔎 Change Quality"
BACK_TO_MENU_BUTTON = "🔙 Back to Menu"

# Callback payloads
TOGGLE_MODE = "toggle_mode"
TOGGLE_FLASH = "toggle_flash"
TOGGLE_TIMER = "toggle_timer"
TOGGLE_QUALITY = "toggle_quality"
SET_DURATION = "set_duration"
BACK_TO_MENU = "back_to_menu"
DURATION_PREFIX = "duration_"


def main_menu_keyboard():
    return ReplyKeyboardMarkup(
        [
            [PHOTO_MODE_BUTTON, VIDEO_MODE_BUTTON],
            [SETTINGS_BUTTON, HELP_BUTTON],
        ],
        resize_keyboard=True,
    )


def photo_mode_keyboard():
    return ReplyKeyboardMarkup(
        [
            [TAKE_PHOTO_BUTTON, TOGGLE_FLASH_BUTTON],
            [TOGGLE_TIMER_BUTTON, BACK_TO_MENU_BUTTON],
        ],
        resize_keyboard=True,
    )


def video_mode_keyboard():
    return ReplyKeyboardMarkup(
        [
            [RECORD_VIDEO_BUTTON, SET_DURATION_BUTTON],
            [CHANGE_QUALITY_BUTTON, BACK_TO_MENU_BUTTON],
        ],
        resize_keyboard=True,
    )


def settings_keyboard(session: Session):
    if session.mode == Mode.PHOTO:
        mode_row = [
            InlineKeyboardButton("Toggle Flash", callback_data=TOGGLE_FLASH),
            InlineKeyboardButton("Toggle Timer", callback_data=TOGGLE_TIMER),
        ]
    else:
        mode_row = [
            InlineKeyboardButton("Change Duration", callback_data=SET_DURATION),
            InlineKeyboardButton("Change Quality", callback_data=TOGGLE_QUALITY),
        ]
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton("Change Mode", callback_data=TOGGLE_MODE)],
            mode_row,
            [InlineKeyboardButton("Back to Main Menu", callback_data=BACK_TO_MENU)],
        ]
    )


def duration_keyboard():
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(f"{duration} seconds", callback_data=f"{DURATION_PREFIX}{duration}")]
            for duration in VIDEO_DURATIONS
        ]
    )


def settings_text(session: Session):
    """Human-readable summary of the settings that apply to the current mode."""
    if session.mode == Mode.PHOTO:
        details = (
            f"Flash: {display_value(session.flash_mode)} ⚡\n"
            f"Timer: {'On ⏱️' if session.use_timer else 'Off'}"
        )
        mode = "Photo 📷"
    else:
        details = (
            f"Duration: {session.video_duration}s ⏱️\n"
            f"Quality: {display_value(session.video_quality)} 🔎"
        )
        mode = "Video 🎥"
    return f"Current Settings:\n\nMode: {mode}\n{details}"


def display_value(setting):
    return getattr(setting, "value", setting)
