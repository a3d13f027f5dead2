import logging

from telegram import Update
from telegram.ext import ContextTypes

from camerabot.handlers.start import show_main_menu
from camerabot.sessions import Mode, get_session_store
from camerabot.utils.keyboards import (
    BACK_TO_MENU_BUTTON,
    RECORD_VIDEO_BUTTON,
    TAKE_PHOTO_BUTTON,
    photo_mode_keyboard,
    video_mode_keyboard,
)

logger = logging.getLogger(__name__)


async def activate_photo_mode(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    get_session_store(context).set(chat_id, mode=Mode.PHOTO)
    logger.info(f"Chat {chat_id} switched to photo mode")
    await context.bot.send_message(
        chat_id,
        "Photo mode activated! 📷 Send me a photo or selfie.",
        reply_markup=photo_mode_keyboard(),
    )


async def activate_video_mode(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    get_session_store(context).set(chat_id, mode=Mode.VIDEO)
    logger.info(f"Chat {chat_id} switched to video mode")
    await context.bot.send_message(
        chat_id,
        "Video mode activated! 🎥 Send me a video to process.",
        reply_markup=video_mode_keyboard(),
    )


async def handle_navigation(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Fallback for text that matched no command; unknown text is ignored."""
    text = update.effective_message.text
    chat_id = update.effective_chat.id
    if text == BACK_TO_MENU_BUTTON:
        await show_main_menu(update, context)
    elif text == TAKE_PHOTO_BUTTON:
        await context.bot.send_message(chat_id, "Please send me a photo from your camera or gallery.")
    elif text == RECORD_VIDEO_BUTTON:
        await context.bot.send_message(chat_id, "Please send me a video from your camera or gallery.")
