import asyncio
import logging

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from camerabot import config
from camerabot.sessions import Mode, get_session_store
from camerabot.utils.keyboards import display_value
from camerabot.utils.file_processing import VideoProcessingError, process_photo, process_video
from camerabot.utils.storage import download_file, processed_path_for, release_files

logger = logging.getLogger(__name__)

PHOTO_MODE_REQUIRED = 'Please switch to photo mode first using /photo or "📷 Photo Mode" button.'
VIDEO_MODE_REQUIRED = 'Please switch to video mode first using /video or "🎥 Video Mode" button.'
PHOTO_ERROR = "Sorry, there was an error processing your photo. Please try again."
VIDEO_ERROR = "Sorry, there was an error processing your video. Please try again."
VIDEO_SETTINGS_ERROR = "Sorry, your video could not be converted with the current settings."

COUNTDOWN = ["Timer activated! Taking photo in 3...", "2...", "1...", "📸 Cheese!"]


async def run_countdown(bot, chat_id):
    for i, text in enumerate(COUNTDOWN):
        if i:
            await asyncio.sleep(config.COUNTDOWN_PAUSE)
        await bot.send_message(chat_id, text)


async def handle_photo(update: Update, context: ContextTypes.DEFAULT_TYPE):
    message = update.effective_message
    chat_id = update.effective_chat.id
    session = get_session_store(context).get(chat_id)

    if session.mode != Mode.PHOTO:
        logger.info(f"Photo from chat {chat_id} rejected: chat is in {display_value(session.mode)} mode")
        await context.bot.send_message(chat_id, PHOTO_MODE_REQUIRED)
        return

    settings = session.snapshot()
    source_path = None
    output_path = None
    try:
        try:
            await context.bot.send_message(chat_id, "Processing your photo... ⏳")
        except TelegramError as e:
            logger.warning(f"Could not send processing notice to chat {chat_id}: {e}")

        if settings.use_timer:
            await run_countdown(context.bot, chat_id)

        # Largest available size is last
        source_path = await download_file(context.bot, message.photo[-1].file_id, config.UPLOADS_DIR)
        output_path = await asyncio.to_thread(
            process_photo,
            source_path,
            processed_path_for(source_path, config.PROCESSED_DIR),
            settings.flash_mode,
        )
        with open(output_path, "rb") as photo:
            await context.bot.send_photo(
                chat_id,
                photo=photo,
                caption=f"Processed photo with settings:\nFlash: {display_value(settings.flash_mode)}",
            )
        logger.info(f"Photo delivered to chat {chat_id}")
    except Exception as e:
        logger.error(f"Error processing photo for chat {chat_id}: {e}", exc_info=True)
        await context.bot.send_message(chat_id, PHOTO_ERROR)
    finally:
        release_files(source_path, output_path)


async def handle_video(update: Update, context: ContextTypes.DEFAULT_TYPE):
    message = update.effective_message
    chat_id = update.effective_chat.id
    session = get_session_store(context).get(chat_id)

    if session.mode != Mode.VIDEO:
        logger.info(f"Video from chat {chat_id} rejected: chat is in {display_value(session.mode)} mode")
        await context.bot.send_message(chat_id, VIDEO_MODE_REQUIRED)
        return

    settings = session.snapshot()
    source_path = None
    output_path = None
    try:
        wait_message = await context.bot.send_message(chat_id, "Processing your video... ⏳")
        source_path = await download_file(context.bot, message.video.file_id, config.UPLOADS_DIR)
        output_path = processed_path_for(source_path, config.PROCESSED_DIR)

        try:
            await context.bot.edit_message_text(
                "Applying video settings... this may take a moment",
                chat_id=chat_id,
                message_id=wait_message.message_id,
            )
        except TelegramError as e:
            logger.warning(f"Could not update processing notice in chat {chat_id}: {e}")

        try:
            await asyncio.to_thread(
                process_video,
                source_path,
                output_path,
                settings.video_quality,
                settings.video_duration,
            )
        except VideoProcessingError as e:
            logger.error(f"Video settings could not be applied for chat {chat_id}: {e}")
            await context.bot.send_message(chat_id, VIDEO_SETTINGS_ERROR)
            return

        with open(output_path, "rb") as video:
            await context.bot.send_video(
                chat_id,
                video=video,
                caption=(
                    "Processed video with settings:\n"
                    f"Quality: {display_value(settings.video_quality)}\n"
                    f"Max Duration: {settings.video_duration}s"
                ),
            )
        logger.info(f"Video delivered to chat {chat_id}")
    except Exception as e:
        logger.error(f"Error processing video for chat {chat_id}: {e}", exc_info=True)
        await context.bot.send_message(chat_id, VIDEO_ERROR)
    finally:
        release_files(source_path, output_path)
