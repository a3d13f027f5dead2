import asyncio
import logging

from telegram import Update
from telegram.ext import ContextTypes

from camerabot.config import SETTINGS_REFRESH_DELAY
from camerabot.handlers.start import show_main_menu
from camerabot.sessions import (
    get_session_store,
    next_flash_mode,
    toggle_mode,
    toggle_quality,
)
from camerabot.utils.keyboards import duration_keyboard, settings_keyboard, settings_text

logger = logging.getLogger(__name__)


async def send_settings(bot, chat_id, session):
    await bot.send_message(chat_id, settings_text(session), reply_markup=settings_keyboard(session))


async def show_settings(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    await send_settings(context.bot, chat_id, get_session_store(context).get(chat_id))


async def show_duration_options(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await context.bot.send_message(
        update.effective_chat.id, "Select video duration:", reply_markup=duration_keyboard()
    )


# Text commands and reply-keyboard buttons

async def flash_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, flash_mode=next_flash_mode(sessions.get(chat_id).flash_mode))
    logger.info(f"Chat {chat_id} flash mode: {session.flash_mode.value}")
    await context.bot.send_message(chat_id, f"Flash mode set to: {session.flash_mode.value} ⚡")


async def timer_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, use_timer=not sessions.get(chat_id).use_timer)
    logger.info(f"Chat {chat_id} timer: {session.use_timer}")
    await context.bot.send_message(
        chat_id, f"Timer {'activated' if session.use_timer else 'deactivated'} ⏱️"
    )


async def quality_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, video_quality=toggle_quality(sessions.get(chat_id).video_quality))
    logger.info(f"Chat {chat_id} video quality: {session.video_quality.value}")
    await context.bot.send_message(chat_id, f"Video quality set to: {session.video_quality.value} 🔎")


# Inline settings keyboard callbacks

def schedule_settings_refresh(context: ContextTypes.DEFAULT_TYPE, chat_id):
    """Re-send the settings menu once the callback answer has had time to show."""
    context.application.create_task(_refresh_settings(context, chat_id))


async def _refresh_settings(context, chat_id):
    await asyncio.sleep(SETTINGS_REFRESH_DELAY)
    await send_settings(context.bot, chat_id, get_session_store(context).get(chat_id))


async def on_toggle_mode(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    query = update.callback_query
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, mode=toggle_mode(sessions.get(chat_id).mode))
    await query.answer(text=f"Switched to {session.mode.value} mode")
    await context.bot.edit_message_text(
        f"Current mode: {session.mode.value.upper()}",
        chat_id=chat_id,
        message_id=query.message.message_id,
    )
    schedule_settings_refresh(context, chat_id)


async def on_toggle_flash(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, flash_mode=next_flash_mode(sessions.get(chat_id).flash_mode))
    await update.callback_query.answer(text=f"Flash set to: {session.flash_mode.value}")
    schedule_settings_refresh(context, chat_id)


async def on_toggle_timer(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, use_timer=not sessions.get(chat_id).use_timer)
    await update.callback_query.answer(
        text=f"Timer {'activated' if session.use_timer else 'deactivated'}"
    )
    schedule_settings_refresh(context, chat_id)


async def on_toggle_quality(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    chat_id = update.effective_chat.id
    sessions = get_session_store(context)
    session = sessions.set(chat_id, video_quality=toggle_quality(sessions.get(chat_id).video_quality))
    await update.callback_query.answer(text=f"Quality set to: {session.video_quality.value}")
    schedule_settings_refresh(context, chat_id)


async def on_set_duration(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    await update.callback_query.answer()
    await show_duration_options(update, context)


async def on_duration_selected(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    chat_id = update.effective_chat.id
    try:
        duration = int(argument)
    except ValueError:
        await on_unknown_callback(update, context, argument)
        return
    get_session_store(context).set(chat_id, video_duration=duration)
    logger.info(f"Chat {chat_id} video duration: {duration}s")
    await update.callback_query.answer(text=f"Duration set to: {duration} seconds")
    schedule_settings_refresh(context, chat_id)


async def on_back_to_menu(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    await update.callback_query.answer()
    await show_main_menu(update, context)


async def on_unknown_callback(update: Update, context: ContextTypes.DEFAULT_TYPE, argument=""):
    query = update.callback_query
    logger.warning(f"Unrecognized callback payload {query.data!r} from chat {update.effective_chat.id}")
    # Still answered so the client stops showing a loading indicator
    await query.answer()
