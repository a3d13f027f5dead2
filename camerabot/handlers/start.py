import logging

from telegram import Update
from telegram.ext import ContextTypes

from camerabot.sessions import get_session_store
from camerabot.utils.keyboards import main_menu_keyboard

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Welcome to Camera Bot! 📸\n\n"
    "This bot allows you to take photos and record videos with various options.\n\n"
    "Available commands:\n"
    "/photo - Switch to photo mode\n"
    "/video - Switch to video mode\n"
    "/settings - Adjust camera settings\n"
    "/help - Show help information"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    get_session_store(context).reset(chat_id)
    logger.info(f"Session started for chat {chat_id}")
    await context.bot.send_message(chat_id, WELCOME_TEXT, reply_markup=main_menu_keyboard())


async def show_main_menu(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await context.bot.send_message(
        update.effective_chat.id, "Main Menu", reply_markup=main_menu_keyboard()
    )
