from telegram import Update
from telegram.ext import ContextTypes


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await context.bot.send_message(
        update.effective_chat.id,
        "Camera Bot Help 📋\n\n"
        "Commands:\n"
        "/start - Start the bot and show main menu\n"
        "/photo - Switch to photo mode\n"
        "/video - Switch to video mode\n"
        "/settings - View and change camera settings\n"
        "/flash - Toggle flash mode (photo only)\n"
        "/timer - Toggle 3-second timer (photo only)\n"
        "/quality - Toggle video quality (video only)\n"
        "/duration - Set video recording duration\n\n"
        "How to use:\n"
        "1. Select photo or video mode\n"
        "2. Adjust settings as needed\n"
        "3. Send a photo or video from your device\n"
        "4. The bot will process it according to your settings"
    )
