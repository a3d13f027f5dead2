# camerabot/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from camerabot import config
from camerabot.dispatch import dispatch_callback, dispatch_text
from camerabot.handlers.file_handler import handle_photo, handle_video
from camerabot.sessions import SESSIONS_KEY, SessionStore
from camerabot.utils.storage import ensure_directories

logger = logging.getLogger(__name__)


# Error handler
async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error(msg="Exception while handling an update:", exc_info=context.error)


def build_application(token, sessions=None):
    application = Application.builder().token(token).build()
    application.bot_data[SESSIONS_KEY] = sessions if sessions is not None else SessionStore()

    application.add_error_handler(error_handler)

    # Edited messages are not new uploads or commands
    new_message = filters.UpdateType.MESSAGE

    # Media first so captions never reach the text routes
    application.add_handler(MessageHandler(filters.PHOTO & new_message, handle_photo))
    application.add_handler(MessageHandler(filters.VIDEO & new_message, handle_video))
    application.add_handler(MessageHandler(filters.TEXT & new_message, dispatch_text))
    application.add_handler(CallbackQueryHandler(dispatch_callback))
    return application


def create_app(application, run_mode=None):
    run_mode = run_mode or config.RUN_MODE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup logic
        ensure_directories(config.UPLOADS_DIR, config.PROCESSED_DIR)
        await application.initialize()
        await application.start()
        if run_mode == "polling":
            await application.updater.start_polling()
            logger.info("Camera bot is polling for updates.")
        try:
            yield  # Application runs during this time
        finally:
            # Shutdown logic
            if run_mode == "polling":
                await application.updater.stop()
            await application.stop()
            await application.shutdown()

    app = FastAPI(lifespan=lifespan)

    @app.get("/")
    async def root():
        return {"message": "Camera bot is running."}

    @app.post("/webhook")
    async def telegram_webhook(request: Request):
        try:
            update = Update.de_json(await request.json(), application.bot)
            logger.info(f"Received update: {update.update_id}")
            await application.process_update(update)
        except Exception as e:
            logger.error(f"Error processing update: {e}")
            return Response(status_code=500)
        return Response(status_code=200)

    return app
