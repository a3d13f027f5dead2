"""Ordered routing tables for text messages and inline-button callbacks.

Each route pairs a matcher with a handler. A matcher returns ``None`` when
it does not apply, otherwise the argument extracted from the input (an empty
string for plain commands and exact labels). The first matching route wins.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Tuple

from telegram import Update
from telegram.ext import ContextTypes

from camerabot.handlers.help import help_command
from camerabot.handlers.modes import activate_photo_mode, activate_video_mode, handle_navigation
from camerabot.handlers.settings import (
    flash_command,
    on_back_to_menu,
    on_duration_selected,
    on_set_duration,
    on_toggle_flash,
    on_toggle_mode,
    on_toggle_quality,
    on_toggle_timer,
    on_unknown_callback,
    quality_command,
    show_duration_options,
    show_settings,
    timer_command,
)
from camerabot.handlers.start import start_command
from camerabot.utils import keyboards

logger = logging.getLogger(__name__)

Matcher = Callable[[str], Optional[str]]
TextHandler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]
CallbackHandler = Callable[[Update, ContextTypes.DEFAULT_TYPE, str], Awaitable[None]]


def command(name) -> Matcher:
    """Match ``/name`` (optionally ``/name@botname``) as the first token."""
    def match(text):
        tokens = text.split(maxsplit=1)
        if not tokens:
            return None
        head = tokens[0].split("@", 1)[0]
        if head != f"/{name}":
            return None
        return tokens[1] if len(tokens) > 1 else ""
    return match


def exact(value) -> Matcher:
    def match(text):
        return "" if text == value else None
    return match


def prefix(value) -> Matcher:
    def match(text):
        return text[len(value):] if text.startswith(value) else None
    return match


def any_of(*matchers) -> Matcher:
    def match(text):
        for matcher in matchers:
            argument = matcher(text)
            if argument is not None:
                return argument
        return None
    return match


TEXT_ROUTES: List[Tuple[Matcher, TextHandler]] = [
    (command("start"), start_command),
    (any_of(command("help"), exact(keyboards.HELP_BUTTON)), help_command),
    (any_of(command("photo"), exact(keyboards.PHOTO_MODE_BUTTON)), activate_photo_mode),
    (any_of(command("video"), exact(keyboards.VIDEO_MODE_BUTTON)), activate_video_mode),
    (any_of(command("settings"), exact(keyboards.SETTINGS_BUTTON)), show_settings),
    (any_of(command("flash"), exact(keyboards.TOGGLE_FLASH_BUTTON)), flash_command),
    (any_of(command("timer"), exact(keyboards.TOGGLE_TIMER_BUTTON)), timer_command),
    (any_of(command("duration"), exact(keyboards.SET_DURATION_BUTTON)), show_duration_options),
    (any_of(command("quality"), exact(keyboards.CHANGE_QUALITY_BUTTON)), quality_command),
]

CALLBACK_ROUTES: List[Tuple[Matcher, CallbackHandler]] = [
    (exact(keyboards.TOGGLE_MODE), on_toggle_mode),
    (exact(keyboards.TOGGLE_FLASH), on_toggle_flash),
    (exact(keyboards.TOGGLE_TIMER), on_toggle_timer),
    (exact(keyboards.TOGGLE_QUALITY), on_toggle_quality),
    (exact(keyboards.SET_DURATION), on_set_duration),
    (exact(keyboards.BACK_TO_MENU), on_back_to_menu),
    (prefix(keyboards.DURATION_PREFIX), on_duration_selected),
]


def resolve(routes, text):
    for matcher, handler in routes:
        argument = matcher(text)
        if argument is not None:
            return handler, argument
    return None, None


async def dispatch_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = update.effective_message.text or ""
    handler, _ = resolve(TEXT_ROUTES, text)
    if handler is None:
        handler = handle_navigation
    logger.debug(f"Text {text!r} from chat {update.effective_chat.id} -> {handler.__name__}")
    await handler(update, context)


async def dispatch_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    data = update.callback_query.data or ""
    handler, argument = resolve(CALLBACK_ROUTES, data)
    if handler is None:
        await on_unknown_callback(update, context, data)
        return
    logger.info(f"Callback {data!r} from chat {update.effective_chat.id} -> {handler.__name__}")
    await handler(update, context, argument)
