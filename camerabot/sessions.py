"""Per-chat camera settings and the in-memory store that holds them."""

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Union

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    PHOTO = "photo"
    VIDEO = "video"


class FlashMode(str, Enum):
    OFF = "off"
    ON = "on"
    AUTO = "auto"


class VideoQuality(str, Enum):
    P720 = "720p"
    P1080 = "1080p"


FLASH_CYCLE = [FlashMode.OFF, FlashMode.ON, FlashMode.AUTO]

ChatKey = Union[int, str]


@dataclass
class Session:
    mode: Mode = Mode.PHOTO
    flash_mode: FlashMode = FlashMode.OFF
    use_timer: bool = False
    video_duration: int = 30
    video_quality: VideoQuality = VideoQuality.P1080

    def snapshot(self) -> "Session":
        return replace(self)


def next_flash_mode(current: FlashMode) -> FlashMode:
    try:
        index = FLASH_CYCLE.index(current)
    except ValueError:
        index = -1
    return FLASH_CYCLE[(index + 1) % len(FLASH_CYCLE)]


def toggle_quality(current: VideoQuality) -> VideoQuality:
    return VideoQuality.P720 if current == VideoQuality.P1080 else VideoQuality.P1080


def toggle_mode(current: Mode) -> Mode:
    return Mode.VIDEO if current == Mode.PHOTO else Mode.PHOTO


class SessionStore:
    """Maps a chat id to its settings.

    ``get`` never fails: an unknown chat gets a session with default
    settings. Sessions live for the lifetime of the process.
    """

    _field_names = {f.name for f in fields(Session)}

    def __init__(self):
        self._sessions: Dict[ChatKey, Session] = {}

    def get(self, chat_id: ChatKey) -> Session:
        session = self._sessions.get(chat_id)
        if session is None:
            session = Session()
            self._sessions[chat_id] = session
        return session

    def set(self, chat_id: ChatKey, **changes) -> Session:
        session = self.get(chat_id)
        for name, value in changes.items():
            if name not in self._field_names:
                logger.warning("Ignoring unknown session field %r for chat %s", name, chat_id)
                continue
            setattr(session, name, value)
        return session

    def reset(self, chat_id: ChatKey) -> Session:
        session = Session()
        self._sessions[chat_id] = session
        return session

    def __contains__(self, chat_id: ChatKey) -> bool:
        return chat_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


SESSIONS_KEY = "sessions"


def get_session_store(context) -> SessionStore:
    """The store injected into ``application.bot_data`` at startup."""
    return context.bot_data.setdefault(SESSIONS_KEY, SessionStore())
