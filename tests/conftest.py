"""Shared test fixtures."""

from dataclasses import dataclass, field
from types import SimpleNamespace

import pytest

from camerabot import config
from camerabot.handlers import settings as settings_handlers
from camerabot.sessions import SESSIONS_KEY, SessionStore
from tests.helpers import (
    FakeApplication,
    FakeBot,
    FakeCallbackQuery,
    FakeFile,
    FakeMessage,
    write_bytes,
    write_image,
)


@dataclass
class FakeContext:
    bot: FakeBot
    application: FakeApplication
    bot_data: dict = field(default_factory=dict)

    @property
    def sessions(self) -> SessionStore:
        return self.bot_data[SESSIONS_KEY]


CHAT_ID = 42


@pytest.fixture(autouse=True)
def working_dirs(tmp_path, monkeypatch):
    uploads = tmp_path / "uploads"
    processed = tmp_path / "processed"
    uploads.mkdir()
    processed.mkdir()
    monkeypatch.setattr(config, "UPLOADS_DIR", str(uploads))
    monkeypatch.setattr(config, "PROCESSED_DIR", str(processed))
    return SimpleNamespace(uploads=uploads, processed=processed)


@pytest.fixture(autouse=True)
def no_delays(monkeypatch):
    monkeypatch.setattr(config, "COUNTDOWN_PAUSE", 0)
    monkeypatch.setattr(settings_handlers, "SETTINGS_REFRESH_DELAY", 0)


@pytest.fixture
def bot() -> FakeBot:
    return FakeBot()


@pytest.fixture
def context(bot: FakeBot) -> FakeContext:
    return FakeContext(bot=bot, application=FakeApplication(), bot_data={SESSIONS_KEY: SessionStore()})


@pytest.fixture
def text_update():
    def make(text, chat_id=CHAT_ID):
        message = FakeMessage(message_id=1, chat_id=chat_id, text=text)
        return SimpleNamespace(
            effective_chat=SimpleNamespace(id=chat_id),
            effective_message=message,
            callback_query=None,
        )
    return make


@pytest.fixture
def callback_update(bot: FakeBot):
    def make(data, chat_id=CHAT_ID):
        message = FakeMessage(message_id=7, chat_id=chat_id, text="Current Settings")
        query = FakeCallbackQuery(data=data, message=message, calls=bot.calls)
        return SimpleNamespace(
            effective_chat=SimpleNamespace(id=chat_id),
            effective_message=message,
            callback_query=query,
        )
    return make


@pytest.fixture
def photo_update(bot: FakeBot):
    def make(value=128, chat_id=CHAT_ID, writer=None):
        file_id = f"photo-{len(bot.files)}"
        bot.files[file_id] = FakeFile(
            file_path=f"photos/file_{len(bot.files)}.png",
            writer=writer or (lambda path: write_image(path, value, image_format="PNG")),
        )
        sizes = [SimpleNamespace(file_id="thumbnail"), SimpleNamespace(file_id=file_id)]
        message = FakeMessage(message_id=2, chat_id=chat_id, photo=sizes)
        return SimpleNamespace(effective_chat=SimpleNamespace(id=chat_id), effective_message=message)
    return make


@pytest.fixture
def video_update(bot: FakeBot):
    def make(chat_id=CHAT_ID):
        file_id = f"video-{len(bot.files)}"
        bot.files[file_id] = FakeFile(
            file_path=f"videos/file_{len(bot.files)}.mp4",
            writer=lambda path: write_bytes(path, b"source-video"),
        )
        message = FakeMessage(message_id=3, chat_id=chat_id, video=SimpleNamespace(file_id=file_id))
        return SimpleNamespace(effective_chat=SimpleNamespace(id=chat_id), effective_message=message)
    return make
