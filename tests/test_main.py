"""Tests for application wiring and the liveness app."""

from dataclasses import dataclass, field

from fastapi.testclient import TestClient
from telegram import Update
from telegram.ext import CallbackQueryHandler, MessageHandler

from camerabot import config
from camerabot.dispatch import dispatch_callback, dispatch_text
from camerabot.handlers.file_handler import handle_photo, handle_video
from camerabot.main import build_application, create_app, error_handler
from camerabot.sessions import SESSIONS_KEY, SessionStore
from tests.helpers import FakeBot


@dataclass
class FakeUpdater:
    events: list

    async def start_polling(self, **kwargs):
        self.events.append("start_polling")

    async def stop(self):
        self.events.append("stop_polling")


@dataclass
class FakePTBApplication:
    events: list = field(default_factory=list)
    processed: list = field(default_factory=list)
    bot: FakeBot = field(default_factory=FakeBot)

    def __post_init__(self):
        self.updater = FakeUpdater(self.events)

    async def initialize(self):
        self.events.append("initialize")

    async def start(self):
        self.events.append("start")

    async def stop(self):
        self.events.append("stop")

    async def shutdown(self):
        self.events.append("shutdown")

    async def process_update(self, update):
        self.processed.append(update)


def test_build_application_registers_routes() -> None:
    sessions = SessionStore()

    application = build_application("123456:TEST-TOKEN", sessions=sessions)

    handlers = application.handlers[0]
    callbacks = [handler.callback for handler in handlers]
    assert callbacks == [handle_photo, handle_video, dispatch_text, dispatch_callback]
    assert isinstance(handlers[0], MessageHandler)
    assert isinstance(handlers[3], CallbackQueryHandler)
    assert application.bot_data[SESSIONS_KEY] is sessions
    assert error_handler in application.error_handlers


def _update_payload(key, **message):
    message = {
        "message_id": 9,
        "date": 1700000000,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 42, "is_bot": False, "first_name": "Ann"},
        **message,
    }
    if key == "edited_message":
        message["edit_date"] = 1700000060
    return {"update_id": 11, key: message}


def _matching_callbacks(application, payload):
    update = Update.de_json(payload, application.bot)
    return [handler.callback for handler in application.handlers[0] if handler.check_update(update)]


def test_edited_messages_match_no_handler() -> None:
    application = build_application("123456:TEST-TOKEN")
    photo = [{"file_id": "photo-0", "file_unique_id": "u-0", "width": 32, "height": 32}]

    edited_text = _update_payload("edited_message", text="/flash")
    edited_photo = _update_payload("edited_message", photo=photo, caption="/flash")

    assert _matching_callbacks(application, edited_text) == []
    assert _matching_callbacks(application, edited_photo) == []


def test_new_messages_reach_their_handlers() -> None:
    application = build_application("123456:TEST-TOKEN")
    photo = [{"file_id": "photo-0", "file_unique_id": "u-0", "width": 32, "height": 32}]

    text = _update_payload("message", text="/flash")
    captioned_photo = _update_payload("message", photo=photo, caption="/flash")

    assert _matching_callbacks(application, text) == [dispatch_text]
    assert _matching_callbacks(application, captioned_photo) == [handle_photo]


def test_liveness_and_polling_lifecycle(working_dirs, tmp_path, monkeypatch) -> None:
    uploads = tmp_path / "fresh" / "uploads"
    monkeypatch.setattr(config, "UPLOADS_DIR", str(uploads))
    application = FakePTBApplication()

    with TestClient(create_app(application, run_mode="polling")) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Camera bot is running."}
        assert uploads.is_dir()

    assert application.events == [
        "initialize",
        "start",
        "start_polling",
        "stop_polling",
        "stop",
        "shutdown",
    ]


def test_webhook_mode_forwards_updates() -> None:
    application = FakePTBApplication()

    with TestClient(create_app(application, run_mode="webhook")) as client:
        response = client.post("/webhook", json={"update_id": 5})

    assert response.status_code == 200
    assert [update.update_id for update in application.processed] == [5]
    assert "start_polling" not in application.events


def test_webhook_rejects_bad_payload() -> None:
    application = FakePTBApplication()

    with TestClient(create_app(application, run_mode="webhook")) as client:
        response = client.post("/webhook", content=b"not json")

    assert response.status_code == 500
    assert application.processed == []
