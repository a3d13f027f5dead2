"""Fakes and file helpers shared by the tests."""

import io
from dataclasses import dataclass, field
from typing import Callable, Optional

from PIL import Image, ImageStat
from telegram.error import BadRequest, NetworkError


def write_image(path, value, size=(32, 32), image_format=None):
    """Write a solid RGB image whose every channel equals ``value``."""
    Image.new("RGB", size, (value, value, value)).save(path, format=image_format)


def write_bytes(path, data):
    with open(path, "wb") as f:
        f.write(data)


def red_mean(data: bytes) -> float:
    with Image.open(io.BytesIO(data)) as image:
        return ImageStat.Stat(image.convert("RGB")).mean[0]


@dataclass
class FakeMessage:
    message_id: int
    chat_id: int
    text: Optional[str] = None
    photo: list = field(default_factory=list)
    video: object = None


@dataclass
class FakeFile:
    """Telegram file whose download writes via ``writer(path)``."""

    file_path: str
    writer: Callable[[str], None]

    async def download_to_drive(self, custom_path=None):
        self.writer(custom_path)
        return custom_path


@dataclass
class FakeBot:
    """Records every outbound call in ``calls`` in the order it happened."""

    calls: list = field(default_factory=list)
    files: dict = field(default_factory=dict)
    fail_texts: set = field(default_factory=set)
    fail_downloads: bool = False
    fail_deliveries: bool = False
    fail_edits: bool = False
    defaults: object = None
    _next_message_id: int = 100

    async def send_message(self, chat_id, text, reply_markup=None, **kwargs):
        if text in self.fail_texts:
            raise NetworkError("send failed")
        self.calls.append(("send_message", chat_id, text, reply_markup))
        self._next_message_id += 1
        return FakeMessage(message_id=self._next_message_id, chat_id=chat_id, text=text)

    async def send_photo(self, chat_id, photo, caption=None, **kwargs):
        if self.fail_deliveries:
            raise NetworkError("upload failed")
        self.calls.append(("send_photo", chat_id, photo.read(), caption))

    async def send_video(self, chat_id, video, caption=None, **kwargs):
        if self.fail_deliveries:
            raise NetworkError("upload failed")
        self.calls.append(("send_video", chat_id, video.read(), caption))

    async def edit_message_text(self, text, chat_id=None, message_id=None, **kwargs):
        if self.fail_edits:
            raise BadRequest("Message to edit not found")
        self.calls.append(("edit_message_text", chat_id, text, message_id))

    async def get_file(self, file_id):
        self.calls.append(("get_file", file_id))
        if self.fail_downloads:
            raise NetworkError("download failed")
        return self.files[file_id]

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]

    def texts(self):
        return [call[2] for call in self.of_kind("send_message")]


@dataclass
class FakeCallbackQuery:
    data: str
    message: FakeMessage
    calls: list
    id: str = "callback-1"

    async def answer(self, text=None, **kwargs):
        self.calls.append(("answer", self.id, text))


@dataclass
class FakeApplication:
    """Collects coroutines scheduled through ``create_task``."""

    tasks: list = field(default_factory=list)

    def create_task(self, coroutine, update=None, **kwargs):
        self.tasks.append(coroutine)

    async def run_tasks(self):
        while self.tasks:
            await self.tasks.pop(0)
