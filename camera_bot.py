import logging

import uvicorn

from camerabot import config
from camerabot.main import build_application, create_app
from camerabot.utils.logging_config import setup_logging

logger = logging.getLogger("camerabot")


def main():
    setup_logging()
    token = config.require_bot_token()
    app = create_app(build_application(token))
    logger.info(f"Camera bot is starting on port {config.PORT}. Press Ctrl+C to stop.")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
