"""Run the message board under uvicorn: python -m message_board."""

import uvicorn

from message_board.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "message_board.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
