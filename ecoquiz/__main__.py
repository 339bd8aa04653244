import uvicorn

from ecoquiz.api.main import create_app
from ecoquiz.config import Settings
from ecoquiz.logging_config import setup_logging


def main() -> None:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_file or None)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
