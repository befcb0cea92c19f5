import logging

import uvicorn

from .app import create_app
from .core.config import Config


def configure_logging() -> None:
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )


def main() -> None:
    Config.validate()

    # Before create_app() so its startup lines are emitted
    configure_logging()
    app = create_app()

    uvicorn.run(app, host=Config.HOST, port=Config.port())


if __name__ == "__main__":
    main()

