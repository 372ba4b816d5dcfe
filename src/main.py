import logging
import sys

import uvicorn
from pydantic import ValidationError

from src.application.app import create_app

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        app = create_app()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.critical(f"Invalid configuration, DATABASE_URL is required: {e}")
        return 1

    settings = app.state.container.config()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
