"""Run the Jokebook API with uvicorn on HOST:PORT (default port 3000)."""
import uvicorn

from jokebook.core.config import get_settings
from jokebook.core.logging import get_logger

logger = get_logger("jokebook")


def main() -> None:
    settings = get_settings()
    logger.info("Server listening on port %s", settings.port)
    uvicorn.run("jokebook.app_factory:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
