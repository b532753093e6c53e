"""Run the docmark API with uvicorn: ``python -m server``."""

import uvicorn

from docmark.utils.logging_config import configure_logging, get_logger
from server.server_config import HOST, PORT, RELOAD

logger = get_logger(__name__)


def main() -> None:
    configure_logging()
    logger.info("Starting docmark server", extra={"host": HOST, "port": PORT, "reload": RELOAD})
    # uvicorn keeps the handlers installed by configure_logging
    uvicorn.run("server.main:app", host=HOST, port=PORT, reload=RELOAD, log_config=None)


if __name__ == "__main__":
    main()
