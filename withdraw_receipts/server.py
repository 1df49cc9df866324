"""
Run the service with uvicorn
"""

import logging

import uvicorn

from withdraw_receipts.core.config import settings
from withdraw_receipts.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging(settings.log_level)
    logger.info(f"Server listening on {settings.host}:{settings.port}")
    uvicorn.run(
        "withdraw_receipts.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
