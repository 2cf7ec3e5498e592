#!/usr/bin/env python3
"""
Trade-in Discount Service - Main Entry Point

Serves POST /api/calculate-discount, which scores a customer's age bracket,
ZIP code and trade-in device against the reference tables named by
ZIP_DATA_PATH and DEVICE_DATA_PATH and answers with a 5-30% discount.
"""

import logging
import uvicorn
from config.app import settings

logger = logging.getLogger(__name__)


def main():
    """Run the discount API with uvicorn using the configured host and port"""
    logger.info(
        f"Starting discount API on {settings.API_HOST}:{settings.API_PORT} "
        f"(environment={settings.ENVIRONMENT})"
    )
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
