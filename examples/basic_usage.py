#!/usr/bin/env python3
"""Basic usage example"""

import logging

from runtime_logger import LoggerBuilder, LogLevel, Logger
from runtime_logger.handlers import configure_logging

def main():
    # Create logger from the runtime's environment variables
    logger = (LoggerBuilder.from_env()
        .with_level(LogLevel.DEBUG)
        .build())

    Logger.set_request_id("8f3c2a1e-example")

    # Log messages
    logger.trace("This is trace")
    logger.debug("Handler loaded in {elapsed} ms", 42)
    logger.info("Processed {count} of {total} items", 3, 10)
    logger.warning("Retrying {operation}", "upload")
    logger.error("Missing {first} and {second}", "bucket")
    logger.critical("This is critical")

    # Same line format through the standard library
    configure_logging()
    logging.getLogger(__name__).info("Loaded {count} records", 12)

    logger.flush()
    logger.shutdown()

if __name__ == "__main__":
    main()
