#!/usr/bin/env python3
"""Basic usage example"""

from context_logger import configure, create_logger


def main():
    # Global defaults, seen by every logger on its next call
    configure(log_level="TRACE", date_format="%H:%M:%S.%f")

    logger = create_logger("example")
    logger.trace("This is trace")
    logger.info("Application started")
    logger.warn({"retries": 3, "backoff": [1, 2, 4]})

    try:
        raise RuntimeError("This is error")
    except RuntimeError as e:
        logger.error(e)

    # Context defaults to this file's path; overrides win over global options
    quiet = create_logger({"log_level": "ERROR", "colors": False})
    quiet.warn("Not shown")
    quiet.error(f"Level is {quiet.get_log_level()}")


if __name__ == "__main__":
    main()
