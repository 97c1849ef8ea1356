"""
m3trans - portable playlist exporter
Main entry point for the command-line tool.
"""

from .core import setup_logging
from .core.validation import validate_and_raise
from .ui.cli import M3transCLI

logger = setup_logging()


def main(args=None):
    """Main entry point."""
    logger.debug("Starting m3trans")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        cli = M3transCLI()
        cli.run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    main()
