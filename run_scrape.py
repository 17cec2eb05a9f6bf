"""Command-line entry point: run one full scrape cycle."""
import logging
import sys

from lambda_function import build_runner, setup_logging
from processor.errors import StorageError
from settings import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Run a scrape over every venue and save the report.

    Returns:
        0 when the run completes (even if some venues failed), 1 otherwise
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level, json_format=False, stream=sys.stdout)

    runner = build_runner(settings)
    try:
        scrape_run = runner.run()
    except StorageError as e:
        logger.error(f"Scrape finished but results could not be saved: {e}")
        return 1
    finally:
        runner.fetcher.close()

    logger.info(f"Total events found: {scrape_run.total_events}")
    logger.info(f"Errors: {scrape_run.total_errors}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
