"""AWS Lambda handlers for the Spotted venue scraper."""
import json
import logging
import time
from typing import Any, Dict, Optional

from processor.errors import ReportNotFoundError, StorageError
from processor.models import ScrapedEvent
from processor.scrape_runner import ScrapeRunner
from registry.venues import VENUES
from scraper.extractor import EventExtractor
from scraper.fetcher import VenueFetcher
from scraper.rate_limiter import RateLimiter
from settings import Settings
from storage.dynamodb_sink import DynamoDBReportSink
from storage.report_sink import FileReportSink, load_report
from storage.spotlight_store import SpotlightStore

# Attributes present on every LogRecord; anything else came in via ``extra``
_RESERVED_ATTRS = set(
    logging.LogRecord('', 0, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO', json_format: bool = True, stream=None) -> None:
    """
    Configure root logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit JSON lines; otherwise plain text
        stream: Output stream (default: stderr)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def build_report_sink(settings: Settings):
    """Pick the DynamoDB sink when a table is configured, else the JSON file."""
    if settings.report_table_name:
        return DynamoDBReportSink(table_name=settings.report_table_name)
    return FileReportSink(settings.report_path)


def build_runner(settings: Settings) -> ScrapeRunner:
    """Wire a ScrapeRunner from settings."""
    return ScrapeRunner(
        venues=VENUES,
        fetcher=VenueFetcher(
            timeout=settings.request_timeout_seconds,
            user_agent=settings.user_agent
        ),
        extractor=EventExtractor(),
        rate_limiter=RateLimiter(min_interval=settings.request_delay_seconds),
        sink=build_report_sink(settings)
    )


def _response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body)
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Scheduled handler: run one full scrape cycle.

    Individual venue failures are part of a successful run; only a failure
    of the run itself (including saving the report) returns 500.

    Args:
        event: EventBridge event payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and summary statistics
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info(
        "Lambda execution started",
        extra={
            'venues': len(VENUES),
            'timeout_seconds': settings.request_timeout_seconds,
            'delay_seconds': settings.request_delay_seconds
        }
    )

    try:
        runner = build_runner(settings)
        try:
            scrape_run = runner.run()
        finally:
            runner.fetcher.close()
    except StorageError as e:
        logger.error(
            f"Failed to save scrape results: {str(e)}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        duration = time.time() - start_time
        return _response(500, {
            'message': 'Failed to save scrape results',
            'error': str(e),
            'error_type': type(e).__name__,
            'note': 'Previous results remain in storage',
            'duration_seconds': round(duration, 2)
        })
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Lambda execution failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return _response(500, {
            'message': 'Scrape failed',
            'error': str(e),
            'error_type': type(e).__name__,
            'duration_seconds': round(duration, 2)
        })

    duration = time.time() - start_time
    logger.info(
        "Lambda execution completed successfully",
        extra={
            'duration_seconds': round(duration, 2),
            'total_events': scrape_run.total_events,
            'total_errors': scrape_run.total_errors
        }
    )

    return _response(200, {
        'message': 'Scrape completed successfully',
        'runId': scrape_run.run_id,
        'statistics': {
            'venues_scraped': len(scrape_run.results),
            'total_events': scrape_run.total_events,
            'total_errors': scrape_run.total_errors,
            'duration_seconds': round(duration, 2)
        }
    })


def scrape_results_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    API handler: return the latest scrape report.

    Returns 404 when no report exists yet and 500 when it cannot be read.
    """
    settings = Settings.from_env()
    logger = logging.getLogger(__name__)

    try:
        if settings.report_table_name:
            report = DynamoDBReportSink(settings.report_table_name).get_latest()
            if report is None:
                raise ReportNotFoundError("No scrape data yet")
        else:
            report = load_report(settings.report_path)
    except ReportNotFoundError as e:
        return _response(404, {'error': str(e)})
    except StorageError as e:
        logger.error(f"Failed to read scrape results: {e}")
        return _response(500, {'error': 'Failed to read scrape results'})

    return _response(200, report)


def _parse_body(event: Dict[str, Any]) -> Optional[dict]:
    body = event.get('body')
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def spotlight_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    API handler for the spotlight selection.

    GET returns the current entry (or ``{"spotlight": null}``), POST with
    ``{"event": {...}}`` replaces it, DELETE clears it.
    """
    settings = Settings.from_env()
    logger = logging.getLogger(__name__)
    store = SpotlightStore(settings.spotlight_path)
    method = (event.get('httpMethod') or 'GET').upper()

    try:
        if method == 'GET':
            entry = store.load()
            if entry is None:
                return _response(200, {'spotlight': None})
            return _response(200, entry.to_dict())

        if method == 'POST':
            payload = _parse_body(event)
            if payload is None or not isinstance(payload.get('event'), dict):
                return _response(400, {'error': 'Request body must be {"event": {...}}'})
            try:
                selected = ScrapedEvent.from_dict(payload['event'])
            except (KeyError, TypeError) as e:
                return _response(400, {'error': f"Invalid event: missing {e}"})
            entry = store.select(selected)
            return _response(200, {'success': True, 'spotlight': entry.to_dict()})

        if method == 'DELETE':
            return _response(200, {'success': True, 'cleared': store.clear()})

    except StorageError as e:
        logger.error(f"Spotlight storage failure: {e}")
        return _response(500, {'error': 'Failed to access spotlight'})

    return _response(405, {'error': f"Method {method} not allowed"})
