"""Runs one full scrape cycle over the venue roster."""
import logging
import threading
from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional, Sequence

from processor.errors import FetchError
from processor.models import ScrapeRun, ScrapeStatus, Venue, VenueResult, summarize, utc_timestamp
from scraper.extractor import EventExtractor
from scraper.fetcher import VenueFetcher
from scraper.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    NOT_STARTED = 'not-started'
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'


class ScrapeRunner:
    """Fetches and extracts every venue in order, one at a time."""

    def __init__(
        self,
        venues: Sequence[Venue],
        fetcher: VenueFetcher,
        extractor: EventExtractor,
        rate_limiter: RateLimiter,
        sink=None
    ):
        """
        Initialize the runner.

        Args:
            venues: Venue roster, processed in this order
            fetcher: Fetcher used for every venue page
            extractor: Extractor applied to each fetched page
            rate_limiter: Pacing between successive fetches
            sink: Optional ReportSink the finished run is persisted to
        """
        self.venues = tuple(venues)
        self.fetcher = fetcher
        self.extractor = extractor
        self.rate_limiter = rate_limiter
        self.sink = sink
        self.state = RunState.NOT_STARTED

    def run(
        self,
        cancel_event: Optional[threading.Event] = None,
        today: Optional[date] = None
    ) -> ScrapeRun:
        """
        Scrape every venue and assemble the run report.

        A failing venue never stops the run; its error is recorded in its
        VenueResult and the next venue is attempted.

        Args:
            cancel_event: Optional event checked before each venue; when set,
                remaining venues are skipped
            today: Reference date for dropping past events (default: run start date)

        Returns:
            The completed ScrapeRun

        Raises:
            StorageError: If the sink cannot persist the report
        """
        self.state = RunState.IN_PROGRESS
        started = datetime.now(timezone.utc)
        started_at = utc_timestamp(started)
        today = today or started.astimezone().date()

        logger.info(f"Scrape starting at {started_at}: {len(self.venues)} venues")

        results: List[VenueResult] = []
        for venue in self.venues:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning(
                    f"Scrape cancelled with {len(self.venues) - len(results)} venues remaining"
                )
                break

            self.rate_limiter.acquire()
            try:
                result = self.scrape_venue(venue, today)
            finally:
                self.rate_limiter.release()
            self._log_result(result)
            results.append(result)

        scrape_run = ScrapeRun(
            started_at=started_at,
            completed_at=utc_timestamp(),
            results=tuple(results)
        )
        self.state = RunState.COMPLETED

        logger.info(
            f"Scrape complete: {scrape_run.total_events} events, "
            f"{scrape_run.total_errors} errors",
            extra={'statuses': summarize(results)}
        )

        if self.sink is not None:
            self.sink.persist(scrape_run)

        return scrape_run

    def scrape_venue(self, venue: Venue, today: date) -> VenueResult:
        """
        Fetch and extract one venue, capturing any failure in the result.

        Args:
            venue: Venue to scrape
            today: Reference date for dropping past events

        Returns:
            VenueResult for this venue
        """
        scraped_at = utc_timestamp()
        logger.info(f"-> {venue.name}")

        try:
            html = self.fetcher.fetch(venue.website)
        except FetchError as e:
            return VenueResult(
                venue=venue,
                status=ScrapeStatus.ERROR,
                scraped_at=scraped_at,
                error=e.message
            )

        try:
            events = self.extractor.extract(html, venue, today=today)
        except Exception as e:
            logger.error(
                f"[{venue.id}] Extraction failed: {e}",
                extra={'error_type': type(e).__name__},
                exc_info=True
            )
            return VenueResult(
                venue=venue,
                status=ScrapeStatus.ERROR,
                scraped_at=scraped_at,
                error=str(e) or type(e).__name__
            )

        return VenueResult(
            venue=venue,
            status=ScrapeStatus.SUCCESS if events else ScrapeStatus.NO_EVENTS,
            scraped_at=scraped_at,
            events=tuple(events)
        )

    def _log_result(self, result: VenueResult) -> None:
        if result.status is ScrapeStatus.SUCCESS:
            logger.info(f"   Found {len(result.events)} event(s)")
        elif result.status is ScrapeStatus.NO_EVENTS:
            logger.info("   No events found")
        else:
            logger.warning(f"   Error: {result.error}")
