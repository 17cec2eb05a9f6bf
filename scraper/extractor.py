"""Heuristic event extraction from arbitrary venue HTML.

Venue sites are uncontrolled, so extraction is deliberately loose: it is
better to pull in a few false positives than to miss real events, because
every result is reviewed by a person before anything is published.

Extraction runs an ordered list of strategies. The first strategy that
yields any events wins; later strategies only run when earlier ones found
nothing.
"""
import logging
import re
from datetime import date
from typing import List, Optional, Sequence, Set, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from processor.models import ScrapedEvent, Venue
from processor.normalizer import find_date_text, find_time_range, normalize_date

logger = logging.getLogger(__name__)

COVER_PATTERN = re.compile(
    r'(?:cover|admission|entry)[:\s]*\$?(\d+)|(\$\d+)\s*(?:cover|admission)',
    re.IGNORECASE
)

FREE_PATTERN = re.compile(r'\bfree\b', re.IGNORECASE)

WHITESPACE_PATTERN = re.compile(r'\s+')


class ExtractionStrategy:
    """Base class for a single way of finding events in a page."""

    name = 'base'

    def extract(self, soup: BeautifulSoup, venue: Venue, today: date) -> List[ScrapedEvent]:
        raise NotImplementedError


class EventCollector:
    """Accumulates events for one venue, dropping (title, date) duplicates."""

    def __init__(self):
        self.events: List[ScrapedEvent] = []
        self._seen: Set[Tuple[str, str]] = set()

    def add(self, event: ScrapedEvent) -> bool:
        key = (event.title, event.date)
        if key in self._seen:
            return False
        self._seen.add(key)
        self.events.append(event)
        return True

    def __len__(self) -> int:
        return len(self.events)


def _upcoming_date(text: str, today: date) -> Optional[str]:
    """Return the first normalizable, non-past date in text."""
    match = find_date_text(text)
    if not match:
        return None

    normalized = normalize_date(match.group(1), today=today)
    if not normalized or normalized < today.isoformat():
        return None
    return normalized


def _collapse(text: str) -> str:
    return WHITESPACE_PATTERN.sub(' ', text).strip()


class StructuredBlockStrategy(ExtractionStrategy):
    """Scan elements carrying common event-listing classes."""

    name = 'structured'

    SELECTORS = (
        '.event',
        '.event-card',
        '.event-item',
        '.events-list-item',
        '[class*="event"]',
        '.tribe-events-calendar-day',      # The Events Calendar plugin
        '.tribe-events-list-event-title',
        '.eventbrite-widget-iframe',
    )
    TITLE_SELECTOR = 'h1, h2, h3, h4, h5, strong, .event-title'

    MIN_TEXT_LENGTH = 10
    MAX_TITLE_LENGTH = 100
    MAX_DESCRIPTION_LENGTH = 200

    def extract(self, soup: BeautifulSoup, venue: Venue, today: date) -> List[ScrapedEvent]:
        collector = EventCollector()
        visited = set()

        for selector in self.SELECTORS:
            for element in soup.select(selector):
                if id(element) in visited:
                    continue
                visited.add(id(element))

                event = self._parse_element(element, venue, today)
                if event and not collector.add(event):
                    logger.debug(f"[{venue.id}] Duplicate event skipped: {event.title} {event.date}")

        return collector.events

    def _parse_element(self, element: Tag, venue: Venue, today: date) -> Optional[ScrapedEvent]:
        """
        Parse one matched element into an event.

        Args:
            element: Element matched by one of the selectors
            venue: Venue being scraped
            today: Reference date; earlier events are dropped

        Returns:
            ScrapedEvent or None when the element lacks a usable date
        """
        text = element.get_text().strip()
        if len(text) < self.MIN_TEXT_LENGTH:
            return None

        event_date = _upcoming_date(text, today)
        if not event_date:
            return None

        title = self._extract_title(element, text)
        if not title:
            return None

        time_start, time_end = find_time_range(text)

        return ScrapedEvent(
            venue_id=venue.id,
            venue_name=venue.name,
            title=title[:self.MAX_TITLE_LENGTH],
            date=event_date,
            time_start=time_start,
            time_end=time_end,
            description=_collapse(text[:self.MAX_DESCRIPTION_LENGTH]),
            cover_charge=self._extract_cover_charge(text),
            source_url=venue.website
        )

    def _extract_title(self, element: Tag, text: str) -> str:
        heading = element.select_one(self.TITLE_SELECTOR)
        if heading:
            heading_text = _collapse(heading.get_text())
            if heading_text:
                return heading_text

        first_line = text.split('\n')[0].strip()

        # A single-line block usually reads "<title> <date> <time>"
        match = find_date_text(first_line)
        if match:
            before_date = first_line[:match.start()].strip(' \t-–—|:,')
            if before_date:
                return _collapse(before_date)

        return _collapse(first_line)

    def _extract_cover_charge(self, text: str) -> Optional[str]:
        match = COVER_PATTERN.search(text)
        if match:
            if match.group(1):
                return f"${match.group(1)}"
            return match.group(2)

        if FREE_PATTERN.search(text):
            return 'Free'
        return None


class LooseTextStrategy(ExtractionStrategy):
    """Fallback: scan visible page text line by line for dates."""

    name = 'loose-text'

    MAX_EVENTS = 5
    MAX_TITLE_LENGTH = 80
    MAX_DESCRIPTION_LENGTH = 200
    INVISIBLE_TAGS = ['script', 'style', 'noscript', 'template']

    def extract(self, soup: BeautifulSoup, venue: Venue, today: date) -> List[ScrapedEvent]:
        collector = EventCollector()
        lines = self._visible_lines(soup)

        for index, line in enumerate(lines):
            event_date = _upcoming_date(line, today)
            if not event_date:
                continue

            following = lines[index + 1] if index + 1 < len(lines) else ''
            context = f"{line} {following}".strip()

            collector.add(ScrapedEvent(
                venue_id=venue.id,
                venue_name=venue.name,
                title=line[:self.MAX_TITLE_LENGTH],
                date=event_date,
                description=context[:self.MAX_DESCRIPTION_LENGTH],
                source_url=venue.website
            ))

            if len(collector) >= self.MAX_EVENTS:
                break

        return collector.events

    def _visible_lines(self, soup: BeautifulSoup) -> List[str]:
        root = soup.body or soup
        for hidden in root.find_all(self.INVISIBLE_TAGS):
            hidden.decompose()

        lines = (line.strip() for line in root.get_text().split('\n'))
        return [line for line in lines if line]


class EventExtractor:
    """Runs extraction strategies in order until one finds events."""

    def __init__(self, strategies: Optional[Sequence[ExtractionStrategy]] = None):
        if strategies is None:
            strategies = (StructuredBlockStrategy(), LooseTextStrategy())
        self.strategies = tuple(strategies)

    def extract(self, html: str, venue: Venue, today: Optional[date] = None) -> List[ScrapedEvent]:
        """
        Extract candidate events from one venue page.

        Args:
            html: Raw page HTML
            venue: Venue the page belongs to
            today: Reference date; events before it are dropped (default: today)

        Returns:
            Deduplicated list of ScrapedEvent objects, possibly empty
        """
        today = today or date.today()
        soup = BeautifulSoup(html, 'html.parser')

        for strategy in self.strategies:
            events = strategy.extract(soup, venue, today)
            if events:
                logger.debug(
                    f"[{venue.id}] Strategy '{strategy.name}' found {len(events)} events"
                )
                return events

        return []
