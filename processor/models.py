"""Data models for venue scraping."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Return an ISO 8601 UTC timestamp with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(
        timespec='milliseconds'
    ).replace('+00:00', 'Z')


class Category(str, Enum):
    LIVE_MUSIC = 'Live Music'
    FOOD_AND_DRINK = 'Food & Drink'
    ARTS_AND_CULTURE = 'Arts & Culture'
    OUTDOORS = 'Outdoors'


class ScrapeStatus(str, Enum):
    SUCCESS = 'success'
    NO_EVENTS = 'no-events'
    ERROR = 'error'


class SpotlightStatus(str, Enum):
    PENDING = 'pending'
    POSTED = 'posted'


@dataclass(frozen=True)
class Venue:
    """A venue whose website is checked for events."""
    id: str
    name: str
    category: Category
    address: str
    website: str
    description: str
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category.value,
            'address': self.address,
            'website': self.website,
            'description': self.description,
            'tags': list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Venue':
        return cls(
            id=data['id'],
            name=data['name'],
            category=Category(data['category']),
            address=data.get('address', ''),
            website=data['website'],
            description=data.get('description', ''),
            tags=tuple(data.get('tags', ())),
        )


@dataclass(frozen=True)
class ScrapedEvent:
    """Candidate event pulled from a venue page, pending human review."""
    venue_id: str
    venue_name: str
    title: str
    date: str
    source_url: str
    time_start: Optional[str] = None
    time_end: Optional[str] = None
    description: Optional[str] = None
    cover_charge: Optional[str] = None

    def to_dict(self) -> dict:
        item = {
            'venueId': self.venue_id,
            'venueName': self.venue_name,
            'title': self.title,
            'date': self.date,
        }

        # Optional fields are omitted rather than written as null
        if self.time_start:
            item['timeStart'] = self.time_start
        if self.time_end:
            item['timeEnd'] = self.time_end
        if self.description:
            item['description'] = self.description
        if self.cover_charge:
            item['coverCharge'] = self.cover_charge

        item['sourceUrl'] = self.source_url
        return item

    @classmethod
    def from_dict(cls, data: dict) -> 'ScrapedEvent':
        return cls(
            venue_id=data['venueId'],
            venue_name=data['venueName'],
            title=data['title'],
            date=data['date'],
            source_url=data['sourceUrl'],
            time_start=data.get('timeStart'),
            time_end=data.get('timeEnd'),
            description=data.get('description'),
            cover_charge=data.get('coverCharge'),
        )


@dataclass(frozen=True)
class VenueResult:
    """Outcome of scraping one venue."""
    venue: Venue
    status: ScrapeStatus
    scraped_at: str
    events: Tuple[ScrapedEvent, ...] = ()
    error: Optional[str] = None

    def to_dict(self) -> dict:
        item = {
            'venue': self.venue.to_dict(),
            'status': self.status.value,
            'events': [event.to_dict() for event in self.events],
        }
        if self.error is not None:
            item['error'] = self.error
        item['scrapedAt'] = self.scraped_at
        return item

    @classmethod
    def from_dict(cls, data: dict) -> 'VenueResult':
        return cls(
            venue=Venue.from_dict(data['venue']),
            status=ScrapeStatus(data['status']),
            scraped_at=data['scrapedAt'],
            events=tuple(ScrapedEvent.from_dict(e) for e in data.get('events', [])),
            error=data.get('error'),
        )


@dataclass(frozen=True)
class ScrapeRun:
    """The full output of one scrape cycle over every venue."""
    started_at: str
    completed_at: str
    results: Tuple[VenueResult, ...] = field(default_factory=tuple)

    @property
    def run_id(self) -> str:
        return self.started_at

    @property
    def total_events(self) -> int:
        return sum(len(result.events) for result in self.results)

    @property
    def total_errors(self) -> int:
        return sum(1 for result in self.results if result.status is ScrapeStatus.ERROR)

    def to_dict(self) -> dict:
        return {
            'runId': self.run_id,
            'startedAt': self.started_at,
            'completedAt': self.completed_at,
            'results': [result.to_dict() for result in self.results],
            'totalEvents': self.total_events,
            'totalErrors': self.total_errors,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ScrapeRun':
        return cls(
            started_at=data['startedAt'],
            completed_at=data['completedAt'],
            results=tuple(VenueResult.from_dict(r) for r in data.get('results', [])),
        )


@dataclass(frozen=True)
class SpotlightEntry:
    """The single event picked for the weekly spotlight."""
    event: ScrapedEvent
    selected_at: str
    week_of: str
    status: SpotlightStatus = SpotlightStatus.PENDING

    def to_dict(self) -> dict:
        return {
            'event': self.event.to_dict(),
            'selectedAt': self.selected_at,
            'weekOf': self.week_of,
            'status': self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SpotlightEntry':
        return cls(
            event=ScrapedEvent.from_dict(data['event']),
            selected_at=data['selectedAt'],
            week_of=data['weekOf'],
            status=SpotlightStatus(data.get('status', SpotlightStatus.PENDING.value)),
        )


def summarize(results: List[VenueResult]) -> dict:
    """Count venue results by status."""
    counts = {status.value: 0 for status in ScrapeStatus}
    for result in results:
        counts[result.status.value] += 1
    return counts
