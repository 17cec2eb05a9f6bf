"""Unit tests for event extraction strategies."""
from datetime import date
from unittest.mock import Mock

from bs4 import BeautifulSoup

from processor.models import ScrapedEvent
from scraper.extractor import (
    EventExtractor,
    ExtractionStrategy,
    LooseTextStrategy,
    StructuredBlockStrategy,
)


def _page(body: str) -> str:
    return f"<html><head><title>Events</title></head><body>\n{body}\n</body></html>"


class TestStructuredBlockStrategy:
    """Test cases for the event-class block scan."""

    def test_single_line_event_block(self, venue, today):
        """Test title, date, times and free cover from a one-line block."""
        html = _page(
            '<div class="event">Live Music: The Band March 14 6:00pm – 9:00pm Free</div>'
        )

        events = EventExtractor().extract(html, venue, today=today)

        assert len(events) == 1
        event = events[0]
        assert event.title == "Live Music: The Band"
        assert event.date == "2026-03-14"
        assert event.time_start == "18:00"
        assert event.time_end == "21:00"
        assert event.cover_charge == "Free"
        assert event.venue_id == venue.id
        assert event.venue_name == venue.name
        assert event.source_url == venue.website

    def test_heading_is_used_as_title(self, venue, today):
        """Test that a heading inside the block becomes the title."""
        html = _page("""
            <div class="event-card">
                <h3>Trivia Night</h3>
                <p>April 2, 2026</p>
                <p>7:00 PM - 9:00 PM</p>
                <p>Cover: $10</p>
            </div>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert len(events) == 1
        assert events[0].title == "Trivia Night"
        assert events[0].date == "2026-04-02"
        assert events[0].time_start == "19:00"
        assert events[0].time_end == "21:00"
        assert events[0].cover_charge == "$10"

    def test_numeric_cover_wins_over_free(self, venue, today):
        """Test that an explicit price is preferred over the word free."""
        html = _page(
            '<div class="event-item"><strong>Comedy Show</strong> May 9 '
            'Admission: $15 (free parking)</div>'
        )

        events = EventExtractor().extract(html, venue, today=today)

        assert events[0].cover_charge == "$15"

    def test_price_before_cover_keyword(self, venue, today):
        """Test the "$N cover" form."""
        html = _page('<div class="event-item"><h4>Open Mic</h4> May 9 $5 cover at the door</div>')

        events = EventExtractor().extract(html, venue, today=today)

        assert events[0].cover_charge == "$5"

    def test_no_cover_and_no_time(self, venue, today):
        """Test optional fields stay empty when not present."""
        html = _page('<div class="event"><h3>Wine Tasting</h3> June 20</div>')

        events = EventExtractor().extract(html, venue, today=today)

        assert events[0].cover_charge is None
        assert events[0].time_start is None
        assert events[0].time_end is None

    def test_free_must_be_a_whole_word(self, venue, today):
        """Test words containing "free" do not set a cover charge."""
        html = _page('<div class="event"><h3>Freedom Rally</h3> Nov 4 carefree fun</div>')

        events = EventExtractor().extract(html, venue, today=today)

        assert events[0].title == "Freedom Rally"
        assert events[0].cover_charge is None

    def test_impossible_day_is_not_read_as_year(self, venue, today):
        """Test a block whose only date has an impossible day is dropped."""
        html = _page('<div class="event"><h3>Gala</h3> Doors Dec 45 tickets</div>')

        assert EventExtractor().extract(html, venue, today=today) == []

    def test_short_blocks_are_skipped(self, venue, today):
        """Test that blocks under the minimum length are ignored."""
        strategy = StructuredBlockStrategy()
        soup = BeautifulSoup(_page('<div class="event">May 9</div>'), 'html.parser')

        assert strategy.extract(soup, venue, today) == []

    def test_blocks_without_dates_are_skipped(self, venue, today):
        """Test that blocks with no month-name date are ignored."""
        strategy = StructuredBlockStrategy()
        soup = BeautifulSoup(
            _page('<div class="event"><h3>Every Friday</h3> Happy hour 4-6pm</div>'),
            'html.parser'
        )

        assert strategy.extract(soup, venue, today) == []

    def test_past_events_are_dropped(self, venue, today):
        """Test that events before the reference date are not reported."""
        html = _page("""
            <div class="event"><h3>Last Year Show</h3> March 14, 2025</div>
            <div class="event"><h3>This Year Show</h3> March 14, 2026</div>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert [e.title for e in events] == ["This Year Show"]

    def test_duplicate_title_and_date_are_dropped(self, venue, today):
        """Test per-venue deduplication on (title, date)."""
        html = _page("""
            <div class="event"><h3>Jazz Brunch</h3> Feb 1 11:00 am</div>
            <div class="event"><h3>Jazz Brunch</h3> Feb 1 11:00 am</div>
            <div class="event"><h3>Jazz Brunch</h3> Feb 8 11:00 am</div>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert [(e.title, e.date) for e in events] == [
            ("Jazz Brunch", "2026-02-01"),
            ("Jazz Brunch", "2026-02-08"),
        ]

    def test_container_matching_selector_does_not_duplicate(self, venue, today):
        """Test a wrapping list element does not add an extra event."""
        html = _page("""
            <ul class="events-list">
                <li class="event-item"><h3>Band A</h3> March 1</li>
                <li class="event-item"><h3>Band B</h3> March 8</li>
            </ul>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert [e.title for e in events] == ["Band A", "Band B"]

    def test_title_and_description_are_truncated(self, venue, today):
        """Test length caps on title and description."""
        long_title = "A" * 150
        html = _page(
            f'<div class="event"><h3>{long_title}</h3> March 14 '
            f'{"words and more words " * 20}</div>'
        )

        events = EventExtractor().extract(html, venue, today=today)

        assert len(events[0].title) == 100
        assert len(events[0].description) <= 200
        assert "  " not in events[0].description

    def test_events_calendar_plugin_markup(self, venue, today):
        """Test The Events Calendar plugin class names are recognized."""
        html = _page(
            '<div class="tribe-events-calendar-day">'
            '<h3 class="tribe-events-calendar-day__event-title">Pottery Class</h3>'
            ' <time>February 21</time></div>'
        )

        events = EventExtractor().extract(html, venue, today=today)

        assert events[0].title == "Pottery Class"
        assert events[0].date == "2026-02-21"


class TestLooseTextStrategy:
    """Test cases for the full-text fallback."""

    def test_fallback_when_no_event_blocks(self, venue, today):
        """Test date-bearing lines become events when no blocks match."""
        html = _page("""
            <h1>Welcome</h1>
            <p>Jazz Night on May 3</p>
            <p>Bring a chair</p>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert len(events) == 1
        assert events[0].title == "Jazz Night on May 3"
        assert events[0].date == "2026-05-03"
        assert events[0].description == "Jazz Night on May 3 Bring a chair"
        assert events[0].time_start is None
        assert events[0].cover_charge is None

    def test_caps_at_five_events(self, venue, today):
        """Test the fallback never returns more than five events."""
        lines = "\n".join(f"<p>Show number {day} on March {day}</p>" for day in range(1, 9))
        html = _page(lines)

        events = EventExtractor().extract(html, venue, today=today)

        assert len(events) == 5
        assert events[-1].date == "2026-03-05"

    def test_scripts_and_styles_are_ignored(self, venue, today):
        """Test that non-visible text is not scanned."""
        html = _page("""
            <script>var launch = "June 1 release";</script>
            <style>/* August 5 */</style>
            <p>Nothing scheduled</p>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert events == []

    def test_past_dates_are_dropped(self, venue, today):
        """Test the fallback also drops past events."""
        html = _page("<p>Closed December 25, 2025</p>\n<p>Reopening Feb 2</p>")

        events = EventExtractor().extract(html, venue, today=today)

        assert [e.date for e in events] == ["2026-02-02"]

    def test_duplicate_lines_are_dropped(self, venue, today):
        """Test identical date-bearing lines yield one event."""
        html = _page("<p>Jazz Night on May 3</p>\n<p>Jazz Night on May 3</p>")

        events = EventExtractor().extract(html, venue, today=today)

        assert [(e.title, e.date) for e in events] == [("Jazz Night on May 3", "2026-05-03")]

    def test_duplicates_do_not_count_toward_cap(self, venue, today):
        """Test skipped duplicates leave room for five distinct events."""
        repeated = "\n".join("<p>Opening night March 1</p>" for _ in range(4))
        distinct = "\n".join(f"<p>Show on March {day}</p>" for day in range(2, 8))
        html = _page(f"{repeated}\n{distinct}")

        events = EventExtractor().extract(html, venue, today=today)

        assert [e.date for e in events] == [
            "2026-03-01", "2026-03-02", "2026-03-03", "2026-03-04", "2026-03-05",
        ]

    def test_title_is_truncated(self, venue, today):
        """Test the fallback title cap."""
        html = _page(f"<p>{'x' * 100} March 3</p>")

        events = LooseTextStrategy().extract(
            BeautifulSoup(html, 'html.parser'), venue, today
        )

        assert len(events[0].title) == 80


class TestEventExtractor:
    """Test cases for strategy ordering."""

    def test_fallback_not_used_when_blocks_found(self, venue, today):
        """Test loose lines are ignored when a block produced events."""
        html = _page("""
            <div class="event"><h3>Block Event</h3> April 1</div>
            <p>Loose line mentioning April 2</p>
        """)

        events = EventExtractor().extract(html, venue, today=today)

        assert [e.title for e in events] == ["Block Event"]

    def test_second_strategy_runs_only_when_first_is_empty(self, venue, today):
        """Test strategy N+1 runs only if strategy N yields nothing."""
        found = ScrapedEvent(
            venue_id=venue.id,
            venue_name=venue.name,
            title='Found',
            date='2026-02-01',
            source_url=venue.website
        )
        first = Mock(spec=ExtractionStrategy)
        first.name = 'first'
        first.extract.return_value = []
        second = Mock(spec=ExtractionStrategy)
        second.name = 'second'
        second.extract.return_value = [found]
        third = Mock(spec=ExtractionStrategy)
        third.name = 'third'

        events = EventExtractor([first, second, third]).extract("<p></p>", venue, today=today)

        assert events == [found]
        first.extract.assert_called_once()
        second.extract.assert_called_once()
        third.extract.assert_not_called()

    def test_empty_page_is_not_an_error(self, venue, today):
        """Test that nothing found is an empty list, not an exception."""
        assert EventExtractor().extract("", venue, today=today) == []

    def test_extraction_is_deterministic(self, venue, today):
        """Test identical markup gives identical events."""
        html = _page("""
            <div class="event"><h3>One</h3> March 1 7:00 pm</div>
            <div class="event"><h3>Two</h3> March 2 Cover $8</div>
        """)

        first = EventExtractor().extract(html, venue, today=today)
        second = EventExtractor().extract(html, venue, today=today)

        assert first == second
        assert [e.to_dict() for e in first] == [e.to_dict() for e in second]

    def test_never_emits_dates_before_today(self, venue):
        """Test no event predates the reference date."""
        html = _page("""
            <div class="event"><h3>A</h3> Jan 1, 2026</div>
            <div class="event"><h3>B</h3> Jan 10, 2026</div>
            <div class="event"><h3>C</h3> Jan 11, 2026</div>
        """)

        events = EventExtractor().extract(html, venue, today=date(2026, 1, 10))

        assert [e.title for e in events] == ["B", "C"]
