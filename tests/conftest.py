"""Shared fixtures for scraper tests."""
import logging
from datetime import date

import pytest

from processor.models import Category, Venue


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def venue():
    """A single test venue."""
    return Venue(
        id='test-brewery',
        name='Test Brewery',
        category=Category.LIVE_MUSIC,
        address='1 Main St, Dripping Springs, TX 78620',
        website='https://brewery.example.com/events',
        description='Brewery with live music.',
        tags=('brewery', 'live music')
    )


@pytest.fixture
def venues():
    """Three test venues with distinct event pages."""
    return [
        Venue(
            id=f'venue-{name}',
            name=f'Venue {name.title()}',
            category=category,
            address=f'{i} Test Rd',
            website=f'https://{name}.example.com/events',
            description=f'Venue {name}',
            tags=(name,)
        )
        for i, (name, category) in enumerate([
            ('alpha', Category.LIVE_MUSIC),
            ('bravo', Category.FOOD_AND_DRINK),
            ('charlie', Category.OUTDOORS),
        ], start=1)
    ]


@pytest.fixture
def today():
    """Fixed reference date for extraction."""
    return date(2026, 1, 10)
