"""Pytest configuration and fixtures for people tests."""

import pytest

from people.core.models import Person


@pytest.fixture
def ada():
    return Person(name="Ada", age=36, favourite_food="tea")


@pytest.fixture
def grace():
    """Person without a favourite food."""
    return Person(name="Grace", age=85, favourite_food=None)


@pytest.fixture
def sample_people(ada, grace):
    return [
        ada,
        grace,
        Person(name="", age=0, favourite_food=""),
    ]
