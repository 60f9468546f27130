"""Shared fixtures for the coursehub test suite."""

from __future__ import annotations

from typing import List

import pytest

from coursehub import CatalogEvent, Course, EventHandler, create_catalog


@pytest.fixture
def scala_course() -> Course:
    return Course("SCALA01", "Functional Programming in Scala", "Prof. Odersky", "Programming")


@pytest.fixture
def python_course() -> Course:
    return Course("PYTHON01", "Introduction to Python", "Prof. van Rossum", "Programming")


@pytest.fixture
def design_course() -> Course:
    return Course("DESIGN01", "UI/UX Design Fundamentals", "Prof. Norman", "Design")


@pytest.fixture
def catalog():
    return create_catalog()


@pytest.fixture
def populated_catalog(catalog, scala_course, python_course, design_course):
    for course in (scala_course, python_course, design_course):
        catalog.add_course(course)
    return catalog


class RecordingHandler(EventHandler):
    """Event handler that keeps every event it accepts."""

    def __init__(self, event_types=None):
        self.event_types = set(event_types) if event_types else None
        self.events: List[CatalogEvent] = []

    def handle_event(self, event: CatalogEvent) -> None:
        self.events.append(event)

    def can_handle(self, event_type: str) -> bool:
        return self.event_types is None or event_type in self.event_types


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def make_recorder():
    return RecordingHandler
