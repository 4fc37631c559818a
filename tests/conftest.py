"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest

from taskmanager import InMemoryTaskService, Task, TaskPriority


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")


@pytest.fixture
def service():
    """A fresh, empty service per test."""
    return InMemoryTaskService()


@pytest.fixture
def past():
    return datetime.now(timezone.utc) - timedelta(days=1)


@pytest.fixture
def future():
    return datetime.now(timezone.utc) + timedelta(days=1)


@pytest.fixture
def sample_task():
    return Task(title="Write spec", description="", priority=TaskPriority.HIGH)
