"""Root conftest for pytest configuration and shared fixtures.

Loaded before the colocated ``tests/`` packages under ``crowdtrack/``,
making its fixtures available to all of them.
"""

import os
from datetime import datetime, timezone

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any crowdtrack module import.
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ANALYTICS_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
DISTINCT_ID = "3D8C5C0E-7A55-4D63-9A8B-6D1F0B8E2A11"


# ---------------------------------------------------------------------------
# Shared fake fixtures: individual protocol fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_client():
    """Fake primary TrackingClient that records events."""
    from crowdtrack.adapters.tracking.fake import FakeTrackingClient

    return FakeTrackingClient()


@pytest.fixture
def fake_data_lake_client():
    """Fake data lake TrackingClient that records events."""
    from crowdtrack.adapters.tracking.fake import FakeTrackingClient

    return FakeTrackingClient()


@pytest.fixture
def notification_center():
    """In-memory NotificationCenter."""
    from crowdtrack.adapters.notifications import InMemoryNotificationCenter

    return InMemoryNotificationCenter()


@pytest.fixture
def device_provider():
    """Static iPhone-like device snapshot."""
    from crowdtrack.adapters.device import StaticDeviceInfoProvider
    from crowdtrack.schemas.device import DeviceIdiom, DeviceInfo, DeviceOrientation

    return StaticDeviceInfoProvider(
        DeviceInfo(
            system_name="iOS",
            system_version="17.2",
            model="iPhone15,2",
            manufacturer="Apple",
            idiom=DeviceIdiom.PHONE,
            orientation=DeviceOrientation.PORTRAIT,
            screen_width=393.0,
            language="en",
            cellular_radio="LTE",
            is_wifi=True,
        ),
        content_size_category="UICTContentSizeCategoryL",
    )


@pytest.fixture
def test_settings():
    """Settings with deterministic client constants."""
    from crowdtrack.core.config import Settings

    return Settings(
        APP_BUILD_NUMBER="1234",
        APP_RELEASE_VERSION="5.6.0",
        USER_AGENT="Kickstarter/5.6.0 (iPhone; iOS 17.2)",
    )


# ---------------------------------------------------------------------------
# Tracker wired to fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def tracker(fake_client, fake_data_lake_client, device_provider, notification_center, test_settings):
    """Tracker over fakes with a fixed clock and distinct id."""
    from crowdtrack.analytics.tracker import Tracker

    t = Tracker(
        fake_client,
        fake_data_lake_client,
        device_provider=device_provider,
        notification_center=notification_center,
        settings=test_settings,
        distinct_id=DISTINCT_ID,
        clock=lambda: FIXED_NOW,
    )
    yield t
    t.close()


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


@pytest.fixture
def user():
    """A logged-in backer."""
    from crowdtrack.schemas.user import User, UserLocation, UserStats

    return User(
        id=42,
        name="Blob",
        is_admin=False,
        facebook_connected=True,
        location=UserLocation(country="CA", name="Toronto"),
        stats=UserStats(backed_projects_count=3, starred_projects_count=7, created_projects_count=1),
    )


@pytest.fixture
def config():
    """Remote config with flags on both sides of the feature prefix."""
    from crowdtrack.schemas.user import RemoteConfig

    return RemoteConfig(
        country_code="US",
        features={"ios_native_checkout": True, "ios_dark_mode": False, "android_x": True},
        ab_experiments={"2001_insights": "control", "1999_pledge": "experimental"},
    )


@pytest.fixture
def project():
    """A live project launched ten days before FIXED_NOW, ending in 50 hours."""
    from crowdtrack.schemas.project import (
        Category,
        Country,
        Creator,
        Location,
        Personalization,
        Project,
        ProjectDates,
        ProjectState,
        ProjectStats,
    )
    from crowdtrack.schemas.reward import Reward

    now = FIXED_NOW.timestamp()
    return Project(
        id=1,
        name="The Project",
        state=ProjectState.LIVE,
        category=Category(id=22, name="Illustration", parent=Category(id=1, name="Art")),
        country=Country(country_code="US", currency_code="USD"),
        creator=Creator(id=100, name="Creator"),
        dates=ProjectDates(launched_at=now - 10 * 86400, deadline=now + 50 * 3600),
        location=Location(id=7, name="Brooklyn, NY"),
        personalization=Personalization(is_starred=True, is_backing=False),
        stats=ProjectStats(
            backers_count=10,
            comments_count=2,
            updates_count=1,
            goal=1000.0,
            pledged=500.0,
            static_usd_rate=1.0,
        ),
        rewards=[Reward(id=5, minimum=10.0)],
    )
