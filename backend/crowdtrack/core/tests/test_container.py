"""Tests for container wiring."""

import pytest

from crowdtrack.adapters.notifications import InMemoryNotificationCenter
from crowdtrack.adapters.tracking import HttpDataLakeClient, NullTrackingClient, PostHogTrackingClient
from crowdtrack.adapters.tracking.fake import FakeTrackingClient
from crowdtrack.analytics.tracker import Tracker
from crowdtrack.core import container as container_module
from crowdtrack.core.config import Environment, Settings
from crowdtrack.core.container import Container, create_container, create_tracker
from crowdtrack.core.exceptions import SinkConfigurationError


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **{"ANALYTICS_ENABLED": True, **overrides})


def test_local_environment_uses_null_clients():
    c = create_container(_settings(ENVIRONMENT=Environment.LOCAL, POSTHOG_API_KEY="phc"))

    assert isinstance(c.client, NullTrackingClient)
    assert isinstance(c.data_lake_client, NullTrackingClient)
    assert isinstance(c.notification_center, InMemoryNotificationCenter)


def test_analytics_disabled_uses_null_clients():
    c = create_container(_settings(ENVIRONMENT=Environment.PRD, ANALYTICS_ENABLED=False))

    assert isinstance(c.client, NullTrackingClient)
    assert isinstance(c.data_lake_client, NullTrackingClient)


def test_production_wires_real_sinks():
    c = create_container(
        _settings(
            ENVIRONMENT=Environment.PRD,
            POSTHOG_API_KEY="phc_test",
            DATA_LAKE_URL="https://lake.example.com/events",
        )
    )
    try:
        assert isinstance(c.client, PostHogTrackingClient)
        assert isinstance(c.data_lake_client, HttpDataLakeClient)
    finally:
        c.client.close()
        c.data_lake_client.close()


def test_data_lake_can_be_disabled_alone():
    c = create_container(
        _settings(ENVIRONMENT=Environment.DEV, POSTHOG_API_KEY="phc_test", DATA_LAKE_ENABLED=False)
    )

    try:
        assert isinstance(c.client, PostHogTrackingClient)
        assert isinstance(c.data_lake_client, NullTrackingClient)
    finally:
        c.client.close()


def test_missing_posthog_key_fails_fast():
    with pytest.raises(SinkConfigurationError) as exc_info:
        create_container(_settings(ENVIRONMENT=Environment.PRD))

    assert exc_info.value.sink == "posthog"


def test_missing_data_lake_url_fails_fast():
    with pytest.raises(SinkConfigurationError) as exc_info:
        create_container(_settings(ENVIRONMENT=Environment.PRD, POSTHOG_API_KEY="phc_test"))

    assert exc_info.value.sink == "data_lake"


def test_create_tracker_owns_sinks(device_provider, notification_center, test_settings):
    client, lake = FakeTrackingClient(), FakeTrackingClient()
    c = Container(
        client=client,
        data_lake_client=lake,
        device_provider=device_provider,
        notification_center=notification_center,
        settings=test_settings,
    )

    tracker = create_tracker(c, distinct_id="ABC")
    tracker.track_project_search_view()
    tracker.close()

    assert isinstance(tracker, Tracker)
    assert tracker.distinct_id == "ABC"
    assert client.names == ["Search Page Viewed"]
    assert lake.names == ["Search Page Viewed"]
    assert client.closed and lake.closed


def test_replace_swaps_dependencies(test_settings, device_provider, notification_center):
    c = Container(
        client=NullTrackingClient(),
        data_lake_client=NullTrackingClient(),
        device_provider=device_provider,
        notification_center=notification_center,
        settings=test_settings,
    )
    fake = FakeTrackingClient()

    swapped = c.replace(client=fake)

    assert swapped.client is fake
    assert swapped.device_provider is device_provider
    assert isinstance(c.client, NullTrackingClient)


def test_initialize_container_once():
    container_module.reset_container()
    try:
        container_module.initialize_container(_settings(ENVIRONMENT=Environment.TEST))
        assert isinstance(container_module.container, Container)

        with pytest.raises(RuntimeError):
            container_module.initialize_container(_settings(ENVIRONMENT=Environment.TEST))
    finally:
        container_module.reset_container()
