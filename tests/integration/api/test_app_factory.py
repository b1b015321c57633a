from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from invitapp.api.app import create_app
from tests.fixtures.app_config import TestConfig
from tests.fixtures.fake_storage import FakeObjectStorage


class UnknownZoneConfig(TestConfig):
    EVENT_TIMEZONE = "Mars/Olympus_Mons"


def test_unknown_event_timezone_fails_at_startup():
    with pytest.raises(ZoneInfoNotFoundError):
        create_app(UnknownZoneConfig, object_storage=FakeObjectStorage())


def test_event_timezone_resolved_once():
    app = create_app(TestConfig, object_storage=FakeObjectStorage())

    assert app.state.event_timezone == ZoneInfo("UTC")


def test_storage_disabled_without_bucket():
    app = create_app(TestConfig)

    assert app.state.object_storage is None
