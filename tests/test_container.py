"""Tests for container wiring."""

import asyncio

import pytest

from healthy_coaching.config import Settings
from healthy_coaching.containers import build_container
from healthy_coaching.errors import ConfigurationError


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.daily_summary_service.catalog is container.catalog_service
    assert container.catalog_service.ttl_seconds == 3600
    assert container.profile_service.default_calorie_target == 2000
    asyncio.run(container.close_resources())


def test_build_container_requires_supabase_settings(settings: Settings) -> None:
    blank = settings.model_copy(update={"supabase_url": ""})

    with pytest.raises(ConfigurationError) as excinfo:
        build_container(blank)

    assert excinfo.value.config_key == "supabase_url"
