"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def settings():
    from vendscore.config import Settings
    return Settings(_env_file=None)


@pytest.fixture
def registry():
    from vendscore.services.metric_registry import MetricRegistry
    return MetricRegistry.with_defaults()


@pytest.fixture
def service(registry, settings):
    from vendscore.services.evaluation_service import EvaluationService
    return EvaluationService(registry=registry, config=settings)


@pytest.fixture
def office_site(service):
    return service.create_site("Harbor Tower", "1 Harbor Way", "office")


@pytest.fixture
def hospital_site(service):
    return service.create_site("St. Clare Medical", "200 Clinic Rd", "hospital")
