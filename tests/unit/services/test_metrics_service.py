"""Tests for the body metrics upsert."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from gymapi.core.exceptions import NotFoundError
from gymapi.db.repositories.user_metrics import UserMetricsRepository
from gymapi.schemas.metrics import UserMetricsUpdate
from gymapi.services.metrics_service import MetricsService


@pytest.fixture
def service(db):
    return MetricsService(db)


class TestUpsert:
    def test_no_metrics_yet(self, service, athlete):
        assert service.get(athlete.id) is None

    def test_first_write_creates_with_nulls(self, service, athlete):
        metrics, created = service.upsert(athlete.id, UserMetricsUpdate(weight=80))
        assert created is True
        assert metrics.weight == 80
        assert metrics.height is None
        assert metrics.age is None
        assert metrics.gender is None
        assert metrics.body_fat is None
        assert metrics.muscle_mass is None

    def test_second_write_changes_only_given_fields(self, service, athlete):
        first, _ = service.upsert(athlete.id, UserMetricsUpdate(weight=80))
        second, created = service.upsert(athlete.id, UserMetricsUpdate(height=180))
        assert created is False
        assert second.id == first.id
        assert second.height == 180
        assert second.weight == 80

    def test_explicit_null_clears_field(self, service, athlete):
        service.upsert(athlete.id, UserMetricsUpdate(weight=80, height=180))
        metrics, _ = service.upsert(athlete.id, UserMetricsUpdate(weight=None))
        assert metrics.weight is None
        assert metrics.height == 180

    def test_concurrent_first_write_becomes_update(self, service, athlete, monkeypatch):
        first, _ = service.upsert(athlete.id, UserMetricsUpdate(weight=80))

        real_get_by_user = UserMetricsRepository.get_by_user
        calls = []

        def stale_then_real(self, user_id):
            calls.append(user_id)
            return None if len(calls) == 1 else real_get_by_user(self, user_id)

        monkeypatch.setattr(UserMetricsRepository, "get_by_user", stale_then_real)
        metrics, created = service.upsert(athlete.id, UserMetricsUpdate(height=180))
        assert created is False
        assert metrics.id == first.id
        assert metrics.weight == 80
        assert metrics.height == 180

    def test_metrics_are_per_user(self, service, athlete, trainer):
        service.upsert(athlete.id, UserMetricsUpdate(weight=80))
        assert service.get(trainer.id) is None

    @pytest.mark.parametrize("payload", [
        {"height": 20},
        {"weight": 900},
        {"age": 0},
        {"body_fat": 101},
        {"gender": "robot"},
    ])
    def test_out_of_range_values(self, payload):
        with pytest.raises(PydanticValidationError):
            UserMetricsUpdate(**payload)


class TestDelete:
    def test_delete(self, service, athlete):
        service.upsert(athlete.id, UserMetricsUpdate(weight=80))
        service.delete(athlete.id)
        assert service.get(athlete.id) is None

    def test_delete_without_metrics(self, service, athlete):
        with pytest.raises(NotFoundError):
            service.delete(athlete.id)
