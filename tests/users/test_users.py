from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.admin_dashboard.admin_dashboard.core.exceptions import NotFoundError, ValidationError


def test_statistics_of_empty_table_are_zero(container):
    stats = container.user_service.statistics()

    assert stats.total_users == 0
    assert (stats.average_nps, stats.average_csat, stats.average_rd) == (0.0, 0.0, 0.0)


def test_statistics_average_the_counters(container):
    svc = container.user_service
    svc.create({"name": "Ana", "nps": 8, "csat": 4, "rd": 1})
    svc.create({"name": "Luis", "nps": 6, "csat": 2, "rd": 0})

    stats = svc.statistics()

    assert stats.total_users == 2
    assert stats.average_nps == pytest.approx(7.0)
    assert stats.average_csat == pytest.approx(3.0)
    assert stats.average_rd == pytest.approx(0.5)


def test_new_user_counters_default_to_zero(container):
    user = container.user_service.create({"name": "Ana"})
    stored = container.user_service.get(user.user_id)

    assert (stored.responses, stored.nps, stored.csat, stored.rd) == (0, 0, 0, 0)


def test_update_metrics_overwrites_counters(container):
    svc = container.user_service
    user = svc.create({"name": "Ana"})

    svc.update_metrics(user.user_id, {"responses": 3, "nps": 9, "csat": 5, "rd": 2})

    stored = svc.get(user.user_id)
    assert (stored.responses, stored.nps, stored.csat, stored.rd) == (3, 9, 5, 2)


def test_update_unknown_user(container):
    assert container.users_repo.update_metrics(999, responses=1, nps=1, csat=1, rd=1) is False
    with pytest.raises(NotFoundError):
        container.user_service.update_metrics(999, {"responses": 1, "nps": 1, "csat": 1, "rd": 1})


def test_get_unknown_user_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.user_service.get(42)


def test_negative_counters_are_rejected(container):
    with pytest.raises(ValidationError):
        container.user_service.create({"name": "Ana", "nps": -1})
    with pytest.raises(ValidationError):
        container.user_service.update_metrics(1, {"responses": 1, "nps": 1, "csat": -2, "rd": 1})


def test_email_lookup(container):
    svc = container.user_service
    svc.create({"name": "Ana", "email": "Ana@Example.com"})

    assert svc.find_by_email("ana@example.com").name == "Ana"
    assert svc.find_by_email(" ANA@example.com ").name == "Ana"
    assert svc.find_by_email("nobody@example.com") is None
    assert svc.find_by_email("") is None


def test_password_is_stored_hashed(container):
    user = container.user_service.create({"name": "Ana", "email": "ana@example.com", "password": "s3cret!"})

    stored = container.users_repo.get_by_id(user.user_id)
    assert stored.password_hash != "s3cret!"
    assert check_password_hash(stored.password_hash, "s3cret!")


def test_password_without_email_is_rejected(container):
    with pytest.raises(ValidationError):
        container.user_service.create({"name": "Ana", "password": "s3cret!"})
