from __future__ import annotations

import pytest

from src.admin_dashboard.admin_dashboard.core.exceptions import ValidationError


def test_recording_same_month_twice_keeps_latest_value(container):
    svc = container.nps_trimestral_service

    svc.record(1, {"month": "2025-01", "nps": 40})
    svc.record(1, {"month": "2025-01", "nps": 55})

    history = svc.history(1)
    assert [(e.month, e.nps) for e in history] == [("2025-01", 55)]


def test_history_returns_latest_three_months_newest_first(container):
    svc = container.nps_trimestral_service
    for month, nps in [("2024-11", 10), ("2025-01", 30), ("2024-12", 20), ("2025-02", 40)]:
        svc.record(7, {"month": month, "nps": nps})
    svc.record(8, {"month": "2025-03", "nps": 99})

    history = svc.history(7)

    assert [e.month for e in history] == ["2025-02", "2025-01", "2024-12"]
    assert all(e.user_id == 7 for e in history)


def test_history_of_unknown_user_is_empty(container):
    assert container.nps_trimestral_service.history(123) == []


@pytest.mark.parametrize(
    "payload",
    [
        {"month": "2025-13", "nps": 10},
        {"month": "January", "nps": 10},
        {"month": "2025-01", "nps": 101},
        {"month": "2025-01"},
    ],
)
def test_invalid_entries_are_rejected(container, payload):
    with pytest.raises(ValidationError):
        container.nps_trimestral_service.record(1, payload)


def test_user_id_must_be_positive(container):
    with pytest.raises(ValidationError):
        container.nps_trimestral_service.history(0)
