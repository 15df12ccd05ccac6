from __future__ import annotations

import pytest
from pydantic import BaseModel, Field

from src.admin_dashboard.admin_dashboard.common.validators import (
    require_hhmm,
    require_non_empty,
    require_year_month,
    validate,
)
from src.admin_dashboard.admin_dashboard.core.enums import NewsEstado
from src.admin_dashboard.admin_dashboard.core.exceptions import ValidationError


class _Sample(BaseModel):
    count: int = Field(ge=0)


def test_require_non_empty_strips():
    assert require_non_empty("  x ", "f") == "x"
    with pytest.raises(ValueError):
        require_non_empty("   ", "f")
    with pytest.raises(ValueError):
        require_non_empty(None, "f")


@pytest.mark.parametrize("value", ["00:00", "09:30", "23:59"])
def test_valid_hhmm(value):
    assert require_hhmm(value, "t") == value


@pytest.mark.parametrize("value", ["24:00", "9:30", "12:60", "noon"])
def test_invalid_hhmm(value):
    with pytest.raises(ValueError):
        require_hhmm(value, "t")


def test_year_month():
    assert require_year_month("2025-12", "m") == "2025-12"
    with pytest.raises(ValueError):
        require_year_month("2025-00", "m")


def test_validate_wraps_schema_errors():
    assert validate(_Sample, {"count": "3"}).count == 3

    with pytest.raises(ValidationError) as exc:
        validate(_Sample, {"count": -1})
    assert "count" in str(exc.value)

    with pytest.raises(ValidationError):
        validate(_Sample, None)
    with pytest.raises(ValidationError):
        validate(_Sample, ["count", 1])


def test_legacy_estado_mapping():
    assert NewsEstado.from_legacy("Activa") is NewsEstado.VIGENTE
    assert NewsEstado.from_legacy("fuera_de_uso") is NewsEstado.NO_VIGENTE
    assert NewsEstado.VIGENTE.toggled() is NewsEstado.NO_VIGENTE
    with pytest.raises(ValueError):
        NewsEstado.from_legacy("archivada")
