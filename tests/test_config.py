from __future__ import annotations

import pytest

from academic_portal.common.datetime_utils import join_year_range, parse_iso_date
from academic_portal.common.validators import require_int
from academic_portal.config import get_settings_module
from academic_portal.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "academic_portal.config.production"),
        ("PROD", "academic_portal.config.production"),
        ("testing", "academic_portal.config.testing"),
        ("anything-else", "academic_portal.config.development"),
    ],
)
def test_app_env_selects_settings(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_default_settings_are_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "academic_portal.config.development"


def test_join_year_range():
    assert join_year_range("2024") == "2024-2027"
    assert join_year_range(2021) == "2021-2024"
    assert join_year_range("") is None
    with pytest.raises(ValidationError):
        join_year_range("20x4")


def test_parse_iso_date_rejects_other_formats():
    assert parse_iso_date(" 2024-02-29 ").isoformat() == "2024-02-29"
    with pytest.raises(ValidationError):
        parse_iso_date("2023-02-29")
    with pytest.raises(ValidationError):
        parse_iso_date(None)


def test_require_int_bounds():
    assert require_int("7", "marks", min_value=0, max_value=10) == 7
    with pytest.raises(ValidationError):
        require_int(11, "marks", max_value=10)
