import pytest
from pydantic import ValidationError

from app.config import Settings


def test_week_start_defaults_to_sunday():
    assert Settings().week_start_day == 6


@pytest.mark.parametrize("day", [-1, 7])
def test_week_start_out_of_range_rejected(day):
    with pytest.raises(ValidationError):
        Settings(week_start_day=day)


def test_week_start_out_of_range_rejected_from_env(monkeypatch):
    monkeypatch.setenv("PLC_WEEK_START_DAY", "7")
    with pytest.raises(ValidationError):
        Settings()


def test_week_start_read_from_env(monkeypatch):
    monkeypatch.setenv("PLC_WEEK_START_DAY", "0")
    assert Settings().week_start_day == 0
