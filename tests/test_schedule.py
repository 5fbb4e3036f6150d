from datetime import date, timedelta

from hypothesis import given, strategies as st

from smartpill_backend.models.medication import Medication
from smartpill_backend.services.schedule import expected_slots_on_date, is_dose_day


def _medication(start: date, daily_frequency: int = 1, day_interval: int = 1, name: str = "Aspirin") -> Medication:
    return Medication(
        id=7,
        user_id=1,
        name=name,
        dose="100mg",
        start_date=start,
        daily_frequency=daily_frequency,
        day_interval=day_interval,
    )


start_dates = st.dates(min_value=date(2000, 1, 1), max_value=date(2090, 12, 31))
frequencies = st.integers(min_value=1, max_value=12)
intervals = st.integers(min_value=1, max_value=60)


@given(start=start_dates, freq=frequencies, interval=intervals)
def test_start_date_is_always_a_dose_day(start: date, freq: int, interval: int) -> None:
    assert is_dose_day(_medication(start, freq, interval), start) is True


@given(start=start_dates, interval=intervals, days_before=st.integers(min_value=1, max_value=400))
def test_dates_before_start_are_never_dose_days(start: date, interval: int, days_before: int) -> None:
    med = _medication(start, day_interval=interval)
    assert is_dose_day(med, start - timedelta(days=days_before)) is False
    assert expected_slots_on_date(med, start - timedelta(days=days_before)) == []


@given(start=start_dates, interval=intervals, offset=st.integers(min_value=0, max_value=1000))
def test_exactly_one_dose_day_per_interval(start: date, interval: int, offset: int) -> None:
    med = _medication(start, day_interval=interval)
    block_start = start + timedelta(days=offset * interval)
    window = [block_start + timedelta(days=i) for i in range(interval)]
    assert sum(is_dose_day(med, d) for d in window) == 1


@given(start=start_dates, freq=frequencies, interval=intervals, offset=st.integers(min_value=0, max_value=120))
def test_slots_are_full_or_empty(start: date, freq: int, interval: int, offset: int) -> None:
    med = _medication(start, freq, interval)
    on = start + timedelta(days=offset)
    slots = expected_slots_on_date(med, on)
    if is_dose_day(med, on):
        assert [s.dose_index for s in slots] == list(range(1, freq + 1))
    else:
        assert slots == []


def test_every_other_day() -> None:
    med = _medication(date(2025, 2, 15), daily_frequency=1, day_interval=2)
    assert is_dose_day(med, date(2025, 2, 15)) is True
    assert is_dose_day(med, date(2025, 2, 16)) is False
    assert is_dose_day(med, date(2025, 2, 17)) is True


def test_slots_carry_current_medication_identity() -> None:
    med = _medication(date(2025, 2, 15), daily_frequency=2)
    slots = expected_slots_on_date(med, date(2025, 2, 15))
    assert [(s.medication_id, s.medication_name, s.dose_index) for s in slots] == [
        (7, "Aspirin", 1),
        (7, "Aspirin", 2),
    ]
    med.name = "Aspirin Forte"
    renamed = expected_slots_on_date(med, date(2025, 2, 15))
    assert {s.medication_name for s in renamed} == {"Aspirin Forte"}
