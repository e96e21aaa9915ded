"""Tests for sl_session.domain.rates — peak windows, schedules, rate-card snapshots."""

from datetime import datetime, time, timezone
from decimal import Decimal

import pytest

from config.settings import Settings
from src.sl_common.enums import CourtType
from src.sl_common.errors import NegativeInputError
from src.sl_common.money import Money
from src.sl_session.domain.models import SessionUsage
from src.sl_session.domain.rates import PeakHours, RateSchedule, is_peak_time, select_rate_card
from src.sl_session.domain.splitter import compute_usage_cost

_PEAK = PeakHours(time(7, 0), time(10, 0), time(18, 0), time(22, 0))


@pytest.fixture
def schedule() -> RateSchedule:
    return RateSchedule.from_settings(Settings())


class TestIsPeakTime:
    @pytest.mark.parametrize(
        "t,expected",
        [
            (time(6, 59), False),
            (time(7, 0), True),
            (time(9, 59, 59), True),
            (time(10, 0), False),
            (time(12, 0), False),
            (time(18, 0), True),
            (time(21, 59), True),
            (time(22, 0), False),
        ],
    )
    def test_windows_are_half_open(self, t: time, expected: bool) -> None:
        assert is_peak_time(t, _PEAK) is expected

    def test_from_settings(self) -> None:
        assert PeakHours.from_settings(Settings()) == _PEAK

    def test_custom_window(self) -> None:
        peak = PeakHours.from_settings(Settings(PEAK_EVENING_START="17:30"))
        assert is_peak_time(time(17, 45), peak)

    def test_utc_offset_is_ignored(self) -> None:
        assert is_peak_time(time(19, 0, tzinfo=timezone.utc), _PEAK)
        assert not is_peak_time(time(12, 0, tzinfo=timezone.utc), _PEAK)


class TestRateSchedule:
    def test_default_rates(self, schedule: RateSchedule) -> None:
        assert schedule.court_rates[CourtType.INDOOR_PEAK] == Money("50")
        assert schedule.court_rates[CourtType.INDOOR_OFFPEAK] == Money("35")
        assert schedule.court_rates[CourtType.OUTDOOR] == Money("15")
        assert schedule.court_rates[CourtType.COMMUNITY] == Money("25")
        assert schedule.shuttlecock_rates[CourtType.INDOOR_PEAK] == Money("2.50")
        assert schedule.shuttlecock_rates[CourtType.COMMUNITY] == Money("1.80")

    def test_rates_from_settings(self) -> None:
        schedule = RateSchedule.from_settings(Settings(COURT_RATE_OUTDOOR=Decimal("18")))
        assert schedule.court_rates[CourtType.OUTDOOR] == Money(18)

    def test_maps_are_read_only(self, schedule: RateSchedule) -> None:
        with pytest.raises(TypeError):
            schedule.court_rates[CourtType.OUTDOOR] = Money(1)  # type: ignore[index]

    def test_missing_court_type(self, schedule: RateSchedule) -> None:
        rates = dict(schedule.court_rates)
        del rates[CourtType.COMMUNITY]
        with pytest.raises(ValueError, match="community"):
            RateSchedule(rates, schedule.shuttlecock_rates, schedule.peak_hours)

    def test_negative_rate(self, schedule: RateSchedule) -> None:
        with pytest.raises(NegativeInputError):
            schedule.with_rates(CourtType.OUTDOOR, court_rate=Money("-1"))

    def test_with_rates_returns_new_schedule(self, schedule: RateSchedule) -> None:
        repriced = schedule.with_rates(CourtType.INDOOR_PEAK, shuttlecock_rate=Money("3"))
        assert repriced.shuttlecock_rates[CourtType.INDOOR_PEAK] == Money(3)
        assert repriced.court_rates[CourtType.INDOOR_PEAK] == Money(50)
        assert schedule.shuttlecock_rates[CourtType.INDOOR_PEAK] == Money("2.50")


class TestSelectRateCard:
    def test_peak_defaults_to_indoor_peak(self, schedule: RateSchedule) -> None:
        card = select_rate_card(schedule, time(19, 0))
        assert card.court_type is CourtType.INDOOR_PEAK
        assert card.court_rate_per_hour == Money(50)
        assert card.shuttlecock_rate_each == Money("2.50")
        assert card.is_peak

    def test_offpeak_defaults_to_indoor_offpeak(self, schedule: RateSchedule) -> None:
        card = select_rate_card(schedule, time(12, 0))
        assert card.court_type is CourtType.INDOOR_OFFPEAK
        assert card.court_rate_per_hour == Money(35)
        assert card.shuttlecock_rate_each == Money("2.00")
        assert not card.is_peak

    def test_explicit_court_type(self, schedule: RateSchedule) -> None:
        card = select_rate_card(schedule, time(19, 0), CourtType.OUTDOOR)
        assert card.court_type is CourtType.OUTDOOR
        assert card.court_rate_per_hour == Money(15)
        assert card.is_peak

    def test_effective_from(self, schedule: RateSchedule) -> None:
        when = datetime(2026, 3, 1, 19, 0, tzinfo=timezone.utc)
        assert select_rate_card(schedule, time(19, 0), effective_from=when).effective_from == when

    def test_effective_from_defaults_to_now(self, schedule: RateSchedule) -> None:
        assert select_rate_card(schedule, time(19, 0)).effective_from.tzinfo is not None

    def test_repricing_leaves_past_results_alone(self, schedule: RateSchedule) -> None:
        card = select_rate_card(schedule, time(19, 0))
        result = compute_usage_cost(SessionUsage(Decimal("2"), 4), card, 4)
        schedule.with_rates(CourtType.INDOOR_PEAK, court_rate=Money(80))
        assert result.rate_card.court_rate_per_hour == Money(50)
        assert result.total_cost == Money(110)
