"""Rate schedules and effective-rate selection.

A RateSchedule is the organizer's current price list. It is never read as
ambient state by the splitter: select_rate_card() snapshots it into an
immutable RateCard, and that card is what a SessionCostResult keeps.
"""

from dataclasses import dataclass, replace
from datetime import datetime, time
from types import MappingProxyType
from typing import Mapping

from config.settings import Settings, settings
from src.sl_common.datetime_utils import parse_hhmm, utc_now
from src.sl_common.enums import CourtType
from src.sl_common.errors import NegativeInputError
from src.sl_common.money import Money
from src.sl_session.domain.models import RateCard


@dataclass(frozen=True)
class PeakHours:
    morning_start: time
    morning_end: time
    evening_start: time
    evening_end: time

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> "PeakHours":
        return cls(
            morning_start=parse_hhmm(cfg.PEAK_MORNING_START),
            morning_end=parse_hhmm(cfg.PEAK_MORNING_END),
            evening_start=parse_hhmm(cfg.PEAK_EVENING_START),
            evening_end=parse_hhmm(cfg.PEAK_EVENING_END),
        )


def is_peak_time(session_time: time, peak_hours: PeakHours) -> bool:
    """Wall-clock minute resolution; each window is [start, end). A UTC offset is ignored."""
    t = session_time.replace(second=0, microsecond=0, tzinfo=None)
    if peak_hours.morning_start <= t < peak_hours.morning_end:
        return True
    return peak_hours.evening_start <= t < peak_hours.evening_end


@dataclass(frozen=True)
class RateSchedule:
    court_rates: Mapping[CourtType, Money]
    shuttlecock_rates: Mapping[CourtType, Money]
    peak_hours: PeakHours

    def __post_init__(self) -> None:
        for court_type in CourtType:
            if court_type not in self.court_rates or court_type not in self.shuttlecock_rates:
                raise ValueError(f"RateSchedule is missing rates for {court_type.value}")
        for court_type, rate in self.court_rates.items():
            if rate.is_negative():
                raise NegativeInputError(f"court rate ({court_type.value})", rate)
        for court_type, rate in self.shuttlecock_rates.items():
            if rate.is_negative():
                raise NegativeInputError(f"shuttlecock rate ({court_type.value})", rate)
        object.__setattr__(self, "court_rates", MappingProxyType(dict(self.court_rates)))
        object.__setattr__(
            self, "shuttlecock_rates", MappingProxyType(dict(self.shuttlecock_rates))
        )

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> "RateSchedule":
        return cls(
            court_rates={
                CourtType.INDOOR_PEAK: Money(cfg.COURT_RATE_INDOOR_PEAK),
                CourtType.INDOOR_OFFPEAK: Money(cfg.COURT_RATE_INDOOR_OFFPEAK),
                CourtType.OUTDOOR: Money(cfg.COURT_RATE_OUTDOOR),
                CourtType.COMMUNITY: Money(cfg.COURT_RATE_COMMUNITY),
            },
            shuttlecock_rates={
                CourtType.INDOOR_PEAK: Money(cfg.SHUTTLECOCK_RATE_INDOOR_PEAK),
                CourtType.INDOOR_OFFPEAK: Money(cfg.SHUTTLECOCK_RATE_INDOOR_OFFPEAK),
                CourtType.OUTDOOR: Money(cfg.SHUTTLECOCK_RATE_OUTDOOR),
                CourtType.COMMUNITY: Money(cfg.SHUTTLECOCK_RATE_COMMUNITY),
            },
            peak_hours=PeakHours.from_settings(cfg),
        )

    def with_rates(
        self,
        court_type: CourtType,
        court_rate: Money | None = None,
        shuttlecock_rate: Money | None = None,
    ) -> "RateSchedule":
        """Return a new schedule with one court type repriced."""
        court_rates = dict(self.court_rates)
        shuttlecock_rates = dict(self.shuttlecock_rates)
        if court_rate is not None:
            court_rates[court_type] = court_rate
        if shuttlecock_rate is not None:
            shuttlecock_rates[court_type] = shuttlecock_rate
        return replace(self, court_rates=court_rates, shuttlecock_rates=shuttlecock_rates)


def select_rate_card(
    schedule: RateSchedule,
    session_time: time,
    court_type: CourtType | None = None,
    effective_from: datetime | None = None,
) -> RateCard:
    """Snapshot the rates in force for a session.

    Without an explicit court type, peak time picks INDOOR_PEAK and anything
    else INDOOR_OFFPEAK.
    """
    peak = is_peak_time(session_time, schedule.peak_hours)
    if court_type is None:
        court_type = CourtType.INDOOR_PEAK if peak else CourtType.INDOOR_OFFPEAK
    return RateCard(
        court_type=court_type,
        court_rate_per_hour=schedule.court_rates[court_type],
        shuttlecock_rate_each=schedule.shuttlecock_rates[court_type],
        effective_from=effective_from or utc_now(),
        is_peak=peak,
    )
