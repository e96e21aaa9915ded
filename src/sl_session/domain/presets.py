"""Common session cost presets for quick setup."""

from dataclasses import dataclass

from src.sl_common.errors import UnknownPresetError
from src.sl_common.money import Money
from src.sl_session.domain.models import SessionCostResult
from src.sl_session.domain.splitter import compute_flat_session_cost


@dataclass(frozen=True)
class SessionPreset:
    name: str
    description: str
    court_cost: Money
    shuttlecock_cost: Money


SESSION_PRESETS: dict[str, SessionPreset] = {
    preset.name: preset
    for preset in (
        SessionPreset(
            "indoor_court_1_hour", "Indoor court 1 hour + shuttlecocks", Money("40"), Money("12")
        ),
        SessionPreset(
            "indoor_court_2_hours", "Indoor court 2 hours + shuttlecocks", Money("80"), Money("18")
        ),
        SessionPreset("outdoor_court", "Outdoor court + shuttlecocks", Money("20"), Money("8")),
    )
}


def get_preset(name: str) -> SessionPreset:
    try:
        return SESSION_PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None


def preset_session_cost(name: str, participant_count: int) -> SessionCostResult:
    preset = get_preset(name)
    return compute_flat_session_cost(
        preset.court_cost, participant_count, shuttlecock_cost=preset.shuttlecock_cost
    )
