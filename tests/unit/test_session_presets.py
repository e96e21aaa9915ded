"""Tests for sl_session.domain.presets."""

import pytest

from src.sl_common.errors import NoParticipantsError, UnknownPresetError
from src.sl_common.money import Money
from src.sl_session.domain.presets import SESSION_PRESETS, get_preset, preset_session_cost


class TestPresets:
    def test_known_presets(self) -> None:
        assert set(SESSION_PRESETS) == {
            "indoor_court_1_hour",
            "indoor_court_2_hours",
            "outdoor_court",
        }

    def test_get_preset(self) -> None:
        preset = get_preset("indoor_court_2_hours")
        assert preset.court_cost == Money(80)
        assert preset.shuttlecock_cost == Money(18)

    def test_unknown_preset(self) -> None:
        with pytest.raises(UnknownPresetError) as exc_info:
            get_preset("squash")
        assert exc_info.value.code == 2004
        assert exc_info.value.http_status == 404

    def test_preset_cost(self) -> None:
        result = preset_session_cost("indoor_court_1_hour", 4)
        assert result.total_cost == Money(52)
        assert result.cost_per_participant == Money(13)

    def test_preset_cost_checks_participants(self) -> None:
        with pytest.raises(NoParticipantsError):
            preset_session_cost("outdoor_court", 0)
