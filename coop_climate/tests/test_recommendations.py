"""
Tests for the recommendation generator:
- Age band lookup
- Temperature, humidity, energy and equipment rules
- Rule order and messages
"""

import pytest

from coop_climate.config import AGE_TARGETS, get_target_band
from coop_climate.core.equipment import Fan, Heater
from coop_climate.climate.recommendations import (
    Advisory,
    AdvisoryType,
    ActionCode,
    RULES,
    generate_recommendations,
    has_action,
)


def codes(advisories):
    return [a.action for a in advisories]


# =============================================================================
# BAND LOOKUP TESTS
# =============================================================================

class TestTargetBands:
    """Tests for the age-keyed target table."""

    def test_bucket_boundaries(self):
        assert get_target_band(0) == AGE_TARGETS[0]
        assert get_target_band(6.9) == AGE_TARGETS[0]
        assert get_target_band(7) == AGE_TARGETS[7]
        assert get_target_band(18) == AGE_TARGETS[14]
        assert get_target_band(34) == AGE_TARGETS[28]

    def test_older_flocks_use_last_band(self):
        """Test no extrapolation beyond the last breakpoint."""
        assert get_target_band(35) == AGE_TARGETS[35]
        assert get_target_band(42) == AGE_TARGETS[35]
        assert get_target_band(400) == AGE_TARGETS[35]

    def test_bucket_14_values(self):
        band = get_target_band(14)
        assert (band.temp_min, band.temp_max, band.humidity) == (27, 30, 65)


# =============================================================================
# TEMPERATURE RULE TESTS
# =============================================================================

class TestTemperatureRules:
    """Tests for the three mutually exclusive temperature rules."""

    def test_below_band(self):
        advisories = generate_recommendations(25.0, 65.0, 18, 5.0, [Heater(is_active=True, current_setting=30, power=15)])

        assert codes(advisories) == [ActionCode.TEMPERATURE_LOW]
        low = advisories[0]
        assert low.type is AdvisoryType.WARNING
        assert low.title == "Temperature Below Target"
        assert "25.0°C is 2.0°C below target range (27-30°C)" in low.message

    def test_above_band(self):
        advisories = generate_recommendations(33.5, 65.0, 18, 0.0, [])

        assert codes(advisories) == [ActionCode.TEMPERATURE_HIGH]
        assert "3.5°C above target range (27-30°C)" in advisories[0].message

    def test_band_edges_are_optimal(self):
        """Test the band is inclusive at both ends."""
        for temp in (27.0, 30.0):
            advisories = generate_recommendations(temp, 65.0, 14, 0.0, [])
            assert codes(advisories) == [ActionCode.TEMPERATURE_GOOD], f"{temp}°C"

    def test_optimal_message(self):
        advisories = generate_recommendations(28.0, 65.0, 18, 0.0, [])

        good = advisories[0]
        assert good.type is AdvisoryType.SUCCESS
        assert good.message == "Inside temperature 28.0°C is within the optimal range for 18-day-old chicks."


# =============================================================================
# FILTER RULE TESTS
# =============================================================================

class TestFilterRules:
    """Tests for the independent humidity, energy and equipment rules."""

    def test_humidity_thresholds_are_strict(self):
        """Test humidity limits at band-10 and band+15 (band 65% at age 14)."""
        assert not has_action(generate_recommendations(28, 55.0, 14, 0, []), ActionCode.HUMIDITY_LOW)
        assert has_action(generate_recommendations(28, 54.9, 14, 0, []), ActionCode.HUMIDITY_LOW)
        assert not has_action(generate_recommendations(28, 80.0, 14, 0, []), ActionCode.HUMIDITY_HIGH)
        assert has_action(generate_recommendations(28, 80.1, 14, 0, []), ActionCode.HUMIDITY_HIGH)

    def test_energy_optimisation(self):
        """Test heavy heating in an overheated house."""
        heaters = [Heater(is_active=True, current_setting=100, power=12)]

        hot = generate_recommendations(32.0, 65.0, 14, 12.0, heaters)
        assert codes(hot) == [ActionCode.TEMPERATURE_HIGH, ActionCode.OPTIMIZE_ENERGY]

        at_threshold = generate_recommendations(32.0, 65.0, 14, 10.0, heaters)
        assert not has_action(at_threshold, ActionCode.OPTIMIZE_ENERGY)

    def test_fan_optimisation(self):
        """Test several active fans in an optimal house."""
        fans = [Fan(is_active=True, current_setting=50, diameter=120) for _ in range(2)]

        assert codes(generate_recommendations(28.0, 65.0, 14, 0.0, fans)) == [
            ActionCode.TEMPERATURE_GOOD, ActionCode.OPTIMIZE_FANS,
        ]
        assert not has_action(generate_recommendations(28.0, 65.0, 14, 0.0, fans[:1]), ActionCode.OPTIMIZE_FANS)
        assert not has_action(generate_recommendations(31.0, 65.0, 14, 0.0, fans), ActionCode.OPTIMIZE_FANS)

    def test_inactive_fans_not_counted(self):
        fans = [Fan(is_active=True, current_setting=50, diameter=120),
                Fan(is_active=False, current_setting=50, diameter=120)]
        assert not has_action(generate_recommendations(28.0, 65.0, 14, 0.0, fans), ActionCode.OPTIMIZE_FANS)

    def test_activate_heating(self):
        """Test a critically cold house with no heaters running."""
        idle = [Heater(is_active=False, current_setting=0, power=15)]

        critical = generate_recommendations(24.9, 65.0, 14, 0.0, idle)
        assert codes(critical) == [ActionCode.TEMPERATURE_LOW, ActionCode.ACTIVATE_HEATING]
        assert critical[1].type is AdvisoryType.WARNING

        # Exactly 2°C below the minimum is not yet critical
        assert not has_action(generate_recommendations(25.0, 65.0, 14, 0.0, idle), ActionCode.ACTIVATE_HEATING)

        running = [Heater(is_active=True, current_setting=10, power=15)]
        assert not has_action(generate_recommendations(20.0, 65.0, 14, 1.5, running), ActionCode.ACTIVATE_HEATING)

    def test_rule_order(self):
        """Test advisories come out in rule order."""
        advisories = generate_recommendations(10.0, 20.0, 0, 0.0, [])
        assert codes(advisories) == [
            ActionCode.TEMPERATURE_LOW, ActionCode.HUMIDITY_LOW, ActionCode.ACTIVATE_HEATING,
        ]
        assert [rule.action for rule in RULES] == list(ActionCode)

    def test_never_empty(self):
        for temp in (-20.0, 0.0, 19.5, 33.0, 50.0):
            for age in (0, 10, 20, 30, 60):
                assert generate_recommendations(temp, 60.0, age, 0.0, []), f"{temp}°C, {age}d"

    def test_advisory_record(self):
        advisory = generate_recommendations(28.0, 65.0, 14, 0.0, [])[0]
        record = advisory.to_dict()

        assert record == {
            "type": "success",
            "title": "Temperature Optimal",
            "message": advisory.message,
            "action": "temperature_good",
        }
        assert Advisory.from_dict(record) == advisory


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
