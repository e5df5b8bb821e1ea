"""
Tests for the equipment inventory and the equipment aggregator:
- Parsing sparse inventory records
- Heating/cooling totals
- Inlet ventilation
- Per-variant readouts
"""

import pytest

from coop_climate.core.equipment import (
    Equipment,
    EquipmentType,
    Fan,
    Heater,
    Inlet,
    equipment_from_dict,
    equipment_list_from_dicts,
)
from coop_climate.climate.aggregator import (
    aggregate_equipment,
    ventilation_effect,
    count_active,
)


# =============================================================================
# RECORD PARSING TESTS
# =============================================================================

class TestEquipmentRecords:
    """Tests for building equipment from inventory records."""

    def test_fan_record(self):
        """Test a complete fan record."""
        fan = equipment_from_dict({
            "id": "eq-1",
            "type": "fan",
            "name": "Tunnel Fan",
            "isActive": True,
            "currentSetting": 75,
            "specification": {"diameter": 120},
        })

        assert isinstance(fan, Fan)
        assert fan.equipment_type is EquipmentType.FAN
        assert fan.diameter == 120.0
        assert fan.current_setting == 75.0
        assert fan.is_active
        assert fan.equipment_id == "eq-1"

    def test_missing_specification_defaults_to_zero(self):
        """Test absent or null spec fields become 0, not errors."""
        heater = equipment_from_dict({"type": "heater", "isActive": True, "currentSetting": 50})
        inlet = equipment_from_dict({"type": "inlet", "specification": None, "currentSetting": None})
        fan = equipment_from_dict({"type": "fan", "specification": {"power": 5}})

        assert heater.power == 0.0
        assert inlet.surface == 0.0
        assert inlet.current_setting == 0.0
        assert fan.diameter == 0.0
        assert not fan.is_active

    def test_unknown_type(self):
        """Test an unknown equipment type is rejected."""
        with pytest.raises(ValueError, match="Unknown equipment type"):
            equipment_from_dict({"type": "sprinkler"})

    def test_inventory_and_serialisation(self):
        """Test a full inventory keeps order and serialises back to records."""
        records = [
            {"type": "heater", "isActive": True, "currentSetting": 45, "specification": {"power": 15}},
            {"type": "inlet", "currentSetting": 30, "specification": {"surface": 0.5}},
        ]
        inventory = equipment_list_from_dicts(records)

        assert [e.equipment_type for e in inventory] == [EquipmentType.HEATER, EquipmentType.INLET]
        record = inventory[0].to_dict()
        assert record["type"] == "heater"
        assert record["specification"] == {"power": 15.0}
        assert record["isActive"] is True

    def test_with_setting_returns_copy(self):
        """Test changing a setting leaves the original untouched."""
        heater = Heater(is_active=False, current_setting=0, power=10)
        warmed = heater.with_setting(50, is_active=True)

        assert warmed.current_setting == 50
        assert warmed.is_active
        assert heater.current_setting == 0
        assert not heater.is_active


# =============================================================================
# AGGREGATOR TESTS
# =============================================================================

class TestAggregator:
    """Tests for the heating/cooling reduction."""

    def test_active_heater_output(self):
        """Test heater output scales with setting."""
        totals = aggregate_equipment([Heater(is_active=True, current_setting=45, power=15)])

        assert totals.total_heating == pytest.approx(6.75)
        assert totals.active_heaters == 1
        assert totals.total_cooling == 0.0

    def test_inactive_equipment_ignored(self):
        """Test inactive heaters and fans contribute nothing."""
        totals = aggregate_equipment([
            Heater(is_active=False, current_setting=100, power=50),
            Fan(is_active=False, current_setting=100, diameter=140),
        ])

        assert totals.total_heating == 0.0
        assert totals.total_cooling == 0.0
        assert totals.active_fans == 0
        assert totals.active_heaters == 0

    def test_fan_cooling_capacity(self):
        """Test fan capacity is diameter x airflow factor x setting."""
        fans = [Fan(is_active=True, current_setting=100, diameter=120) for _ in range(2)]
        totals = aggregate_equipment(fans)

        assert totals.total_cooling == pytest.approx(204.0)
        assert totals.active_fans == 2
        assert totals.fan_power_kw == pytest.approx(2 * 120 * 0.02)

    def test_inlets_counted(self):
        """Test inlets are counted whether or not flagged active."""
        totals = aggregate_equipment([
            Inlet(is_active=False, current_setting=50, surface=2.0),
            Inlet(is_active=True, current_setting=100, surface=1.0),
        ])

        assert totals.inlet_count == 2
        assert totals.inlet_area_m2 == pytest.approx(2.0)
        assert totals.total_heating == 0.0

    def test_empty_inventory(self):
        """Test an empty inventory reduces to zeros."""
        totals = aggregate_equipment([])
        assert totals.total_heating == 0.0
        assert totals.total_cooling == 0.0
        assert totals.inlet_count == 0

    def test_base_equipment_rejected(self):
        """Test the untagged base class is not a variant."""
        with pytest.raises(TypeError):
            aggregate_equipment([Equipment(is_active=True, current_setting=10)])

    def test_count_active(self):
        """Test active counts per variant."""
        inventory = [
            Fan(is_active=True, current_setting=50, diameter=90),
            Fan(is_active=False, current_setting=50, diameter=90),
            Heater(is_active=True, current_setting=50, power=10),
        ]
        assert count_active(inventory, EquipmentType.FAN) == 1
        assert count_active(inventory, EquipmentType.HEATER) == 1
        assert count_active(inventory, EquipmentType.INLET) == 0


class TestVentilation:
    """Tests for wind-driven inlet cooling."""

    def test_ventilation_formula(self):
        """Test surface x velocity x cooling x wind x 0.1."""
        effect = ventilation_effect([Inlet(current_setting=50, surface=4.0)], wind_speed=10)
        # 4 * 2.5/100 * 50 = 5.0; 5.0 * 0.1 * 10 * 0.1 = 0.5
        assert effect == pytest.approx(0.5)

    def test_inactive_inlets_contribute(self):
        """Test the active flag does not gate inlet ventilation."""
        open_inlet = Inlet(is_active=False, current_setting=50, surface=4.0)
        assert ventilation_effect([open_inlet], wind_speed=10) == pytest.approx(0.5)

    def test_no_wind_no_ventilation(self):
        """Test still air gives no ventilation cooling."""
        assert ventilation_effect([Inlet(current_setting=100, surface=3.0)], wind_speed=0) == 0.0

    def test_other_variants_ignored(self):
        """Test fans and heaters do not add ventilation."""
        inventory = [
            Fan(is_active=True, current_setting=100, diameter=120),
            Heater(is_active=True, current_setting=100, power=20),
        ]
        assert ventilation_effect(inventory, wind_speed=15) == 0.0


# =============================================================================
# READOUT TESTS
# =============================================================================

class TestReadouts:
    """Tests for per-variant equipment panel figures."""

    def test_fan_readouts(self):
        """Test fan power draw and airflow."""
        fan = Fan(is_active=True, current_setting=60, diameter=120)

        assert fan.power_draw_kw() == pytest.approx(1.44)
        assert fan.airflow_m3_per_h() == 3672

    def test_inactive_fan_readouts(self):
        """Test an idle fan reports no draw or airflow."""
        fan = Fan(is_active=False, current_setting=60, diameter=120)

        assert fan.power_draw_kw() == 0.0
        assert fan.airflow_m3_per_h() == 0

    def test_heater_readouts(self):
        """Test heater output follows the active flag."""
        heater = Heater(is_active=False, current_setting=40, power=20)

        assert heater.heat_output_kw() == pytest.approx(8.0)
        assert heater.current_output_kw() == 0.0

    def test_inlet_readouts(self):
        """Test inlet open area and air velocity."""
        inlet = Inlet(current_setting=30, surface=0.5)

        assert inlet.effective_area_m2() == pytest.approx(0.15)
        assert inlet.air_velocity() == pytest.approx(0.75)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
