#!/usr/bin/env python3
"""
Create a climate report and temperature sweep for a sample broiler house.

Usage: python create_climate_report.py [output_dir]
"""

import logging
import os
import sys

from coop_climate import (
    Enclosure,
    Fan,
    Heater,
    Inlet,
    Flock,
    WeatherSnapshot,
    ClimateSimulator,
    project_growth,
    plan_adjustments,
)
from coop_climate.reports import create_climate_report, create_sweep_workbook, export_json


def sample_house():
    enclosure = Enclosure(length=24.0, width=12.0, height=3.5)
    equipment = [
        Heater(is_active=True, current_setting=45, power=15.0, name="Heater 1"),
        Heater(is_active=False, current_setting=0, power=15.0, name="Heater 2"),
        Fan(is_active=True, current_setting=60, diameter=120.0, name="Tunnel Fan 1"),
        Fan(is_active=False, current_setting=0, diameter=120.0, name="Tunnel Fan 2"),
        Inlet(current_setting=30, surface=0.5, name="Side Inlet North"),
        Inlet(current_setting=30, surface=0.5, name="Side Inlet South"),
    ]
    flock = Flock(current_age=18, average_weight=620, chick_count=9820,
                  initial_chick_count=10000, name="Batch 2026-10")
    weather = WeatherSnapshot(outside_temp=22.0, outside_humidity=45.0, wind_speed=12.0)
    return enclosure, equipment, flock, weather


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    output_dir = sys.argv[1] if len(sys.argv) > 1 else "."
    os.makedirs(output_dir, exist_ok=True)

    enclosure, equipment, flock, weather = sample_house()
    simulator = ClimateSimulator()

    result = simulator.simulate_weather(enclosure, equipment, weather, flock.current_age)
    projection = project_growth(flock, result)

    print("=" * 60)
    print(f"Inside: {result.inside_temp}°C, {result.inside_humidity}% RH")
    print("=" * 60)
    for advisory in result.recommendations:
        print(f"  [{advisory.type.value.upper()}] {advisory.title}: {advisory.message}")
    for adjustment in plan_adjustments(result.recommendations, equipment):
        print(f"  -> {adjustment.equipment.name}: {adjustment.new_setting:g}%")
    print(f"\nProjected weight: {projection.projected_weight_7d:.0f} g (7d), "
          f"{projection.projected_weight_14d:.0f} g (14d), FCR {projection.fcr}")

    create_climate_report(
        os.path.join(output_dir, "climate_report.docx"),
        enclosure, equipment, weather, result, flock, projection,
    )
    sweep = simulator.sweep_outside_temperature(
        enclosure, equipment, range(-10, 41, 2),
        weather.outside_humidity, weather.wind_speed, flock.current_age,
    )
    create_sweep_workbook(os.path.join(output_dir, "temperature_sweep.xlsx"), sweep)
    export_json(os.path.join(output_dir, "climate.json"), result, projection)

    print(f"\nOutput directory: {os.path.abspath(output_dir)}")
