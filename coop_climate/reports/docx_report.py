"""
Coop Climate — Word Report
Climate and growth summary for a house, written with python-docx.
"""

from datetime import datetime
from typing import Iterable, Optional
import logging

from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement

from ..core.enclosure import Enclosure
from ..core.equipment import Equipment, EquipmentType
from ..core.flock import Flock
from ..core.weather import WeatherSnapshot
from ..climate.recommendations import AdvisoryType
from ..climate.simulator import SimulationResult
from ..growth.projector import GrowthProjection
from ..growth.husbandry import growth_stage, stocking_density, consumption_targets

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E79"

ADVISORY_COLORS = {
    AdvisoryType.WARNING: "FFEB9C",
    AdvisoryType.INFO: "BDD7EE",
    AdvisoryType.SUCCESS: "C6EFCE",
}


def set_cell_shading(cell, color):
    """Set cell background color."""
    shading = OxmlElement('w:shd')
    shading.set(qn('w:fill'), color)
    cell._tc.get_or_add_tcPr().append(shading)


def add_formatted_table(doc, headers, rows, header_color=HEADER_COLOR):
    """Add a formatted table with header styling."""
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = 'Table Grid'

    header_cells = table.rows[0].cells
    for i, header in enumerate(headers):
        header_cells[i].text = header
        header_cells[i].paragraphs[0].runs[0].bold = True
        header_cells[i].paragraphs[0].runs[0].font.color.rgb = RGBColor(255, 255, 255)
        set_cell_shading(header_cells[i], header_color)

    for row_data in rows:
        row = table.add_row()
        for i, cell_data in enumerate(row_data):
            row.cells[i].text = str(cell_data)

    return table


def _equipment_row(item: Equipment):
    kind = item.equipment_type
    if kind is EquipmentType.FAN:
        detail = f"Ø {item.diameter:g} cm | {item.power_draw_kw():.1f} kW | {item.airflow_m3_per_h()} m³/h"
    elif kind is EquipmentType.HEATER:
        detail = f"{item.power:g} kW rated | {item.current_output_kw():.1f} kW output"
    elif kind is EquipmentType.INLET:
        detail = (f"{item.surface:g} m² | {item.effective_area_m2():.2f} m² open | "
                  f"{item.air_velocity():.1f} m/s")
    else:
        raise TypeError(f"Not an equipment variant: {item!r}")
    return [
        item.name or kind.value.title(),
        kind.value,
        "On" if item.is_active else "Off",
        f"{item.current_setting:g}%",
        detail,
    ]


def create_climate_report(
    output_path: str,
    enclosure: Enclosure,
    equipment: Iterable[Equipment],
    weather: WeatherSnapshot,
    result: SimulationResult,
    flock: Optional[Flock] = None,
    projection: Optional[GrowthProjection] = None,
    title: str = "House Climate Report",
) -> str:
    """
    Write a Word document summarising one simulation.

    Returns:
        The output path
    """
    doc = Document()

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(11)

    heading = doc.add_heading(title, 0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    info = doc.add_paragraph()
    info.alignment = WD_ALIGN_PARAGRAPH.CENTER
    info.add_run('Generated: ').bold = True
    info.add_run(datetime.now().strftime('%Y-%m-%d %H:%M'))

    # ========== HOUSE ==========
    doc.add_heading('House', level=1)
    add_formatted_table(doc,
        ['Length', 'Width', 'Height', 'Volume', 'Surface Area'],
        [[f"{enclosure.length:g} m", f"{enclosure.width:g} m", f"{enclosure.height:g} m",
          f"{result.volume:g} m³", f"{result.surface_area:g} m²"]]
    )

    # ========== CONDITIONS ==========
    doc.add_heading('Conditions', level=1)
    add_formatted_table(doc,
        ['Reading', 'Temperature', 'Humidity'],
        [
            ['Outside', f"{weather.outside_temp:.1f}°C", f"{weather.outside_humidity:.1f}%"],
            ['Inside (simulated)', f"{result.inside_temp:.1f}°C", f"{result.inside_humidity:.1f}%"],
        ]
    )
    p = doc.add_paragraph()
    p.add_run('Heating: ').bold = True
    p.add_run(f"{result.total_heating:.2f} kW   ")
    p.add_run('Fan capacity: ').bold = True
    p.add_run(f"{result.total_cooling:.1f}   ")
    p.add_run('Ventilation effect: ').bold = True
    p.add_run(f"{result.ventilation_effect:.1f}°C   ")
    p.add_run('Wind: ').bold = True
    p.add_run(f"{weather.wind_speed:g}")

    # ========== EQUIPMENT ==========
    equipment = list(equipment)
    doc.add_heading('Equipment', level=1)
    if equipment:
        add_formatted_table(doc,
            ['Name', 'Type', 'State', 'Setting', 'Detail'],
            [_equipment_row(item) for item in equipment]
        )
    else:
        doc.add_paragraph().add_run('No equipment installed.').italic = True

    # ========== ADVISORIES ==========
    doc.add_heading('Advisories', level=1)
    table = add_formatted_table(doc,
        ['Severity', 'Advisory', 'Detail'],
        [[a.type.value.upper(), a.title, a.message] for a in result.recommendations]
    )
    for row, advisory in zip(table.rows[1:], result.recommendations):
        set_cell_shading(row.cells[0], ADVISORY_COLORS[advisory.type])

    # ========== FLOCK ==========
    if flock is not None:
        doc.add_heading('Flock', level=1)
        targets = consumption_targets(flock.chick_count, flock.current_age)
        add_formatted_table(doc,
            ['Metric', 'Value'],
            [
                ['Age', f"{flock.current_age:g} days ({growth_stage(flock.current_age)})"],
                ['Birds', f"{flock.chick_count:,} of {flock.initial_chick_count:,}"],
                ['Survival', f"{flock.survival_rate:.1f}%"],
                ['Density', f"{stocking_density(flock.chick_count, enclosure):.2f} birds/m²"],
                ['Average weight', f"{flock.average_weight:.0f} g"],
                ['Feed target', f"{targets.feed_kg:.2f} kg/day"],
                ['Water target', f"{targets.water_l:.2f} L/day"],
            ]
        )

    if projection is not None:
        doc.add_heading('Growth Projection', level=2)
        add_formatted_table(doc,
            ['Metric', 'Value'],
            [
                ['Weight in 7 days', f"{projection.projected_weight_7d:.0f} g"],
                ['Weight in 14 days', f"{projection.projected_weight_14d:.0f} g"],
                ['vs standard curve', f"{projection.growth_rate_vs_standard:+.1f}%"],
                ['FCR', f"{projection.fcr:.2f} (target {projection.fcr_target:.2f})"],
                ['Environmental factor', f"{projection.environmental_factor:.2f}"],
            ]
        )

    doc.save(output_path)
    logger.info(f"Climate report written to {output_path}")
    return output_path
