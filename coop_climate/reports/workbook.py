"""
Coop Climate — Sweep Workbook
Outside-temperature sweep tables written with openpyxl.
"""

from typing import List, Tuple
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from ..climate.recommendations import ActionCode, TEMPERATURE_ACTIONS
from ..climate.simulator import SimulationResult

logger = logging.getLogger(__name__)

STATUS_FILLS = {
    ActionCode.TEMPERATURE_LOW: "BDD7EE",
    ActionCode.TEMPERATURE_GOOD: "C6EFCE",
    ActionCode.TEMPERATURE_HIGH: "FFC7CE",
}


def _temperature_status(result: SimulationResult) -> ActionCode:
    for action in TEMPERATURE_ACTIONS:
        if result.has_action(action):
            return action
    raise ValueError("Simulation result has no temperature advisory")


def create_sweep_workbook(
    output_path: str,
    sweep: List[Tuple[float, SimulationResult]],
    title: str = "Outside Temperature Sweep",
) -> str:
    """
    Write one row per sweep point: conditions, status and other advisories.

    Returns:
        The output path
    """
    wb = Workbook()

    header_fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )

    ws = wb.active
    ws.title = "Sweep"

    ws['A1'] = title.upper()
    ws['A1'].font = Font(bold=True, size=14)

    headers = ['Outside °C', 'Inside °C', 'Inside RH %', 'Heating kW',
               'Fan Capacity', 'Ventilation °C', 'Status', 'Other Advisories']
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=3, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = thin_border

    for row_idx, (outside_temp, result) in enumerate(sweep, 4):
        status = _temperature_status(result)
        others = ", ".join(a.action.value for a in result.recommendations
                           if a.action not in TEMPERATURE_ACTIONS)
        row = [
            outside_temp,
            result.inside_temp,
            result.inside_humidity,
            result.total_heating,
            result.total_cooling,
            result.ventilation_effect,
            status.value,
            others,
        ]
        for col_idx, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            cell.border = thin_border
        ws.cell(row=row_idx, column=7).fill = PatternFill(
            start_color=STATUS_FILLS[status], end_color=STATUS_FILLS[status], fill_type="solid"
        )

    for col in range(1, len(headers) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 16
    ws.column_dimensions[get_column_letter(len(headers))].width = 45

    wb.save(output_path)
    logger.info(f"Sweep workbook written to {output_path} ({len(sweep)} points)")
    return output_path
