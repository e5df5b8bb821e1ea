"""
Coop Climate — Reports Package
Word, Excel and JSON output for simulation results.
"""

from .docx_report import create_climate_report, add_formatted_table, set_cell_shading
from .workbook import create_sweep_workbook
from .json_export import build_record, export_json

__all__ = [
    'create_climate_report', 'add_formatted_table', 'set_cell_shading',
    'create_sweep_workbook',
    'build_record', 'export_json',
]
