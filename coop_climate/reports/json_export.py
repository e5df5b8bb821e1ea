"""
Coop Climate — JSON Export
Flat JSON records of a simulation and its growth projection.
"""

from typing import Dict, Optional
import json
import logging

from ..climate.simulator import SimulationResult
from ..growth.projector import GrowthProjection

logger = logging.getLogger(__name__)


def build_record(
    result: SimulationResult,
    projection: Optional[GrowthProjection] = None,
) -> Dict:
    """Combine the climate and growth records into one document."""
    record = {"climate": result.to_dict()}
    if projection is not None:
        record["growth"] = projection.to_dict()
    return record


def export_json(
    filepath: str,
    result: SimulationResult,
    projection: Optional[GrowthProjection] = None,
):
    """Write the climate (and growth) records to a JSON file."""
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(build_record(result, projection), f, indent=2, ensure_ascii=False)

    logger.info(f"Climate record exported to {filepath}")
