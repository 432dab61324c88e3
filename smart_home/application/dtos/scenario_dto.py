"""Scenario DTOs - Application Layer."""

from typing import List

from pydantic import BaseModel, Field

from .device_dto import EnergyStatisticsDTO


class ScenarioReportDTO(BaseModel):
    """Outcome of a demonstration scenario."""

    name: str = Field(description="Scenario name")
    title: str = Field(description="Short description of what was exercised")
    lines: List[str] = Field(default_factory=list, description="Collected output")
    statistics: EnergyStatisticsDTO = Field(description="Registry state at the end")
