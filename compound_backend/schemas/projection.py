"""Data contracts for compound interest projections."""

from __future__ import annotations

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from compound_backend.core.formatting import parse_formatted_number, parse_leading_int


class RateBasis(str, Enum):
    ANNUAL = "annual"
    MONTHLY = "monthly"


class HorizonUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="null",
    )


class ProjectionInput(_CamelModel):
    """Inputs of one projection.

    Every field is coerced instead of validated: missing or unparseable
    numbers become 0, and an unrecognised rate basis or horizon unit falls
    back to the monthly/months member.
    """

    initial_value: float = Field(0.0, description="Lump sum at month 0.")
    monthly_contribution: float = Field(0.0, description="Deposit added at the end of each month.")
    nominal_rate: float = Field(0.0, description="Interest rate in percentage points (5 means 5%).")
    rate_basis: RateBasis = RateBasis.MONTHLY
    horizon: int = Field(0, description="Projection length in horizon_unit.")
    horizon_unit: HorizonUnit = HorizonUnit.MONTHS

    @field_validator("initial_value", "monthly_contribution", "nominal_rate", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return parse_formatted_number(value)

    @field_validator("horizon", mode="before")
    @classmethod
    def _coerce_horizon(cls, value: Any) -> int:
        return parse_leading_int(value)

    @field_validator("rate_basis", mode="before")
    @classmethod
    def _coerce_rate_basis(cls, value: Any) -> RateBasis:
        if isinstance(value, RateBasis):
            return value
        if isinstance(value, str) and value.strip().lower() == RateBasis.ANNUAL.value:
            return RateBasis.ANNUAL
        return RateBasis.MONTHLY

    @field_validator("horizon_unit", mode="before")
    @classmethod
    def _coerce_horizon_unit(cls, value: Any) -> HorizonUnit:
        if isinstance(value, HorizonUnit):
            return value
        if isinstance(value, str) and value.strip().lower() == HorizonUnit.YEARS.value:
            return HorizonUnit.YEARS
        return HorizonUnit.MONTHS


class ProjectionPoint(_CamelModel):
    """Single month of a projection."""

    month: int = Field(..., ge=0)
    accumulated: float
    invested: float
    interest: float


class ProjectionSeries(_CamelModel):
    """Month-by-month projection, month 0 through the horizon inclusive."""

    points: List[ProjectionPoint] = Field(..., min_length=1)

    @property
    def labels(self) -> List[int]:
        return [point.month for point in self.points]

    @property
    def accumulated(self) -> List[float]:
        return [point.accumulated for point in self.points]

    @property
    def invested(self) -> List[float]:
        return [point.invested for point in self.points]

    @property
    def interest(self) -> List[float]:
        return [point.interest for point in self.points]

    @property
    def final(self) -> ProjectionPoint:
        return self.points[-1]


class ProjectionSummary(_CamelModel):
    """Totals shown next to the chart, read off the last month."""

    total_invested: float
    total_interest: float
    final_amount: float
    total_invested_display: str
    total_interest_display: str
    final_amount_display: str


class ChartDataset(_CamelModel):
    label: str
    data: List[float]
    border_color: str


class ChartData(_CamelModel):
    """Arrays handed to the time-series chart renderer."""

    labels: List[int]
    datasets: List[ChartDataset]


class ProjectionResponse(_CamelModel):
    points: List[ProjectionPoint] = Field(..., min_length=1)
    summary: ProjectionSummary
    chart: ChartData
