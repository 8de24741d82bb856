from __future__ import annotations

from typing import List

from compound_backend.core.formatting import format_currency
from compound_backend.schemas.projection import (
    ChartData,
    ChartDataset,
    HorizonUnit,
    ProjectionInput,
    ProjectionPoint,
    ProjectionSeries,
    ProjectionSummary,
    RateBasis,
)

MONTHS_PER_YEAR = 12

# longest projection served, 500 years
MAX_TOTAL_MONTHS = 6000

# (label, line colour) in the order the chart draws them
ACCUMULATED_LINE = ("Accumulated Total", "#3498db")
INVESTED_LINE = ("Total Invested", "#e74c3c")
INTEREST_LINE = ("Total Interest", "#f39c12")


def monthly_rate(nominal_rate: float, rate_basis: RateBasis) -> float:
    """
    Effective monthly rate as a decimal.

    An annual rate is taken as an annual *effective* rate and converted with
    (1 + r)^(1/12) - 1, so 12% annual is ~0.9489% monthly, not 1%.
    A monthly rate is used as-is. Annual rates below -100% floor at a total
    loss instead of taking a fractional power of a negative number.
    """
    if rate_basis == RateBasis.ANNUAL:
        growth = max(0.0, 1 + nominal_rate / 100)
        return growth ** (1 / MONTHS_PER_YEAR) - 1
    return nominal_rate / 100


def total_months(horizon: int, horizon_unit: HorizonUnit) -> int:
    months = horizon * MONTHS_PER_YEAR if horizon_unit == HorizonUnit.YEARS else horizon
    # negative horizons keep the month-0 point; very long ones are capped
    return min(max(0, months), MAX_TOTAL_MONTHS)


def project(inputs: ProjectionInput) -> ProjectionSeries:
    """
    Build a month-by-month series from month 0 to the horizon (inclusive).

    Order of operations (per month m >= 1):
      1) Apply one month of growth to last month's accumulated value.
      2) Add the monthly contribution at month END (ordinary annuity, the
         deposit does not grow in the month it is made).
      3) Record invested = initial + contribution * m and
         interest = accumulated - invested.

    Month 0 is the initial state: accumulated == invested == initial value.
    """
    rate = monthly_rate(inputs.nominal_rate, inputs.rate_basis)
    months = total_months(inputs.horizon, inputs.horizon_unit)

    initial = float(inputs.initial_value)
    contribution = float(inputs.monthly_contribution)

    accumulated = initial
    points: List[ProjectionPoint] = []
    for month in range(months + 1):
        if month > 0:
            accumulated = accumulated * (1 + rate) + contribution
        invested = initial + contribution * month

        points.append(
            ProjectionPoint(
                month=month,
                accumulated=accumulated,
                invested=invested,
                interest=accumulated - invested,
            )
        )

    return ProjectionSeries(points=points)


def summarize(series: ProjectionSeries) -> ProjectionSummary:
    """Totals for the summary labels, taken from the last month."""
    last = series.final
    return ProjectionSummary(
        total_invested=last.invested,
        total_interest=last.interest,
        final_amount=last.accumulated,
        total_invested_display=format_currency(last.invested),
        total_interest_display=format_currency(last.interest),
        final_amount_display=format_currency(last.accumulated),
    )


def chart_data(series: ProjectionSeries) -> ChartData:
    """Per-month arrays plus month labels for the line chart."""
    lines = [
        (ACCUMULATED_LINE, series.accumulated),
        (INVESTED_LINE, series.invested),
        (INTEREST_LINE, series.interest),
    ]
    return ChartData(
        labels=series.labels,
        datasets=[
            ChartDataset(label=label, data=data, border_color=colour)
            for (label, colour), data in lines
        ],
    )


__all__ = [
    "MAX_TOTAL_MONTHS",
    "MONTHS_PER_YEAR",
    "chart_data",
    "monthly_rate",
    "project",
    "summarize",
    "total_months",
]
