from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from src.domain.models.animal import AnimalRecord
from src.domain.models.lactation import LactationAnalysis, LactationCurvePoint
from src.domain.models.milk_weighing import MilkWeighingRecord
from src.utils.dates import parse_iso_date

logger = logging.getLogger(__name__)

STANDARD_LACTATION_DAYS = 305
PERSISTENCY_WINDOW = 10


def build_curve(
    lactation_start: date, records: Iterable[MilkWeighingRecord]
) -> list[LactationCurvePoint]:
    """Daily totals by days in milk, AM/PM sessions summed per date.

    Records dated before the lactation start or with unparsable dates are dropped.
    """
    daily: dict[int, float] = {}
    for record in records:
        record_date = parse_iso_date(record.date)
        if record_date is None:
            logger.debug("Skipping milk record %s: invalid date %r", record.id, record.date)
            continue
        del_ = (record_date - lactation_start).days
        if del_ < 0:
            logger.debug(
                "Skipping milk record %s: dated %s before lactation start %s",
                record.id,
                record_date,
                lactation_start,
            )
            continue
        daily[del_] = daily.get(del_, 0.0) + float(record.quantity)
    return [LactationCurvePoint(days_in_milk=d, production=p) for d, p in sorted(daily.items())]


def _mean(points: Sequence[LactationCurvePoint]) -> float:
    if not points:
        return 0.0
    return sum(p.production for p in points) / len(points)


def peak_window(
    points: Sequence[LactationCurvePoint], window: int = PERSISTENCY_WINDOW
) -> list[LactationCurvePoint]:
    """`window` consecutive points centred on the first peak, shifted to stay in range."""
    if not points:
        return []
    size = min(window, len(points))
    peak_index = max(range(len(points)), key=lambda i: (points[i].production, -i))
    start = peak_index - size // 2
    start = max(0, min(start, len(points) - size))
    return list(points[start : start + size])


def persistency(
    points: Sequence[LactationCurvePoint], window: int = PERSISTENCY_WINDOW
) -> float:
    """Mean of the latest `window` points as a percentage of the mean around the peak."""
    if not points:
        return 0.0
    size = min(window, len(points))
    around_peak = _mean(peak_window(points, size))
    if around_peak <= 0:
        return 0.0
    return _mean(points[-size:]) / around_peak * 100


def project_standard_lactation(
    points: Sequence[LactationCurvePoint], standard_days: int = STANDARD_LACTATION_DAYS
) -> float:
    """Linear projection: total yield over the observed DEL span, scaled to `standard_days`.

    The span counts both ends, so a single recorded day spans one day.
    """
    if not points:
        return 0.0
    total = sum(p.production for p in points)
    span = points[-1].days_in_milk - points[0].days_in_milk + 1
    return total / span * standard_days


def analyze_curve(
    lactation_start: str | date | None,
    records: Iterable[MilkWeighingRecord],
    *,
    standard_days: int = STANDARD_LACTATION_DAYS,
    window: int = PERSISTENCY_WINDOW,
) -> LactationAnalysis | None:
    start = parse_iso_date(lactation_start)
    if start is None:
        logger.debug("No lactation analysis: missing or invalid start %r", lactation_start)
        return None

    points = build_curve(start, records)
    if not points:
        return None

    total = sum(p.production for p in points)
    peak = max(points, key=lambda p: p.production)
    span = points[-1].days_in_milk - points[0].days_in_milk + 1
    return LactationAnalysis(
        data=points,
        peak_production=peak.production,
        total_production=total,
        persistency=persistency(points, window),
        projected_305_day_production=project_standard_lactation(points, standard_days),
        peak_days_in_milk=peak.days_in_milk,
        days_in_milk=points[-1].days_in_milk,
        average_daily_production=total / span,
    )


def execute(
    animal: AnimalRecord,
    records: Iterable[MilkWeighingRecord],
    *,
    standard_days: int = STANDARD_LACTATION_DAYS,
    window: int = PERSISTENCY_WINDOW,
) -> LactationAnalysis | None:
    """Lactation KPIs for the animal's current lactation, or None when there is no data."""
    own = [r for r in records if r.animal_id == animal.id]
    if not own:
        return None
    return analyze_curve(
        animal.last_calving_date, own, standard_days=standard_days, window=window
    )
