"""Sentiment trend and volatility over a chronological score series."""

from __future__ import annotations

import statistics
from typing import Optional, Sequence

from moodmine.config.engine_config import EngineConfig
from moodmine.models.results import TrendDirection, TrendResult


def regression_slope(values: Sequence[float]) -> float:
    """Least-squares slope of ``values`` against their 0-based index.

    slope = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)

    Requires at least two points; the indices are distinct so the
    denominator is positive.
    """
    n = len(values)
    sum_x = n * (n - 1) / 2
    sum_y = sum(values)
    sum_xy = sum(i * v for i, v in enumerate(values))
    sum_x2 = (n - 1) * n * (2 * n - 1) / 6
    return (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)


def analyze_sentiment_trends(
    sentiment_scores: Sequence[float],
    config: Optional[EngineConfig] = None,
) -> TrendResult:
    """Classify the series as improving / declining / stable.

    ``volatility`` is the population standard deviation (divides by n).
    Series shorter than three points are reported as stable with zeros.
    """
    config = config or EngineConfig()
    scores = list(sentiment_scores)
    if len(scores) < config.min_trend_points:
        return TrendResult(trend=TrendDirection.STABLE, average=0, volatility=0)

    average = statistics.fmean(scores)
    slope = regression_slope(scores)
    volatility = statistics.pstdev(scores, mu=average)

    threshold = config.trend_slope_threshold
    if slope > threshold:
        trend = TrendDirection.IMPROVING
    elif slope < -threshold:
        trend = TrendDirection.DECLINING
    else:
        trend = TrendDirection.STABLE

    return TrendResult(
        trend=trend,
        average=round(average, 2),
        volatility=round(volatility, 2),
    )
