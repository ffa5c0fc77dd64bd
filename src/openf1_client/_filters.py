"""Query-string construction, including OpenF1's comparison operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Scalar = int | float | str


@dataclass(frozen=True)
class Filter:
    """A comparison filter on one query field.

    OpenF1 encodes comparisons in the parameter name itself::

        year=Filter(gte=2023, lte=2025)   ->  year>=2023&year<=2025
        lap_number=Filter(lt=10)          ->  lap_number<10
    """

    gt: Scalar | None = None
    gte: Scalar | None = None
    lt: Scalar | None = None
    lte: Scalar | None = None

    def to_params(self, key: str) -> list[tuple[str, str]]:
        operators = (">", self.gt), (">=", self.gte), ("<", self.lt), ("<=", self.lte)
        return [(f"{key}{op}", str(value)) for op, value in operators if value is not None]


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Turn keyword filters into httpx query tuples.

    ``None`` values are dropped, :class:`Filter` values expand into
    comparison parameters, and anything else becomes an equality filter.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Filter):
            params.extend(value.to_params(key))
        elif isinstance(value, bool):
            params.append((key, str(value).lower()))
        else:
            params.append((key, str(value)))
    return params
