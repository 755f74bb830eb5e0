"""Shared test fixtures for the estimator suite."""

from collections.abc import Callable
from datetime import date

import pytest

from estimators.engines.settlement import SettlementEngine
from estimators.engines.tax import TaxEngine


@pytest.fixture
def tax_engine() -> TaxEngine:
    return TaxEngine.for_year(2025)


@pytest.fixture
def settlement_engine() -> SettlementEngine:
    return SettlementEngine()


@pytest.fixture
def fixed_clock() -> Callable[[date], Callable[[], date]]:
    """Build a clock that always reports the given day."""

    def _make(day: date) -> Callable[[], date]:
        return lambda: day

    return _make
