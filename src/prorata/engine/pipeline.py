"""End-to-end TCC calculation: validate, prorate, derive, aggregate."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from prorata.core.config import AppSettings
from prorata.core.exceptions import CalculationError, ProrataError
from prorata.engine.aggregator import calculate_tcc
from prorata.engine.derivation import compute_derived
from prorata.engine.prorater import derive_component_keys, prorate
from prorata.engine.targets import compute_targets
from prorata.engine.validator import validate_inputs
from prorata.models.calculation import CalculationRequest, CalculationResponse
from prorata.models.period import AllocationPeriod
from prorata.models.results import ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_stage(stage: str, func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except ProrataError:
        raise
    except Exception as exc:
        raise CalculationError(stage, str(exc)) from exc


class TCCCalculator:
    """Runs the full calculation over one input snapshot.

    Holds configuration only; every call builds fresh results, so a single
    instance can serve concurrent callers.
    """

    def __init__(self, *, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def validate(self, periods: Iterable[AllocationPeriod], year: int) -> ValidationResult:
        return validate_inputs(periods, year, settings=self._settings)

    def calculate(self, request: CalculationRequest) -> CalculationResponse:
        """Compute totals, incentives, TCC and wRVU targets.

        Validation problems are reported alongside the numbers and never stop
        the calculation.
        """
        validation = self.validate(request.periods, request.year)
        if not validation.ok:
            logger.warning(
                "Calculating %d with %d validation issue(s): %s",
                request.year,
                len(validation.errors),
                "; ".join(e.message for e in validation.errors),
            )

        if request.component_keys is not None:
            component_keys = list(dict.fromkeys(request.component_keys))
        else:
            component_keys = derive_component_keys(request.periods)

        proration = _run_stage("prorate", prorate, request.periods, request.year, component_keys)
        derived_totals = _run_stage(
            "derive", compute_derived, proration.totals_by_component, request.derived_items,
        )
        tcc = _run_stage("aggregate", calculate_tcc, proration.totals_by_component, derived_totals)
        targets = _run_stage(
            "targets", compute_targets, proration.totals_by_component, request.target_items,
        )

        result = proration.model_copy(update={"derived_totals": derived_totals, "tcc": tcc})
        logger.debug(
            "TCC for %d: %.2f across %d period(s), %d component(s), %d incentive(s)",
            request.year, tcc, len(request.periods), len(component_keys), len(derived_totals),
        )

        return CalculationResponse(
            validation=validation,
            component_keys=component_keys,
            result=result,
            targets=targets,
        )
