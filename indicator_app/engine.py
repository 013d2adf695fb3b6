"""
Indicator engine coordinator.

Runs an explicit, ordered set of calculators against one IndicatorContext and
collects their results. A calculator that lacks data is skipped; a calculator
that faults is logged and skipped without affecting the rest of the batch.
"""

from typing import Iterable, Optional

from .config.defaults import IndicatorDefaults, get_default_config
from .data.models import IndicatorContext
from .errors import IndicatorCalculationError, RegistrationError
from .indicators import (
    BollingerBandCalculator,
    DirectorPledgeCalculator,
    DividendYieldCalculator,
    EPSCalculator,
    ForeignHoldingCalculator,
    IndicatorCalculator,
    InsiderTradingCalculator,
    KDCalculator,
    MACDCalculator,
    MarginIndicatorCalculator,
    MovingAverageCalculator,
    PBRatioCalculator,
    PERatioCalculator,
    RevenueGrowthCalculator,
    RSICalculator,
    VolumeRatioCalculator,
)
from .logging.config import get_engine_logger, log_indicator_result
from .models.indicators import IndicatorCategory, IndicatorResult


def build_default_calculators(config: Optional[IndicatorDefaults] = None) -> list[IndicatorCalculator]:
    """
    Build the standard calculator set in registration order.

    Args:
        config: Indicator parameters; defaults when omitted

    Returns:
        Ordered list of calculators ready to hand to IndicatorEngine
    """
    config = config or get_default_config()

    return [
        # Technical
        MovingAverageCalculator(config.ma),
        RSICalculator(config.rsi),
        MACDCalculator(config.macd),
        KDCalculator(config.kd),
        VolumeRatioCalculator(config.volume),
        BollingerBandCalculator(config.bollinger),
        # Chip
        MarginIndicatorCalculator(),
        ForeignHoldingCalculator(),
        DirectorPledgeCalculator(),
        # Fundamental
        PERatioCalculator(),
        PBRatioCalculator(),
        DividendYieldCalculator(),
        RevenueGrowthCalculator(),
        EPSCalculator(),
        # US market only
        InsiderTradingCalculator(),
    ]


class IndicatorEngine:
    """
    Runs registered indicator calculators against a market snapshot.

    The engine holds no per-call state, so one instance can serve concurrent
    requests as long as each request supplies its own context.
    """

    def __init__(self, calculators: Optional[Iterable[IndicatorCalculator]] = None) -> None:
        """
        Initialize the engine.

        Args:
            calculators: Calculators in registration order; the default set when omitted

        Raises:
            RegistrationError: If two calculators share a name
        """
        # Resolved here, not at import, so configure_logging() settings apply
        self.logger = get_engine_logger(__name__)
        registered = list(calculators) if calculators is not None else build_default_calculators()

        seen = set()
        for calculator in registered:
            if calculator.name in seen:
                raise RegistrationError(
                    f"Duplicate indicator name: {calculator.name}",
                    indicator_name=calculator.name,
                    context={"calculators": [c.name for c in registered]},
                )
            seen.add(calculator.name)

        self._calculators = tuple(registered)

        self.logger.info("Indicator engine initialized", calculator_count=len(self._calculators))

    @property
    def calculators(self) -> tuple[IndicatorCalculator, ...]:
        return self._calculators

    def calculate_all(self, context: IndicatorContext) -> list[IndicatorResult]:
        """Calculate every indicator the context has data for."""
        return self._run(context, self._calculators)

    def calculate_by_category(self, context: IndicatorContext,
                              category: IndicatorCategory) -> list[IndicatorResult]:
        """Calculate the indicators of one category."""
        selected = [c for c in self._calculators if c.category == category]
        return self._run(context, selected, category=category.value)

    def calculate_by_name(self, context: IndicatorContext, name: str) -> Optional[IndicatorResult]:
        """
        Calculate a single indicator by name.

        Returns:
            The result, or None if no calculator has that name, the context
            lacks its data, or the calculation faulted
        """
        calculator = next((c for c in self._calculators if c.name == name), None)
        if calculator is None:
            self.logger.warning("Indicator not registered", indicator=name,
                                stock_code=context.stock_code)
            return None

        try:
            if not calculator.can_calculate(context):
                self.logger.warning("Insufficient data for indicator", indicator=name,
                                    stock_code=context.stock_code)
                return None
            result = calculator.calculate(context)
        except Exception as e:
            self._log_failure(calculator, context, e)
            return None

        log_indicator_result(self.logger, result, context.stock_code)
        return result

    def _run(self, context: IndicatorContext, calculators: Iterable[IndicatorCalculator],
             **log_fields) -> list[IndicatorResult]:
        results = []
        skipped = 0
        failed = 0

        for calculator in calculators:
            # The data check is guarded too: a malformed context may break it
            try:
                if not calculator.can_calculate(context):
                    self.logger.debug("Skipping indicator, insufficient data",
                                      indicator=calculator.name, stock_code=context.stock_code)
                    skipped += 1
                    continue
                result = calculator.calculate(context)
            except Exception as e:
                self._log_failure(calculator, context, e)
                failed += 1
                continue

            log_indicator_result(self.logger, result, context.stock_code)
            results.append(result)

        self.logger.info(
            "Indicator batch completed",
            stock_code=context.stock_code,
            computed=len(results),
            skipped=skipped,
            failed=failed,
            **log_fields,
        )
        return results

    def _log_failure(self, calculator: IndicatorCalculator, context: IndicatorContext,
                     cause: Exception) -> None:
        error = IndicatorCalculationError(
            f"{calculator.name} calculation failed: {cause}",
            indicator_name=calculator.name,
            calculation_input={
                "price_count": len(context.prices),
                "has_fundamentals": context.fundamentals is not None,
                "has_chips": context.chips is not None,
                "has_insider_trading": context.insider_trading is not None,
            },
            context={"stock_code": context.stock_code},
        )
        self.logger.warning(
            "Indicator calculation failed",
            indicator=error.indicator_name,
            error=str(error),
            error_type=type(cause).__name__,
            calculation_input=error.calculation_input,
            exc_info=cause,
            **error.context,
        )
