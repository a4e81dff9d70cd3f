from __future__ import annotations

import math
from dataclasses import dataclass

AMERICAN_BASE = 100.0
FAVOURITE_THRESHOLD = 0.5


class OddsError(ValueError):
    """Base class for out-of-domain odds, probability and stake inputs."""


class InvalidProbability(OddsError):
    pass


class InvalidOdds(OddsError):
    pass


class InvalidStake(OddsError):
    pass


def round_half_away(value: float) -> float:
    """Round to the nearest integer-valued float, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Odds:
    """One implied probability written in decimal, fractional or American notation.

    Variants compare structurally: ``DecimalOdds(2.0)`` and
    ``FractionalOdds(1.0, 1.0)`` imply the same probability but are not equal.
    Conversions go through the implied probability.
    """

    def __new__(cls, *args, **kwargs):
        if cls is Odds:
            raise TypeError("Odds is abstract; construct DecimalOdds, FractionalOdds or AmericanOdds")
        return super().__new__(cls)

    def implied_probability(self) -> float:
        # deferred: calculator imports the variants from this module
        from .calculator import probability_from_odds

        return probability_from_odds(self)

    def to_decimal(self) -> DecimalOdds:
        return DecimalOdds(1 / self.implied_probability())

    def to_fractional(self) -> FractionalOdds:
        """Return net profit over a fixed denominator of 1.

        The ratio is not reduced to small integers, so 6/4 comes back as 1.5/1.
        """
        # TODO: reduce to a small-integer ratio once the approximation rule is chosen
        # (continued fraction vs fixed precision).
        return FractionalOdds(1 / self.implied_probability() - 1, 1.0)

    def to_american(self) -> AmericanOdds:
        """Return signed American odds; even money (p == 0.5) is +100."""
        p = self.implied_probability()
        if p > FAVOURITE_THRESHOLD:
            if p >= 1:
                raise InvalidOdds("a certain outcome has no American odds")
            return AmericanOdds(-round_half_away(p / (1 - p) * AMERICAN_BASE))
        return AmericanOdds(round_half_away((1 - p) / p * AMERICAN_BASE))


@dataclass(frozen=True)
class DecimalOdds(Odds):
    value: float


@dataclass(frozen=True)
class FractionalOdds(Odds):
    numerator: float
    denominator: float


@dataclass(frozen=True)
class AmericanOdds(Odds):
    value: float


def validate_odds(odds: Odds) -> Odds:
    """Raise if ``odds`` does not imply a probability in (0, 1]."""
    if isinstance(odds, DecimalOdds):
        if not math.isfinite(odds.value) or odds.value < 1:
            raise InvalidOdds(f"decimal odds must be finite and >= 1, got {odds.value}")
    elif isinstance(odds, FractionalOdds):
        n, d = odds.numerator, odds.denominator
        if not (math.isfinite(n) and math.isfinite(d)):
            raise InvalidOdds(f"fractional odds must be finite, got {n}/{d}")
        if n < 0 or d <= 0:
            raise InvalidOdds(f"fractional odds need numerator >= 0 and denominator > 0, got {n}/{d}")
    elif isinstance(odds, AmericanOdds):
        if not math.isfinite(odds.value) or odds.value == 0:
            raise InvalidOdds(f"American odds must be finite and non-zero, got {odds.value}")
    else:
        raise TypeError(f"expected an Odds value, got {type(odds).__name__}")
    return odds
