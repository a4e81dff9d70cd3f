from __future__ import annotations

import math

from .odds import (
    AMERICAN_BASE,
    DecimalOdds,
    FractionalOdds,
    InvalidProbability,
    InvalidStake,
    Odds,
    validate_odds,
)


def _validate_stake(stake: float) -> None:
    if not math.isfinite(stake) or stake < 0:
        raise InvalidStake(f"stake must be finite and >= 0, got {stake}")


def odds_from_probability(chance: float) -> DecimalOdds:
    """Return fair decimal odds for a win probability in (0, 1]."""
    if not 0 < chance <= 1:
        raise InvalidProbability(f"probability must be in (0, 1], got {chance}")
    return DecimalOdds(1 / chance)


def probability_from_odds(odds: Odds) -> float:
    """Convert any odds notation to its implied probability."""
    validate_odds(odds)
    if isinstance(odds, DecimalOdds):
        return 1 / odds.value
    if isinstance(odds, FractionalOdds):
        # numerator is net profit, denominator is stake
        return odds.denominator / (odds.denominator + odds.numerator)
    if odds.value < 0:
        return abs(odds.value) / (abs(odds.value) + AMERICAN_BASE)
    return AMERICAN_BASE / (odds.value + AMERICAN_BASE)


def expected_return(stake: float, odds: Odds) -> float:
    """Total payout (stake plus profit) if the bet wins."""
    _validate_stake(stake)
    validate_odds(odds)
    if isinstance(odds, DecimalOdds):
        return stake * odds.value
    if isinstance(odds, FractionalOdds):
        return stake + stake * odds.numerator / odds.denominator
    if odds.value > 0:
        return stake + odds.value * (stake / AMERICAN_BASE)
    return stake - (AMERICAN_BASE / odds.value) * stake


def net_profit(stake: float, odds: Odds) -> float:
    """Profit on top of the returned stake if the bet wins."""
    return expected_return(stake, odds) - stake


def expected_value(probability: float, odds: Odds, stake: float = 1.0) -> float:
    """Compute expected profit of a bet given the true win probability."""
    if not 0 <= probability <= 1:
        raise InvalidProbability(f"probability must be in [0, 1], got {probability}")
    return probability * net_profit(stake, odds) - (1 - probability) * stake


class OddsCalculator:
    """Stateless facade over the module-level conversion functions."""

    def odds_from_probability(self, chance: float) -> DecimalOdds:
        """Return fair decimal odds for a win probability in (0, 1]."""
        return odds_from_probability(chance)

    def probability_from_odds(self, odds: Odds) -> float:
        """Convert any odds notation to its implied probability."""
        return probability_from_odds(odds)

    def expected_return(self, stake: float, odds: Odds) -> float:
        """Total payout (stake plus profit) if the bet wins."""
        return expected_return(stake, odds)

    def net_profit(self, stake: float, odds: Odds) -> float:
        """Profit on top of the returned stake if the bet wins."""
        return net_profit(stake, odds)

    def expected_value(self, probability: float, odds: Odds, stake: float = 1.0) -> float:
        """Compute expected profit of a bet given the true win probability."""
        return expected_value(probability, odds, stake)
