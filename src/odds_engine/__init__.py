"""Odds notation conversion, implied probability and bet return calculations."""

from .calculator import (
    OddsCalculator,
    expected_return,
    expected_value,
    net_profit,
    odds_from_probability,
    probability_from_odds,
)
from .frame import (
    american_from_probabilities,
    annotate_odds_frame,
    decimal_from_probabilities,
    fractional_probabilities,
    implied_probabilities,
)
from .odds import (
    AmericanOdds,
    DecimalOdds,
    FractionalOdds,
    InvalidOdds,
    InvalidProbability,
    InvalidStake,
    Odds,
    OddsError,
)

__all__ = [
    "Odds",
    "DecimalOdds",
    "FractionalOdds",
    "AmericanOdds",
    "OddsError",
    "InvalidOdds",
    "InvalidProbability",
    "InvalidStake",
    "OddsCalculator",
    "odds_from_probability",
    "probability_from_odds",
    "expected_return",
    "net_profit",
    "expected_value",
    "implied_probabilities",
    "fractional_probabilities",
    "decimal_from_probabilities",
    "american_from_probabilities",
    "annotate_odds_frame",
]
