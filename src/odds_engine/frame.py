from __future__ import annotations

import logging
from typing import Literal

import numpy as np
import pandas as pd

from .odds import AMERICAN_BASE, FAVOURITE_THRESHOLD, InvalidOdds, InvalidProbability, OddsError

logger = logging.getLogger(__name__)

PriceFormat = Literal["decimal", "american"]
Errors = Literal["raise", "coerce"]


def _apply_errors(
    result: np.ndarray,
    invalid: np.ndarray,
    errors: Errors,
    error_cls: type[OddsError],
    message: str,
) -> np.ndarray:
    if errors not in ("raise", "coerce"):
        raise ValueError(f"errors must be 'raise' or 'coerce', got {errors!r}")
    if not invalid.any():
        return result
    if errors == "raise":
        first = int(np.flatnonzero(invalid)[0])
        raise error_cls(f"{message} (first invalid entry at position {first})")
    logger.warning("Coerced %d of %d entries to NaN: %s", int(invalid.sum()), invalid.size, message)
    result = result.copy()
    result[invalid] = np.nan
    return result


def implied_probabilities(values, fmt: PriceFormat, errors: Errors = "raise") -> np.ndarray:
    """Vectorised implied probability for decimal or American prices."""
    prices = np.atleast_1d(np.asarray(values, dtype=float))
    with np.errstate(divide="ignore", invalid="ignore"):
        if fmt == "decimal":
            invalid = ~np.isfinite(prices) | (prices < 1)
            result = 1 / prices
        elif fmt == "american":
            invalid = ~np.isfinite(prices) | (prices == 0)
            magnitude = np.abs(prices)
            result = np.where(
                prices < 0,
                magnitude / (magnitude + AMERICAN_BASE),
                AMERICAN_BASE / (prices + AMERICAN_BASE),
            )
        else:
            raise ValueError(f"Unsupported price format: {fmt}")
    return _apply_errors(result, invalid, errors, InvalidOdds, f"invalid {fmt} odds")


def fractional_probabilities(numerators, denominators, errors: Errors = "raise") -> np.ndarray:
    """Vectorised implied probability for fractional prices (profit over stake)."""
    num = np.atleast_1d(np.asarray(numerators, dtype=float))
    den = np.atleast_1d(np.asarray(denominators, dtype=float))
    if num.shape != den.shape:
        raise ValueError("numerators and denominators must have the same shape")
    invalid = ~np.isfinite(num) | ~np.isfinite(den) | (num < 0) | (den <= 0)
    with np.errstate(divide="ignore", invalid="ignore"):
        result = den / (den + num)
    return _apply_errors(result, invalid, errors, InvalidOdds, "invalid fractional odds")


def _probability_mask(probabilities) -> tuple[np.ndarray, np.ndarray]:
    probs = np.atleast_1d(np.asarray(probabilities, dtype=float))
    # NaN compares False, so it lands in the invalid mask
    invalid = ~((probs > 0) & (probs <= 1))
    return probs, invalid


def decimal_from_probabilities(probabilities, errors: Errors = "raise") -> np.ndarray:
    """Vectorised fair decimal odds for probabilities in (0, 1]."""
    probs, invalid = _probability_mask(probabilities)
    with np.errstate(divide="ignore", invalid="ignore"):
        result = 1 / probs
    return _apply_errors(result, invalid, errors, InvalidProbability, "probability outside (0, 1]")


def american_from_probabilities(probabilities, errors: Errors = "raise") -> np.ndarray:
    """Vectorised American odds; p == 0.5 maps to +100 and p == 1 is rejected."""
    probs, invalid = _probability_mask(probabilities)
    invalid = invalid | (probs == 1)
    with np.errstate(divide="ignore", invalid="ignore"):
        favourite = probs > FAVOURITE_THRESHOLD
        raw = np.where(
            favourite,
            probs / (1 - probs) * AMERICAN_BASE,
            (1 - probs) / probs * AMERICAN_BASE,
        )
        rounded = np.floor(raw + 0.5)
        result = np.where(favourite, -rounded, rounded)
    return _apply_errors(result, invalid, errors, InvalidProbability, "probability outside (0, 1)")


def annotate_odds_frame(
    frame: pd.DataFrame,
    column: str = "odds",
    fmt: PriceFormat = "american",
    errors: Errors = "raise",
) -> pd.DataFrame:
    """Append implied probability, decimal and American columns for a numeric price column."""
    if column not in frame.columns:
        raise KeyError(f"column {column!r} not found")
    if not pd.api.types.is_numeric_dtype(frame[column]):
        raise TypeError(f"column {column!r} must hold numeric prices, got dtype {frame[column].dtype}")
    annotated = frame.copy()
    prices = annotated[column].to_numpy(dtype=float, na_value=np.nan)
    probs = implied_probabilities(prices, fmt, errors=errors)
    valid = ~np.isnan(probs)
    decimal = np.full(probs.shape, np.nan)
    american = np.full(probs.shape, np.nan)
    decimal[valid] = decimal_from_probabilities(probs[valid])
    # certain outcomes keep NaN American odds
    american_ok = valid & (probs < 1)
    american[american_ok] = american_from_probabilities(probs[american_ok])
    annotated["implied_probability"] = probs
    annotated["decimal_odds"] = decimal
    annotated["american_odds"] = american
    return annotated
