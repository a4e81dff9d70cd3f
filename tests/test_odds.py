import unittest

from odds_engine.odds import (
    AmericanOdds,
    DecimalOdds,
    FractionalOdds,
    InvalidOdds,
    Odds,
    round_half_away,
    validate_odds,
)


class TestOddsValues(unittest.TestCase):
    def test_equality_is_per_variant(self) -> None:
        self.assertEqual(DecimalOdds(2.0), DecimalOdds(2.0))
        self.assertNotEqual(DecimalOdds(2.0), FractionalOdds(1.0, 1.0))
        self.assertNotEqual(DecimalOdds(2.0), AmericanOdds(2.0))
        self.assertEqual(len({DecimalOdds(2.0), DecimalOdds(2.0), AmericanOdds(100.0)}), 2)

    def test_values_are_immutable(self) -> None:
        odds = DecimalOdds(2.0)
        with self.assertRaises(AttributeError):
            odds.value = 3.0  # type: ignore[misc]

    def test_variants_share_base(self) -> None:
        for odds in (DecimalOdds(2.0), FractionalOdds(1.0, 1.0), AmericanOdds(100.0)):
            self.assertIsInstance(odds, Odds)

    def test_base_cannot_be_instantiated(self) -> None:
        with self.assertRaises(TypeError):
            Odds()

    def test_variants_are_plain_dataclasses(self) -> None:
        self.assertFalse(hasattr(Odds, "__slots__"))
        self.assertEqual(vars(DecimalOdds(2.0)), {"value": 2.0})


class TestConversions(unittest.TestCase):
    def test_american_to_decimal(self) -> None:
        result = AmericanOdds(-120.0).to_decimal()
        self.assertIsInstance(result, DecimalOdds)
        self.assertAlmostEqual(result.value, 1.8333333, places=6)

    def test_decimal_to_american(self) -> None:
        self.assertEqual(DecimalOdds(2.8).to_american(), AmericanOdds(180.0))

    def test_favourite_to_american_is_negative(self) -> None:
        self.assertEqual(AmericanOdds(-120.0).to_american(), AmericanOdds(-120.0))
        self.assertEqual(DecimalOdds(1.5).to_american(), AmericanOdds(-200.0))

    def test_even_money_is_positive_hundred(self) -> None:
        for odds in (DecimalOdds(2.0), FractionalOdds(1.0, 1.0), AmericanOdds(-100.0), AmericanOdds(100.0)):
            self.assertEqual(odds.to_american(), AmericanOdds(100.0))

    def test_sign_follows_probability(self) -> None:
        for decimal in (1.05, 1.4, 1.9, 1.99):
            self.assertLess(DecimalOdds(decimal).to_american().value, 0)
        for decimal in (2.0, 2.01, 3.5, 26.0):
            self.assertGreater(DecimalOdds(decimal).to_american().value, 0)

    def test_to_fractional_uses_unit_denominator(self) -> None:
        result = FractionalOdds(6.0, 4.0).to_fractional()
        self.assertEqual(result.denominator, 1.0)
        self.assertAlmostEqual(result.numerator, 1.5)

        result = DecimalOdds(3.5).to_fractional()
        self.assertAlmostEqual(result.numerator, 2.5)
        self.assertEqual(result.denominator, 1.0)

    def test_certain_outcome(self) -> None:
        certain = DecimalOdds(1.0)
        self.assertEqual(certain.to_decimal(), DecimalOdds(1.0))
        self.assertEqual(certain.to_fractional(), FractionalOdds(0.0, 1.0))
        with self.assertRaises(InvalidOdds):
            certain.to_american()

    def test_cross_format_probability(self) -> None:
        samples = [
            DecimalOdds(1.65),
            DecimalOdds(5.0),
            FractionalOdds(5.0, 2.0),
            FractionalOdds(1.0, 3.0),
            AmericanOdds(-120.0),
            AmericanOdds(180.0),
            AmericanOdds(-129.0),
        ]
        for odds in samples:
            p = odds.implied_probability()
            self.assertAlmostEqual(odds.to_decimal().implied_probability(), p, places=9)
            self.assertAlmostEqual(odds.to_fractional().implied_probability(), p, places=9)
            self.assertAlmostEqual(odds.to_american().implied_probability(), p, places=2)

    def test_invalid_odds_propagate_through_conversions(self) -> None:
        with self.assertRaises(InvalidOdds):
            AmericanOdds(0.0).to_decimal()
        with self.assertRaises(InvalidOdds):
            DecimalOdds(0.5).to_fractional()
        with self.assertRaises(InvalidOdds):
            FractionalOdds(1.0, 0.0).to_american()


class TestValidation(unittest.TestCase):
    def test_accepts_valid_values(self) -> None:
        odds = FractionalOdds(0.0, 1.0)
        self.assertIs(validate_odds(odds), odds)
        validate_odds(DecimalOdds(1.0))
        validate_odds(AmericanOdds(-5000.0))

    def test_rejects_out_of_domain(self) -> None:
        bad = [
            DecimalOdds(0.99),
            DecimalOdds(float("inf")),
            DecimalOdds(float("nan")),
            FractionalOdds(-1.0, 2.0),
            FractionalOdds(1.0, 0.0),
            FractionalOdds(1.0, -2.0),
            AmericanOdds(0.0),
            AmericanOdds(float("nan")),
        ]
        for odds in bad:
            with self.assertRaises(InvalidOdds):
                validate_odds(odds)

    def test_invalid_odds_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            validate_odds(AmericanOdds(0.0))

    def test_rejects_non_odds(self) -> None:
        with self.assertRaises(TypeError):
            validate_odds(2.0)  # type: ignore[arg-type]


class TestRounding(unittest.TestCase):
    def test_round_half_away(self) -> None:
        self.assertEqual(round_half_away(2.5), 3.0)
        self.assertEqual(round_half_away(-2.5), -3.0)
        self.assertEqual(round_half_away(179.4), 179.0)
        self.assertEqual(round_half_away(0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
