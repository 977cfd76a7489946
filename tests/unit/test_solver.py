"""
End-to-end tests: raw text → formatted constant term
"""

import json
import random

import pytest

from src.core.domain.fraction import Fraction
from src.core.errors import DuplicateX, InsufficientPoints, MalformedInput, MissingK
from src.core.math.base_n import format_base_n
from src.solver import solve_record, solve_text


def _record(k, pairs, base=10):
    record = {"keys": {"n": len(pairs), "k": k}}
    for x, y in pairs:
        record[str(x)] = {"base": str(base), "value": format_base_n(y, base)}
    return record


class TestExamples:
    """Worked examples"""

    def test_quadratic(self) -> None:
        """y = x² + x + 1 → 1"""
        assert solve_text(json.dumps(_record(3, [(1, 3), (2, 7), (3, 13)]))) == "1"

    def test_quadratic_through_1_3_2_6_3_11(self) -> None:
        """(1,3), (2,6), (3,11) lie on y = x² + 2"""
        assert solve_text(json.dumps(_record(3, [(1, 3), (2, 6), (3, 11)]))) == "2"

    def test_line(self) -> None:
        """y = 2x + 3 → 3"""
        assert solve_text(json.dumps(_record(2, [(1, 5), (2, 7)]))) == "3"

    def test_line_even_xs(self) -> None:
        """y = 2x + 1 → 1"""
        assert solve_text(json.dumps(_record(2, [(2, 5), (4, 9)]))) == "1"

    def test_k_exceeds_points(self) -> None:
        with pytest.raises(InsufficientPoints):
            solve_text(json.dumps(_record(3, [(1, 5), (2, 7)])))

    def test_mixed_bases(self) -> None:
        text = json.dumps({
            "keys": {"n": 4, "k": 3},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "111"},
            "3": {"base": "10", "value": "12"},
            "6": {"base": "4", "value": "213"},
        })
        assert solve_text(text) == "3"

    def test_fractional_result(self) -> None:
        assert solve_text(json.dumps(_record(2, [(1, 1), (3, 2)]))) == "1/2"


class TestProperties:
    """Order independence and exactness through the whole pipeline"""

    def test_shuffled_keys_and_extra_points(self) -> None:
        rng = random.Random(2024)
        coeffs = [rng.randint(-10**30, 10**30) for _ in range(6)]
        xs = rng.sample(range(1, 200), 12)
        pairs = [(x, sum(c * x**i for i, c in enumerate(coeffs))) for x in xs]
        expected = str(coeffs[0])
        for base in (2, 7, 16, 36):
            items = list(_record(6, pairs, base).items())
            rng.shuffle(items)
            assert solve_text(json.dumps(dict(items))) == expected

    def test_solve_record_returns_fraction(self) -> None:
        result = solve_record(_record(2, [(1, 5), (2, 7)]))
        assert result == Fraction(numerator=3, denominator=1)

    def test_duplicate_x_among_lowest(self) -> None:
        record = _record(2, [(1, 5), (3, 7)])
        record["+1"] = {"base": "10", "value": "6"}
        with pytest.raises(DuplicateX):
            solve_record(record)

    def test_noisy_input(self) -> None:
        text = "shares follow\n" + json.dumps(_record(2, [(1, 5), (2, 7)])) + "\n-- end --"
        assert solve_text(text) == "3"

    def test_missing_k(self) -> None:
        with pytest.raises(MissingK):
            solve_text('{"1": {"value": "1", "base": 10}}')


class TestArbitraryPrecision:
    """Values and keys beyond the default int/str digit cap"""

    def test_value_beyond_4300_digits(self) -> None:
        text = json.dumps({"keys": {"k": 1}, "1": {"value": "f" * 4000, "base": 16}})
        result = solve_text(text)
        assert len(result) > 4300
        assert result == str(int("f" * 4000, 16))

    def test_key_beyond_4300_digits(self) -> None:
        key = "1" * 5000
        text = json.dumps({"keys": {"k": 1}, key: {"value": "5", "base": 10}})
        assert solve_text(text) == "5"

    def test_json_number_value_beyond_4300_digits(self) -> None:
        digits = "7" * 5000
        text = '{"keys": {"k": 1}, "1": {"value": ' + digits + ', "base": 10}}'
        assert solve_text(text) == digits

    def test_fractional_result_with_huge_parts(self) -> None:
        y = 10**5000 + 1
        record = _record(2, [(1, 0), (3, y)])
        result = solve_record(record)
        assert result.denominator == 2
        assert result.format() == f"{-y}/2"


class TestNonStandardJsonConstants:
    """NaN / Infinity are not accepted as point values"""

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_rejected(self, constant: str) -> None:
        text = '{"keys": {"k": 1}, "1": {"value": ' + constant + ', "base": 36}}'
        with pytest.raises(MalformedInput):
            solve_text(text)
