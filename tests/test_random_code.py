"""
Testing the secret generator.
"""

import pytest

import mastermind.random_code as random_code
from mastermind.config import CODE_LENGTH, MAX_DIGIT, MIN_DIGIT


def test_generate_code_shape_and_range():
    for _ in range(200):
        code = random_code.generate_code()
        assert isinstance(code, tuple)
        assert len(code) == CODE_LENGTH
        assert all(MIN_DIGIT <= digit <= MAX_DIGIT for digit in code)


def test_generate_code_covers_every_digit():
    seen = set()
    for _ in range(500):
        seen.update(random_code.generate_code())
    assert seen == set(range(MIN_DIGIT, MAX_DIGIT + 1))


def test_generate_code_maps_randbelow_into_range(monkeypatch):
    # randbelow(6) -> 0..5 must land on 1..6
    draws = iter([0, 5, 2, 3])
    monkeypatch.setattr(random_code, "randbelow", lambda span: next(draws))

    assert random_code.generate_code() == (1, 6, 3, 4)


def test_generate_code_rejects_non_positive_length():
    with pytest.raises(ValueError):
        random_code.generate_code(0)
