"""Tests for random string-set generation."""

import random

import pytest

from wildcsp.datasets.synthetic import (
    generate_string_set,
    generate_string_set_from_params,
)


def test_generated_set_shape():
    s = generate_string_set(7, 5, seed=1)
    assert s.string_length == 7
    assert s.num_strings == 5
    assert all(set(x) <= set("01*") for x in s)


def test_same_seed_same_set():
    assert generate_string_set(8, 6, seed=42) == generate_string_set(8, 6, seed=42)


def test_shared_rng_advances():
    rng = random.Random(5)
    a = generate_string_set(10, 3, rng=rng)
    b = generate_string_set(10, 3, rng=rng)
    assert a != b


def test_wildcard_rate_extremes():
    none = generate_string_set(6, 4, wildcard_rate=0.0, seed=3)
    assert none.get_statistics()["wildcards"] == 0
    full = generate_string_set(6, 4, wildcard_rate=1.0, seed=3)
    assert all(x == "******" for x in full)


def test_zero_strings():
    s = generate_string_set(4, 0, seed=1)
    assert s.num_strings == 0
    assert s.string_length == 4


@pytest.mark.parametrize(
    "n, m, rate",
    [(0, 3, None), (3, -1, None), (3, 3, 1.5), (3, 3, -0.1)],
)
def test_invalid_parameters(n, m, rate):
    with pytest.raises(ValueError):
        generate_string_set(n, m, wildcard_rate=rate, seed=1)


def test_from_params_reports_seed():
    s, params = generate_string_set_from_params(5, 4, seed=9)
    assert params["seed"] == 9
    assert params["n"] == 5
    assert params["m"] == 4
    assert params["wildcard_rate"] == pytest.approx(1 / 3)
    assert params["wildcards"] == s.get_statistics()["wildcards"]


def test_from_params_generates_reproducible_seed():
    s, params = generate_string_set_from_params(6, 3)
    assert isinstance(params["seed"], int)
    again, _ = generate_string_set_from_params(6, 3, seed=params["seed"])
    assert again == s
