from itertools import islice

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ntkit.kiss import Kiss, SuperKiss
from ntkit.mersenne import MersenneTwister
from ntkit.rand import RandomAlgorithm, RandState, randinit, set_rand_algorithm


def test_randinit_uses_kiss():
    state = randinit()
    assert state.algorithm is RandomAlgorithm.KISS
    assert state.name == "Kiss"


@pytest.mark.parametrize(
    ("algorithm", "name", "factory"),
    [
        (RandomAlgorithm.KISS, "Kiss", Kiss),
        (RandomAlgorithm.MERSENNE_TWISTER, "Mersenne_Twister", MersenneTwister),
        (RandomAlgorithm.SUPER_KISS, "Super_Kiss", SuperKiss),
    ],
)
def test_algorithm_matches_generator(algorithm, name, factory):
    state = set_rand_algorithm(algorithm)
    assert state.name == name
    reference = factory()
    assert [state.word() for _ in range(20)] == [reference.word() for _ in range(20)]


def test_integer_value_selects_algorithm():
    state = set_rand_algorithm(2)
    assert state.algorithm is RandomAlgorithm.MERSENNE_TWISTER


@pytest.mark.parametrize("unknown", [0, 4, 99, "nonsense"])
def test_unknown_algorithm_falls_back_to_kiss(unknown):
    state = set_rand_algorithm(unknown)
    assert state.algorithm is RandomAlgorithm.KISS
    assert state.word() == Kiss().word()


def test_fresh_states_repeat_sequence():
    a = randinit()
    b = randinit()
    assert list(islice(a, 10)) == list(islice(b, 10))


def test_words_fit_in_word_size():
    state = RandState()
    assert state.bits == 64
    assert all(0 <= w < 2**64 for w in islice(state, 100))


def test_randint_is_word_mod_m():
    state = randinit()
    reference = Kiss()
    for m in (1, 2, 7, 1000, 2**63):
        assert state.randint(m) == reference.word() % m


@settings(max_examples=50)
@given(st.integers(min_value=1, max_value=2**64))
def test_randint_in_range(m):
    state = randinit()
    value = state.randint(m)
    assert 0 <= value < m


@pytest.mark.parametrize("m", [0, -5])
def test_randint_rejects_non_positive(m):
    with pytest.raises(ValueError):
        randinit().randint(m)