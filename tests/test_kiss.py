from itertools import islice

import pytest

from ntkit.kiss import Kiss, SuperKiss


@pytest.mark.parametrize("cls", [Kiss, SuperKiss])
@pytest.mark.parametrize("bits", [0, 16, 63, 128])
def test_invalid_word_size_rejected(cls, bits):
    with pytest.raises(ValueError):
        cls(bits=bits)


@pytest.mark.parametrize("bits", [32, 64])
def test_kiss_is_deterministic(bits):
    first = [Kiss(bits).word() for _ in range(1)]
    a, b = Kiss(bits), Kiss(bits)
    seq_a = [a.word() for _ in range(200)]
    seq_b = [b.word() for _ in range(200)]
    assert seq_a == seq_b
    assert seq_a[0] == first[0]


@pytest.mark.parametrize("bits", [32, 64])
def test_kiss_words_fit_in_word(bits):
    gen = Kiss(bits)
    words = [gen.word() for _ in range(1000)]
    assert all(0 <= w < (1 << bits) for w in words)


def test_kiss64_uses_full_width():
    gen = Kiss(64)
    words = [gen.word() for _ in range(50)]
    assert max(words) >= 1 << 32
    assert len(set(words)) == len(words)


@pytest.mark.parametrize("bits", [32, 64])
def test_kiss_iteration_matches_word(bits):
    gen = Kiss(bits)
    expected = [gen.word() for _ in range(25)]
    assert list(islice(iter(Kiss(bits)), 25)) == expected


def test_kiss_instances_are_independent():
    a, b = Kiss(), Kiss()
    for _ in range(10):
        a.word()
    reference = Kiss()
    assert [b.word() for _ in range(5)] == [reference.word() for _ in range(5)]


@pytest.mark.parametrize("bits", [32, 64])
def test_super_kiss_is_deterministic(bits):
    a, b = SuperKiss(bits), SuperKiss(bits)
    assert [a.word() for _ in range(100)] == [b.word() for _ in range(100)]


@pytest.mark.parametrize("bits", [32, 64])
def test_super_kiss_survives_refill(bits):
    gen = SuperKiss(bits)
    size = {32: 41265, 64: 20632}[bits]
    words = [gen.word() for _ in range(size + 50)]
    assert all(0 <= w < (1 << bits) for w in words)
    tail = words[size - 10:]
    assert len(set(tail)) == len(tail)
    again = SuperKiss(bits)
    assert [again.word() for _ in range(size + 50)] == words


def test_super_kiss_iteration_matches_word():
    gen = SuperKiss(64)
    expected = [gen.word() for _ in range(20)]
    assert list(islice(SuperKiss(64), 20)) == expected


def test_super_kiss_differs_from_kiss():
    kiss_words = list(islice(Kiss(64), 20))
    super_words = list(islice(SuperKiss(64), 20))
    assert len(set(kiss_words) | set(super_words)) == 40