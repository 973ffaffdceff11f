import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ntkit.sha1 import Sha1, sha1


def test_empty_message():
    assert Sha1().hexdigest() == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_abc():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_digest_size():
    assert len(sha1(b"some data")) == Sha1.digest_size == 20


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries_match_stdlib(length):
    data = bytes(i % 251 for i in range(length))
    assert sha1(data) == hashlib.sha1(data).digest()


@settings(max_examples=100)
@given(st.binary(max_size=500))
def test_matches_stdlib(data):
    assert sha1(data) == hashlib.sha1(data).digest()


@settings(max_examples=100)
@given(st.lists(st.binary(max_size=100), max_size=10))
def test_incremental_equals_one_shot(chunks):
    hasher = Sha1()
    for chunk in chunks:
        hasher.update(chunk)
    assert hasher.digest() == sha1(b"".join(chunks))


def test_digest_does_not_finalise():
    hasher = Sha1(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == sha1(b"hello world")


def test_copy_is_independent():
    original = Sha1(b"prefix")
    clone = original.copy()
    clone.update(b"-more")
    assert original.digest() == sha1(b"prefix")
    assert clone.digest() == sha1(b"prefix-more")


def test_hexdigest_matches_digest():
    hasher = Sha1(b"x" * 200)
    assert bytes.fromhex(hasher.hexdigest()) == hasher.digest()


def test_accepts_memoryview_and_bytearray():
    data = b"abcdefgh" * 20
    assert sha1(memoryview(data)) == sha1(bytearray(data)) == sha1(data)