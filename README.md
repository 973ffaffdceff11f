# ntkit

A pure-Python toolkit for integer arithmetic and reproducible randomised
testing. It contains:

- **`ntkit.zz`**: `ZZ`, an immutable signed integer whose *size* is counted
  in 64-bit words (negative for negative values). It supports `+`, `-`, `*`,
  `//`, `%`, `divmod`, `<<`, `>>`, `abs`, negation and ordering. Division
  rounds towards minus infinity and raises `ZeroDivisionError` for a zero
  divisor; `>>` shifts the absolute value and keeps the sign. The comparison
  helpers `cmp`, `cmpi` and `cmpabs` return the difference of the word sizes
  when those differ, and otherwise the sign of the comparison; `equali` and
  `is_zero` test for equality. `ZZ.random(state, words)` draws a random value
  of at most `abs(words)` words, negative with probability one half when
  `words` is negative.
- **Decimal text**: `parse(text)` reads a leading decimal integer (with an
  optional `-`) and returns the value together with the number of characters
  consumed; `ZZ.from_str(text)` accepts only a whole decimal string and raises
  `ValueError` otherwise.
- **`ntkit.numtheory`**: `powi`, `gcd` and `xgcd` on `ZZ` or `int` values.
  `gcd(0, b)` is `b` and `gcd(a, 0)` is `a`; otherwise the result is negative
  exactly when both arguments are negative. `xgcd` returns `(g, s, t)` with
  `g == a*s + b*t`.
- **`ntkit.rand`**: `RandState`, a random word stream selected by
  `RandomAlgorithm` (`KISS`, `MERSENNE_TWISTER`, `SUPER_KISS`). Every state
  starts from a fixed seed. `randinit()` returns a KISS state and
  `set_rand_algorithm(algorithm)` a state for any algorithm; an unknown
  algorithm falls back to KISS.
- **`ntkit.kiss`** and **`ntkit.mersenne`**: the generators themselves,
  `Kiss`, `SuperKiss` and `MersenneTwister`, each in a 64-bit (default) or
  32-bit flavour via `bits=`. `MersenneTwister` can also be seeded with
  `init_genrand(seed)` or `init_by_array(key)`.
- **`ntkit.sha1`**: an incremental `Sha1` hasher (`update`, `digest`,
  `hexdigest`, `copy`) and a one-shot `sha1(data)`.
- **`ntkit.samplers`**: helpers that draw random words skewed towards edge
  cases (sparse words and differences of sparse words as well as uniform
  ones). `randoms` accepts `Flag.ANY`, `Flag.NONZERO`, `Flag.ODD` and
  `Flag.NORMALISED` (top bit set); `randoms_upto` accepts `Flag.ANY`,
  `Flag.NONZERO` and `Flag.ODD`. Other flags raise `ValueError`.

## Installation

```
pip install ntkit
```

To install the test tools as well:

```
pip install "ntkit[test]"
```

## Examples

### Integers

```python
from ntkit.zz import ZZ, parse

a, consumed = parse("-123456789012345678901234567890")
b = ZZ(97)

q, r = divmod(a, b)       # q*b + r == a, and 0 <= r < b for positive b
assert q * b + r == a
print(str(a << 64))       # shift left by 64 bits
print(a.cmpi(0) < 0)      # True: a is negative
print(a.size)             # -2: two words, negative
```

### Number theory

```python
from ntkit.zz import ZZ
from ntkit.numtheory import gcd, powi, xgcd

g = gcd(ZZ(84), ZZ(36))          # ZZ(12)
g, s, t = xgcd(ZZ(240), ZZ(46))  # g == 240*s + 46*t
big = powi(ZZ(3), 200)
```

### Random words

```python
from ntkit.rand import RandState, RandomAlgorithm, randinit

state = randinit()                          # KISS with its default seed
first = state.word()                        # a 64-bit word
dice = state.randint(6)                     # 0..5

mt = RandState(RandomAlgorithm.MERSENNE_TWISTER)
```

Each generator starts from a fixed seed, so the same program always sees the
same sequence. Creating a `SuperKiss` state fills a table of tens of thousands
of words, so it takes noticeably longer than the others.

### SHA-1

```python
from ntkit.sha1 import Sha1, sha1

assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"

h = Sha1(b"ab")
h.update(b"c")
print(h.hexdigest())
```

### Sampling test inputs

```python
from ntkit.rand import randinit
from ntkit.samplers import Flag, randoms, randoms_upto

state = randinit()
odd_words = randoms(Flag.ODD, state, 3)            # three odd random words
small = randoms_upto(100, Flag.NONZERO, state, 2)  # two values in 1..99
```

## What it does not do

- There are no word-array routines: `ZZ` works on whole integers only, and no
  operations on raw sequences of machine words are exposed.
- The samplers produce single words only; there is no helper that builds
  random multi-word values with a given property other than `ZZ.random`.
- SHA-1 works on whole bytes; bit strings that are not a multiple of eight
  bits cannot be hashed.
- There is no command-line program; the package is a library.

## Running the tests

```
pip install "ntkit[test]"
pytest
```