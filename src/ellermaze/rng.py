import math
from dataclasses import dataclass
from typing import Any, List

# IEEE 754 limits for random()
WIDTH = 256                       # each keystream byte is 0 <= b < 256
CHUNKS = 6                        # at least six bytes per double
DIGITS = 52                       # significant digits in a double
MASK = WIDTH - 1
START_DENOM = float(WIDTH ** CHUNKS)
SIGNIFICANCE = float(2 ** DIGITS)
OVERFLOW = SIGNIFICANCE * 2


def _number_text(x: float) -> str:
    """Shortest round-trip text for a float, laid out the way JS prints numbers."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    mantissa, _, exp = repr(abs(x)).partition("e")
    whole, _, frac = mantissa.partition(".")
    combined = whole + frac
    digits = combined.strip("0")
    trailing = len(combined) - len(combined.rstrip("0"))
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = k + int(exp or 0) - len(frac) + trailing
    if k <= n <= 21:
        out = digits + "0" * (n - k)
    elif 0 < n <= 21:
        out = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        out = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        out = digits[0] + ("." + digits[1:] if k > 1 else "") + "e" + ("+" if e >= 0 else "-") + str(abs(e))
    return sign + out


def seed_text(seed: Any) -> str:
    """
    Coerce an arbitrary seed to the text the key mixer folds.
    Numbers use the JavaScript number-to-string layout (1.0 -> "1",
    1e-7 -> "1e-7"), so numeric seeds key the stream the same way a JS
    port of this generator does.
    """
    if isinstance(seed, str):
        return seed
    if seed is None:
        return "null"
    if isinstance(seed, bool):
        return "true" if seed else "false"
    if isinstance(seed, int):
        if abs(seed) < 2 ** 53:
            return str(seed)
        # beyond 2**53 a JS number has already rounded; print it as one
        try:
            return _number_text(float(seed))
        except OverflowError:
            return "Infinity" if seed > 0 else "-Infinity"
    if isinstance(seed, float):
        return _number_text(seed)
    if isinstance(seed, (list, tuple)):
        return ",".join("" if s is None else seed_text(s) for s in seed)
    return str(seed)


def _utf16_units(text: str) -> List[int]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[k] | (raw[k + 1] << 8) for k in range(0, len(raw), 2)]


def mix_key(text: str) -> List[int]:
    """Key bytes from seed text; every second code unit is folded in."""
    units = _utf16_units(text)
    if not units:
        return [0]
    key = [0] * (MASK & len(units))
    mix = 0
    for i in range(0, len(units), 2):
        k = MASK & i
        if k >= len(key):
            continue
        mix ^= key[k] * 19
        key[k] = MASK & (mix + units[i])
    return key


def schedule_key(key: List[int]) -> List[int]:
    """ARC4 key schedule: expand key into a 256-entry permutation."""
    s = list(range(WIDTH))
    keylen = len(key)
    j = 0
    for i in range(WIDTH):
        t = s[i]
        # A zero-length key (seed text of 256, 512, ... units) pins j at 0.
        j = MASK & (j + t + key[i % keylen]) if keylen else 0
        s[i] = s[j]
        s[j] = t
    return s


@dataclass
class SeedRandom:
    s: List[int]
    i: int = 0
    j: int = 0

    @classmethod
    def from_seed(cls, seed: Any) -> "SeedRandom":
        return cls(s=schedule_key(mix_key(seed_text(seed))))

    def next_byte(self) -> int:
        # one keystream step; every other draw is built from this
        s = self.s
        self.i = i = MASK & (self.i + 1)
        t = s[i]
        self.j = j = MASK & (self.j + t)
        s[i] = s[j]
        s[j] = t
        return s[MASK & (s[i] + t)]

    def next_int(self, count: int) -> int:
        """`count` bytes as one integer, earliest byte most significant."""
        r = 0
        for _ in range(count):
            r = r * WIDTH + self.next_byte()
        return r

    def random(self) -> float:
        """
        Uniform double in [0, 1) with randomness in every mantissa bit.
        n and d stay IEEE doubles throughout; a given seed yields the same
        sequence bit for bit on any platform.
        """
        n = float(self.next_int(CHUNKS))   # numerator < 2**48
        d = START_DENOM                    # denominator 2**48
        x = 0                              # pending low byte
        while n < SIGNIFICANCE:            # fill all significant digits
            n = (n + x) * WIDTH
            d *= WIDTH
            x = self.next_int(1)
        while n >= OVERFLOW:               # shift right before adding x so
            n /= 2                         # the sum cannot round up to 1
            d /= 2
            x >>= 1
        return (n + x) / d

    def randrange(self, n: int) -> int:
        assert n > 0
        return int(self.random() * n)
