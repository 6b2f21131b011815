import random
from hashlib import sha256

from gmpy2 import invert, mpz
from py_ecc.bls.hash_to_curve import hash_to_G1, hash_to_G2
from py_ecc.optimized_bls12_381 import (
    FQ12,
    G1 as G1_GENERATOR,
    G2 as G2_GENERATOR,
    Z1,
    Z2,
    add,
    curve_order,
    eq,
    field_modulus,
    is_inf,
    multiply,
    neg,
    normalize,
    pairing,
)

# Order of BLS group
bls12_381_r = curve_order

FQ_BYTES = 48


def pair(g1, g2):
    assert type(g1) is G1 and type(g2) is G2
    return GT(pairing(g2.pt, g1.pt))


def system_rng():
    return random.SystemRandom()


def _exponent(other):
    if type(other) is ZR:
        return int(other)
    elif type(other) is int:
        return other % bls12_381_r
    raise TypeError(
        "Invalid exponentiation param. Expected ZR or int. Got " + str(type(other))
    )


def _fq_to_bytes(value):
    return (int(value) % field_modulus).to_bytes(FQ_BYTES, "big")


class G1:
    def __init__(self, other=None):
        if other is None:
            self.pt = Z1
        elif type(other) is tuple:
            assert len(other) == 3
            self.pt = other
        else:
            raise TypeError(str(type(other)))

    def __str__(self):
        if is_inf(self.pt):
            return "(inf)"
        x, y = normalize(self.pt)
        return "(" + str(int(x)) + ", " + str(int(y)) + ")"

    def __repr__(self):
        return str(self)

    def __mul__(self, other):
        if type(other) is G1:
            return G1(add(self.pt, other.pt))
        raise TypeError(
            "Invalid multiplication param. Expected G1. Got " + str(type(other))
        )

    def __truediv__(self, other):
        if type(other) is G1:
            return G1(add(self.pt, neg(other.pt)))
        raise TypeError("Invalid division param. Expected G1. Got " + str(type(other)))

    def __pow__(self, other):
        return G1(multiply(self.pt, _exponent(other)))

    def __eq__(self, other):
        if type(other) is not G1:
            return False
        return eq(self.pt, other.pt)

    def to_bytes(self):
        if is_inf(self.pt):
            return bytes(2 * FQ_BYTES)
        x, y = normalize(self.pt)
        return _fq_to_bytes(x) + _fq_to_bytes(y)

    def invert(self):
        return G1(neg(self.pt))

    def is_identity(self):
        return is_inf(self.pt)

    @staticmethod
    def one():
        return G1(Z1)

    @staticmethod
    def generator():
        return G1(G1_GENERATOR)

    @staticmethod
    def rand(rng=None):
        return G1.generator() ** ZR.random(rng)

    # RFC 9380 hash-to-curve, domain-separated by dst
    @staticmethod
    def hash(bytestr, dst=b"wefc"):
        assert type(bytestr) is bytes and type(dst) is bytes
        return G1(hash_to_G1(bytestr, dst, sha256))


class G2:
    def __init__(self, other=None):
        if other is None:
            self.pt = Z2
        elif type(other) is tuple:
            assert len(other) == 3
            self.pt = other
        else:
            raise TypeError(str(type(other)))

    def __str__(self):
        if is_inf(self.pt):
            return "(inf)"
        x, y = normalize(self.pt)
        x1, x2 = x.coeffs
        y1, y2 = y.coeffs
        return (
            "("
            + str(int(x1))
            + " + "
            + str(int(x2))
            + "u, "
            + str(int(y1))
            + " + "
            + str(int(y2))
            + "u)"
        )

    def __repr__(self):
        return str(self)

    def __mul__(self, other):
        if type(other) is G2:
            return G2(add(self.pt, other.pt))
        raise TypeError(
            "Invalid multiplication param. Expected G2. Got " + str(type(other))
        )

    def __truediv__(self, other):
        if type(other) is G2:
            return G2(add(self.pt, neg(other.pt)))
        raise TypeError("Invalid division param. Expected G2. Got " + str(type(other)))

    def __pow__(self, other):
        return G2(multiply(self.pt, _exponent(other)))

    def __eq__(self, other):
        if type(other) is not G2:
            return False
        return eq(self.pt, other.pt)

    def to_bytes(self):
        if is_inf(self.pt):
            return bytes(4 * FQ_BYTES)
        x, y = normalize(self.pt)
        return b"".join(_fq_to_bytes(c) for c in x.coeffs + y.coeffs)

    def invert(self):
        return G2(neg(self.pt))

    def is_identity(self):
        return is_inf(self.pt)

    @staticmethod
    def one():
        return G2(Z2)

    @staticmethod
    def generator():
        return G2(G2_GENERATOR)

    @staticmethod
    def rand(rng=None):
        return G2.generator() ** ZR.random(rng)

    # RFC 9380 hash-to-curve, domain-separated by dst
    @staticmethod
    def hash(bytestr, dst=b"wefc"):
        assert type(bytestr) is bytes and type(dst) is bytes
        return G2(hash_to_G2(bytestr, dst, sha256))


class GT:
    _generator = None

    def __init__(self, other=None):
        if other is None:
            self.fq12 = FQ12.one()
        elif type(other) is FQ12:
            self.fq12 = other
        elif type(other) is int:
            self.fq12 = FQ12([other] + [0] * 11)
        else:
            raise TypeError(str(type(other)))

    def __str__(self):
        return "(" + ", ".join(str(int(c)) for c in self.fq12.coeffs) + ")"

    def __repr__(self):
        return str(self)

    def __pow__(self, other):
        return GT(self.fq12 ** _exponent(other))

    def __mul__(self, other):
        if type(other) is GT:
            return GT(self.fq12 * other.fq12)
        raise TypeError(
            "Invalid multiplication param. Expected GT. Got " + str(type(other))
        )

    def __truediv__(self, other):
        if type(other) is GT:
            return GT(self.fq12 / other.fq12)
        raise TypeError("Invalid division param. Expected GT. Got " + str(type(other)))

    def __eq__(self, other):
        if type(other) is not GT:
            return False
        return self.fq12 == other.fq12

    def to_bytes(self):
        return b"".join(_fq_to_bytes(c) for c in self.fq12.coeffs)

    def invert(self):
        return GT(self.fq12.inv())

    def is_identity(self):
        return self.fq12 == FQ12.one()

    @staticmethod
    def one():
        return GT(FQ12.one())

    @staticmethod
    def generator():
        # e(g1, g2) costs a full pairing, compute it once
        if GT._generator is None:
            GT._generator = pair(G1.generator(), G2.generator())
        return GT(GT._generator.fq12)

    @staticmethod
    def rand(rng=None):
        return GT.generator() ** ZR.random(rng)


class ZR:
    def __init__(self, val=None):
        if val is None:
            self.val = 0
        elif type(val) is int:
            self.val = val % bls12_381_r
        elif type(val) is str:
            if val[0:2] == "0x":
                intval = int(val, 0)
            else:
                intval = int(val)
            self.val = intval % bls12_381_r
        elif type(val) is ZR:
            self.val = val.val
        else:
            raise TypeError(str(type(val)))

    def __str__(self):
        return str(self.val)

    def __repr__(self):
        return str(self)

    def __int__(self):
        return self.val

    def __hash__(self):
        return hash(self.val)

    def __add__(self, other):
        if type(other) in (ZR, int):
            return ZR(self.val + ZR(other).val)
        raise TypeError(
            "Invalid addition param. Expected ZR or int. Got " + str(type(other))
        )

    def __radd__(self, other):
        assert type(other) is int
        return self.__add__(ZR(other))

    def __sub__(self, other):
        if type(other) in (ZR, int):
            return ZR(self.val - ZR(other).val)
        raise TypeError(
            "Invalid subtraction param. Expected ZR or int. Got " + str(type(other))
        )

    def __rsub__(self, other):
        assert type(other) is int
        return ZR(other).__sub__(self)

    def __mul__(self, other):
        if type(other) in (ZR, int):
            return ZR(self.val * ZR(other).val)
        raise TypeError(
            "Invalid multiplication param. Expected ZR or int. Got "
            + str(type(other))
        )

    def __rmul__(self, other):
        assert type(other) is int
        return self.__mul__(ZR(other))

    def __truediv__(self, other):
        if type(other) in (ZR, int):
            divisor = ZR(other).val
            if divisor == 0:
                raise ZeroDivisionError("ZR division by zero")
            return ZR(self.val * int(invert(mpz(divisor), mpz(bls12_381_r))))
        raise TypeError(
            "Invalid division param. Expected ZR or int. Got " + str(type(other))
        )

    def __rtruediv__(self, other):
        return ZR(other).__truediv__(self)

    def __pow__(self, other):
        if type(other) is int:
            if other < 0:
                return ZR(1) / ZR(pow(self.val, -other, bls12_381_r))
            return ZR(pow(self.val, other, bls12_381_r))
        elif type(other) is ZR:
            raise TypeError(
                "Invalid exponentiation param. Expected int. Got ZR. This is not a bug"
            )
        raise TypeError(
            "Invalid exponentiation param. Expected int. Got " + str(type(other))
        )

    def __neg__(self):
        return ZR(-self.val)

    def __eq__(self, other):
        if type(other) is int:
            other = ZR(other)
        if type(other) is not ZR:
            return False
        return self.val == other.val

    @staticmethod
    def random(rng=None):
        if rng is None:
            rng = system_rng()
        return ZR(rng.randint(0, bls12_381_r - 1))

    @staticmethod
    def zero():
        return ZR(0)

    @staticmethod
    def one():
        return ZR(1)
