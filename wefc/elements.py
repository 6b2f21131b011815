"""Closed algebra over scalars, source-group points and target-group elements.

``AlgebraicElement`` tags a value from :mod:`wefc.betterpairing` with its
``ElementKind`` so that matrix/vector routines (hash-key projection, the
verifier and prover hashes) can be written once for every operand type.

The operator tables below are the whole algebra. Any operand pair missing from
a table is a construction bug and raises :class:`InvalidOperation`::

    *   Scalar x Scalar        -> Scalar
        Scalar x {G1, G2, Gt}  -> same group (both orders)
        G1 x G2, G2 x G1       -> Gt (pairing)
    +   Scalar + Scalar, Gt + Gt
    -   Gt - Gt

Gt is written additively here even though ``GT`` is multiplicative.
"""
from enum import Enum
from functools import reduce

from wefc.betterpairing import G1, G2, GT, ZR, pair
from wefc.exceptions import DimensionMismatch, InvalidOperation


class ElementKind(Enum):
    SCALAR = "scalar"
    G1 = "g1"
    G2 = "g2"
    GT = "gt"


_KIND_OF_TYPE = {
    ZR: ElementKind.SCALAR,
    G1: ElementKind.G1,
    G2: ElementKind.G2,
    GT: ElementKind.GT,
}


class AlgebraicElement:
    __slots__ = ("kind", "value")

    def __init__(self, kind, value):
        if _KIND_OF_TYPE.get(type(value)) is not kind:
            raise TypeError(f"{type(value).__name__} value cannot be tagged {kind}")
        self.kind = kind
        self.value = value

    @classmethod
    def wrap(cls, value):
        if type(value) is int:
            value = ZR(value)
        if type(value) not in _KIND_OF_TYPE:
            raise TypeError(f"Cannot wrap {type(value).__name__}")
        return cls(_KIND_OF_TYPE[type(value)], value)

    @classmethod
    def scalar(cls, value):
        return cls(ElementKind.SCALAR, ZR(value))

    @classmethod
    def g1(cls, value):
        return cls(ElementKind.G1, value)

    @classmethod
    def g2(cls, value):
        return cls(ElementKind.G2, value)

    @classmethod
    def gt(cls, value):
        return cls(ElementKind.GT, value)

    def __mul__(self, other):
        return multiply(self, other)

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return subtract(self, other)

    def __eq__(self, other):
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __repr__(self):
        return f"AlgebraicElement({self.kind.value}, {self.value!r})"


def _scalar_action(scalar, element):
    return element ** scalar


_MULTIPLICATION = {
    (ElementKind.SCALAR, ElementKind.SCALAR): (
        ElementKind.SCALAR,
        lambda a, b: a * b,
    ),
    (ElementKind.SCALAR, ElementKind.G1): (ElementKind.G1, _scalar_action),
    (ElementKind.SCALAR, ElementKind.G2): (ElementKind.G2, _scalar_action),
    (ElementKind.SCALAR, ElementKind.GT): (ElementKind.GT, _scalar_action),
    (ElementKind.G1, ElementKind.SCALAR): (
        ElementKind.G1,
        lambda a, b: _scalar_action(b, a),
    ),
    (ElementKind.G2, ElementKind.SCALAR): (
        ElementKind.G2,
        lambda a, b: _scalar_action(b, a),
    ),
    (ElementKind.GT, ElementKind.SCALAR): (
        ElementKind.GT,
        lambda a, b: _scalar_action(b, a),
    ),
    (ElementKind.G1, ElementKind.G2): (ElementKind.GT, lambda a, b: pair(a, b)),
    (ElementKind.G2, ElementKind.G1): (ElementKind.GT, lambda a, b: pair(b, a)),
}

_ADDITION = {
    (ElementKind.SCALAR, ElementKind.SCALAR): (
        ElementKind.SCALAR,
        lambda a, b: a + b,
    ),
    (ElementKind.GT, ElementKind.GT): (ElementKind.GT, lambda a, b: a * b),
}

_SUBTRACTION = {
    (ElementKind.GT, ElementKind.GT): (ElementKind.GT, lambda a, b: a / b),
}


def _apply(table, symbol, a, b):
    try:
        kind, op = table[(a.kind, b.kind)]
    except KeyError:
        raise InvalidOperation(
            f"{a.kind.value} {symbol} {b.kind.value} is not defined"
        ) from None
    return AlgebraicElement(kind, op(a.value, b.value))


def multiply(a, b):
    return _apply(_MULTIPLICATION, "*", a, b)


def add(a, b):
    return _apply(_ADDITION, "+", a, b)


def subtract(a, b):
    return _apply(_SUBTRACTION, "-", a, b)


def zero(kind):
    """Identity element of ``kind``."""
    if kind is ElementKind.SCALAR:
        return AlgebraicElement.scalar(0)
    elif kind is ElementKind.G1:
        return AlgebraicElement.g1(G1.one())
    elif kind is ElementKind.G2:
        return AlgebraicElement.g2(G2.one())
    return AlgebraicElement.gt(GT.one())


_PAIRED_KIND = {
    ElementKind.SCALAR: ElementKind.SCALAR,
    ElementKind.G1: ElementKind.G2,
    ElementKind.G2: ElementKind.G1,
    ElementKind.GT: ElementKind.SCALAR,
}


def partner_zero(kind):
    """Identity of the kind that an entry of ``kind`` is multiplied with.

    Gt entries are scaled by scalars and G1/G2 entries are paired with the
    other source group, so the product of an entry and its partner zero is
    always an identity.
    """
    return zero(_PAIRED_KIND[kind])


def summation(terms):
    """Sum a non-empty list of elements of one kind.

    Source-group points are summed with the curve's group law. This is the only
    place where G1/G2 points are added; ``add`` itself never accepts them.
    """
    terms = list(terms)
    if not terms:
        raise DimensionMismatch("Cannot sum an empty list of elements")
    kind = terms[0].kind
    for term in terms:
        if term.kind is not kind:
            raise InvalidOperation(
                f"Cannot sum {term.kind.value} together with {kind.value}"
            )
    if kind in (ElementKind.G1, ElementKind.G2):
        return AlgebraicElement(
            kind, reduce(lambda acc, t: acc * t, (t.value for t in terms))
        )
    return reduce(add, terms)


def inner_product(left, right):
    if len(left) != len(right):
        raise DimensionMismatch(
            f"Inner product of vectors of length {len(left)} and {len(right)}"
        )
    if not left:
        raise DimensionMismatch("Inner product of empty vectors")
    return reduce(add, (multiply(a, b) for a, b in zip(left, right)))
