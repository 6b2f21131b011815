"""Smooth projective hash functions over pairing-friendly languages.

A language is a matrix ``gamma`` (m x k) of ``AlgebraicElement``. A word is
described by ``theta`` (length m, public) and, for whoever knows a witness,
by ``lam`` (length k) with ``gamma . lam == theta``. With a secret hashing
key ``hk`` (m scalars) and its projection ``hp = hk . gamma``::

    verifier_hash(hk, theta) == hk . theta == hk . gamma . lam == prover_hash(hp, lam)

Both hashes land in Gt. Off the language the verifier's value looks uniform
to anyone holding only ``hp``.

Conjunction and disjunction combine exactly two languages.
"""
import logging
from collections import namedtuple

from wefc.betterpairing import G1, G2, GT, pair
from wefc.config import CipherConfig
from wefc.elements import (
    AlgebraicElement,
    ElementKind,
    inner_product,
    partner_zero,
    summation,
    zero,
)
from wefc.exceptions import DimensionMismatch, InvalidOperation, Unsupported
from wefc.func_commit import functional_base
from wefc.matrix import Matrix, check_vector
from wefc.utils import random_scalar

BaseGenerators = namedtuple("BaseGenerators", ["g1", "g2", "h1", "h2"])
Word = namedtuple("Word", ["c1", "d1", "c2", "d2"])
Witness = namedtuple("Witness", ["r1", "r2", "m1", "m2"])


def _gt_result(element, name):
    if element.kind is not ElementKind.GT:
        raise InvalidOperation(
            f"{name} reduced to a {element.kind.value} element instead of gt"
        )
    return element.value


# Functional commitment language


def language_for_functional_commitment(cm, key):
    """1x2 language ``[cm, g2]`` of commitments opening to a claimed value.

    Matching words are ``theta = [e(u1[0], u2[n-1]) ** y]`` and
    ``lam = [sum(beta[i] * u2[n-1-i]), opening ** -1]``, which is the
    verification equation of :class:`LinearFuncCommit` rearranged.
    """
    assert type(cm) is G1
    assert key.n >= 1
    return Matrix.from_rows(
        [[AlgebraicElement.g1(cm), AlgebraicElement.g2(G2.generator())]]
    )


def theta_for_functional_commitment(key, y):
    return [AlgebraicElement.gt(pair(key.u1[0], key.u2[key.n - 1] ** y))]


def lambda_for_functional_commitment(key, beta, opening):
    assert type(opening) is G1
    return [
        AlgebraicElement.g2(functional_base(key, beta)),
        AlgebraicElement.g1(opening.invert()),
    ]


# Independent two-message language


def random_base_generators(rng=None):
    return BaseGenerators(
        G1.generator() ** random_scalar(rng),
        G2.generator() ** random_scalar(rng),
        G1.generator() ** random_scalar(rng),
        G2.generator() ** random_scalar(rng),
    )


def language_for_word(base_generators=None, rng=None):
    """4x3 language of pairs of ElGamal-style encryptions, one in each group.

    Returns ``(base_generators, gamma)``; fresh generators are drawn when none
    are given.
    """
    if base_generators is None:
        base_generators = random_base_generators(rng)
    g1, g2, h1, h2 = base_generators
    gt_1 = AlgebraicElement.gt(GT.one())
    g1_1 = AlgebraicElement.g1(G1.one())
    g2_1 = AlgebraicElement.g2(G2.one())
    gamma = Matrix.from_rows(
        [
            [AlgebraicElement.gt(pair(g1, g2)), g1_1, g2_1],
            [gt_1, AlgebraicElement.g1(g1), g2_1],
            [gt_1, g1_1, AlgebraicElement.g2(g2)],
            [
                AlgebraicElement.gt(pair(h1, h2)),
                AlgebraicElement.g1(h1),
                AlgebraicElement.g2(h2),
            ],
        ]
    )
    return base_generators, gamma


def _messages_to_curve(msg1, msg2, config):
    config = config or CipherConfig.load()
    return (
        G1.hash(msg1.encode("utf-8"), config.hash_domain),
        G2.hash(msg2.encode("utf-8"), config.hash_domain),
    )


def generate_word(base_generators, msg1, msg2, rng=None, config=None):
    m1, m2 = _messages_to_curve(msg1, msg2, config)
    r1 = random_scalar(rng)
    r2 = random_scalar(rng)
    g1, g2, h1, h2 = base_generators
    witness = Witness(r1, r2, m1, m2)
    word = Word(g1 ** r1, h1 ** r1 * m1, g2 ** r2, h2 ** r2 * m2)
    return witness, word


def theta_for_word(word, msg1, msg2, config=None):
    m1, m2 = _messages_to_curve(msg1, msg2, config)
    return [
        AlgebraicElement.gt(pair(word.c1.invert(), word.c2)),
        AlgebraicElement.gt(pair(word.c1, word.d2)),
        AlgebraicElement.gt(pair(word.d1, word.c2)),
        AlgebraicElement.gt(pair(word.d1, word.d2) / pair(m1, m2)),
    ]


def lambda_for_word(witness, word):
    r1 = AlgebraicElement.scalar(witness.r1)
    r2 = AlgebraicElement.scalar(witness.r2)
    return [
        AlgebraicElement.scalar(-witness.r1) * r2,
        r1 * AlgebraicElement.g2(word.d2),
        r2 * AlgebraicElement.g1(word.d1),
    ]


# Hashing


def generate_hash_keys(gamma, rng=None):
    """Draw ``hk`` (one scalar per row) and project it to ``hp = hk . gamma``."""
    hk = [AlgebraicElement.scalar(random_scalar(rng)) for _ in range(gamma.nrows)]
    hp = [
        summation(h * entry for h, entry in zip(hk, gamma.column(j)))
        for j in range(gamma.ncols)
    ]
    logging.debug(
        f"[SPHF] Generated hash keys for a {gamma.nrows}x{gamma.ncols} language"
    )
    return hk, hp


def verifier_hash(hk, theta):
    check_vector(theta, len(hk), "theta")
    return _gt_result(inner_product(hk, theta), "verifier hash")


def prover_hash(hp, lambdas, selected_witness=None, widths=None):
    """Hash a word from the projection key and witness-derived ``lambdas``.

    ``lambdas`` is either one vector or a list with one vector per combined
    language. Without ``selected_witness`` the vectors are concatenated, which
    is the layout of a single language or a conjunction. With
    ``selected_witness`` in ``{0, 1}`` they are laid out for a disjunction and
    only the selected vector is read; the other entry may be ``None``.
    ``widths`` then gives the column counts of the two combined languages.
    """
    if lambdas and isinstance(lambdas[0], AlgebraicElement):
        lambdas = [lambdas]
    if selected_witness is None:
        lam = [entry for block in lambdas for entry in block]
    else:
        lam = disjunction_lambda(hp, lambdas, selected_witness, widths)
    check_vector(lam, len(hp), "lambda")
    return _gt_result(inner_product(hp, lam), "prover hash")


# Combinators


def _padding(kinds):
    return [zero(kind) for kind in kinds]


def conjunction(gamma1, gamma2):
    """Block-diagonal language whose words need a witness for both parts."""
    kinds1 = gamma1.column_kinds()
    kinds2 = gamma2.column_kinds()
    rows = [row + _padding(kinds2) for row in gamma1.rows()]
    rows += [_padding(kinds1) + row for row in gamma2.rows()]
    return Matrix.from_rows(rows)


def conjunction_theta(theta1, theta2):
    return list(theta1) + list(theta2)


def disjunction(gamma1, gamma2, theta1, theta2):
    """Language whose words need a witness for either part.

    The sub-words' ``theta`` vectors become extra columns, so ``hp`` does not
    reveal which part the prover can open. The first row is the slack row
    that forces the prover to spend its ``-1`` on one of those columns.
    """
    check_vector(theta1, gamma1.nrows, "theta1", ElementKind.GT)
    check_vector(theta2, gamma2.nrows, "theta2", ElementKind.GT)
    kinds1 = gamma1.column_kinds()
    kinds2 = gamma2.column_kinds()
    gt_1 = zero(ElementKind.GT)
    gt_g = AlgebraicElement.gt(GT.generator())

    rows = [_padding(kinds1) + [gt_g] + _padding(kinds2) + [gt_g]]
    for i, row in enumerate(gamma1.rows()):
        rows.append(row + [theta1[i]] + _padding(kinds2) + [gt_1])
    for i, row in enumerate(gamma2.rows()):
        rows.append(_padding(kinds1) + [gt_1] + row + [theta2[i]])
    return Matrix.from_rows(rows)


def disjunction_theta(gamma):
    """The fixed verifier word ``[-g_T, 0, ..., 0]`` (additive notation)."""
    theta = [AlgebraicElement.gt(GT.generator().invert())]
    theta += [zero(ElementKind.GT) for _ in range(gamma.nrows - 1)]
    return theta


def disjunction_lambda(hp, lambdas, selected_witness, widths):
    """Lay out the prover vector of a disjunction for the selected part.

    The unselected part gets identities of the right kind and a zero
    coefficient on its ``theta`` column, so its real witness is never needed.
    """
    if selected_witness not in (0, 1):
        raise Unsupported(
            f"Only witness 0 or 1 can be selected, got {selected_witness!r}"
        )
    if len(lambdas) != 2:
        raise DimensionMismatch(
            f"A disjunction combines two languages, got {len(lambdas)} witnesses"
        )
    if widths is None or len(widths) != 2:
        raise DimensionMismatch(
            f"A disjunction needs the widths of both languages, got {widths!r}"
        )
    k1, k2 = widths
    if len(hp) != k1 + k2 + 2:
        raise DimensionMismatch(
            f"Projection key of length {len(hp)} does not fit languages of "
            f"widths {k1} and {k2}"
        )
    selected = lambdas[selected_witness]
    if selected is None:
        raise DimensionMismatch("The selected witness is missing")
    check_vector(selected, widths[selected_witness], "selected lambda")
    minus_one = AlgebraicElement.scalar(-1)
    scalar_0 = zero(ElementKind.SCALAR)

    if selected_witness == 0:
        other_kinds = [entry.kind for entry in hp[k1 + 1 : k1 + 1 + k2]]
        return (
            list(selected)
            + [minus_one]
            + [partner_zero(kind) for kind in other_kinds]
            + [scalar_0]
        )
    other_kinds = [entry.kind for entry in hp[:k1]]
    return (
        [partner_zero(kind) for kind in other_kinds]
        + [scalar_0]
        + list(selected)
        + [minus_one]
    )
