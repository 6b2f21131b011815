import logging
from collections import namedtuple

from wefc.betterpairing import G1, G2, ZR, pair
from wefc.exceptions import DimensionMismatch
from wefc.utils import random_scalar, to_scalars


class CommitmentKey(namedtuple("CommitmentKey", ["u1", "u2"])):
    """Powers of the setup secret ``u`` in both source groups.

    ``u1[j] = g1 ** u ** (j + 1)`` for ``j < 2n`` except ``u1[n]``, which is the
    identity, and ``u2[j] = g2 ** u ** (j + 1)`` for ``j < n``.
    """

    __slots__ = ()

    @property
    def n(self):
        return len(self.u2)


Commitment = namedtuple("Commitment", ["cm", "r"])


def generate_key(n, rng=None, u=None):
    """Trusted single-party setup. ``u`` is dropped when this returns."""
    assert type(n) is int
    assert type(u) in (ZR, int, type(None))
    if n < 1:
        raise DimensionMismatch(f"Witness length must be at least 1, got {n}")
    if u is None:
        u = random_scalar(rng)
    u = ZR(u)
    g1 = G1.generator()
    g2 = G2.generator()
    u1 = [g1 ** (u ** (j + 1)) for j in range(2 * n)]
    # u1[n] would let anyone open to any value
    u1[n] = G1.one()
    u2 = [g2 ** (u ** (j + 1)) for j in range(n)]
    logging.debug(f"[FuncCommit] Generated commitment key for n={n}")
    return CommitmentKey(tuple(u1), tuple(u2))


def functional_base(key, beta):
    """``g2 ** sum(beta[i] * u ** (n - i))``, the G2 side of the opening check."""
    if len(beta) != key.n:
        raise DimensionMismatch(f"beta has length {len(beta)}, key has n={key.n}")
    base = G2.one()
    for i, beta_i in enumerate(to_scalars(beta)):
        base *= key.u2[key.n - 1 - i] ** beta_i
    return base


def compute_func(x, beta):
    """Evaluate the linear functional ``beta`` at ``x``."""
    if len(x) != len(beta):
        raise DimensionMismatch(f"len(x)={len(x)} but len(beta)={len(beta)}")
    y = ZR(0)
    for x_i, beta_i in zip(to_scalars(x), to_scalars(beta)):
        y += x_i * beta_i
    return y


class LinearFuncCommit:
    def __init__(self, key):
        assert type(key) is CommitmentKey
        self.key = key
        self.n = key.n
        self.g1 = G1.generator()
        self.g2 = G2.generator()
        # e(u1[0], u2[n-1]) = e(g1, g2) ** u ** (n + 1), the evaluation slot
        self.gt_base = pair(key.u1[0], key.u2[self.n - 1])

    def _check_length(self, vector, name):
        if len(vector) != self.n:
            raise DimensionMismatch(
                f"{name} has length {len(vector)}, key has n={self.n}"
            )

    def commit(self, x, rng=None):
        self._check_length(x, "x")
        x = to_scalars(x)
        r = random_scalar(rng)
        cm = self.g1 ** r
        for i in range(self.n):
            cm *= self.key.u1[i] ** x[i]
        return Commitment(cm, r)

    def open(self, x, r, beta):
        self._check_length(x, "x")
        self._check_length(beta, "beta")
        x = to_scalars(x)
        beta = to_scalars(beta)
        n = self.n
        u1 = self.key.u1
        opening = G1.one()
        for i in range(n):
            witness = u1[n - i - 1] ** r
            for j in range(n):
                # j == i lands on u1[n], the identity
                if j != i:
                    witness *= u1[n - i + j] ** x[j]
            opening *= witness ** beta[i]
        return opening

    def functional_base(self, beta):
        return functional_base(self.key, beta)

    def verify(self, cm, opening, beta, y):
        lhs = pair(cm, self.functional_base(beta))
        rhs = pair(opening, self.g2) * self.gt_base ** ZR(y)
        if lhs != rhs:
            logging.debug("[FuncCommit] Opening rejected")
            return False
        return True

    # Folds the checks with random weights so a batch costs two pairings.
    def batch_verify(self, commits, openings, beta, ys, rng=None):
        if not (len(commits) == len(openings) == len(ys)):
            raise DimensionMismatch(
                f"Got {len(commits)} commitments, {len(openings)} openings "
                f"and {len(ys)} values"
            )
        if not commits:
            raise DimensionMismatch("Cannot batch verify an empty batch")
        commitprod = G1.one()
        openingprod = G1.one()
        ysum = ZR(0)
        for cm, opening, y in zip(commits, openings, to_scalars(ys)):
            rho = random_scalar(rng)
            commitprod *= cm ** rho
            openingprod *= opening ** rho
            ysum += rho * y
        lhs = pair(commitprod, self.functional_base(beta))
        rhs = pair(openingprod, self.g2) * self.gt_base ** ysum
        if lhs != rhs:
            logging.debug(f"[FuncCommit] Batch of {len(commits)} openings rejected")
            return False
        return True
