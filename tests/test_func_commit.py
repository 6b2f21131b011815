import random

from pytest import mark, raises


@mark.parametrize("n", [1, 2, 3])
def test_commit_open_verify(n):
    from wefc.func_commit import LinearFuncCommit, compute_func, generate_key

    rng = random.Random(n)
    fc = LinearFuncCommit(generate_key(n, rng=rng))
    x = [rng.randint(0, 1000) for _ in range(n)]
    beta = [rng.randint(0, 1000) for _ in range(n)]
    cm, r = fc.commit(x, rng=rng)
    opening = fc.open(x, r, beta)
    assert fc.verify(cm, opening, beta, compute_func(x, beta))
    assert not fc.verify(cm, opening, beta, compute_func(x, beta) + 1)


def test_concrete_opening(fc, rng):
    x = [1, 2]
    beta = [2, 1]
    cm, r = fc.commit(x, rng=rng)
    opening = fc.open(x, r, beta)
    assert fc.verify(cm, opening, beta, 4)
    assert not fc.verify(cm, opening, beta, 5)


def test_scaled_openings_are_rejected(fc, rng):
    from wefc.betterpairing import ZR
    from wefc.func_commit import compute_func

    x = [3, 9]
    beta = [5, 7]
    y = compute_func(x, beta)
    cm, r = fc.commit(x, rng=rng)
    opening = fc.open(x, r, beta)
    for _ in range(100):
        scale = ZR.random(rng)
        if scale == 1:
            continue
        assert not fc.verify(cm, opening ** scale, beta, y)


def test_open_is_deterministic(fc, rng):
    x = [4, 1]
    beta = [1, 6]
    _, r = fc.commit(x, rng=rng)
    assert fc.open(x, r, beta) == fc.open(x, r, beta)


def test_opening_binds_functional(fc, rng):
    x = [2, 5]
    cm, r = fc.commit(x, rng=rng)
    opening = fc.open(x, r, [1, 1])
    assert fc.verify(cm, opening, [1, 1], 7)
    assert not fc.verify(cm, opening, [1, 2], 7)
    assert not fc.verify(cm, opening, [1, 2], 12)


def test_compute_func():
    from wefc.betterpairing import ZR, bls12_381_r
    from wefc.exceptions import DimensionMismatch
    from wefc.func_commit import compute_func

    assert compute_func([1, 2], [2, 1]) == 4
    assert compute_func([bls12_381_r - 1], [2]) == ZR(-2)
    with raises(DimensionMismatch):
        compute_func([1], [1, 2])


def test_dimension_checks(fc, rng):
    from wefc.exceptions import DimensionMismatch
    from wefc.func_commit import generate_key

    with raises(DimensionMismatch):
        generate_key(0)
    with raises(DimensionMismatch):
        fc.commit([1, 2, 3], rng=rng)
    cm, r = fc.commit([1, 2], rng=rng)
    with raises(DimensionMismatch):
        fc.open([1, 2], r, [1])
    with raises(DimensionMismatch):
        fc.verify(cm, fc.open([1, 2], r, [1, 1]), [1, 1, 1], 3)


def test_key_shape(key):
    from wefc.betterpairing import G1, G2

    assert key.n == 2
    assert len(key.u1) == 4
    assert len(key.u2) == 2
    assert key.u1[2] == G1.one()
    assert not key.u1[0].is_identity()
    assert key.u2[0] != G2.generator()


def test_key_from_known_secret():
    from wefc.betterpairing import G1, G2
    from wefc.func_commit import generate_key

    key = generate_key(2, u=3)
    assert key.u1 == (
        G1.generator() ** 3,
        G1.generator() ** 9,
        G1.one(),
        G1.generator() ** 81,
    )
    assert key.u2 == (G2.generator() ** 3, G2.generator() ** 9)


def test_batch_verify(fc, rng):
    from wefc.func_commit import compute_func

    beta = [3, 8]
    xs = [[1, 2], [7, 0], [5, 5]]
    commits, openings, ys = [], [], []
    for x in xs:
        cm, r = fc.commit(x, rng=rng)
        commits.append(cm)
        openings.append(fc.open(x, r, beta))
        ys.append(compute_func(x, beta))
    assert fc.batch_verify(commits, openings, beta, ys, rng=rng)
    ys[1] += 1
    assert not fc.batch_verify(commits, openings, beta, ys, rng=rng)


def test_batch_verify_shape(fc):
    from wefc.exceptions import DimensionMismatch

    with raises(DimensionMismatch):
        fc.batch_verify([], [], [1, 1], [])
    with raises(DimensionMismatch):
        fc.batch_verify([fc.g1], [], [1, 1], [1])
