import random

from pytest import fixture


@fixture
def rng(request):
    """Seeded randomness so a failing run can be replayed."""
    return random.Random(request.node.name)


@fixture(scope="module")
def key():
    from wefc.func_commit import generate_key

    return generate_key(2, rng=random.Random("commitment-key"))


@fixture(scope="module")
def fc(key):
    from wefc.func_commit import LinearFuncCommit

    return LinearFuncCommit(key)
