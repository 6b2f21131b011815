import random

from pytest import raises


class BrokenRandom(random.Random):
    def randint(self, a, b):
        raise OSError("no entropy")

    def getrandbits(self, k):
        raise NotImplementedError


def test_injected_rng_replays():
    from wefc.utils import random_bytes, random_scalar

    assert random_scalar(random.Random(5)) == random_scalar(random.Random(5))
    assert random_bytes(12, random.Random(5)) == random_bytes(12, random.Random(5))
    assert len(random_bytes(12)) == 12


def test_randomness_failure():
    from wefc.exceptions import RandomnessError
    from wefc.utils import random_bytes, random_scalar

    with raises(RandomnessError):
        random_scalar(BrokenRandom())
    with raises(RandomnessError):
        random_bytes(4, BrokenRandom())


def test_to_scalars():
    from wefc.betterpairing import ZR
    from wefc.utils import to_scalars

    assert to_scalars([1, ZR(2)]) == [ZR(1), ZR(2)]
