from wefc.betterpairing import ZR, system_rng
from wefc.exceptions import RandomnessError


def get_rng(rng=None):
    """Use the injected randomness source, or the OS one when none is given."""
    return system_rng() if rng is None else rng


def random_scalar(rng=None):
    try:
        return ZR.random(get_rng(rng))
    except (OSError, NotImplementedError) as e:
        raise RandomnessError(f"Randomness source failed: {e}") from e


def random_bytes(length, rng=None):
    rng = get_rng(rng)
    try:
        return bytes(rng.getrandbits(8) for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise RandomnessError(f"Randomness source failed: {e}") from e


def to_scalars(values):
    """Coerce ints to ``ZR``; ``ZR`` values pass through."""
    return [v if type(v) is ZR else ZR(v) for v in values]
