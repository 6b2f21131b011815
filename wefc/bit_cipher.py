"""One-bit witness encryption keyed by the functional commitment SPHF.

The encryptor holds a commitment ``cm`` and a claimed value ``y``. It hashes
the claim with a fresh hashing key and uses the Gt result as a one-time pad;
only someone who can open ``cm`` to ``y`` recomputes the same Gt value from
the projection key.

Pad derivation: ``keystream = SHAKE256(shared.to_bytes())`` truncated to the
length of ``random_bytes``; the pad bit is the parity of
``random_bytes & keystream`` over every bit position.

A claim of ``y == 0`` hashes to ``e(u1[0], u2[n-1]) ** 0``, the Gt identity,
whatever hashing key is drawn. Its pad is therefore public and such a
ciphertext hides nothing; only encrypt to claims with a non-zero value.
"""
import logging
from collections import namedtuple

from Crypto.Hash import SHAKE256

from wefc.betterpairing import G1
from wefc.config import CipherConfig
from wefc.exceptions import DimensionMismatch
from wefc.sphf import (
    generate_hash_keys,
    lambda_for_functional_commitment,
    language_for_functional_commitment,
    prover_hash,
    theta_for_functional_commitment,
    verifier_hash,
)
from wefc.utils import random_bytes

Ciphertext = namedtuple("Ciphertext", ["bit", "hp", "random_bytes"])


def keystream(shared, length):
    shake = SHAKE256.new(shared.to_bytes())
    return shake.read(length)


def mask_bit(shared, rand):
    """AND each bit of ``rand`` with the keystream and XOR-fold the results."""
    stream = keystream(shared, len(rand))
    folded = int.from_bytes(rand, "big") & int.from_bytes(stream, "big")
    return bin(folded).count("1") & 1


def _check_bit(message):
    if message not in (0, 1):
        raise ValueError(f"Only single bits can be encrypted, got {message!r}")
    return int(message)


def encrypt_bit(key, cm, beta, y, message, rng=None, config=None):
    """Encrypt ``message`` to whoever can open ``cm`` under ``beta`` to ``y``."""
    message = _check_bit(message)
    assert type(cm) is G1
    if len(beta) != key.n:
        raise DimensionMismatch(f"beta has length {len(beta)}, key has n={key.n}")
    config = config or CipherConfig.load()

    gamma = language_for_functional_commitment(cm, key)
    hk, hp = generate_hash_keys(gamma, rng)
    theta = theta_for_functional_commitment(key, y)
    shared = verifier_hash(hk, theta)
    rand = random_bytes(config.mask_length, rng)

    logging.debug(f"[BitCipher] Encrypted a bit with a {len(rand)} byte mask")
    return Ciphertext(message ^ mask_bit(shared, rand), hp, rand)


def decrypt_bit(key, opening, beta, ciphertext):
    """Recover the bit with an opening of the commitment under ``beta``.

    An opening for a different value than the one the encryptor claimed
    yields an unrelated pad, so the result is then a coin flip.
    """
    ciphertext_bit = _check_bit(ciphertext.bit)
    if len(ciphertext.random_bytes) == 0:
        raise DimensionMismatch("Ciphertext carries no mask bytes")

    lam = lambda_for_functional_commitment(key, beta, opening)
    shared = prover_hash(ciphertext.hp, lam)

    logging.debug("[BitCipher] Decrypted a bit")
    return ciphertext_bit ^ mask_bit(shared, ciphertext.random_bytes)
