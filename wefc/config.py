"""
Module for ``wefc``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration from a JSON file
* validate a configuration

A JSON file named by the ``WEFC_CONFIG`` environment variable is picked up by
``CipherConfig.load()``. Sample config::

    {"mask_length": 256, "hash_domain": "wefc"}
"""

import json
import logging
import os

from wefc.exceptions import ConfigurationError

CONFIG_ENV_VAR = "WEFC_CONFIG"


class ConfigVars(object):
    MaskLength = "mask_length"
    HashDomain = "hash_domain"


class CipherConfig(object):
    def __init__(self, mask_length, hash_domain):
        if type(mask_length) is not int or mask_length < 1:
            raise ConfigurationError(
                f"{ConfigVars.MaskLength} must be a positive int, got {mask_length!r}"
            )
        if isinstance(hash_domain, str):
            hash_domain = hash_domain.encode("utf-8")
        if type(hash_domain) is not bytes:
            raise ConfigurationError(
                f"{ConfigVars.HashDomain} must be a string, got {hash_domain!r}"
            )
        self.mask_length = mask_length
        self.hash_domain = hash_domain

    @classmethod
    def default(cls):
        return cls(mask_length=256, hash_domain=b"wefc")

    @classmethod
    def from_json(cls, json_config):
        res = cls.default()
        unknown = set(json_config) - {ConfigVars.MaskLength, ConfigVars.HashDomain}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(
            mask_length=json_config.get(ConfigVars.MaskLength, res.mask_length),
            hash_domain=json_config.get(ConfigVars.HashDomain, res.hash_domain),
        )

    @classmethod
    def from_file(cls, path):
        try:
            with open(path, "r") as f:
                json_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not read config file {path}: {e}") from e
        if not isinstance(json_config, dict):
            raise ConfigurationError(f"Config file {path} must hold a JSON object")
        return cls.from_json(json_config)

    @classmethod
    def load(cls):
        path = os.environ.get(CONFIG_ENV_VAR)
        if path is None:
            return cls.default()
        logging.debug(f"[Config] Loading cipher config from {path}")
        return cls.from_file(path)

    def __eq__(self, other):
        if not isinstance(other, CipherConfig):
            return NotImplemented
        return (self.mask_length, self.hash_domain) == (
            other.mask_length,
            other.hash_domain,
        )

    def __repr__(self):
        return (
            f"CipherConfig(mask_length={self.mask_length}, "
            f"hash_domain={self.hash_domain!r})"
        )
