import json

from pytest import raises


def test_default():
    from wefc.config import CipherConfig

    config = CipherConfig.default()
    assert config.mask_length == 256
    assert config.hash_domain == b"wefc"


def test_from_json():
    from wefc.config import CipherConfig

    config = CipherConfig.from_json({"mask_length": 64})
    assert config == CipherConfig(64, b"wefc")
    config = CipherConfig.from_json({"hash_domain": "test"})
    assert config == CipherConfig(256, b"test")


def test_invalid_values():
    from wefc.config import CipherConfig
    from wefc.exceptions import ConfigurationError

    with raises(ConfigurationError):
        CipherConfig.from_json({"mask_length": 0})
    with raises(ConfigurationError):
        CipherConfig.from_json({"mask_length": "64"})
    with raises(ConfigurationError):
        CipherConfig.from_json({"hash_domain": 5})
    with raises(ConfigurationError):
        CipherConfig.from_json({"mask_bytes": 64})


def test_from_file(tmp_path):
    from wefc.config import CipherConfig
    from wefc.exceptions import ConfigurationError

    path = tmp_path / "wefc.json"
    path.write_text(json.dumps({"mask_length": 32, "hash_domain": "file"}))
    assert CipherConfig.from_file(str(path)) == CipherConfig(32, b"file")

    path.write_text("[1, 2]")
    with raises(ConfigurationError):
        CipherConfig.from_file(str(path))
    with raises(ConfigurationError):
        CipherConfig.from_file(str(tmp_path / "missing.json"))


def test_load_from_environment(tmp_path, monkeypatch):
    from wefc.config import CONFIG_ENV_VAR, CipherConfig

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert CipherConfig.load() == CipherConfig.default()

    path = tmp_path / "wefc.json"
    path.write_text(json.dumps({"mask_length": 8}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert CipherConfig.load() == CipherConfig(8, b"wefc")
