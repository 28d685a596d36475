import pytest

from passdigest.config import DigestSettings


def test_defaults_from_empty_env():
    settings = DigestSettings.from_env({})
    assert settings.salt_length == 16
    assert settings.algorithm == "sha256"
    assert settings.debug is False


def test_env_overrides():
    settings = DigestSettings.from_env(
        {"PASSDIGEST_SALT_LENGTH": "24", "PASSDIGEST_ALGORITHM": "SHA3-256", "PASSDIGEST_DEBUG": "yes"}
    )
    assert settings.salt_length == 24
    assert settings.algorithm == "sha3-256"
    assert settings.debug is True


def test_reads_process_env(monkeypatch):
    monkeypatch.setenv("PASSDIGEST_SALT_LENGTH", "8")
    assert DigestSettings.from_env().salt_length == 8


@pytest.mark.parametrize("value", ["abc", "0", "-4"])
def test_bad_salt_length(value):
    with pytest.raises(ValueError, match="PASSDIGEST_SALT_LENGTH"):
        DigestSettings.from_env({"PASSDIGEST_SALT_LENGTH": value})


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="PASSDIGEST_ALGORITHM"):
        DigestSettings.from_env({"PASSDIGEST_ALGORITHM": "md5"})
