import pytest

from config.config import env_bool


@pytest.mark.parametrize("raw", ["1", "true", "True", " yes ", "ON"])
def test_env_bool_truthy(monkeypatch, raw):
    monkeypatch.setenv("SEED_DEMO_DATA", raw)

    assert env_bool("SEED_DEMO_DATA", False) is True


@pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
def test_env_bool_falsy(monkeypatch, raw):
    monkeypatch.setenv("SEED_DEMO_DATA", raw)

    assert env_bool("SEED_DEMO_DATA", True) is False


def test_env_bool_default_when_unset(monkeypatch):
    monkeypatch.delenv("SEED_DEMO_DATA", raising=False)

    assert env_bool("SEED_DEMO_DATA", True) is True


def test_env_bool_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SEED_DEMO_DATA", "maybe")

    with pytest.raises(ValueError):
        env_bool("SEED_DEMO_DATA", False)
