import pytest

from src.pogo_battle.config import SimulatorConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("POGO_BATTLE_MAX_TURNS", raising=False)
    monkeypatch.delenv("POGO_BATTLE_DEFAULT_LEVEL", raising=False)
    monkeypatch.delenv("POGO_BATTLE_DEFAULT_IV", raising=False)

    settings = SimulatorConfig()
    assert settings.default_max_turns == 100
    assert settings.default_level == 40.0
    assert settings.default_iv == 15


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("POGO_BATTLE_MAX_TURNS", "250")
    monkeypatch.setenv("POGO_BATTLE_DEFAULT_LEVEL", "27.5")
    monkeypatch.setenv("POGO_BATTLE_DEFAULT_IV", "0")

    settings = SimulatorConfig()
    assert settings.default_max_turns == 250
    assert settings.default_level == 27.5
    assert settings.default_iv == 0


def test_max_turns_must_be_positive(monkeypatch):
    monkeypatch.setenv("POGO_BATTLE_MAX_TURNS", "0")
    with pytest.raises(ValueError):
        SimulatorConfig()
    with pytest.raises(ValueError):
        SimulatorConfig(default_max_turns=-1)
