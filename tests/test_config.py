import pytest

from roomprice.adapters.config import AppConfig
from roomprice.services.price_predictor import build_default_predictor


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ROOMPRICE_MARKET_DATA_SOURCE", " HTTP ")
    monkeypatch.setenv("ROOMPRICE_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROOMPRICE_DEFAULT_MARKET_AVERAGE", "450")

    cfg = AppConfig()

    assert cfg.MARKET_DATA_SOURCE == "http"
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.DEFAULT_MARKET_AVERAGE == 450


@pytest.mark.parametrize(
    "overrides",
    [
        {"MARKET_DATA_TIMEOUT_S": 0},
        {"DEFAULT_MARKET_AVERAGE": -1},
        {"MARKET_DATA_SOURCE": "ftp"},
        {"MARKET_DATA_MAX_RETRIES": -1},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValueError):
        AppConfig(**overrides)


def test_default_predictor_uses_configured_average():
    predictor = build_default_predictor(AppConfig(DEFAULT_MARKET_AVERAGE=480))
    assert predictor.weights.default_market_average == 480
    assert predictor.market_average("nowhere", "shared") == 480
