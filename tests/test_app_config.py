from slack_wordle.config.app_config import DevelopmentConfig, ProductionConfig, config


def test_default_config_runs_without_debugger():
    assert config["default"] is ProductionConfig
    assert not config["default"].DEBUG


def test_development_config_is_opt_in():
    assert config["development"] is DevelopmentConfig
    assert DevelopmentConfig.DEBUG
