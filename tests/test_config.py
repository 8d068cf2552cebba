from waterwatch.config import config, TestingConfig


def test_testing_config_is_selected_by_name(app):
    assert config['testing'] is TestingConfig
    assert app.config['TESTING'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert app.config['SMS_ENABLED'] is False
    assert app.config['WHATSAPP_ENABLED'] is False


def test_config_module_ships_inside_the_package():
    import waterwatch.config

    assert waterwatch.config.__name__ == 'waterwatch.config'
    assert 'default' in config
