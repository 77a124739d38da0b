import os


class Config:
    # Upstream directories
    PLAYER_SERVICE_URL = os.getenv('PLAYER_SERVICE_URL', 'http://localhost:3001')
    TEAM_SERVICE_URL = os.getenv('TEAM_SERVICE_URL', 'http://localhost:3002')
    UPSTREAM_TIMEOUT = float(os.getenv('UPSTREAM_TIMEOUT', '10'))

    # Ports
    GATEWAY_PORT = int(os.getenv('GATEWAY_PORT', '3000'))
    PLAYER_SERVICE_PORT = int(os.getenv('PLAYER_SERVICE_PORT', '3001'))
    TEAM_SERVICE_PORT = int(os.getenv('TEAM_SERVICE_PORT', '3002'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    DEBUG = False
    TESTING = True
    PLAYER_SERVICE_URL = 'http://players.test'
    TEAM_SERVICE_URL = 'http://teams.test'
    UPSTREAM_TIMEOUT = 1.0


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
