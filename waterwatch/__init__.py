"""
WaterWatch - Application Factory
Initializes and configures the Flask application
"""
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_cors import CORS
from waterwatch.config import config as config_by_name
import os

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()

def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    config_by_name[config_name].init_app(app)

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    CORS(app)

    # Bearer-token loader and JSON 401 responses
    from waterwatch import auth

    from waterwatch.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from waterwatch.controllers.water_tests import water_tests_bp
    from waterwatch.controllers.health_cards import health_cards_bp

    app.register_blueprint(water_tests_bp)
    app.register_blueprint(health_cards_bp)

    @app.cli.command('init-db')
    def init_db():
        """Create all database tables"""
        db.create_all()
        print("  Database tables created")

    # Shell context for flask shell command
    @app.shell_context_processor
    def make_shell_context():
        from waterwatch.models import User, WaterTest, LeaderAlert, GlobalAlert, HealthCard
        from waterwatch.models.notification_log import NotificationLog
        return {
            'db': db,
            'User': User,
            'WaterTest': WaterTest,
            'LeaderAlert': LeaderAlert,
            'GlobalAlert': GlobalAlert,
            'HealthCard': HealthCard,
            'NotificationLog': NotificationLog
        }

    return app
