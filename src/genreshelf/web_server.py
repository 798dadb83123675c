"""
genreshelf Web Server
Flask app factory
"""
import os
from flask import Flask
from genreshelf.routes.auth import auth_bp
from genreshelf.routes.main import main_bp
from genreshelf.routes.reading_list import reading_list_bp
from genreshelf.services.catalog_service import CatalogService
from genreshelf.services.database_service import DatabaseService
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(config, mongo_client_class=None):
    """Create and configure Flask application"""

    base_dir = os.path.dirname(os.path.abspath(__file__))

    app = Flask(__name__,
                template_folder=os.path.join(base_dir, 'static', 'templates'),
                static_folder=os.path.join(base_dir, 'static'))

    # Flask's own session only carries flashed messages
    app.secret_key = config.SECRET_KEY
    app.config.update({
        'GENRESHELF_CONFIG': config,
        'DEBUG': config.DEBUG,
    })

    # Storage
    app.database_service = DatabaseService(config, mongo_client_class=mongo_client_class)
    app.database_service.connect()

    if config.SEED_ON_START:
        CatalogService(config).seed_if_empty()

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(reading_list_bp)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled error: {error}", exc_info=getattr(error, "original_exception", None))
        return "Internal server error", 500

    return app
