"""
genreshelf - main entry point
"""
from genreshelf.utils.config import Config
from genreshelf.utils.logging import setup_logging, get_logger
from genreshelf.web_server import create_app


def run_server(config):
    """Configure logging, build the app and serve it until interrupted"""
    setup_logging(config.LOG_LEVEL, config.LOGS_PATH)
    logger = get_logger(__name__)

    logger.info("Starting genreshelf")
    logger.info(f"Logs path: {config.LOGS_PATH}")
    logger.info(f"Session tokens expire: {config.token_expires()}")

    app = create_app(config)

    logger.info(f"Starting server on {config.HOST}:{config.PORT}")
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=config.DEBUG,
        threaded=True,  # Handle concurrent requests
        use_reloader=False
    )


def main():
    """Main application entry point"""
    run_server(Config())


if __name__ == '__main__':
    main()
