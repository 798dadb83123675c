"""
Configuration management for genreshelf
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from genreshelf.errors import ConfigurationError

# Load environment variables
load_dotenv()

REQUIRED_SETTINGS = ('GENRESHELF_SECRET_KEY', 'GENRESHELF_MONGODB_URI')


class Config:
    def __init__(self):
        missing = [name for name in REQUIRED_SETTINGS if not os.getenv(name)]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        # Core paths
        self.LOGS_PATH = Path(os.getenv('GENRESHELF_LOGS_PATH', Path.cwd() / 'logs'))

        # Secrets and storage
        self.SECRET_KEY = os.getenv('GENRESHELF_SECRET_KEY')
        self.MONGODB_URI = os.getenv('GENRESHELF_MONGODB_URI')

        # Server configuration
        self.HOST = os.getenv('GENRESHELF_HOST', '0.0.0.0')
        self.PORT = self._int_setting('GENRESHELF_PORT', 3000)
        self.DEBUG = os.getenv('FLASK_DEBUG', '0') in ['1', 'true', 'True', 'TRUE']

        # Sessions
        self.TOKEN_TTL_HOURS = self._int_setting('GENRESHELF_TOKEN_TTL_HOURS', 0)

        # Catalog
        self.SEED_ON_START = os.getenv('GENRESHELF_SEED_ON_START', 'true').lower() == 'true'

        # Logging
        self.LOG_LEVEL = os.getenv('GENRESHELF_LOG_LEVEL', 'INFO')

        self.ensure_directories()

    @staticmethod
    def _int_setting(name, default):
        raw = os.getenv(name)
        if raw in (None, ''):
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")

    def ensure_directories(self):
        """Create necessary directories"""
        self.LOGS_PATH.mkdir(parents=True, exist_ok=True)

    def token_expires(self):
        """Check if issued session tokens carry an expiry"""
        return self.TOKEN_TTL_HOURS > 0
