"""
Database Service for genreshelf
Opens the MongoDB connection used by every document model
"""
import mongoengine
from genreshelf.models import User, Genre, ReadingListEntry
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)

DOCUMENTS = (User, Genre, ReadingListEntry)


class DatabaseService:
    def __init__(self, config, mongo_client_class=None):
        self.config = config
        self.mongo_client_class = mongo_client_class
        self.connection = None

    def connect(self):
        """Register the default connection and make sure indexes exist"""
        options = {'host': self.config.MONGODB_URI}
        if self.mongo_client_class is not None:
            options['mongo_client_class'] = self.mongo_client_class

        logger.info("Connecting to MongoDB")
        self.connection = mongoengine.connect(**options)
        self.ensure_indexes()
        return self.connection

    def ensure_indexes(self):
        """Create the unique username index and reading list lookup index"""
        for document in DOCUMENTS:
            document.ensure_indexes()

    def disconnect(self):
        """Close the default connection"""
        mongoengine.disconnect()
        self.connection = None
        logger.info("Disconnected from MongoDB")

    def drop_all(self):
        """Drop every collection owned by the application"""
        for document in DOCUMENTS:
            document.drop_collection()
        logger.warning("Dropped all genreshelf collections")
