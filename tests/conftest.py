"""
Shared fixtures for genreshelf tests
"""
import os

import mongomock
import pytest

from genreshelf.services.database_service import DatabaseService
from genreshelf.utils.config import Config
from genreshelf.web_server import create_app

TEST_SECRET = 'test-secret'
TEST_URI = 'mongodb://localhost:27017/genreshelf_test'


@pytest.fixture
def env(monkeypatch, tmp_path):
    """A clean GENRESHELF_* environment with the required settings present"""
    for name in list(os.environ):
        if name.startswith('GENRESHELF_'):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('GENRESHELF_SECRET_KEY', TEST_SECRET)
    monkeypatch.setenv('GENRESHELF_MONGODB_URI', TEST_URI)
    monkeypatch.setenv('GENRESHELF_LOGS_PATH', str(tmp_path / 'logs'))
    return monkeypatch


@pytest.fixture
def config(env):
    return Config()


@pytest.fixture
def database(config):
    service = DatabaseService(config, mongo_client_class=mongomock.MongoClient)
    service.connect()
    yield service
    service.drop_all()
    service.disconnect()


@pytest.fixture
def app(config):
    app = create_app(config, mongo_client_class=mongomock.MongoClient)
    app.config['TESTING'] = True
    yield app
    app.database_service.drop_all()
    app.database_service.disconnect()


@pytest.fixture
def client(app):
    return app.test_client()


def signup(client, username='alice', password='secret1'):
    return client.post('/signup', data={'username': username, 'password': password})


def login(client, username='alice', password='secret1'):
    return client.post('/login', data={'username': username, 'password': password})


@pytest.fixture
def logged_in(client):
    """A client holding a session cookie for alice"""
    signup(client)
    login(client)
    return client
