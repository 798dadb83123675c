"""
Tests for session tokens and the login_required guard.
"""
import base64
import json
from datetime import datetime, timedelta, timezone

from bson import ObjectId
from jose import jwt

from genreshelf.utils.auth import ALGORITHM, SESSION_COOKIE, issue_token, read_token

from tests.conftest import TEST_SECRET, login, signup


class TestTokens:

    def test_round_trip(self):
        user_id = str(ObjectId())
        assert read_token(issue_token(user_id, TEST_SECRET), TEST_SECRET) == user_id

    def test_no_expiry_claim_by_default(self):
        token = issue_token('abc', TEST_SECRET)
        assert 'exp' not in jwt.get_unverified_claims(token)

    def test_expiry_claim_with_ttl(self):
        token = issue_token('abc', TEST_SECRET, ttl_hours=2)
        assert 'exp' in jwt.get_unverified_claims(token)

    def test_wrong_secret(self):
        assert read_token(issue_token('abc', 'other-secret'), TEST_SECRET) is None

    def test_malformed(self):
        assert read_token('not.a.token', TEST_SECRET) is None

    def test_expired(self):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode({'userId': 'abc', 'exp': past}, TEST_SECRET, algorithm=ALGORITHM)
        assert read_token(token, TEST_SECRET) is None

    def test_missing_user_claim(self):
        token = jwt.encode({'sub': 'abc'}, TEST_SECRET, algorithm=ALGORITHM)
        assert read_token(token, TEST_SECRET) is None

    def test_claim_that_is_not_an_object_id(self):
        assert read_token(issue_token('abc', TEST_SECRET), TEST_SECRET) is None


class TestLoginRequired:

    PROTECTED = [
        ('get', '/dashboard'),
        ('post', '/select-genre'),
        ('post', '/add-to-list'),
        ('post', '/remove-from-list'),
        ('post', '/add-review'),
    ]

    def test_no_cookie_redirects_to_login(self, client):
        for method, path in self.PROTECTED:
            response = getattr(client, method)(path)
            assert response.status_code == 302, path
            assert response.headers['Location'].endswith('/login'), path

    def test_session_cookie_is_http_only(self, client):
        signup(client)
        response = login(client)

        cookies = [c for c in response.headers.getlist('Set-Cookie') if c.startswith(f'{SESSION_COOKIE}=')]
        assert len(cookies) == 1
        assert 'HttpOnly' in cookies[0]

    def test_token_authenticates_until_signout(self, logged_in):
        assert logged_in.get('/dashboard').status_code == 200
        assert logged_in.get('/dashboard').status_code == 200

        response = logged_in.post('/signout')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')
        assert logged_in.get_cookie(SESSION_COOKIE) is None

        response = logged_in.get('/dashboard')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')

    def test_tampered_token_redirects(self, logged_in):
        header, _, signature = logged_in.get_cookie(SESSION_COOKIE).value.split('.')
        forged = base64.urlsafe_b64encode(json.dumps({'userId': str(ObjectId())}).encode()).rstrip(b'=').decode()
        logged_in.set_cookie(SESSION_COOKIE, f'{header}.{forged}.{signature}')

        response = logged_in.get('/dashboard')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')

    def test_token_signed_with_other_secret_redirects(self, client):
        client.set_cookie(SESSION_COOKIE, issue_token(str(ObjectId()), 'other-secret'))
        response = client.get('/dashboard')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')

    def test_claim_that_is_not_a_user_id_redirects(self, app, client):
        app.config['TESTING'] = False
        client.set_cookie(SESSION_COOKIE, issue_token('abc', TEST_SECRET))

        responses = [
            client.get('/dashboard'),
            client.post('/add-to-list', data={'bookTitle': 'Dune'}),
        ]
        for response in responses:
            assert response.status_code == 302
            assert response.headers['Location'].endswith('/login')

    def test_token_for_unknown_user_redirects(self, client):
        client.set_cookie(SESSION_COOKIE, issue_token(str(ObjectId()), TEST_SECRET))
        response = client.get('/dashboard')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')
