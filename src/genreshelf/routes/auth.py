"""
Signup, login and signout routes for genreshelf
"""
from flask import Blueprint, current_app, make_response, redirect, render_template, request, url_for
from genreshelf.errors import DuplicateUsername
from genreshelf.services.user_service import UserService
from genreshelf.utils.auth import clear_session_cookie, issue_token, set_session_cookie
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)
auth_bp = Blueprint('auth', __name__)

MIN_PASSWORD_LENGTH = 6


def validate_signup(username, password):
    """Collect signup form errors as a list of messages"""
    errors = []
    if not username:
        errors.append('Username is required')
    if len(password or '') < MIN_PASSWORD_LENGTH:
        errors.append(f'Password should be {MIN_PASSWORD_LENGTH} characters or more')
    return errors


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    if request.method == 'GET':
        return render_template('signup.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    errors = validate_signup(username, password)
    if errors:
        return render_template('signup.html', errors=errors, username=username)

    service = UserService(current_app.config['GENRESHELF_CONFIG'])
    try:
        service.create_user(username, password)
    except DuplicateUsername:
        return render_template('signup.html', errors=['User already exists'], username=username)

    return redirect(url_for('auth.login'))


@auth_bp.route('/login', methods=['GET'])
def login():
    return render_template('login.html')


@auth_bp.route('/login', methods=['POST'])
def login_submit():
    config = current_app.config['GENRESHELF_CONFIG']
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    user = UserService(config).verify_credentials(username, password)
    if user is None:
        logger.info(f"Failed login for {username!r}")
        return render_template('login.html', errors=['Invalid credentials'], username=username)

    token = issue_token(user.id, config.SECRET_KEY, config.TOKEN_TTL_HOURS)
    logger.info(f"User {username} logged in")
    response = make_response(redirect(url_for('main.dashboard')))
    return set_session_cookie(response, token)


@auth_bp.route('/signout', methods=['POST'])
def signout():
    response = make_response(redirect(url_for('auth.login')))
    return clear_session_cookie(response)
