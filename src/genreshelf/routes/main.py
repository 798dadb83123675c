"""
Main page routes for genreshelf
"""
from flask import Blueprint, current_app, flash, g, redirect, render_template, request, url_for
from genreshelf.services.catalog_service import CatalogService
from genreshelf.services.reading_list_service import ReadingListService
from genreshelf.utils.auth import login_required
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return redirect(url_for('auth.login'))


@main_bp.route('/dashboard')
@login_required
def dashboard():
    """Genres to browse plus the user's reading list"""
    config = current_app.config['GENRESHELF_CONFIG']

    genres = CatalogService(config).list_genres()
    reading_list = ReadingListService(config).list_for_user(g.user_id)

    return render_template(
        'dashboard.html',
        genres=genres,
        reading_list=reading_list,
        username=g.user.username,
    )


@main_bp.route('/select-genre', methods=['POST'])
@login_required
def select_genre():
    """Recommended books for one genre"""
    config = current_app.config['GENRESHELF_CONFIG']
    name = request.form.get('genre', '')

    genre = CatalogService(config).find_genre(name)
    if genre is None:
        logger.info(f"Unknown genre requested: {name!r}")
        flash('Unknown genre', 'error')
        return redirect(url_for('main.dashboard'))

    return render_template('recommendations.html', books=genre.books, selected_genre=genre.name)
