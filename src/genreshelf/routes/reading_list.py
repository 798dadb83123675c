"""
Reading list routes for genreshelf
"""
from flask import Blueprint, current_app, flash, g, redirect, request, url_for
from genreshelf.errors import InvalidRating
from genreshelf.services.reading_list_service import ReadingListService, parse_rating
from genreshelf.utils.auth import login_required
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)
reading_list_bp = Blueprint('reading_list', __name__)


def _service():
    return ReadingListService(current_app.config['GENRESHELF_CONFIG'])


def _book_title():
    return request.form.get('bookTitle', '').strip()


@reading_list_bp.route('/add-to-list', methods=['POST'])
@login_required
def add_to_list():
    book_title = _book_title()
    if book_title:
        _service().add(g.user_id, book_title)
    return redirect(url_for('main.dashboard'))


@reading_list_bp.route('/remove-from-list', methods=['POST'])
@login_required
def remove_from_list():
    _service().remove(g.user_id, _book_title())
    return redirect(url_for('main.dashboard'))


@reading_list_bp.route('/add-review', methods=['POST'])
@login_required
def add_review():
    book_title = _book_title()
    comment = request.form.get('comment') or None

    try:
        rating = parse_rating(request.form.get('rating'))
    except InvalidRating as e:
        logger.info(f"Review for '{book_title}' rejected: {e}")
        flash('Rating must be a whole number from 1 to 5', 'error')
        return redirect(url_for('main.dashboard'))

    _service().set_review(g.user_id, book_title, comment, rating)
    return redirect(url_for('main.dashboard'))
