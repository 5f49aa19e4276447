"""API routes for computing transitive closures"""
import logging

from flask import Blueprint, jsonify, request, current_app
from pydantic import ValidationError

from src.config import Config
from src.core import InvalidSize, Session, is_transitive
from src.core.io import IterableLineSource, ListTextSink
from src.core.render import can_label, label, pairs, render_pairs
from src.models.api_schemas import ClosureRequest, ClosureResponse, HealthResponse, ErrorResponse

logger = logging.getLogger(__name__)

closure_bp = Blueprint('closure_api', __name__)


def get_max_size() -> int:
    """Universe size limit, preferring the Flask app config."""
    return current_app.config.get('MAX_UNIVERSE_SIZE', Config.MAX_UNIVERSE_SIZE)


def to_grid(matrix):
    return [[1 if cell else 0 for cell in row] for row in matrix.rows()]


@closure_bp.route('/api/closure', methods=['POST'])
def create_closure():
    """
    Compute the transitive closure of a relation.

    Expected JSON body: ClosureRequest schema

    Returns: ClosureResponse
    """
    data = request.get_json(silent=True)

    if not data:
        error = ErrorResponse(error='Request body required')
        return jsonify(error.model_dump()), 400

    # Validate using Pydantic
    try:
        closure_request = ClosureRequest(**data)
    except (ValidationError, TypeError) as e:
        error = ErrorResponse(error=f'Invalid request: {str(e)}')
        return jsonify(error.model_dump()), 400

    sink = ListTextSink()
    session = Session(
        IterableLineSource(closure_request.rows),
        sink,
        max_size=get_max_size(),
        max_line_length=current_app.config.get('MAX_LINE_LENGTH', Config.MAX_LINE_LENGTH),
        interactive=False
    )

    try:
        result = session.run()
    except InvalidSize as e:
        logger.warning(f"Rejected closure request: {e}")
        error = ErrorResponse(error=str(e))
        return jsonify(error.model_dump()), 400

    added = sorted(set(pairs(result.closure)) - set(pairs(result.matrix)))
    if can_label(result.closure):
        added = [(label(i), label(j)) for i, j in added]

    response = ClosureResponse(
        size=result.matrix.n,
        relation=to_grid(result.matrix),
        closure=to_grid(result.closure),
        relation_set=render_pairs("R", result.matrix),
        closure_set=render_pairs("R*", result.closure),
        added_pairs=added,
        relation_is_transitive=is_transitive(result.matrix),
        output=sink.lines
    )
    return jsonify(response.model_dump()), 200


@closure_bp.route('/api/health', methods=['GET'])
def health():
    """Report service status and the configured universe size limit."""
    response = HealthResponse(status='ok', max_universe_size=get_max_size())
    return jsonify(response.model_dump()), 200
