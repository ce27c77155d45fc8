import logging
import os
import sys
import threading
import uuid

from flask import Flask, jsonify, request
from pydantic import ValidationError

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from api.schemas import CompareRequest, NormalizeRequest, SentenceResultRequest
from dictation.alignment.normalizer import normalize_german
from dictation.errors import InvalidInput
from dictation.scorer.text_comparison import compare_live_feedback, compare_texts
from dictation.stats.session import SessionStatistics
from dictation.stats.word_stats import calculate_word_stats

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ============================================================================
# SESSION STORE
# ============================================================================
SESSION_STORE = {}  # {session_id: SessionStatistics}
_STORE_LOCK = threading.Lock()


def _get_session(session_id):
    with _STORE_LOCK:
        return SESSION_STORE.get(session_id)


def _payload():
    return request.get_json(silent=True) or {}


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({
        "error": "Invalid request",
        "details": e.errors(include_url=False, include_context=False),
    }), 400


@app.errorhandler(InvalidInput)
def handle_invalid_input(e):
    return jsonify({"error": str(e)}), 400


# ============================================================================
# ROUTES - COMPARISON
# ============================================================================
@app.route('/health')
def health():
    with _STORE_LOCK:
        session_count = len(SESSION_STORE)
    return jsonify({"status": "ok", "sessions": session_count})


@app.route('/api/normalize', methods=['POST'])
def normalize():
    """Rebuild umlauts and ß in typed text."""
    req = NormalizeRequest.model_validate(_payload())
    return jsonify({"normalized": normalize_german(req.text)})


@app.route('/api/compare', methods=['POST'])
def compare():
    """Grade a finished sentence (word aligned)."""
    req = CompareRequest.model_validate(_payload())
    comparison = compare_texts(req.reference, req.user_input, req.options())
    response = comparison.to_dict()
    response["word_stats"] = calculate_word_stats(comparison.chars).to_dict()
    return jsonify(response)


@app.route('/api/live', methods=['POST'])
def live():
    """Positional feedback while the user is typing."""
    req = CompareRequest.model_validate(_payload())
    return jsonify(compare_live_feedback(req.reference, req.user_input, req.options()).to_dict())


# ============================================================================
# ROUTES - SESSIONS
# ============================================================================
@app.route('/api/sessions', methods=['POST'])
def create_session():
    session_id = str(uuid.uuid4())
    with _STORE_LOCK:
        SESSION_STORE[session_id] = SessionStatistics()
    logger.info("Started session %s", session_id)
    return jsonify({"session_id": session_id}), 201


@app.route('/api/sessions/<session_id>/keystroke', methods=['POST'])
def session_keystroke(session_id):
    """First keystroke of a sentence starts its timer."""
    session = _get_session(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    session.start_sentence_timing()
    return jsonify({"has_started_typing": session.has_started_current_sentence})


@app.route('/api/sessions/<session_id>/results', methods=['POST'])
def session_record_result(session_id):
    session = _get_session(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    req = SentenceResultRequest.model_validate(_payload())
    result = session.record_sentence_result(
        req.sentence_index, req.reference, req.user_input, req.options()
    )
    return jsonify(result.to_dict()), 201


@app.route('/api/sessions/<session_id>', methods=['GET'])
def session_status(session_id):
    session = _get_session(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    return jsonify({
        "session_id": session_id,
        "summary": session.calculate_overall_stats().to_dict(),
        "results": [r.to_dict() for r in session.session_results],
    })


@app.route('/api/sessions/<session_id>', methods=['DELETE'])
def session_delete(session_id):
    with _STORE_LOCK:
        session = SESSION_STORE.pop(session_id, None)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    session.clear()
    logger.info("Closed session %s", session_id)
    return jsonify({"message": f"Session {session_id} closed"})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(
        debug=os.environ.get("DICTATION_API_DEBUG", "0") == "1",
        host=os.environ.get("DICTATION_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("DICTATION_API_PORT", "5000")),
    )
