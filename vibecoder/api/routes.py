"""
Improve routes - HTTP surface over the synthesizer and the provider chain.
"""

from flask import Blueprint, current_app, jsonify, request

from ..models import QuotaExceeded
from ..synthesizer import BriefSynthesizer
from ..providers import ProviderChain
from ..utils.logger import get_logger, log_exception
from ..validator import validate_idea

logger = get_logger(__name__)

improve_bp = Blueprint("improve", __name__)


def _read_idea():
    """Validated idea from the JSON body, or an error response."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    result = validate_idea(payload.get("idea"))
    if not result.is_valid:
        return None, (jsonify({"errors": result.to_error_list()}), 400)
    return result.idea, None


@improve_bp.post("/improve")
def improve():
    idea, error = _read_idea()
    if error:
        return error

    synthesizer: BriefSynthesizer = current_app.extensions["vibecoder.synthesizer"]
    try:
        brief = synthesizer.synthesize(idea)
    except Exception as e:
        log_exception(logger, "Error improving prompt", e)
        return jsonify({"success": False, "error": "Failed to improve prompt"}), 500

    return jsonify({"success": True, "data": brief.to_dict()})


@improve_bp.post("/improve/ai")
def improve_ai():
    idea, error = _read_idea()
    if error:
        return error

    chain: ProviderChain = current_app.extensions["vibecoder.chain"]
    try:
        result = chain.ai_improve(idea)
    except Exception as e:
        log_exception(logger, "Error improving prompt (AI)", e)
        return jsonify({"success": False, "error": "Failed to improve prompt (AI)"}), 500

    if isinstance(result, QuotaExceeded):
        return jsonify({"success": False, **result.to_dict()}), 429

    return jsonify({"success": True, "data": result.to_dict()})


@improve_bp.get("/health")
def health():
    return jsonify({"status": "ok", "message": "Vibe Coder API is running"})
