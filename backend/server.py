import os
import sys
import time

# Ensure backend/ is on sys.path so sibling imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from dotenv import load_dotenv

from envelope import (
    EnvelopeError,
    bad_request_body,
    decode_request_body,
    handle_trigger_event,
    internal_error_body,
    ok_body,
)
from judge import judge

load_dotenv()

SERVICE_VERSION = "1.0.0"

app = Flask(__name__)


def _env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = os.environ.get(name, "")
    try:
        return max(minimum, float(raw))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(name, "")
    try:
        return max(minimum, int(raw))
    except (TypeError, ValueError):
        return default


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y"}


_SLOW_REQUEST_LOG_MS = _env_float("SLOW_REQUEST_LOG_MS", 750.0, minimum=0.0)
app.config["MAX_CONTENT_LENGTH"] = _env_int("MAX_BODY_BYTES", 4 * 1024 * 1024, minimum=1)
app.config["JUDGE_LEGACY_POST_EDGES"] = _env_flag("JUDGE_LEGACY_POST_EDGES")


def _legacy_post_edges() -> bool:
    return bool(app.config.get("JUDGE_LEGACY_POST_EDGES", False))


def _log_judgement(result) -> None:
    if result.accepted:
        print(
            f"[JUDGE] status={result.status} compulsory={result.compulsory_count} "
            f"post={result.post_courses_count} optional={result.optional_score}"
        )
    else:
        print(
            f"[JUDGE] status={result.status} {result.status_label}: {result.comment}",
            file=sys.stderr,
        )


def _is_truthy_arg(value) -> bool:
    return str(value or "").strip().lower() in {"1", "true", "yes"}


# -- Security headers ------------------------------------------------------
@app.before_request
def _start_request_timer():
    g._request_start_time = time.perf_counter()


@app.after_request
def _add_security_headers(response):
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "same-origin"

    started = getattr(g, "_request_start_time", None)
    if started is not None:
        duration_ms = (time.perf_counter() - started) * 1000.0
        if duration_ms >= _SLOW_REQUEST_LOG_MS:
            endpoint = request.endpoint or "unknown"
            print(
                f"[SLOW] {request.method} {request.path} "
                f"endpoint={endpoint} status={response.status_code} duration_ms={duration_ms:.1f}"
            )
    return response


# -- Health endpoint --------------------------------------------------------
@app.route("/health", methods=["GET"])
def health_endpoint():
    return jsonify({
        "status": "ok",
        "version": SERVICE_VERSION,
    })


# ── Error handlers ─────────────────────────────────────────────────────────────
@app.errorhandler(RequestEntityTooLarge)
def handle_body_too_large(e):
    return jsonify(bad_request_body("request body too large", code=413)), 413


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return jsonify(bad_request_body(e.description or e.name, code=e.code)), e.code
    print(f"[WARN] Unhandled error: {e!r}", file=sys.stderr)
    return jsonify(internal_error_body()), 500


# ── Routes ─────────────────────────────────────────────────────────────────────
@app.route("/judge", methods=["POST"])
def judge_endpoint():
    """Judge a plan posted as {input_data, output_data}, optionally base64-wrapped."""
    is_base64 = (
        _is_truthy_arg(request.headers.get("X-Body-Base64"))
        or _is_truthy_arg(request.args.get("isBase64Encoded"))
    )
    try:
        input_data, output_data = decode_request_body(request.get_data(), is_base64)
    except EnvelopeError as exc:
        return jsonify(bad_request_body(str(exc))), 400

    result = judge(input_data, output_data, legacy_post_edges=_legacy_post_edges())
    _log_judgement(result)
    return jsonify(ok_body(result.to_dict()))


@app.route("/invoke", methods=["POST"])
def invoke_endpoint():
    """Local emulation of the serverless HTTP-trigger entry point."""
    event = request.get_json(force=True, silent=True)
    response = handle_trigger_event(event, legacy_post_edges=_legacy_post_edges())
    print(f"[JUDGE] invoke statusCode={response['statusCode']}")
    return jsonify(response)


app.add_url_rule("/api/health", endpoint="api_health", view_func=health_endpoint, methods=["GET"])
app.add_url_rule("/api/judge", endpoint="api_judge", view_func=judge_endpoint, methods=["POST"])
app.add_url_rule("/api/invoke", endpoint="api_invoke", view_func=invoke_endpoint, methods=["POST"])


# -- API catch-all (404 for unknown /api/* routes) -------------------
@app.route("/api/<path:rest>", methods=["GET", "POST", "PUT", "DELETE", "PATCH"])
def api_catch_all(rest):
    return jsonify({"error": f"/api/{rest} not found"}), 404


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    print(f"[OK] Course-plan judge listening on port {port}")
    app.run(host="0.0.0.0", port=port, debug=debug)
