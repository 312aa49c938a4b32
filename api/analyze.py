"""Vercel serverless function for ranking polls."""

import json
import sys
from pathlib import Path

# Add the project root to the path so we can import core modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.analyze import analyze_poll, AnalysisError  # noqa: E402
from core.parsers.json_poll import reject_duplicate_keys  # noqa: E402

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Source name for polls sent inline; selects the JSON parser
INLINE_SOURCE = "request.json"


class BadRequestError(Exception):
    """The request doesn't carry a poll we can read."""
    pass


def handler(request):
    """Handle incoming requests to rank polls.

    Accepts:
    - POST with JSON body: {"poll": {"Pizza": [0, 2, 3], ...}, "name": "Lunch"}
    - POST with multipart form: poll file in the 'file' field, with optional
      'filename' (selects the format) and 'name' (overrides the poll name)

    Returns JSON with the ranking from each voting system.
    """
    if request.method == "OPTIONS":
        return create_response("", status=204, headers=CORS_HEADERS)

    if request.method != "POST":
        return create_response({"error": "Method not allowed. Use POST."}, status=405)

    try:
        source, content, name = read_poll(request)
        result = analyze_poll(source, content, name=name)
    except (BadRequestError, AnalysisError) as e:
        return create_response({"error": str(e)}, status=400)
    except Exception as e:
        return create_response({"error": f"Internal error: {e}"}, status=500)

    return create_response(result.to_dict())


def read_poll(request) -> tuple[str, bytes, str | None]:
    """Extract (source, content, poll name) from a request.

    Raises:
        BadRequestError: If the content type is unsupported or the poll is missing
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        return _read_json_body(request)
    if "multipart/form-data" in content_type:
        return _read_upload(request)
    raise BadRequestError(f"Unsupported content type: {content_type}")


def _read_json_body(request) -> tuple[str, bytes, str | None]:
    try:
        data = json.loads(request.body.decode("utf-8"),
                          object_pairs_hook=reject_duplicate_keys)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadRequestError(f"Invalid JSON: {e}") from e
    except ValueError as e:
        raise BadRequestError(str(e)) from e

    poll = data.get("poll") if isinstance(data, dict) else None
    if not poll:
        raise BadRequestError("Missing 'poll' in request body")
    if not isinstance(poll, dict):
        raise BadRequestError("'poll' must map each candidate to a list of grades")

    content = json.dumps(poll).encode("utf-8")
    return INLINE_SOURCE, content, data.get("name") or "Poll"


def _read_upload(request) -> tuple[str, bytes, str | None]:
    # Vercel's request object handles multipart parsing
    file_data = request.files.get("file")
    if not file_data:
        raise BadRequestError("Missing 'file' in form data")

    source = request.form.get("filename") or file_data.filename or "upload"
    return source, file_data.read(), request.form.get("name")


def create_response(body, status: int = 200, headers: dict | None = None):
    """Create a response object in the shape the Vercel Python runtime expects."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        **(headers or {}),
    }
    if isinstance(body, dict):
        body = json.dumps(body)
    return {"statusCode": status, "headers": response_headers, "body": body}
