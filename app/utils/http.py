from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True accepts bodies sent without a JSON Content-Type
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        return schema_cls().load(payload), None
    except ValidationError as err:
        return None, err.messages


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def arg_bool(name: str, default: bool = False) -> bool:
    val = request.args.get(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")
