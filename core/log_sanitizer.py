"""
Log Sanitizer - keeps the API-Sports key out of log output
==========================================================

The only secret this service holds is the API-Sports credential. It reaches
the wire as the x-apisports-key header and lives in the environment as
API_SPORTS_KEY (or the legacy API_KEY). Anything that might carry it goes
through here before it is logged:

- header maps       -> sanitize_headers()
- params / extras   -> sanitize_dict()
- free text         -> sanitize()
- request summary   -> safe_log_request()
- response summary  -> safe_log_response()

Usage:
    from core.log_sanitizer import safe_log_request

    logger.debug(safe_log_request("GET", url, params=params, headers=headers))
"""

import os
import re
from typing import Any, Dict, Mapping, Optional

REDACTED = "[REDACTED]"

# Header names (lowercase) whose values are never logged
SENSITIVE_HEADERS = frozenset({
    "x-apisports-key",
    "x-rapidapi-key",
    "x-api-key",
    "authorization",
    "cookie",
    "set-cookie",
})

# Env vars holding the credential; their live values are scrubbed from text
SENSITIVE_ENV_VARS = ("API_SPORTS_KEY", "API_KEY")

# Env values shorter than this are too generic to scrub safely
MIN_SECRET_LENGTH = 8

# Max nesting sanitize_dict will walk
MAX_DEPTH = 5

TOKEN_PATTERNS = (
    re.compile(r"Bearer\s+[A-Za-z0-9\-_\.]+", re.IGNORECASE),
    re.compile(r"\b[A-Za-z0-9]{20,}\b"),  # bare API keys
)

_SENSITIVE_FRAGMENTS = ("token", "secret", "password", "auth")


def _is_sensitive_key(key: str) -> bool:
    """Header/param/extra name looks like it carries a credential."""
    name = key.lower().replace("_", "-").replace(" ", "-")
    if name in SENSITIVE_HEADERS or name.endswith("key"):
        return True
    return any(fragment in name for fragment in _SENSITIVE_FRAGMENTS)


def _get_env_values_to_redact() -> set:
    """Current values of the credential env vars (read on every call)."""
    values = set()
    for var_name in SENSITIVE_ENV_VARS:
        value = os.environ.get(var_name, "").strip()
        if len(value) >= MIN_SECRET_LENGTH:
            values.add(value)
    return values


def sanitize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Copy of a header map with credential values replaced."""
    if not headers:
        return {}
    return {
        str(name): REDACTED if _is_sensitive_key(str(name)) else str(value)
        for name, value in headers.items()
    }


def sanitize_dict(data: Optional[Mapping[str, Any]], depth: int = 0) -> Dict[str, Any]:
    """
    Recursive copy of a mapping with credentials redacted.

    A value is redacted when its key looks sensitive, or when it equals the
    live API-Sports key from the environment.
    """
    if not data:
        return {}
    if depth > MAX_DEPTH:
        return dict(data)

    env_values = _get_env_values_to_redact()
    clean = {}
    for key, value in data.items():
        name = str(key)
        if _is_sensitive_key(name):
            clean[name] = REDACTED
        elif isinstance(value, Mapping):
            clean[name] = sanitize_dict(value, depth + 1)
        elif isinstance(value, str) and value in env_values:
            clean[name] = REDACTED
        else:
            clean[name] = value
    return clean


def sanitize(text: Optional[str], redact_tokens: bool = True) -> Optional[str]:
    """
    Scrub the live credential (and optionally anything token-shaped) from text.

    redact_tokens also hits long alphanumeric runs, so leave it off for
    upstream bodies that carry ids.
    """
    if not text:
        return text

    for value in _get_env_values_to_redact():
        text = text.replace(value, REDACTED)

    if redact_tokens:
        for pattern in TOKEN_PATTERNS:
            text = pattern.sub(REDACTED, text)

    return text


def safe_log_request(
    method: str,
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    One-line request summary, e.g.
    "GET https://.../games params={'league': '1', ...} (auth headers present)".

    Header values are never included.
    """
    line = f"{method} {url}"
    if params:
        line += f" params={sanitize_dict(params)}"
    if headers and REDACTED in sanitize_headers(headers).values():
        line += " (auth headers present)"
    return line


def safe_log_response(
    status_code: int,
    url: str,
    response_text: Optional[str] = None,
    max_length: int = 200,
) -> str:
    """One-line response summary with the body truncated and scrubbed."""
    line = f"HTTP {status_code} from {url}"
    if response_text:
        body = response_text[:max_length]
        if len(response_text) > max_length:
            body += "..."
        line += f" response={sanitize(body, redact_tokens=False)}"
    return line
