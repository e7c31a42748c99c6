"""String validators capability used by the built-in catalog.

The catalog never validates formats itself: it calls a
:class:`StringValidators` implementation. :class:`DefaultStringValidators`
delegates e-mail and URL checks to pydantic's validated types and keeps the
remaining rules as small regular-expression or codec checks.

Also home to the two loose-input conversions the catalog shares:
:func:`as_text` and :func:`to_number`.
"""

from __future__ import annotations

import binascii
import json
import math
import re
from base64 import b64decode
from typing import Any, Protocol

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

_INT_RE = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"[-+]?[0-9]*(?:\.[0-9]*)?(?:[eE][-+]?[0-9]+)?")
_ALPHA_RE = re.compile(r"[A-Za-z]+")
_ALNUM_RE = re.compile(r"[A-Za-z0-9]+")
_ASCII_RE = re.compile(r"[\x00-\x7f]+")
_MONGO_ID_RE = re.compile(r"[0-9a-fA-F]{24}")
_LABEL_RE = re.compile(r"[a-z0-9\u00a1-\uffff](?:[a-z0-9\u00a1-\uffff-]*[a-z0-9\u00a1-\uffff])?", re.I)
_TLD_RE = re.compile(r"(?:[a-z\u00a1-\uffff]{2,}|xn--[a-z0-9-]{2,})", re.I)

_BOOLEAN_TEXT = frozenset({"true", "false", "1", "0"})
_NOT_NUMBERS = frozenset({"", ".", "-", "+"})
_URL_SCHEMES = frozenset({"http", "https", "ftp"})

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)
_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def as_text(value: Any) -> str:
    """Render *value* the way it would appear in a query string.

    Bools become ``"true"``/``"false"``, ``None`` becomes ``"null"`` and
    integral floats lose their fraction (``1.0`` -> ``"1"``).
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> int | float:
    """Convert loose input to a number.

    Only plain ASCII decimal text converts; ``None``, blank text, digit
    separators and anything else unparseable convert to NaN.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if not text.isascii() or text in _NOT_NUMBERS or not _FLOAT_RE.fullmatch(text):
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def is_nan(value: Any) -> bool:
    """Whether *value* is not a usable number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return True
    return math.isnan(value)


class StringValidators(Protocol):
    """Named string-format predicates the built-in catalog depends on."""

    def is_email(self, value: str) -> bool: ...

    def is_url(self, value: str) -> bool: ...

    def is_fqdn(self, value: str) -> bool: ...

    def is_alpha(self, value: str) -> bool: ...

    def is_alphanumeric(self, value: str) -> bool: ...

    def is_ascii(self, value: str) -> bool: ...

    def is_base64(self, value: str) -> bool: ...

    def is_boolean(self, value: str) -> bool: ...

    def is_int(self, value: str) -> bool: ...

    def is_float(self, value: str) -> bool: ...

    def is_json(self, value: str) -> bool: ...

    def is_mongo_id(self, value: str) -> bool: ...

    def is_empty(self, value: str) -> bool: ...


class DefaultStringValidators:
    """Stock :class:`StringValidators` implementation."""

    def is_email(self, value: str) -> bool:
        """Bare address only; the display-name form ``Name <addr>`` is rejected."""
        try:
            address = _email_adapter.validate_python(value)
        except ValidationError:
            return False
        return address.casefold() == value.casefold()

    def is_url(self, value: str) -> bool:
        """http, https or ftp URL whose host has a TLD or is an IPv4 address.

        The scheme may be omitted.
        """
        if not value or any(ch.isspace() for ch in value):
            return False
        candidate = value if "://" in value else f"http://{value}"
        try:
            url = _url_adapter.validate_python(candidate)
        except ValidationError:
            return False
        return url.scheme in _URL_SCHEMES and bool(url.host) and self._has_valid_host(url.host)

    def _has_valid_host(self, host: str) -> bool:
        return self.is_fqdn(host) or _is_ipv4(host)

    def is_fqdn(self, value: str) -> bool:
        """Fully qualified domain name with an alphabetic TLD; trailing dot allowed."""
        if not value or len(value) > 253:
            return False
        name = value[:-1] if value.endswith(".") else value
        labels = name.split(".")
        if len(labels) < 2 or not _TLD_RE.fullmatch(labels[-1]):
            return False
        return all(len(label) <= 63 and _LABEL_RE.fullmatch(label) for label in labels)

    def is_alpha(self, value: str) -> bool:
        return bool(_ALPHA_RE.fullmatch(value))

    def is_alphanumeric(self, value: str) -> bool:
        return bool(_ALNUM_RE.fullmatch(value))

    def is_ascii(self, value: str) -> bool:
        return bool(_ASCII_RE.fullmatch(value))

    def is_base64(self, value: str) -> bool:
        if len(value) % 4:
            return False
        try:
            b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            return False
        return True

    def is_boolean(self, value: str) -> bool:
        return value in _BOOLEAN_TEXT

    def is_int(self, value: str) -> bool:
        return bool(_INT_RE.fullmatch(value))

    def is_float(self, value: str) -> bool:
        if value in _NOT_NUMBERS:
            return False
        return bool(_FLOAT_RE.fullmatch(value))

    def is_json(self, value: str) -> bool:
        """Text decoding to a JSON object or array."""
        try:
            decoded = json.loads(value)
        except ValueError:
            return False
        return isinstance(decoded, (dict, list))

    def is_mongo_id(self, value: str) -> bool:
        return bool(_MONGO_ID_RE.fullmatch(value))

    def is_empty(self, value: str) -> bool:
        return len(value) == 0


def _is_ipv4(host: str) -> bool:
    parts = host.split(".")
    return len(parts) == 4 and all(p.isdigit() and int(p) <= 255 for p in parts)
