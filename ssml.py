"""Helpers for building SSML documents from authored templates.

Templates are written as indented, multi-line strings for readability. The
helpers here escape any interpolated values into XML entities and collapse the
layout whitespace so the result is compact and safe to send to the voice
service.

Example::

    >>> ssml(["<speak>", "</speak>"], ['"1 + 1 > 1"'])
    '<speak>&quot;1 + 1 &gt; 1&quot;</speak>'
"""

import re
from string import Formatter
from typing import Any, List, Optional, Sequence
from xml.sax.saxutils import escape as _xml_escape

_WHITESPACE_RE = re.compile(r"\s+")
_SPEAK_RE = re.compile(r"^<speak\b[^>]*>.*</speak>$", re.DOTALL)


def escape(value: Any) -> str:
    """Replace ``&``, ``<``, ``>`` and ``"`` with their XML entities.

    Each character of the original value is escaped exactly once, so entities
    produced here are never escaped again.
    """
    if value is None:
        return ""
    return _xml_escape(str(value), {'"': "&quot;"})


def normalize(text: str) -> str:
    """Collapse layout whitespace, including around tags."""
    text = _WHITESPACE_RE.sub(" ", text.strip())
    return text.replace(" <", "<").replace("> ", ">")


def ssml(fragments: Sequence[str], values: Sequence[Any] = ()) -> str:
    """Join trusted literal ``fragments`` with escaped dynamic ``values``.

    ``fragments`` surround the values, so a well formed call has one more
    fragment than values. A missing value counts as empty text and surplus
    values are ignored.
    """
    if not fragments:
        return ""
    parts: List[str] = [fragments[0]]
    for i, fragment in enumerate(fragments[1:]):
        value = values[i] if i < len(values) else ""
        parts.append(escape(value))
        parts.append(fragment)
    return normalize("".join(parts))


def render(template: str, **values: Any) -> str:
    """Render a ``str.format`` style template through :func:`ssml`.

    Placeholders such as ``{equation}`` or ``{equation!r:>12}`` become escaped
    dynamic values, the rest of the template is literal markup. Literal braces
    are written ``{{``/``}}``. A placeholder with no matching value renders as
    empty text, and a template with unbalanced braces is taken as all literal.
    """
    formatter = Formatter()
    try:
        parsed = list(formatter.parse(template))
    except ValueError:
        return ssml([template])

    fragments: List[str] = []
    inputs: List[Any] = []
    pending = ""
    for literal, field, spec, conversion in parsed:
        pending += literal
        if field is None:
            continue
        fragments.append(pending)
        inputs.append(_format_value(formatter, values.get(field), spec, conversion))
        pending = ""
    fragments.append(pending)
    return ssml(fragments, inputs)


def _format_value(formatter: Formatter, value: Any, spec: Optional[str], conversion: Optional[str]) -> Any:
    if value is None:
        return None
    try:
        return formatter.format_field(formatter.convert_field(value, conversion), spec or "")
    except (TypeError, ValueError):
        # unusable conversion or format spec for this value
        return value


def is_ssml(text: str) -> bool:
    """Return True when ``text`` is a complete ``<speak>`` document."""
    return bool(_SPEAK_RE.match(text.strip()))
