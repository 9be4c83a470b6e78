"""Template scanning, literal encoding, substitution, binding and caching.

- scanner.py: ``TemplateParser`` and ``scan_template``
- encoder.py: value to SQL literal conversion
- substitution.py: splicing literals into the template
- binder.py: ``SQLBinder`` and the one-shot ``bind`` helpers
- cache.py: ``TemplateCache`` keyed by caller-chosen identity
"""

from sqlbind.core.binder import SQLBinder, bind, bind_one
from sqlbind.core.cache import CacheStats, TemplateCache, get_default_cache
from sqlbind.core.encoder import (
    encode_value,
    escape_text,
    null_if_empty,
    render_literal,
    to_json_literal,
    to_json_path,
    to_sql,
)
from sqlbind.core.scanner import TemplateParser, normalize_placeholder_name, scan_template
from sqlbind.core.substitution import substitute

__all__ = (
    "CacheStats",
    "SQLBinder",
    "TemplateCache",
    "TemplateParser",
    "bind",
    "bind_one",
    "encode_value",
    "escape_text",
    "get_default_cache",
    "normalize_placeholder_name",
    "null_if_empty",
    "render_literal",
    "scan_template",
    "substitute",
    "to_json_literal",
    "to_json_path",
    "to_sql",
)
