"""sqlbind: render SQL templates with named placeholders into finished SQL text."""

from sqlbind import config, core, exceptions, types, utils
from sqlbind.__metadata__ import __version__
from sqlbind.config import JSON_PATH_LITERAL, SQL_LITERAL, SQL_STANDARD_LITERAL, LiteralConfig
from sqlbind.core import (
    CacheStats,
    SQLBinder,
    TemplateCache,
    TemplateParser,
    bind,
    bind_one,
    encode_value,
    get_default_cache,
    null_if_empty,
    render_literal,
    scan_template,
    substitute,
    to_json_literal,
    to_json_path,
    to_sql,
)
from sqlbind.exceptions import (
    BindAfterFinalizeError,
    BindError,
    DuplicateBindError,
    EmptyPlaceholderMarkerError,
    EmptyVariableNameError,
    EncodeError,
    MissingBindValueError,
    SerializationError,
    SQLBindError,
    TemplateCacheKeyConflict,
    TemplateError,
    UnsupportedDurationRangeError,
)
from sqlbind.types import Occurrence, RawJSON

__all__ = (
    "JSON_PATH_LITERAL",
    "SQL_LITERAL",
    "SQL_STANDARD_LITERAL",
    "BindAfterFinalizeError",
    "BindError",
    "CacheStats",
    "DuplicateBindError",
    "EmptyPlaceholderMarkerError",
    "EmptyVariableNameError",
    "EncodeError",
    "LiteralConfig",
    "MissingBindValueError",
    "Occurrence",
    "RawJSON",
    "SQLBindError",
    "SQLBinder",
    "SerializationError",
    "TemplateCache",
    "TemplateCacheKeyConflict",
    "TemplateError",
    "TemplateParser",
    "UnsupportedDurationRangeError",
    "__version__",
    "bind",
    "bind_one",
    "config",
    "core",
    "encode_value",
    "exceptions",
    "get_default_cache",
    "null_if_empty",
    "render_literal",
    "scan_template",
    "substitute",
    "to_json_literal",
    "to_json_path",
    "to_sql",
    "types",
    "utils",
)
