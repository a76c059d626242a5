from .core import (
    SENTINEL_POSITION,
    # Core types
    Change,
    DiffPolicy,
    DiffRecord,
    DiffReport,
    KeyEntry,
    ValueKind,
    # Comparison
    compare,
    diff_documents,
    json_diff,
    locate,
    values_equal,
)
from .documents import (
    Document,
    DocumentError,
    DocumentParseError,
    DocumentReadError,
    load_document,
    same_content,
)
from .version import JSONDELTA_VERSION

__all__ = [
    # Version
    "JSONDELTA_VERSION",
    # Core types
    "Change",
    "DiffPolicy",
    "DiffRecord",
    "DiffReport",
    "KeyEntry",
    "ValueKind",
    # Comparison
    "compare",
    "json_diff",
    "values_equal",
    "diff_documents",
    # Positions
    "locate",
    "SENTINEL_POSITION",
    # Documents
    "Document",
    "DocumentError",
    "DocumentReadError",
    "DocumentParseError",
    "load_document",
    "same_content",
]
