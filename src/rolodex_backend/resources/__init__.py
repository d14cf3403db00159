"""Query and update pipelines for the exposed resource collections."""

from rolodex_backend.resources.configuration import (
    ResourceConfiguration,
    ResourceRegistry,
    SanitizationPolicy,
    get_default_registry,
)
from rolodex_backend.resources.engine import apply_query
from rolodex_backend.resources.errors import (
    NotFoundError,
    QueryParameterError,
    RolodexError,
    StoreError,
    ValidationError,
)
from rolodex_backend.resources.locks import RecordLockRegistry
from rolodex_backend.resources.pagination import Page, PageMeta, paginate, populate
from rolodex_backend.resources.query import (
    PageWindow,
    QueryDescriptor,
    SortKey,
    parse_query,
)
from rolodex_backend.resources.records import ResourceRecord
from rolodex_backend.resources.sanitizer import escape_markup, sanitize
from rolodex_backend.resources.serializer import ResourceSerializer

__all__ = [
    "NotFoundError",
    "Page",
    "PageMeta",
    "PageWindow",
    "QueryDescriptor",
    "QueryParameterError",
    "RecordLockRegistry",
    "ResourceConfiguration",
    "ResourceRecord",
    "ResourceRegistry",
    "ResourceSerializer",
    "RolodexError",
    "SanitizationPolicy",
    "SortKey",
    "StoreError",
    "ValidationError",
    "apply_query",
    "escape_markup",
    "get_default_registry",
    "paginate",
    "parse_query",
    "populate",
    "sanitize",
]
