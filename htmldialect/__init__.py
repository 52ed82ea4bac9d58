from .element import Element, makeelement
from .errors import InvalidOperation, NotFound
from .reference import (
    DEFAULT_REFERENCE,
    HTML5Reference,
    Reference,
    XHTMLReference,
    escape,
    unescape,
)

__all__ = [
    "DEFAULT_REFERENCE",
    "Element",
    "HTML5Reference",
    "InvalidOperation",
    "NotFound",
    "Reference",
    "XHTMLReference",
    "escape",
    "makeelement",
    "unescape",
]
