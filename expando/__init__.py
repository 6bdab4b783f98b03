"""Expand `(a|b)` alternation groups in text lines into every literal phrasing."""

from expando.core.expand.expander import expand, iter_expand

__all__ = ["expand", "iter_expand"]
__version__ = "0.1.0"
