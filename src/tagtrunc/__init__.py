"""tagtrunc - markup-aware truncation of HTML fragments."""

from tagtrunc.core.truncate import trunc, truncate, truncate_fragment

__version__ = "1.0.0"

__all__ = ["__version__", "trunc", "truncate", "truncate_fragment"]
