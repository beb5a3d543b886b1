"""Offset-based auto-pagination.

Architecture:
    - paginator.py: lazy item/page sequences driven by a caller-supplied fetch callable
    - telemetry.py: structured logging for page fetches

Usage:
    Resource sub-clients wrap ``RequestExecutor.get_json`` in a fetch callable
    and hand it to ``paginate_items`` together with an item projection.
"""

from __future__ import annotations

from .paginator import FetchPage, paginate_items, paginate_pages

__all__ = [
    "FetchPage",
    "paginate_items",
    "paginate_pages",
]
