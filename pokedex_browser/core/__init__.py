"""
Core domain layer: record model, filter/page state and the view model
that derives the visible page from them.
"""

from .filter_state import FilterConfig, PageState
from .record import Record
from .view_model import ViewModel, ViewSnapshot, apply_filter, paginate

__all__ = [
    "FilterConfig",
    "PageState",
    "Record",
    "ViewModel",
    "ViewSnapshot",
    "apply_filter",
    "paginate",
]
