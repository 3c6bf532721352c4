"""UI components for DrinkList."""
from .summary import render_summary
from .drink_form import render_drink_form
from .drink_list import render_drink_list
from .warning_banner import render_warning_banner
from .feedback import render_feedback, render_pending_feedback, show_result

__all__ = [
    'render_summary',
    'render_drink_form',
    'render_drink_list',
    'render_warning_banner',
    'render_feedback',
    'render_pending_feedback',
    'show_result'
]
