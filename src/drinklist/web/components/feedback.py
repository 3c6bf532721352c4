"""Feedback component for showing why an action was refused."""
from typing import Optional, List
import streamlit as st

from drinklist.services.base_service import Result

FEEDBACK_KEY = 'feedback'


def render_feedback(message: str, suggestions: Optional[List[str]] = None) -> None:
    """
    Display an error message with optional suggestions.

    Args:
        message: The message to display
        suggestions: Optional list of hints shown under the message
    """
    st.error(message)
    for suggestion in suggestions or []:
        st.caption(f"• {suggestion}")


def show_result(result: Result) -> None:
    """Queue a failed result for display on the next rerun."""
    if not result.success:
        st.session_state[FEEDBACK_KEY] = result


def render_pending_feedback() -> None:
    """Display and clear the feedback queued by widget callbacks."""
    result = st.session_state.pop(FEEDBACK_KEY, None)
    if result is not None:
        render_feedback(result.error, suggestions=result.suggestions)
