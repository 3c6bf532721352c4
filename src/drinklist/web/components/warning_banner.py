"""Warning banner shown when the drink count reaches a threshold."""
import streamlit as st

from drinklist.services.drink_store import DrinkListStore


def render_warning_banner(store: DrinkListStore) -> bool:
    """
    Render the warning if it is armed.

    Args:
        store: Store owning the warning state

    Returns:
        True if the banner is showing and the rest of the page should be hidden
    """
    warning = store.warning
    if not warning.visible:
        return False

    with st.container(border=True):
        st.header("Warning!")
        st.write(warning.message)
        st.button(
            "Continue drinking",
            key="dismiss_warning",
            on_click=store.dismiss_warning
        )
    return True
