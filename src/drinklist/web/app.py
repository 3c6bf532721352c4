"""Main Streamlit application for DrinkList."""
import uuid
import streamlit as st

from drinklist.config.settings import get_settings, get_streamlit_settings
from drinklist.domain.types import StoreSnapshot
from drinklist.services.drink_store import DrinkListStore
from drinklist.utils.logger import get_logger
from drinklist.web.components import (
    render_summary,
    render_drink_form,
    render_drink_list,
    render_warning_banner,
    render_pending_feedback
)

# Initialize logger
logger = get_logger(__name__)


def _log_snapshot(session_id: str):
    def listener(snapshot: StoreSnapshot) -> None:
        logger.debug(
            "Store changed",
            session_id=session_id,
            count=snapshot.count,
            mode=snapshot.mode.value,
            warning=snapshot.warning.visible
        )
    return listener


def init_session_state() -> DrinkListStore:
    """Create the per-session store on first run and return it."""
    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    if 'store' not in st.session_state:
        store = DrinkListStore()
        store.subscribe(_log_snapshot(st.session_state.session_id))
        st.session_state.store = store

    return st.session_state.store


def main() -> None:
    """Render the page for the current session."""
    settings = get_settings()
    ui_settings = get_streamlit_settings()
    st.set_page_config(
        page_title=settings.APP_TITLE,
        page_icon=ui_settings.PAGE_ICON,
        layout=ui_settings.LAYOUT
    )

    try:
        store = init_session_state()
        st.title(settings.APP_TITLE)

        # The banner replaces the page until it is dismissed
        if render_warning_banner(store):
            return

        render_summary(store)
        render_pending_feedback()
        render_drink_form(store)
        st.divider()
        render_drink_list(store)

    except Exception:
        logger.exception(
            "Unhandled error in main application",
            session_id=st.session_state.get('session_id', 'error')
        )
        st.error("Something went wrong. Please try again.")


if __name__ == "__main__":
    main()
