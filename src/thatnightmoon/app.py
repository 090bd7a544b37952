"""ThatNightMoon — Streamlit app for tonight's moon phase."""

import datetime
import logging

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from thatnightmoon.compute import run  # noqa: E402
from thatnightmoon.config import configure_logging, load_settings  # noqa: E402
from thatnightmoon.renderers.plotly_2d import render_illumination_chart  # noqa: E402
from thatnightmoon.renderers.svg_2d import render_dashboard_html  # noqa: E402
from thatnightmoon.starfield import generate_starfield  # noqa: E402

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Moon Phase",
    page_icon="☾",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "show_forecast" not in st.session_state:
    st.session_state.show_forecast = False
if "clock_seq" not in st.session_state:
    st.session_state.clock_seq = 0
if "stars" not in st.session_state:
    st.session_state.stars = generate_starfield(settings.star_count, settings.star_seed)

# --- Dark theme CSS (static) ---
st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0d1b35 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    [data-testid="stMainBlockContainer"] {
        padding-top: 1rem !important;
    }
    [data-testid="stButton"] button {
        background-color: rgba(201, 169, 110, 0.15) !important;
        color: #e8d5a3 !important;
        border: 1px solid rgba(201, 169, 110, 0.6) !important;
        border-radius: 6px !important;
        font-weight: 600;
    }
    [data-testid="stButton"] button:hover {
        background-color: rgba(201, 169, 110, 0.3) !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def _browser_now() -> datetime.datetime | None:
    """Current instant from the browser clock, in the browser's UTC offset.

    Returns None on the first run, before the JS call has answered.
    """
    # getTimezoneOffset() is UTC - local, in minutes
    result = streamlit_js_eval(
        js_expressions="[Date.now(), new Date().getTimezoneOffset()]",
        key=f"_clock_{st.session_state.clock_seq}",
        height=0,
    )
    if not result:
        return None
    epoch_ms, offset_min = result
    tz = datetime.timezone(datetime.timedelta(minutes=-int(offset_min)))
    return datetime.datetime.fromtimestamp(epoch_ms / 1000, tz=tz)


_now = _browser_now()
if _now is None:
    # Server clock until the browser answers
    _now = datetime.datetime.now().astimezone()
    logger.debug("browser clock not available yet, using server clock %s", _now)

dashboard = run(_now, forecast_days=settings.forecast_days)

# --- Controls ---
col1, col2, _ = st.columns([1, 1, 4])
with col1:
    if st.button("↻ Update to Today", key="update_btn", use_container_width=True):
        # New key → streamlit_js_eval re-reads the browser clock
        st.session_state.clock_seq += 1
        st.rerun()
with col2:
    forecast_label = "Hide Forecast" if st.session_state.show_forecast else "7-Day Forecast"
    if st.button(forecast_label, key="forecast_btn", use_container_width=True):
        st.session_state.show_forecast = not st.session_state.show_forecast
        st.rerun()

# --- Dashboard ---
page_html = render_dashboard_html(
    dashboard,
    stars=st.session_state.stars,
    show_forecast=st.session_state.show_forecast,
)
components.html(page_html, height=900 if st.session_state.show_forecast else 680, scrolling=True)

if st.session_state.show_forecast:
    st.plotly_chart(
        render_illumination_chart(dashboard),
        use_container_width=True,
        config={"displayModeBar": False},
    )
