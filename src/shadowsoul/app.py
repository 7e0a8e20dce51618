"""Shadow — Streamlit app for shadow length and soul silhouette readings."""

import datetime
import html

import streamlit as st
import structlog
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from shadowsoul.compute import InputValidationError, run  # noqa: E402
from shadowsoul.i18n import t  # noqa: E402
from shadowsoul.logging_config import setup_logging  # noqa: E402
from shadowsoul.models import (  # noqa: E402
    DIRECTIONS,
    FOOTWEAR,
    HEIGHT_UNITS,
    QueryInput,
)
from shadowsoul.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from shadowsoul.weather import (  # noqa: E402
    GeocodingError,
    fetch_weather,
    geocode_city,
    weather_icon,
)

setup_logging()
log = structlog.get_logger(__name__)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# The first run returns None; the rerun triggered by streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="◐",
    layout="centered",
)

# --- Session state initialization ---
if "reading" not in st.session_state:
    st.session_state.reading = None
if "weather" not in st.session_state:
    st.session_state.weather = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None
if "no_shadow_altitude" not in st.session_state:
    st.session_state.no_shadow_altitude = None
if "lat" not in st.session_state:
    st.session_state.lat = 40.7128
if "lon" not in st.session_state:
    st.session_state.lon = -74.0060

_MIN_CITY_QUERY = 2

# Icon keys from interpretation traits and the weather card
_ICONS: dict[str, str] = {
    "arrow-right": "➜",
    "eye": "👁",
    "circle": "◯",
    "scale": "⚖",
    "book": "📖",
    "trending-up": "📈",
    "telescope": "🔭",
    "ripple": "〰",
    "layers": "☰",
    "cloud": "☁",
    "sun": "☀",
}

# --- Minimal light theme CSS ---
st.markdown(
    """
    <style>
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    h1, h2, h3, h4 { font-weight: 300 !important; }
    .metric-card {
        border: 1px solid rgba(0,0,0,0.08);
        border-radius: 16px;
        padding: 1.2rem 1rem;
        text-align: center;
    }
    .metric-card .value { font-size: 1.6rem; font-weight: 300; }
    .metric-card .label { font-size: 0.8rem; color: #888888; }
    .soul-card {
        background: linear-gradient(135deg, rgba(168,85,247,0.06), rgba(236,72,153,0.06));
        border-radius: 20px;
        padding: 2rem 1.6rem;
        text-align: center;
    }
    .trait-icon { font-size: 1.8rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown(f"# ◐ {t('page_title', _lang)}")
st.caption(t("hero", _lang))

# --- City search (geocoding populates latitude/longitude) ---
city = st.text_input(t("label_city", _lang), placeholder="New York")
if len(city.strip()) >= _MIN_CITY_QUERY:
    try:
        matches = geocode_city(city)
    except GeocodingError as e:
        matches = ()
        st.warning(t("error_city", _lang).format(error=html.escape(str(e))))
    if matches:
        choice = st.selectbox(
            t("label_city_match", _lang),
            options=range(len(matches)),
            format_func=lambda i: matches[i].label,
        )
        if st.button("✓", key="use_city"):
            st.session_state.lat = matches[choice].lat
            st.session_state.lon = matches[choice].lon
            st.rerun()

# --- Input form ---
st.markdown(f"### {t('section_params', _lang)}")
with st.form("shadow_form"):
    col1, col2 = st.columns([3, 1])
    with col1:
        height = st.number_input(
            t("label_height", _lang), min_value=0.0, value=6.0, step=0.1
        )
    with col2:
        height_unit = st.selectbox(t("label_unit", _lang), HEIGHT_UNITS)
    col3, col4 = st.columns(2)
    with col3:
        lat = st.number_input(
            t("label_lat", _lang),
            min_value=-90.0,
            max_value=90.0,
            value=float(st.session_state.lat),
            format="%.4f",
        )
    with col4:
        lon = st.number_input(
            t("label_lon", _lang),
            min_value=-180.0,
            max_value=180.0,
            value=float(st.session_state.lon),
            format="%.4f",
        )
    col5, col6 = st.columns(2)
    with col5:
        direction = st.selectbox(t("label_direction", _lang), DIRECTIONS)
    with col6:
        footwear = st.selectbox(t("label_footwear", _lang), FOOTWEAR)
    col7, col8 = st.columns(2)
    with col7:
        date_val = st.date_input(t("label_date", _lang), value=datetime.date.today())
    with col8:
        time_val = st.time_input(
            t("label_time", _lang), value=datetime.time(12, 0), step=300
        )
    submitted = st.form_submit_button(
        t("btn_calculate", _lang), use_container_width=True
    )

# --- Form submission handler ---
if submitted:
    st.session_state.error_msg = None
    st.session_state.no_shadow_altitude = None
    st.session_state.reading = None
    st.session_state.weather = None
    when_str = f"{date_val.strftime('%Y-%m-%d')} {time_val.strftime('%H:%M')}"
    try:
        reading = run(
            QueryInput(
                height=height,
                height_unit=height_unit,
                latitude=lat,
                longitude=lon,
                direction=direction,
                footwear=footwear,
                when=when_str,
            )
        )
    except InputValidationError as e:
        log.info("input_rejected", error=str(e))
        st.session_state.error_msg = t("error_input", _lang).format(
            error=html.escape(str(e))
        )
    else:
        if reading.result.shadow_exists:
            st.session_state.reading = reading
            st.session_state.weather = fetch_weather(lat, lon)
        else:
            st.session_state.no_shadow_altitude = reading.result.sun_altitude_deg

# --- Error / no-shadow messages ---
if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

if st.session_state.no_shadow_altitude is not None:
    st.warning(
        f"**{t('no_shadow_title', _lang)}**: "
        + t("no_shadow_body", _lang).format(
            altitude=st.session_state.no_shadow_altitude
        )
    )

# --- Results ---
reading = st.session_state.reading
if reading is not None:
    result = reading.result
    weather = st.session_state.weather

    st.markdown(f"### {t('section_measurements', _lang)}")
    if weather is not None:
        st.markdown(
            f"{_ICONS[weather_icon(weather.description)]} **{html.escape(weather.description)}** · "
            + t("weather_caption", _lang).format(
                temperature=weather.temperature,
                cloud_cover=weather.cloud_cover,
                visibility=html.escape(weather.visibility),
            )
        )

    cards = [
        (f"{result.length_feet:.2f}", t("unit_feet", _lang)),
        (result.planck_lengths, t("unit_planck", _lang)),
        (result.light_years, t("unit_light_years", _lang)),
        (f"{result.horse_units:.2f}", t("unit_horses", _lang)),
    ]
    for col, (value, label) in zip(st.columns(4), cards):
        col.markdown(
            f"<div class='metric-card'><div class='value'>{value}</div>"
            f"<div class='label'>{label}</div></div>",
            unsafe_allow_html=True,
        )

    st.plotly_chart(
        render_plotly_chart(reading),
        use_container_width=True,
        config={"displayModeBar": False},
    )

    interpretation = reading.interpretation
    st.markdown(f"### {t('section_soul', _lang)}")
    st.caption(t("soul_subtitle", _lang))
    st.markdown(
        f"<div class='soul-card'><h3>{interpretation.title}</h3>"
        f"<p>{html.escape(interpretation.description)}</p></div>",
        unsafe_allow_html=True,
    )
    for col, trait in zip(st.columns(3), interpretation.traits):
        col.markdown(
            f"<div style='text-align:center'>"
            f"<div class='trait-icon'>{_ICONS.get(trait.icon, '✦')}</div>"
            f"<h5>{trait.name}</h5><p style='color:#888'>{trait.description}</p></div>",
            unsafe_allow_html=True,
        )
