import logging
import os

import streamlit as st

from src.infrastructure.config import Settings
from src.infrastructure.facilities.overpass import OverpassFacilitySearch
from src.infrastructure.llm.factory import build_llm
from src.infrastructure.practitioners.factory import build_practitioner_store
from src.application.schemas import AggregateResult, LocationChatRequest
from src.application.use_cases import LocationChatUseCase
from src.domain.rules import is_emergency


logger = logging.getLogger(__name__)


DISCLAIMER = (
    "⚕️ **DISCLAIMER:** This is NOT medical advice and NOT a diagnosis. "
    "This assistant is for educational purposes only. "
    "If you experience emergency symptoms, seek immediate care (call local emergency number)."
)


@st.cache_resource
def _get_use_case() -> LocationChatUseCase:
    settings = Settings()
    return LocationChatUseCase(
        llm=build_llm(settings),
        practitioners=build_practitioner_store(settings),
        facilities=OverpassFacilitySearch(settings),
        branch_timeout=settings.branch_timeout_seconds,
        max_workers=settings.worker_pool_size,
    )


def _init_session_state():
    if "chat_messages" not in st.session_state:
        st.session_state.chat_messages = []


def _render_sidebar(settings: Settings):
    st.sidebar.title("⚙️ Settings")

    st.sidebar.markdown("### Model")
    if settings.ai_backend == "mistral":
        st.sidebar.caption(f"**Hosted:** {settings.mistral_model}")
        if not settings.mistral_api_key:
            st.sidebar.warning("⚠️ MISTRAL_API_KEY missing; advice will use the fallback text")
    else:
        st.sidebar.caption(f"**Local:** {settings.ollama_model} @ {settings.ollama_base_url}")

    st.sidebar.markdown("### Your Location")
    use_location = st.sidebar.checkbox("Search near me", value=True)
    lat = st.sidebar.number_input("Latitude", min_value=-90.0, max_value=90.0, value=17.385, format="%.4f")
    lon = st.sidebar.number_input("Longitude", min_value=-180.0, max_value=180.0, value=78.4867, format="%.4f")
    if use_location:
        st.session_state["location"] = (lat, lon)
    else:
        st.session_state["location"] = None

    st.sidebar.divider()

    if st.sidebar.button("🔄 New Conversation", use_container_width=True):
        st.session_state.chat_messages = []
        st.rerun()


def main():
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    st.set_page_config(
        page_title="Nearby Care Assistant",
        page_icon="⚕️",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    settings = Settings()
    _init_session_state()
    _render_sidebar(settings)

    st.markdown("# 🏥 Nearby Care Assistant")
    st.info(DISCLAIMER)

    for msg in st.session_state.chat_messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    user_input = st.chat_input("Describe your symptoms...")

    if user_input:
        st.session_state.chat_messages.append({"role": "user", "content": user_input})
        with st.chat_message("user"):
            st.markdown(user_input)

        location = st.session_state.get("location")
        request = LocationChatRequest(
            message=user_input,
            latitude=location[0] if location else None,
            longitude=location[1] if location else None,
        )

        with st.spinner("⏳ Looking for advice, doctors and hospitals..."):
            result = _get_use_case().handle(request)

        st.session_state.chat_messages.append({
            "role": "assistant",
            "content": format_result_for_chat(result, emergency=is_emergency(user_input)),
        })
        st.rerun()


def format_result_for_chat(result: AggregateResult, emergency: bool = False) -> str:
    """Format the aggregate as a markdown chat message."""
    lines = []

    if emergency:
        lines.append("## ⚠️ EMERGENCY")
        lines.append("**Your message mentions symptoms that may need urgent care. "
                     "Call your local emergency number or go to the nearest emergency room.**\n")

    lines.append(f"## 👨‍⚕️ Suggested Specialist: {result.specialization}\n")
    lines.append(result.suggestion_primary)
    lines.append("")
    lines.append(result.suggestion_secondary)
    lines.append("")

    lines.append("## 🩺 Doctors Near You")
    if result.matched_doctors:
        for doctor in result.matched_doctors:
            lines.append(f"- **{doctor.name}** ({doctor.specialization}) · {doctor.distance_label}")
    else:
        lines.append("- No available doctors found within 10 km")
    lines.append("")

    lines.append("## 🏥 Nearby Hospitals")
    if result.nearby_facilities:
        for facility in result.nearby_facilities:
            c = facility.coordinate
            maps_url = f"https://www.openstreetmap.org/?mlat={c.latitude}&mlon={c.longitude}#map=17/{c.latitude}/{c.longitude}"
            lines.append(f"- **{facility.name}** · [View on map]({maps_url})")
    else:
        lines.append("- No hospitals found nearby")
    lines.append("")

    lines.append("---")
    lines.append("⚠️ **Reminder:** This is NOT medical advice. Always consult a licensed healthcare professional.")

    return "\n".join(lines)


if __name__ == "__main__":
    main()
