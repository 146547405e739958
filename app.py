"""Passforge -- Streamlit web interface."""

import streamlit as st

from passforge import GenerationOptions, MAX_SCORE, clamp_score
from passforge.adapter import PasswordController

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_GAUGE = _LUCIDE.format(s=20, paths=(
    '<path d="m12 14 4-4"/><path d="M3.34 19a10 10 0 1 1 17.32 0"/>'
))

ICON_DICES = _LUCIDE.format(s=20, paths=(
    '<rect width="12" height="12" x="2" y="10" rx="2" ry="2"/>'
    '<path d="m17.92 14 3.5-3.5a2.24 2.24 0 0 0 0-3l-5-4.92a2.24 2.24 0 0 0-3 0L10 6"/>'
    '<path d="M6 18h.01"/><path d="M10 14h.01"/>'
    '<path d="M15 6h.01"/><path d="M18 9h.01"/>'
))


def _score_color(score: int) -> str:
    if score < 40:
        return "#d32f2f"
    if score < 70:
        return "#f57c00"
    if score < MAX_SCORE:
        return "#fbc02d"
    return "#388e3c"


class StreamlitAdapter:
    """UI adapter backed by Streamlit widgets."""

    def __init__(self, options: GenerationOptions | None = None, password: str = ""):
        self.options = options
        self.password = password

    def read_options(self) -> GenerationOptions:
        return self.options

    def render_password(self, password: str) -> None:
        st.code(password, language=None)

    def read_password_input(self) -> str:
        return self.password

    def render_analysis(self, score: int, messages: list[str]) -> None:
        st.markdown(
            f"**Strength:** <span style='color:{_score_color(score)}'>{score}</span>"
            f" / {MAX_SCORE}",
            unsafe_allow_html=True,
        )
        st.progress(clamp_score(score) / MAX_SCORE)
        for m in messages:
            if score == MAX_SCORE:
                st.success(m)
            else:
                st.warning(m, icon="⚠️")


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Passforge",
    page_icon="\U0001f511",
    layout="centered",
)

st.title("Passforge")
st.caption(
    "Analyse how strong a password is or generate a new one.  \n"
    "Everything runs locally; nothing is sent over the network."
)

tab_analyze, tab_generate = st.tabs(["Analyze Password", "Generate Password"])

# ── Analyze tab ────────────────────────────────────────────────────────────

with tab_analyze:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_GAUGE} <strong>Analyse a password</strong></p>',
        unsafe_allow_html=True,
    )
    password = st.text_input(
        "Password",
        type="default",
        placeholder="Enter a password…",
        autocomplete="off",
    )
    if password:
        PasswordController(StreamlitAdapter(password=password)).analyze()

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_DICES} <strong>Generate a password</strong></p>',
        unsafe_allow_html=True,
    )
    col1, col2 = st.columns(2)
    with col1:
        length = st.slider("Length", 1, 64, 16)
    with col2:
        use_upper = st.checkbox("Uppercase", value=True)
        use_digits = st.checkbox("Numbers", value=True)
        use_basic = st.checkbox("Basic symbols", value=True)
        use_all = st.checkbox("All symbols", value=False)

    if st.button("Generate password", type="primary"):
        options = GenerationOptions(
            length, use_upper, use_digits, use_basic, use_all,
        )
        PasswordController(StreamlitAdapter(options=options)).generate()
