"""PassGuardian -- Streamlit web interface."""

import streamlit as st

from passguardian import (
    WORDLIST_FILENAME,
    analyze_password,
    export_wordlist,
    generate_wordlist,
)

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=32, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

ICON_KEY = _LUCIDE.format(s=20, paths=(
    '<path d="m15.5 7.5 2.3 2.3a1 1 0 0 0 1.4 0l2.1-2.1a1 1 0 0 0 0-1.4'
    'L19 4"/><path d="m21 2-9.6 9.6"/><circle cx="7.5" cy="15.5" r="5.5"/>'
))

ICON_LIST = _LUCIDE.format(s=20, paths=(
    '<path d="M3 12h.01"/><path d="M3 18h.01"/><path d="M3 6h.01"/>'
    '<path d="M8 12h13"/><path d="M8 18h13"/><path d="M8 6h13"/>'
))

# Bootstrap-style tags from analyze_password() mapped to hex colours
TAG_COLORS = {
    "danger": "#d32f2f",
    "warning": "#f57c00",
    "primary": "#1976d2",
    "success": "#388e3c",
}

FIELD_LABELS = [
    ("name", "Name"),
    ("birthdate", "Birth Date"),
    ("pet", "Pet Name"),
    ("company", "Company"),
    ("hobby", "Hobby"),
    ("location", "Location"),
]

CHARACTERISTIC_LABELS = {
    "has_lower": "Lowercase letters",
    "has_upper": "Uppercase letters",
    "has_digit": "Digits",
    "has_special": "Special characters",
}


def _heading(icon: str, text: str) -> None:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{icon} <strong>{text}</strong></p>',
        unsafe_allow_html=True,
    )


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="PassGuardian",
    page_icon="\U0001f6e1\ufe0f",
    layout="centered",
)

if "wordlist" not in st.session_state:
    st.session_state.wordlist = []

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_SHIELD} PassGuardian</h1>',
    unsafe_allow_html=True,
)
st.caption("Analyze your password and generate custom wordlists.")

tab_analyzer, tab_wordlist = st.tabs(["Password Analyzer", "Wordlist Generator"])

# ── Analyzer tab ───────────────────────────────────────────────────────────

with tab_analyzer:
    _heading(ICON_KEY, "Password Analyzer")
    show = st.toggle("Show password", value=False)
    password = st.text_input(
        "Password",
        key="password",
        type="default" if show else "password",
        placeholder="Enter your password\u2026",
        autocomplete="off",
    )

    report = analyze_password(password)
    if report is not None:
        color = TAG_COLORS[report["color"]]
        st.markdown(
            f"**Strength:** <span style='color:{color}'>{report['strength']}</span>",
            unsafe_allow_html=True,
        )
        st.progress(report["score"] / 100, text=f"{report['score']}%")

        col1, col2 = st.columns(2)
        col1.metric("Entropy", f"{report['entropy']} bits")
        col2.metric("Time to Crack", report["time_to_crack"])

        st.markdown("**Characteristics:**")
        chars = report["characteristics"]
        st.markdown(f"- Length: {chars['length']}")
        for key, label in CHARACTERISTIC_LABELS.items():
            mark = "\u2705" if chars[key] else "\u274c"
            st.markdown(f"- {mark} {label}")

        if report["patterns"]:
            st.error(
                "Common patterns detected:\n"
                + "\n".join(f"- {p['name']}" for p in report["patterns"]),
                icon="\u26a0\ufe0f",
            )

# ── Wordlist tab ───────────────────────────────────────────────────────────

with tab_wordlist:
    _heading(ICON_LIST, "Wordlist Generator")
    inputs = {}
    columns = st.columns(2)
    for i, (field, label) in enumerate(FIELD_LABELS):
        with columns[i % 2]:
            inputs[field] = st.text_input(label, key=f"field_{field}")

    if st.button("Generate Wordlist", type="primary"):
        st.session_state.wordlist = generate_wordlist(inputs)
        if not st.session_state.wordlist:
            st.info("Fill in at least one field to build a wordlist.")

    words = st.session_state.wordlist
    if words:
        content = export_wordlist(words)
        col1, col2 = st.columns([3, 1])
        col1.markdown(f"##### Generated Wordlist ({len(words):,})")
        col2.download_button(
            "Download",
            data=content,
            file_name=WORDLIST_FILENAME,
            mime="text/plain",
        )
        st.text_area("Candidates", content, height=250, disabled=True)
