"""Tests for the Streamlit front end."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.run()
    return at


class TestAnalyzerTab:
    def test_password_survives_show_toggle(self, app):
        app.text_input(key="password").input("Tr0ub4dor&3").run()
        assert app.text_input(key="password").value == "Tr0ub4dor&3"

        app.toggle[0].set_value(True).run()
        assert app.text_input(key="password").value == "Tr0ub4dor&3"
        assert any("Strong" in md.value for md in app.markdown)

    def test_empty_password_shows_no_report(self, app):
        assert not any("Strength" in md.value for md in app.markdown)


class TestWordlistTab:
    def test_generate_stores_wordlist(self, app):
        app.text_input(key="field_pet").input("Rex").run()
        app.button[0].click().run()
        words = app.session_state["wordlist"]
        assert words[0] == "Rex"
        assert "loveRex" in words

    def test_generate_with_no_fields(self, app):
        app.button[0].click().run()
        assert app.session_state["wordlist"] == []
        assert len(app.info) == 1
