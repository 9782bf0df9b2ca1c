import importlib
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from app.layout import NAV_LINKS
from core import SEED_ITEMS

APP_SCRIPT = Path(__file__).resolve().parent.parent / "streamlit_app.py"


@pytest.fixture()
def app_test() -> AppTest:
    at = AppTest.from_file(str(APP_SCRIPT), default_timeout=30)
    at.run()
    return at


def _submit_item(at: AppTest, name: str, spend: str, budget: str) -> None:
    at.text_input(key="new_item_name").input(name)
    at.text_input(key="new_item_spend").input(spend)
    at.text_input(key="new_item_budget").input(budget)
    submit = next(button for button in at.button if button.label == "加入分析")
    submit.click().run()


def _chips(at: AppTest) -> list[str]:
    return [md.value for md in at.markdown if "bl-chip'>" in md.value]


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_nav_links_match_rendered_pages():
    assert [link.slug for link in NAV_LINKS] == ["overview", "categories"]


def test_overview_renders_seeded_dashboard(app_test):
    assert not app_test.exception
    assert app_test.metric[0].value == "$144,000"
    assert len(app_test.session_state["item_store"]) == len(SEED_ITEMS)
    assert [text.value for text in app_test.text] == [name for name, _, _ in SEED_ITEMS]


def test_add_form_appends_item_and_updates_totals(app_test):
    _submit_item(app_test, "AWS $5 plan $10", "5", "10")

    assert not app_test.exception
    store = app_test.session_state["item_store"]
    assert len(store) == len(SEED_ITEMS) + 1
    assert store.items[-1].name == "AWS $5 plan $10"
    assert app_test.metric[0].value == "$144,010"


def test_item_names_render_as_plain_text(app_test):
    _submit_item(app_test, "AWS $5 plan $10", "5", "10")

    assert app_test.text[-1].value == "AWS $5 plan $10"
    assert not any("AWS $5" in md.value for md in app_test.markdown)


def test_add_form_with_empty_spend_is_ignored(app_test):
    _submit_item(app_test, "辦公室文具", "", "1000")

    assert not app_test.exception
    assert len(app_test.session_state["item_store"]) == len(SEED_ITEMS)
    assert app_test.metric[0].value == "$144,000"


def test_delete_button_removes_item(app_test):
    app_test.button(key="delete-1").click().run()

    assert not app_test.exception
    store = app_test.session_state["item_store"]
    assert len(store) == len(SEED_ITEMS) - 1
    assert all(item.id != 1 for item in store)
    assert app_test.metric[0].value == "$94,000"


def test_clear_button_empties_store(app_test):
    app_test.button(key="clear-items").click().run()

    assert not app_test.exception
    assert len(app_test.session_state["item_store"]) == 0
    assert app_test.metric[0].value == "$0"
    assert any("目前尚無分析數據" in md.value for md in app_test.markdown)


def test_malformed_rules_file_falls_back_to_defaults(monkeypatch, tmp_path):
    rules_path = tmp_path / "rules.toml"
    rules_path.write_text("[categories\n", encoding="utf-8")
    monkeypatch.setenv("BUDGET_RULES_PATH", str(rules_path))

    at = AppTest.from_file(str(APP_SCRIPT), default_timeout=30)
    at.run()

    assert not at.exception
    assert len(at.error) == 1
    assert "無法載入分類規則" in at.error[0].value
    chips = _chips(at)
    assert any(">資訊技術<" in chip for chip in chips)
    assert any(">行銷推廣<" in chip for chip in chips)


def test_custom_rules_file_is_used(monkeypatch, tmp_path):
    rules_path = tmp_path / "rules.toml"
    rules_path.write_text('[categories]\n"雲端服務" = ["AWS"]\n', encoding="utf-8")
    monkeypatch.setenv("BUDGET_RULES_PATH", str(rules_path))

    at = AppTest.from_file(str(APP_SCRIPT), default_timeout=30)
    at.run()

    assert not at.exception
    assert len(at.error) == 0
    assert any(">雲端服務<" in chip for chip in _chips(at))
