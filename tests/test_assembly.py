"""Tests for killboard.assembly.page — slot queue, hooks, filters and rendering."""

import logging

import pytest

from killboard.assembly.callbacks import FunctionCallback, StaticCallback
from killboard.assembly.menu import MenuItem
from killboard.assembly.page import PageAssembly
from killboard.errors import KillboardError, UnknownSlotError
from killboard.events import ASSEMBLE_EVENT, EventBus


class DemoPage(PageAssembly):
    def header(self) -> str:
        return "<header>"

    def content(self) -> str:
        return "<content>"

    def footer(self) -> str:
        return "<footer>"

    def nothing(self) -> None:
        return None

    def shout(self, text: str) -> str:
        return text.upper()


class Widgets:
    @staticmethod
    def banner(page: PageAssembly) -> str:
        return f"[banner:{len(page.slots)}]"

    @classmethod
    def ad(cls, page: PageAssembly) -> str:
        return f"[{cls.__name__}]"


def _text(label: str):
    def render(page: PageAssembly) -> str:
        return label

    return render


def _page(*slots: str, events: EventBus | None = None) -> DemoPage:
    page = DemoPage(events)
    for slot_id in slots:
        page.queue(slot_id)
    return page


class TestQueue:
    def test_renders_in_queue_order(self) -> None:
        page = _page("header", "content", "footer")
        assert page.assemble() == "<header><content><footer>"

    def test_slots(self) -> None:
        page = _page("header", "content")
        assert page.slots == ("header", "content")
        assert "header" in page
        assert "footer" not in page

    def test_queue_again_resets_hooks_keeps_position(self) -> None:
        page = _page("header", "content")
        page.add_before("header", _text("x"))
        page.replace("header", _text("replaced"))
        page.queue("header")
        assert page.slots == ("header", "content")
        assert page.assemble() == "<header><content>"

    def test_empty_page(self) -> None:
        assert DemoPage().assemble() == ""


class TestHooks:
    def test_before_and_behind_across_slots(self) -> None:
        page = _page("header", "content")
        page.add_before("content", _text("cb"), priority=1)
        page.add_behind("header", _text("cb2"), priority=1)
        assert page.assemble() == "<header>cb2cb<content>"

    def test_priority_order(self) -> None:
        page = _page("content")
        page.add_before("content", _text("late"), priority=9)
        page.add_before("content", _text("early"), priority=1)
        page.add_behind("content", _text("b9"), priority=9)
        page.add_behind("content", _text("b0"), priority=0)
        assert page.assemble() == "earlylate<content>b0b9"

    def test_equal_priorities_keep_insertion_order(self) -> None:
        page = _page("content")
        for label in ("one", "two", "three", "four"):
            page.add_before("content", _text(label))
        assert page.assemble() == "onetwothreefour<content>"

    def test_default_priority_is_five(self) -> None:
        page = _page("content")
        page.add_behind("content", _text("default"))
        page.add_behind("content", _text("four"), priority=4)
        page.add_behind("content", _text("six"), priority=6)
        assert page.assemble() == "<content>fourdefaultsix"

    def test_replace(self) -> None:
        page = _page("header", "content")
        page.replace("content", _text("<new>"))
        assert page.assemble() == "<header><new>"

    def test_delete(self) -> None:
        page = _page("header", "content", "footer")
        page.add_before("content", _text("gone"))
        page.delete("content")
        assert page.assemble() == "<header><footer>"

    def test_delete_unknown_is_silent(self) -> None:
        page = _page("header")
        page.delete("missing")
        assert page.assemble() == "<header>"


class TestFilters:
    def test_chain_in_priority_order(self) -> None:
        page = _page("content")
        page.filter("content", lambda text: text + "2", priority=2)
        page.filter("content", lambda text: text + "1", priority=1)
        assert page.assemble() == "<content>12"

    def test_filters_only_touch_primary_output(self) -> None:
        page = _page("content")
        page.add_before("content", _text("before"))
        page.add_behind("content", _text("behind"))
        page.filter("content", str.upper)
        assert page.assemble() == "before<CONTENT>behind"

    def test_method_filter(self) -> None:
        page = _page("content")
        page.filter("content", "shout")
        assert page.assemble() == "<CONTENT>"

    def test_filter_applies_to_replacement(self) -> None:
        page = _page("content")
        page.replace("content", _text("new"))
        page.filter("content", str.upper)
        assert page.assemble() == "NEW"

    def test_unresolvable_filter_passes_text_through(self) -> None:
        page = _page("content")
        page.filter("content", "no_such_filter")
        assert page.assemble() == "<content>"


class TestUnknownSlot:
    @pytest.mark.parametrize("method", ["add_before", "add_behind", "filter", "replace"])
    def test_raises(self, method: str) -> None:
        page = _page("content")
        with pytest.raises(UnknownSlotError) as exc_info:
            getattr(page, method)("sidebar", _text("x"))
        assert exc_info.value.slot_id == "sidebar"
        assert "sidebar" in str(exc_info.value)

    def test_is_lookup_error(self) -> None:
        page = _page()
        with pytest.raises(LookupError):
            page.add_before("sidebar", _text("x"))
        with pytest.raises(KillboardError):
            page.add_behind("sidebar", _text("x"))


class TestCallbackKinds:
    def test_static_method(self) -> None:
        page = _page("header", "content")
        page.add_behind("header", (Widgets, "banner"))
        assert page.assemble() == "<header>[banner:2]<content>"

    def test_classmethod(self) -> None:
        page = _page("content")
        page.replace("content", StaticCallback(Widgets, "ad"))
        assert page.assemble() == "[Widgets]"

    def test_method_by_name(self) -> None:
        page = _page("header")
        page.add_behind("header", "footer")
        assert page.assemble() == "<header><footer>"

    def test_function_receives_page(self) -> None:
        seen: list[PageAssembly] = []

        def capture(p: PageAssembly) -> str:
            seen.append(p)
            return "ok"

        page = _page("content")
        page.replace("content", FunctionCallback(capture))
        assert page.assemble() == "ok"
        assert seen == [page]

    def test_none_and_false_render_nothing(self) -> None:
        page = _page("nothing", "content")
        page.add_before("content", lambda p: False)
        assert page.assemble() == "<content>"

    def test_non_string_result_is_stringified(self) -> None:
        page = _page("content")
        page.add_behind("content", lambda p: 42)
        assert page.assemble() == "<content>42"

    def test_unresolvable_renders_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        page = _page("header", "sidebar", "footer")
        page.add_before("footer", (Widgets, "missing"))
        with caplog.at_level(logging.WARNING, logger="killboard.assembly"):
            assert page.assemble() == "<header><footer>"
        assert "self.sidebar" in caplog.text
        assert "Widgets.missing" in caplog.text

    def test_callback_errors_propagate(self) -> None:
        def broken(p: PageAssembly) -> str:
            raise RuntimeError("boom")

        page = _page("content")
        page.add_behind("content", broken)
        with pytest.raises(RuntimeError, match="boom"):
            page.assemble()

    def test_rejects_non_callable(self) -> None:
        page = _page("content")
        with pytest.raises(TypeError):
            page.add_before("content", 42)  # type: ignore[arg-type]


class TestAssembleEvent:
    def test_handlers_see_page_before_render(self) -> None:
        events = EventBus()

        def drop_footer(page: PageAssembly) -> None:
            page.delete("footer")
            page.add_before("header", _text("<nav>"))

        events.register(ASSEMBLE_EVENT, drop_footer)
        page = _page("header", "footer", events=events)
        assert page.assemble() == "<nav><header>"

    def test_without_bus(self) -> None:
        assert _page("header").assemble() == "<header>"


class TestMenu:
    def test_add_menu_item(self) -> None:
        page = DemoPage()
        page.add_menu_item("caption", "Navigation")
        page.add_menu_item("link", "Kills", "/?a=kills")
        page.add_menu_item("img", "Logo", "/logo.png", "32", 16.0)  # type: ignore[arg-type]
        assert page.menu_items == (
            MenuItem("caption", "Navigation"),
            MenuItem("link", "Kills", "/?a=kills"),
            MenuItem("img", "Logo", "/logo.png", 32, 16),
        )

    def test_empty_onclick_is_none(self) -> None:
        page = DemoPage()
        page.add_menu_item("link", "Top", "#", onclick="")
        assert page.menu_items[0].onclick is None

    def test_render_menu(self) -> None:
        page = DemoPage()
        page.add_menu_item("link", "Kills", "/?a=kills")
        html = page.render_menu(title="Menu")
        assert 'href="/?a=kills"' in html
        assert "Menu" in html


class TestViews:
    def test_no_view_selected(self) -> None:
        page = DemoPage()
        assert page.get_view() is None
        assert page.render_view() == ""

    def test_add_and_render_view(self) -> None:
        page = DemoPage()
        page.add_view("kills", _text("kill list"))
        page.add_view("losses", "footer")
        page.view = "kills"
        assert page.get_view() == "kills"
        assert page.render_view() == "kill list"
        page.view = "losses"
        assert page.render_view() == "<footer>"

    def test_unknown_view(self) -> None:
        page = DemoPage()
        page.view = "pods"
        assert page.render_view() == ""

    def test_views_is_a_copy(self) -> None:
        page = DemoPage()
        page.add_view("kills", _text("k"))
        page.views.clear()  # type: ignore[attr-defined]
        assert "kills" in page.views
