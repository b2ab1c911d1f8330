"""Tests for the headless status surface."""

import pytest

from hostprof.indicator.surface import StatusBar


class TestStatusBar:
    def test_given_bar_when_create_item_then_hidden_and_registered(self) -> None:
        """New items are hidden, empty and tracked by id."""
        bar = StatusBar()

        item = bar.create_item("profile")

        assert bar.items == {"profile": item}
        assert item.hidden is True
        assert item.text == ""

    def test_given_existing_id_when_create_item_then_raises(self) -> None:
        """Item ids are unique per container."""
        bar = StatusBar()
        bar.create_item("profile")

        with pytest.raises(ValueError, match="already exists"):
            bar.create_item("profile")

    def test_given_listener_when_clicked_then_notified_until_disposed(self) -> None:
        """Click listeners stop receiving clicks once disposed."""
        bar = StatusBar()
        item = bar.create_item("profile")
        clicks: list[None] = []
        registration = item.on_click(clicks.append)

        item.click()
        registration.dispose()
        item.click()

        assert clicks == [None]
        assert item.click_listener_count == 0
