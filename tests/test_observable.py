"""
Tests for the property-change notification base.
"""

import pytest

from whack.binding import Observable, ViewModel, PropertyChanged, bindable, property_changed_args


class Player(Observable):
    name = bindable(None)
    score = bindable(0)

    def __init__(self):
        super().__init__()
        self.after = []

    def after_property_changed(self, name):
        self.after.append(name)


@pytest.fixture
def player():
    return Player()


@pytest.fixture
def changes(player):
    seen = []
    player.subscribe(lambda sender, args: seen.append((sender, args.name)))
    return seen


class TestNotification:
    """Tests for equality-gated notifications."""

    def test_change_notifies(self, player, changes):
        player.score = 3

        assert player.score == 3
        assert changes == [(player, "score")]

    def test_equal_value_is_silent(self, player, changes):
        player.score = 0
        player.score = 5
        player.score = 5

        assert changes == [(player, "score")]

    def test_none_default_then_value(self, player, changes):
        player.name = None
        assert changes == []

        player.name = "ada"
        player.name = None
        assert [n for _, n in changes] == ["name", "name"]
        assert player.name is None

    def test_after_hook_runs_without_subscribers(self, player):
        player.score = 1
        assert player.after == ["score"]

    def test_suppressed_notifications(self, player, changes):
        player.raise_notifications = False
        player.score = 9

        assert player.score == 9
        assert changes == []
        assert player.after == []

    def test_unsubscribe(self, player):
        seen = []

        def listener(sender, args):
            seen.append(args.name)

        player.subscribe(listener)
        player.subscribe(listener)  # second subscribe is a no-op
        player.score = 1
        player.unsubscribe(listener)
        player.score = 2

        assert seen == ["score"]

    def test_instances_do_not_share_values(self):
        a, b = Player(), Player()
        a.score = 4
        assert b.score == 0


class TestPropertyNames:
    """Tests for notification arguments and name checking."""

    def test_args_are_cached_per_name(self):
        assert property_changed_args("score") is property_changed_args("score")
        assert property_changed_args("score") == PropertyChanged("score")

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            property_changed_args("")

    def test_unknown_name_fails_check(self, player):
        with pytest.raises(AssertionError):
            player.raise_property_changed("nope")

    def test_bindable_names_include_bases(self):
        class Coach(Player):
            team = bindable("")

        assert Coach.bindable_names() == {"name", "score", "team"}


class TestViewModel:
    """Tests for the display name and teardown hook."""

    def test_default_display_name(self):
        class Screen(ViewModel):
            pass

        assert Screen().display_name.endswith("Screen")

    def test_dispose_calls_hook_and_drops_subscribers(self):
        class Screen(ViewModel):
            title = bindable("")

            def __init__(self):
                super().__init__("screen")
                self.disposed = False

            def on_dispose(self):
                self.disposed = True

        screen = Screen()
        seen = []
        screen.subscribe(lambda s, a: seen.append(a.name))
        screen.dispose()
        screen.title = "after"

        assert screen.disposed
        assert seen == []
