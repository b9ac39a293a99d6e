import logging

import pytest

from tfeditor.observable import Observable


class Counter(Observable):
    def __init__(self):
        super().__init__()
        self.value = 0

    def increment(self):
        self.value += 1
        self.notify()


def test_add_listener_returns_distinct_ids(recorder):
    counter = Counter()
    first = counter.add_listener(recorder)
    second = counter.add_listener(recorder)
    assert first != second
    assert counter.listener_count == 2


def test_listener_called_immediately_with_current_state():
    counter = Counter()
    counter.value = 5
    seen = []
    counter.add_listener(lambda model: seen.append(model.value))
    assert seen == [5]


def test_registration_order():
    counter = Counter()
    order = []
    counter.add_listener(lambda model: order.append("a"))
    counter.add_listener(lambda model: order.append("b"))
    order.clear()
    counter.increment()
    assert order == ["a", "b"]


def test_removed_listener_is_not_called(recorder):
    counter = Counter()
    listener_id = counter.add_listener(recorder)
    assert counter.remove_listener(listener_id)
    counter.increment()
    assert recorder.count == 1


def test_remove_unknown_listener():
    assert Counter().remove_listener(99) is False


def test_listener_removing_itself_during_notify(recorder):
    counter = Counter()
    ids = {}

    def once(model):
        if model.value:
            model.remove_listener(ids["once"])

    ids["once"] = counter.add_listener(once)
    counter.add_listener(recorder)
    counter.increment()
    counter.increment()
    assert counter.listener_count == 1
    assert recorder.count == 3


def test_raising_listener_is_logged_and_isolated(recorder, caplog):
    counter = Counter()

    def broken(model):
        if model.value:
            raise RuntimeError("boom")

    counter.add_listener(broken)
    counter.add_listener(recorder)
    with caplog.at_level(logging.WARNING, logger="tfeditor.observable"):
        counter.increment()
    assert recorder.count == 2
    assert "raised" in caplog.text
    assert any(record.exc_info for record in caplog.records)


def test_rejects_non_callable():
    with pytest.raises(TypeError):
        Counter().add_listener("not callable")
