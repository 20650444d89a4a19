import pytest

from nodekit.observer import FieldNotFound, Observer


def test_get_and_index_return_initial_values():
    obs = Observer({"a": 1, "b": "two"})
    assert obs.get("a") == 1
    assert obs["b"] == "two"
    assert len(obs) == 2


def test_accepts_pairs():
    obs = Observer([("x", 5)])
    assert obs["x"] == 5


def test_set_emits_old_and_new():
    obs = Observer({"a": 1})
    seen = []
    obs.on("a", lambda old, new: seen.append((old, new)))
    obs.set("a", 2)
    obs.set("a", 3)
    assert seen == [(1, 2), (2, 3)]
    assert obs["a"] == 3


def test_once_fires_only_once():
    obs = Observer({"a": 1})
    seen = []
    obs.once("a", lambda old, new: seen.append(new))
    obs.set("a", 2)
    obs.set("a", 3)
    assert seen == [2]


def test_on_unknown_field_returns_none():
    obs = Observer({"a": 1})
    assert obs.on("nope", lambda old, new: None) is None
    assert obs.once("nope", lambda old, new: None) is None


def test_off_stops_notifications():
    obs = Observer({"a": 1})
    seen = []
    handle = obs.on("a", lambda old, new: seen.append(new))
    obs.off("a", handle)
    obs.set("a", 9)
    assert seen == []
    assert obs["a"] == 9


def test_set_unknown_raises():
    obs = Observer({"a": 1})
    with pytest.raises(FieldNotFound):
        obs.set("b", 1)
    assert obs["a"] == 1
    assert len(obs) == 1


def test_get_unknown_raises():
    obs = Observer({"a": 1})
    with pytest.raises(FieldNotFound):
        obs.get("b")
    with pytest.raises(FieldNotFound):
        obs.__getitem__("b")
    assert obs["a"] == 1
    assert len(obs) == 1


def test_update_with_observer_result():
    obs = Observer({"a": 1, "b": 2})
    seen = []
    obs.on("b", lambda old, new: seen.append((old, new)))
    obs.update(lambda current: Observer({"b": current["a"] + current["b"]}))
    assert obs["b"] == 3
    assert seen == [(2, 3)]


def test_update_with_mapping_result():
    obs = Observer({"a": 1})
    obs.update(lambda current: {"a": "changed"})
    assert obs["a"] == "changed"


def test_update_unknown_field_raises():
    obs = Observer({"a": 1})
    with pytest.raises(FieldNotFound):
        obs.update(lambda current: {"zzz": 0})


def test_clear_single_field_and_all():
    obs = Observer({"a": 1, "b": 2})
    seen = []
    obs.on("a", lambda old, new: seen.append("a"))
    obs.on("b", lambda old, new: seen.append("b"))
    obs.clear("a")
    obs.set("a", 5)
    obs.set("b", 5)
    assert seen == ["b"]
    obs.clear()
    obs.set("b", 6)
    assert seen == ["b"]