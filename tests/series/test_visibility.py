from __future__ import annotations

import random
from datetime import date, timedelta

from lakeviz.core.grammar import TriState
from lakeviz.core.schema import Session
from lakeviz.series import SeriesRegistry, VisibilityStore
from lakeviz.series.visibility import tri_state_of


def _registry(n_per_lake: int = 10) -> SeriesRegistry:
    start = date(2023, 11, 1)
    sessions: list[Session] = []
    for k in range(n_per_lake):
        day = (start + timedelta(days=20 * k)).isoformat()
        sessions.append(Session(lake="Gunflint", date=day))
        sessions.append(Session(lake="Hague", date=day))
    return SeriesRegistry.build(sessions)


def _store(default_count: int = 12) -> VisibilityStore:
    store = VisibilityStore()
    store.reset(_registry(), default_count)
    return store


def test_reset_shows_first_k_in_registry_order() -> None:
    store = _store(12)
    assert len(store.visible_ids()) == 12
    # Registry order is all Gunflint (10) then Hague
    assert store.visible_ids() == frozenset(
        [f"Gunflint-{i}" for i in range(10)] + ["Hague-0", "Hague-1"]
    )
    assert [s.id for s in store.visible_series()][:2] == ["Gunflint-0", "Gunflint-1"]


def test_reset_with_more_than_available_shows_everything() -> None:
    store = _store(50)
    assert store.all_state() is TriState.ALL


def test_tri_state_of_empty_group_is_none() -> None:
    assert tri_state_of([], {"a"}) is TriState.NONE
    assert tri_state_of(["a", "b"], {"a"}) is TriState.SOME
    assert tri_state_of(["a"], {"a"}) is TriState.ALL


def test_toggle_series_flips_one_id_and_ignores_unknown() -> None:
    store = _store(0)
    store.toggle_series("Hague-3")
    assert store.visible_ids() == frozenset({"Hague-3"})
    store.toggle_series("Hague-3")
    assert store.visible_ids() == frozenset()
    store.toggle_series("Saganaga-0")
    assert store.visible_ids() == frozenset()


def test_date_toggle_selects_missing_then_hides_all() -> None:
    store = _store(0)
    day = store.registry.series[0].date
    store.toggle_series("Gunflint-0")
    assert store.date_state(day) is TriState.SOME

    store.toggle_by_date(day)
    assert store.date_state(day) is TriState.ALL
    store.toggle_by_date(day)
    assert store.date_state(day) is TriState.NONE
    # Two toggles from a partial state do not restore it
    assert not store.is_visible("Gunflint-0")


def test_year_toggle_covers_every_lake_in_that_year() -> None:
    store = _store(0)
    store.toggle_by_year(2023)
    ids = {s.id for s in store.registry.for_year(2023)}
    assert ids and store.visible_ids() == frozenset(ids)
    assert store.year_state("2023") is TriState.ALL
    assert store.year_state(2024) is TriState.NONE


def test_invalid_group_keys_are_no_ops() -> None:
    store = _store(5)
    before = store.visible_ids()
    store.toggle_by_date("not-a-date")
    store.toggle_by_date("1999-01-01")
    store.toggle_by_year("abc")
    store.toggle_by_year(1850)
    assert store.visible_ids() == before
    assert store.date_state("garbage") is TriState.NONE


def test_set_all_and_clear() -> None:
    store = _store(3)
    store.set_all(True)
    assert len(store.visible_ids()) == len(store.registry)
    store.set_all(False)
    assert store.all_state() is TriState.NONE
    store.set_all(True)
    store.clear()
    assert store.visible_ids() == frozenset()
    assert len(store.registry) == 0


def test_group_states_match_visible_set_under_random_toggles() -> None:
    rng = random.Random(20240615)
    store = _store(7)
    reg = store.registry
    days = reg.dates()
    years = reg.years()
    for _ in range(300):
        op = rng.randrange(4)
        if op == 0:
            store.toggle_series(rng.choice(reg.ids))
        elif op == 1:
            store.toggle_by_date(rng.choice(days))
        elif op == 2:
            store.toggle_by_year(rng.choice(years))
        else:
            store.set_all(rng.random() < 0.5)

        visible = store.visible_ids()
        assert visible <= frozenset(reg.ids)
        for y in years:
            members = {s.id for s in reg.for_year(y)}
            expected = (
                TriState.ALL
                if members <= visible
                else TriState.NONE
                if not members & visible
                else TriState.SOME
            )
            assert store.year_state(y) is expected
        for d in days:
            members = {s.id for s in reg.for_date(d)}
            state = store.date_state(d)
            assert (state is TriState.ALL) == (members <= visible)
            assert (state is TriState.NONE) == (not members & visible)


def test_group_toggle_from_all_visible_hides_only_that_group() -> None:
    rng = random.Random(7)
    store = _store(0)
    store.set_all(True)
    day = rng.choice(store.registry.dates())
    store.toggle_by_date(day)
    hidden = {s.id for s in store.registry.for_date(day)}
    assert store.visible_ids() == frozenset(set(store.registry.ids) - hidden)
