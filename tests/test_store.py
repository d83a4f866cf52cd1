from fitplan.fallback import create_fallback_plan
from fitplan.models import WorkoutRequest
from fitplan.store import PlanStore


def make_plan(goal="Fat Burn"):
    return create_fallback_plan(WorkoutRequest(days_per_week=3, goal=goal))


def test_add_assigns_fresh_id_and_keeps_newest_first():
    store = PlanStore()
    plan = make_plan()
    first = store.add(plan)
    second = store.add(plan)

    assert first.id != plan.id
    assert first.id != second.id
    assert [p.id for p in store.list()] == [second.id, first.id]
    assert first.exercises == plan.exercises


def test_stored_plan_is_independent_of_input():
    store = PlanStore()
    plan = make_plan()
    stored = store.add(plan)

    assert stored.exercises is not plan.exercises
    plan.exercises[0].exercises.clear()
    plan.exercises.clear()
    assert len(store.get(stored.id).exercises) == 3
    assert store.get(stored.id).exercises[0].exercises


def test_get_and_remove():
    store = PlanStore()
    kept = store.add(make_plan())
    gone = store.add(make_plan("Muscle Gain"))

    assert store.get(kept.id) == kept
    assert store.remove(gone.id) is True
    assert store.remove(gone.id) is False
    assert store.get(gone.id) is None
    assert store.list() == [kept]


def test_clear():
    store = PlanStore()
    store.add(make_plan())
    store.clear()
    assert store.list() == []
