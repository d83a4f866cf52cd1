from fitplan.fallback import (
    FAT_BURN_DAYS,
    FAT_BURN_PROGRESSION,
    MUSCLE_GAIN_DAYS,
    MUSCLE_GAIN_PROGRESSION,
    NUTRITION_TIPS,
    create_fallback_plan,
)
from fitplan.models import MacroGoals, WorkoutRequest


def make_request(**overrides):
    base = {"days_per_week": 3, "goal": "Fat Burn"}
    base.update(overrides)
    return WorkoutRequest(**base)


def test_catalogs_have_six_days():
    assert len(FAT_BURN_DAYS) == 6
    assert len(MUSCLE_GAIN_DAYS) == 6


def test_fallback_is_deterministic():
    req = make_request()
    a = create_fallback_plan(req)
    b = create_fallback_plan(req)

    assert a.id != b.id
    assert [d.model_dump() for d in a.exercises] == [d.model_dump() for d in b.exercises]
    assert a.progression_notes == b.progression_notes


def test_fat_burn_catalog_selected():
    plan = create_fallback_plan(make_request())

    assert plan.goal == "Fat Burn"
    assert [d.day for d in plan.exercises] == [1, 2, 3]
    assert plan.exercises[0].name == f"Day 1: {FAT_BURN_DAYS[0]['name']}"
    assert plan.progression_notes == FAT_BURN_PROGRESSION
    assert plan.total_weeks == 4


def test_other_goals_use_muscle_gain_catalog():
    for goal in ["Muscle Gain", "fat burn", "Strength"]:
        plan = create_fallback_plan(make_request(goal=goal, days_per_week=2))
        assert plan.goal == goal
        assert plan.exercises[0].focus == MUSCLE_GAIN_DAYS[0]["focus"]
        assert plan.progression_notes == MUSCLE_GAIN_PROGRESSION


def test_days_truncated_and_capped_at_catalog_size():
    assert len(create_fallback_plan(make_request(days_per_week=1)).exercises) == 1
    assert len(create_fallback_plan(make_request(days_per_week=6)).exercises) == 6
    assert len(create_fallback_plan(make_request(days_per_week=7)).exercises) == 6


def test_every_day_is_fully_populated():
    plan = create_fallback_plan(make_request(goal="Muscle Gain", days_per_week=6))
    for day in plan.exercises:
        assert day.focus
        assert day.estimated_duration
        assert day.exercises
        for ex in day.exercises:
            assert ex.name
            assert ex.sets >= 1
            assert ex.reps
            assert ex.rest
            assert len(ex.target_muscles) == 1


def test_nutrition_tips_only_with_macro_goals():
    assert create_fallback_plan(make_request()).nutrition_tips is None

    macros = MacroGoals(protein=120, carbs=180, fats=55, calories=1700)
    plan = create_fallback_plan(make_request(macro_goals=macros))
    assert plan.nutrition_tips == NUTRITION_TIPS
    assert len(plan.nutrition_tips) == 5
    assert plan.macro_goals == macros


def test_fallback_plans_do_not_share_state():
    req = make_request()
    a = create_fallback_plan(req)
    a.exercises[0].exercises.clear()
    b = create_fallback_plan(req)
    assert b.exercises[0].exercises
