from fitplan.models import MacroGoals, WorkoutRequest
from fitplan.prompt import build_workout_prompt


def make_request(**overrides):
    base = {"days_per_week": 3, "goal": "Fat Burn"}
    base.update(overrides)
    return WorkoutRequest(**base)


def test_prompt_contains_template_headings():
    prompt = build_workout_prompt(make_request())

    for heading in [
        "Day 1: [Workout Name]",
        "Focus: ",
        "Duration: ",
        "Exercise 1: [Exercise Name]",
        "- Sets: [number] sets of [reps/time]",
        "- Rest: ",
        "- Target: ",
        "PROGRESSION NOTES:",
    ]:
        assert heading in prompt
    assert "NUTRITION TIPS:" not in prompt
    assert "NUTRITION GOALS:" not in prompt


def test_prompt_uses_request_values_and_defaults():
    prompt = build_workout_prompt(make_request(days_per_week=5))

    assert "5-day per week workout plan for fat burn" in prompt
    assert "- Primary goal: Fat Burn" in prompt
    assert "- Fitness level: intermediate" in prompt
    assert "Each workout should be 50 minutes" in prompt
    assert "[Continue for all 5 days]" in prompt


def test_prompt_with_custom_level_and_time():
    prompt = build_workout_prompt(make_request(fitness_level="beginner", time_per_session=30))
    assert "- Fitness level: beginner" in prompt
    assert "Each workout should be 30 minutes" in prompt
    assert "achievable for beginner level" in prompt


def test_prompt_with_macro_goals():
    macros = MacroGoals(protein=150, carbs=200, fats=67, calories=2000)
    prompt = build_workout_prompt(make_request(macro_goals=macros))

    assert "NUTRITION GOALS:" in prompt
    assert "- Daily Calories: 2000" in prompt
    assert "- Protein: 150g (30% of calories)" in prompt
    assert "- Carbohydrates: 200g (40% of calories)" in prompt
    assert "- Fats: 67g (30% of calories)" in prompt
    assert "NUTRITION TIPS:" in prompt


def test_prompt_with_zero_calories_skips_percentages():
    macros = MacroGoals(protein=100, carbs=100, fats=50, calories=0)
    prompt = build_workout_prompt(make_request(macro_goals=macros))

    assert "- Protein: 100g\n" in prompt
    assert "% of calories" not in prompt
