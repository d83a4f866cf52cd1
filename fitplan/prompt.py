from __future__ import annotations

import math

from langchain_core.prompts import PromptTemplate

from .models import MacroGoals, WorkoutRequest


# Heading vocabulary here is what parser.py keys on; keep both in sync.
WORKOUT_PROMPT = PromptTemplate.from_template(
    """You are a professional fitness trainer with 15+ years of experience. Create a comprehensive {days_per_week}-day per week workout plan for {goal_lower}.

REQUIREMENTS:
- {days_per_week} workout days per week
- Primary goal: {goal}
- Fitness level: {fitness_level}
- Each workout should be {time_per_session} minutes
- Focus on bodyweight exercises (no equipment needed)
- Include proper rest periods between sets
- Emphasize compound movements and functional fitness
{macro_section}
STRUCTURE YOUR RESPONSE EXACTLY LIKE THIS:

Day 1: [Workout Name]
Focus: [Primary muscle groups/training focus]
Duration: [time estimate]

Exercise 1: [Exercise Name]
- Sets: [number] sets of [reps/time]
- Rest: [rest period]
- Target: [muscle groups]

Exercise 2: [Exercise Name]
- Sets: [number] sets of [reps/time]
- Rest: [rest period]
- Target: [muscle groups]

[Continue with 4-6 exercises per day]

Day 2: [Workout Name]
[Follow same format]

[Continue for all {days_per_week} days]

PROGRESSION NOTES:
[Provide specific tips for advancing the workout over time]
{nutrition_section}
Make the workout challenging but achievable for {fitness_level} level. Include exercise variations and form cues where helpful. Ensure each exercise has a clear name, sets count, reps specification, and rest period."""
)

NUTRITION_TIPS_SECTION = """
NUTRITION TIPS:
[Provide 3-5 specific nutrition tips to help achieve the macro targets and fitness goal. Include meal timing, food suggestions, and hydration advice.]
"""

# kcal per gram
KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fats": 9}


def _percent_of_calories(grams: float, kcal_per_gram: int, calories: float) -> str:
    if calories <= 0:
        return ""
    pct = math.floor(grams * kcal_per_gram / calories * 100 + 0.5)
    return f" ({pct}% of calories)"


def _fmt(value: float) -> str:
    return f"{value:g}"


def _macro_section(macros: MacroGoals, goal: str) -> str:
    c = macros.calories
    return (
        "\nNUTRITION GOALS:\n"
        f"- Daily Calories: {_fmt(c)}\n"
        f"- Protein: {_fmt(macros.protein)}g{_percent_of_calories(macros.protein, KCAL_PER_GRAM['protein'], c)}\n"
        f"- Carbohydrates: {_fmt(macros.carbs)}g{_percent_of_calories(macros.carbs, KCAL_PER_GRAM['carbs'], c)}\n"
        f"- Fats: {_fmt(macros.fats)}g{_percent_of_calories(macros.fats, KCAL_PER_GRAM['fats'], c)}\n"
        "\n"
        f"Please provide nutrition guidance that aligns with these macro targets and the fitness goal of {goal}.\n"
    )


def build_workout_prompt(request: WorkoutRequest) -> str:
    macros = request.macro_goals
    return WORKOUT_PROMPT.format(
        days_per_week=request.days_per_week,
        goal=request.goal,
        goal_lower=request.goal.lower(),
        fitness_level=request.fitness_level,
        time_per_session=request.time_per_session,
        macro_section=_macro_section(macros, request.goal) if macros else "",
        nutrition_section=NUTRITION_TIPS_SECTION if macros else "",
    )
