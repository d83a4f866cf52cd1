from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from .models import DayWorkout, Exercise, WorkoutPlan, WorkoutRequest

logger = logging.getLogger(__name__)


FAT_BURN = "Fat Burn"

# (name, sets, reps, rest, target)
ExerciseRow = Tuple[str, int, str, str, str]

FAT_BURN_DAYS: List[Dict[str, Any]] = [
    {
        "name": "HIIT Cardio Blast",
        "focus": "Full Body Cardio",
        "duration": "40-45 min",
        "exercises": [
            ("Jumping Jacks", 3, "45s", "15s", "Full Body"),
            ("Burpees", 4, "10", "45s", "Full Body"),
            ("Mountain Climbers", 3, "30s", "30s", "Core, Shoulders"),
            ("High Knees", 3, "30s", "30s", "Legs, Cardio"),
            ("Squat Jumps", 3, "12", "45s", "Quads, Glutes"),
        ],
    },
    {
        "name": "Lower Body Burn",
        "focus": "Legs and Glutes",
        "duration": "45 min",
        "exercises": [
            ("Bodyweight Squats", 4, "20", "30s", "Quads, Glutes"),
            ("Alternating Reverse Lunges", 3, "12 per leg", "30s", "Quads, Glutes"),
            ("Glute Bridges", 3, "20", "30s", "Glutes, Hamstrings"),
            ("Lateral Skater Hops", 3, "30s", "30s", "Legs, Cardio"),
            ("Wall Sit", 3, "40s", "30s", "Quads"),
        ],
    },
    {
        "name": "Upper Body Circuit",
        "focus": "Chest, Back and Arms",
        "duration": "40 min",
        "exercises": [
            ("Push-ups", 4, "12", "30s", "Chest, Triceps"),
            ("Plank Shoulder Taps", 3, "20", "30s", "Shoulders, Core"),
            ("Tricep Dips", 3, "12", "30s", "Triceps"),
            ("Superman Pulls", 3, "15", "30s", "Back"),
            ("Inchworms", 3, "8", "45s", "Full Body"),
        ],
    },
    {
        "name": "Core and Conditioning",
        "focus": "Core Stability",
        "duration": "35-40 min",
        "exercises": [
            ("Plank", 3, "45s", "30s", "Core"),
            ("Bicycle Crunches", 3, "20", "30s", "Abs, Obliques"),
            ("Russian Twists", 3, "20", "30s", "Obliques"),
            ("Flutter Kicks", 3, "30s", "30s", "Lower Abs"),
            ("Burpees", 3, "8", "45s", "Full Body"),
        ],
    },
    {
        "name": "Tabata Total Body",
        "focus": "Metabolic Conditioning",
        "duration": "30-35 min",
        "exercises": [
            ("Squat Thrusts", 4, "20s", "10s", "Full Body"),
            ("Jump Lunges", 4, "20s", "10s", "Legs"),
            ("Push-up to Plank Jacks", 4, "20s", "10s", "Chest, Core"),
            ("Speed Skaters", 4, "20s", "10s", "Legs, Cardio"),
        ],
    },
    {
        "name": "Active Recovery Flow",
        "focus": "Mobility and Light Cardio",
        "duration": "30 min",
        "exercises": [
            ("Brisk Marching in Place", 2, "3 min", "30s", "Cardio"),
            ("World's Greatest Stretch", 2, "5 per side", "30s", "Hips, Thoracic Spine"),
            ("Cat-Cow", 2, "10", "30s", "Spine"),
            ("Bird Dog", 3, "10 per side", "30s", "Core, Lower Back"),
            ("Walking Lunges", 2, "10 per leg", "45s", "Legs"),
        ],
    },
]

MUSCLE_GAIN_DAYS: List[Dict[str, Any]] = [
    {
        "name": "Push Strength",
        "focus": "Chest, Shoulders and Triceps",
        "duration": "50 min",
        "exercises": [
            ("Push-ups", 4, "12-15", "60s", "Chest, Triceps"),
            ("Decline Push-ups", 4, "8-12", "75s", "Upper Chest, Shoulders"),
            ("Pike Push-ups", 3, "8-10", "75s", "Shoulders"),
            ("Diamond Push-ups", 3, "8-12", "60s", "Triceps"),
            ("Chair Dips", 3, "10-12", "60s", "Triceps, Chest"),
        ],
    },
    {
        "name": "Leg Hypertrophy",
        "focus": "Quads, Glutes and Hamstrings",
        "duration": "50-55 min",
        "exercises": [
            ("Bulgarian Split Squats", 4, "10 per leg", "90s", "Quads, Glutes"),
            ("Tempo Bodyweight Squats", 4, "15", "60s", "Quads"),
            ("Single-Leg Glute Bridges", 3, "12 per leg", "60s", "Glutes, Hamstrings"),
            ("Reverse Lunges", 3, "12 per leg", "60s", "Glutes, Quads"),
            ("Single-Leg Calf Raises", 4, "15 per leg", "45s", "Calves"),
        ],
    },
    {
        "name": "Pull and Core",
        "focus": "Back, Biceps and Core",
        "duration": "45-50 min",
        "exercises": [
            ("Inverted Rows (Table)", 4, "8-12", "75s", "Back, Biceps"),
            ("Superman Holds", 3, "30s", "45s", "Lower Back"),
            ("Towel Bicep Curls", 3, "12-15", "60s", "Biceps"),
            ("Reverse Snow Angels", 3, "12", "45s", "Upper Back, Rear Delts"),
            ("Hollow Body Hold", 3, "30s", "45s", "Core"),
        ],
    },
    {
        "name": "Upper Body Volume",
        "focus": "Chest, Back and Arms",
        "duration": "50 min",
        "exercises": [
            ("Archer Push-ups", 4, "6-8 per side", "90s", "Chest"),
            ("Inverted Rows (Table)", 4, "10-12", "75s", "Back"),
            ("Close-Grip Push-ups", 3, "10-12", "60s", "Triceps"),
            ("Doorframe Rows", 3, "12-15", "60s", "Back, Biceps"),
            ("Plank to Push-up", 3, "10", "60s", "Core, Triceps"),
        ],
    },
    {
        "name": "Posterior Chain and Legs",
        "focus": "Glutes, Hamstrings and Calves",
        "duration": "50 min",
        "exercises": [
            ("Pistol Squat Progression", 4, "5-8 per leg", "90s", "Quads, Glutes"),
            ("Single-Leg Romanian Deadlifts", 4, "10 per leg", "75s", "Hamstrings, Glutes"),
            ("Hip Thrusts (Couch)", 4, "15", "60s", "Glutes"),
            ("Nordic Curl Negatives", 3, "5", "90s", "Hamstrings"),
            ("Wall Sit", 3, "60s", "60s", "Quads"),
        ],
    },
    {
        "name": "Full Body Strength",
        "focus": "Compound Full Body",
        "duration": "55 min",
        "exercises": [
            ("Pseudo Planche Push-ups", 4, "6-10", "90s", "Chest, Shoulders"),
            ("Jump Squats", 4, "10", "75s", "Quads, Glutes"),
            ("Inverted Rows (Table)", 4, "8-12", "75s", "Back, Biceps"),
            ("Walking Lunges", 3, "12 per leg", "60s", "Legs"),
            ("Hanging Knee Raises", 3, "12", "60s", "Core"),
        ],
    },
]

FAT_BURN_PROGRESSION = (
    "Week 1-2: Focus on learning the movements and keeping rest periods as written. "
    "Week 3: Cut rest periods by 10-15 seconds and add one extra round to each circuit. "
    "Week 4: Increase work intervals by 10 seconds or add 2-3 reps per set while keeping good form. "
    "Stay consistent and pair the program with a modest calorie deficit for best results."
)

MUSCLE_GAIN_PROGRESSION = (
    "Week 1-2: Master form and control a 3-second lowering phase on every rep. "
    "Week 3: Add 1-2 reps per set or one extra set to the first two exercises of each day. "
    "Week 4: Progress to harder variations (e.g. decline or archer push-ups, deeper split squats) "
    "once you can complete the top of the rep range. Eat in a slight calorie surplus and sleep 7-9 hours."
)

NUTRITION_TIPS = [
    "Spread your protein intake across 3-5 meals, aiming for 20-40g of protein per meal.",
    "Eat a meal with carbohydrates and protein 1-3 hours before training to fuel your workout.",
    "Have a protein-rich snack or meal within 2 hours after training to support recovery.",
    "Build meals around whole foods: lean meats, eggs, legumes, whole grains, fruit and vegetables.",
    "Drink at least 2-3 liters of water per day, and more on training days or in hot weather.",
]


def _exercise(row: ExerciseRow) -> Exercise:
    name, sets, reps, rest, target = row
    return Exercise(
        name=name,
        sets=sets,
        reps=reps,
        rest=rest,
        description=target,
        target_muscles=[target],
    )


def _catalog_for(goal: str) -> Tuple[List[Dict[str, Any]], str]:
    if goal == FAT_BURN:
        return FAT_BURN_DAYS, FAT_BURN_PROGRESSION
    return MUSCLE_GAIN_DAYS, MUSCLE_GAIN_PROGRESSION


def create_fallback_plan(request: WorkoutRequest) -> WorkoutPlan:
    """Deterministic bodyweight plan used whenever a model-authored plan is unavailable."""
    catalog, progression = _catalog_for(request.goal)
    days: List[DayWorkout] = []
    for i, template in enumerate(catalog[: request.days_per_week], start=1):
        days.append(
            DayWorkout(
                day=i,
                name=f"Day {i}: {template['name']}",
                focus=template["focus"],
                exercises=[_exercise(row) for row in template["exercises"]],
                estimated_duration=template["duration"],
            )
        )

    logger.info("Built fallback %s plan with %d day(s)", request.goal, len(days))
    return WorkoutPlan(
        id=uuid.uuid4().hex,
        days_per_week=request.days_per_week,
        goal=request.goal,
        created_at=datetime.now(timezone.utc),
        exercises=days,
        total_weeks=4,
        progression_notes=progression,
        macro_goals=request.macro_goals,
        nutrition_tips=list(NUTRITION_TIPS) if request.macro_goals is not None else None,
    )
