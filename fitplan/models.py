from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class MacroGoals(BaseModel):
    protein: float = Field(ge=0, description="grams per day")
    carbs: float = Field(ge=0, description="grams per day")
    fats: float = Field(ge=0, description="grams per day")
    calories: float = Field(ge=0, description="total kcal per day")

class WorkoutRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    days_per_week: int = Field(ge=1, le=7)
    goal: str = Field(description="Fat Burn | Muscle Gain")
    fitness_level: str = "intermediate"
    time_per_session: int = Field(default=50, gt=0, description="minutes")
    macro_goals: Optional[MacroGoals] = None

class Exercise(BaseModel):
    name: str = Field(min_length=1)
    sets: int = Field(default=3, ge=1)
    reps: str = "12"
    rest: str = "60s"
    description: Optional[str] = None
    target_muscles: Optional[List[str]] = None

class DayWorkout(BaseModel):
    day: int = Field(ge=1)
    name: str
    focus: str
    exercises: List[Exercise] = Field(default_factory=list)
    estimated_duration: str

class WorkoutPlan(BaseModel):
    id: str
    days_per_week: int
    goal: str
    created_at: datetime
    exercises: List[DayWorkout]
    total_weeks: int = 4
    progression_notes: str = Field(min_length=1)
    macro_goals: Optional[MacroGoals] = None
    nutrition_tips: Optional[List[str]] = None

class PlanSource(str, Enum):
    AI = "ai"
    FALLBACK = "fallback"

class PlanResponse(BaseModel):
    plan: WorkoutPlan
    source: PlanSource
    warning: Optional[str] = None

class ParseRequest(BaseModel):
    request: WorkoutRequest
    text: str
