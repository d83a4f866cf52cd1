import logging
import os
from typing import List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from .errors import ParseFailure
from .models import ParseRequest, PlanResponse, WorkoutPlan, WorkoutRequest
from .parser import parse_workout_response
from .planner import WorkoutPlanGenerator
from .store import PlanStore

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="AI Workout Plan API", version="0.1.0")

# CORS (allow mobile/web clients on localhost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

generator = WorkoutPlanGenerator()
store = PlanStore()


def get_generator() -> WorkoutPlanGenerator:
    return generator


def get_store() -> PlanStore:
    return store


@app.get("/health")
def health(gen: WorkoutPlanGenerator = Depends(get_generator)):
    return {"status": "ok", "llm_configured": gen.llm_configured}


@app.post("/workout-plans", response_model=PlanResponse, response_model_exclude_none=True)
async def create_workout_plan(
    request: WorkoutRequest,
    gen: WorkoutPlanGenerator = Depends(get_generator),
    plans: PlanStore = Depends(get_store),
):
    result = await gen.generate_plan(request)
    stored = plans.add(result.plan)
    return result.model_copy(update={"plan": stored})


@app.post("/workout-plans/parse", response_model=WorkoutPlan, response_model_exclude_none=True)
def parse_workout_plan(body: ParseRequest):
    try:
        return parse_workout_response(body.text, body.request)
    except ParseFailure as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/workout-plans", response_model=List[WorkoutPlan], response_model_exclude_none=True)
def list_workout_plans(plans: PlanStore = Depends(get_store)):
    return plans.list()


@app.get("/workout-plans/{plan_id}", response_model=WorkoutPlan, response_model_exclude_none=True)
def get_workout_plan(plan_id: str, plans: PlanStore = Depends(get_store)):
    plan = plans.get(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"Workout plan {plan_id} not found")
    return plan


@app.delete("/workout-plans/{plan_id}")
def delete_workout_plan(plan_id: str, plans: PlanStore = Depends(get_store)):
    if not plans.remove(plan_id):
        raise HTTPException(status_code=404, detail=f"Workout plan {plan_id} not found")
    return {"status": "deleted", "id": plan_id}


@app.delete("/workout-plans")
def clear_workout_plans(plans: PlanStore = Depends(get_store)):
    plans.clear()
    return {"status": "cleared"}
