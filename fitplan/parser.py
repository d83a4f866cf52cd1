"""
Turns the free-text reply of a text-generation model into a WorkoutPlan.

The reply is expected to follow the template rendered by prompt.py, but models
drift: headings change case, bullets change style, sections go missing. The
parser is a small state machine over non-blank trimmed lines. Each line is
first classified (LineKind), then handled according to the current
ParserState. Field extraction inside an exercise block is pattern based, with
defaults for anything that is missing or malformed.
"""
from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from .errors import ParseFailure
from .models import DayWorkout, Exercise, WorkoutPlan, WorkoutRequest

logger = logging.getLogger(__name__)


# Day / exercise headers ("Day 1: Leg Day", "Exercise 2: Squats")
DAY_HEADER_RE = re.compile(r"day\s+(\d+):\s*(.+)", re.IGNORECASE)
EXERCISE_HEADER_RE = re.compile(r"exercise\s+\d+:\s*(.+)", re.IGNORECASE)

# Bullet handling
BULLET_OPENER_RE = re.compile(r"^[-•]\s*\w")
EXERCISE_BULLET_RE = re.compile(r"^[-•]\s*")
TIP_BULLET_RE = re.compile(r"^[-•*]\s*")

# Exercise detail lines and their values
SETS_LINE_RE = re.compile(r"^(?:- )?sets:", re.IGNORECASE)
REST_LINE_RE = re.compile(r"^(?:- )?rest:", re.IGNORECASE)
TARGET_LINE_RE = re.compile(r"^(?:- )?target:", re.IGNORECASE)
SETS_RE = re.compile(r"(\d+)\s*sets?\s*of\s*([^,\n]+)", re.IGNORECASE)
REST_RE = re.compile(r"rest:\s*([^,\n]+)", re.IGNORECASE)
TARGET_RE = re.compile(r"target:\s*([^,\n]+)", re.IGNORECASE)
DETAIL_KEYWORDS = ("sets:", "rest:", "target:")

FOCUS_PREFIX = "focus:"
DURATION_PREFIX = "duration:"

DAY_LOOKAHEAD = 3
EXERCISE_LOOKAHEAD = 9
MIN_TIP_LENGTH = 10

DEFAULT_DURATION = "45-60 min"
DEFAULT_SETS = 3
DEFAULT_REPS = "12"
DEFAULT_REST = "60s"
DEFAULT_DESCRIPTION = "Focus on proper form and controlled movement"
DEFAULT_PROGRESSION_NOTES = (
    "Increase difficulty by adding more reps, sets, or reducing rest time as you get stronger."
)
TOTAL_WEEKS = 4


class LineKind(Enum):
    NUTRITION_HEADER = "nutrition_header"
    PROGRESSION_HEADER = "progression_header"
    DAY_HEADER = "day_header"
    EXERCISE_OPENER = "exercise_opener"
    TEXT = "text"


class ParserState(Enum):
    IDLE = "idle"
    COLLECTING_DAY = "collecting_day"
    COLLECTING_PROGRESSION = "collecting_progression"
    COLLECTING_NUTRITION = "collecting_nutrition"


NARRATIVE_STATES = (ParserState.COLLECTING_PROGRESSION, ParserState.COLLECTING_NUTRITION)


def _is_detail_line(lowered: str) -> bool:
    return any(k in lowered for k in DETAIL_KEYWORDS)


def classify_line(line: str) -> LineKind:
    """Classify a trimmed line. Section headers win over everything else."""
    lowered = line.lower()
    if "nutrition" in lowered and "tips" in lowered and ":" in line:
        return LineKind.NUTRITION_HEADER
    if "progression" in lowered and ":" in line:
        return LineKind.PROGRESSION_HEADER
    if lowered.startswith("day") and ":" in line:
        return LineKind.DAY_HEADER
    if lowered.startswith("exercise"):
        return LineKind.EXERCISE_OPENER
    if BULLET_OPENER_RE.match(line) and not _is_detail_line(lowered):
        return LineKind.EXERCISE_OPENER
    return LineKind.TEXT


def parse_exercise_block(lines: List[str], start: int) -> Optional[Exercise]:
    """
    Build one Exercise from the block opened at ``lines[start]``.

    Returns None when the opener yields no name or when anything in the
    block fails to parse; the caller simply skips the block.
    """
    try:
        opener = lines[start].strip()
        if opener.lower().startswith("exercise"):
            m = EXERCISE_HEADER_RE.search(opener)
            name = m.group(1).strip() if m else ""
        else:
            name = EXERCISE_BULLET_RE.sub("", opener, count=1).strip()
        if not name:
            return None

        sets = DEFAULT_SETS
        reps = DEFAULT_REPS
        rest = DEFAULT_REST
        target_muscles: List[str] = []
        description = DEFAULT_DESCRIPTION

        for raw in lines[start + 1 : start + 1 + EXERCISE_LOOKAHEAD]:
            line = raw.strip()
            lowered = line.lower()
            # next block starts here
            if lowered.startswith("exercise") or lowered.startswith("day"):
                break

            if SETS_LINE_RE.match(line):
                m = SETS_RE.search(line)
                if m:
                    sets = int(m.group(1))
                    reps = m.group(2).strip()
            elif REST_LINE_RE.match(line):
                m = REST_RE.search(line)
                if m:
                    rest = m.group(1).strip()
            elif TARGET_LINE_RE.match(line):
                m = TARGET_RE.search(line)
                if m:
                    target = m.group(1).strip()
                    target_muscles = [target]
                    description = target

        return Exercise(
            name=name,
            sets=sets,
            reps=reps,
            rest=rest,
            description=description,
            target_muscles=target_muscles,
        )
    except Exception as e:
        logger.debug("Dropping exercise block at line %d: %s", start, e)
        return None


class ResponseParser:
    """Single-use parser; create one per model reply."""

    def __init__(self, request: WorkoutRequest) -> None:
        self.request = request
        self.state = ParserState.IDLE
        self.days: List[DayWorkout] = []
        self.current: Optional[DayWorkout] = None
        self.progression: List[str] = []
        self.tips: List[str] = []

    def parse(self, text: str) -> WorkoutPlan:
        lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
        for i, line in enumerate(lines):
            self._feed(lines, i, line)
        self._close_day()

        if not self.days:
            raise ParseFailure("No workout days could be extracted from the model response")
        return self._build_plan()

    # --- internals ---
    def _feed(self, lines: List[str], index: int, line: str) -> None:
        kind = classify_line(line)

        if kind is LineKind.NUTRITION_HEADER:
            self.state = ParserState.COLLECTING_NUTRITION
            return
        if kind is LineKind.PROGRESSION_HEADER:
            self.state = ParserState.COLLECTING_PROGRESSION
            return

        # only a section header leaves narrative text
        if self.state in NARRATIVE_STATES:
            self._collect_narrative(line)
            return

        if kind is LineKind.DAY_HEADER:
            self._open_day(lines, index, line)
        elif kind is LineKind.EXERCISE_OPENER and self.current is not None:
            exercise = parse_exercise_block(lines, index)
            if exercise is not None:
                self.current.exercises.append(exercise)

    def _collect_narrative(self, line: str) -> None:
        lowered = line.lower()
        if lowered.startswith("day"):
            return
        if self.state is ParserState.COLLECTING_NUTRITION:
            if len(line) > MIN_TIP_LENGTH:
                tip = TIP_BULLET_RE.sub("", line, count=1).strip()
                if tip:
                    self.tips.append(tip)
        elif "nutrition" not in lowered:
            self.progression.append(line)

    def _open_day(self, lines: List[str], index: int, line: str) -> None:
        self._close_day()

        m = DAY_HEADER_RE.search(line)
        day_number = int(m.group(1)) if m else 0
        if day_number < 1:
            logger.warning("Ignoring unrecognised day header: %r", line)
            self.state = ParserState.IDLE
            return

        day_name = m.group(2).strip()
        focus = ""
        duration = DEFAULT_DURATION
        for ahead in lines[index + 1 : index + 1 + DAY_LOOKAHEAD]:
            lowered = ahead.lower()
            if lowered.startswith(FOCUS_PREFIX):
                focus = ahead[len(FOCUS_PREFIX):].strip()
            elif lowered.startswith(DURATION_PREFIX):
                duration = ahead[len(DURATION_PREFIX):].strip()

        self.current = DayWorkout(
            day=day_number,
            name=f"Day {day_number}: {day_name}",
            focus=focus or day_name,
            exercises=[],
            estimated_duration=duration or DEFAULT_DURATION,
        )
        self.state = ParserState.COLLECTING_DAY

    def _close_day(self) -> None:
        if self.current is not None:
            self.days.append(self.current)
            self.current = None

    def _build_plan(self) -> WorkoutPlan:
        req = self.request
        days = self.days[: req.days_per_week]
        notes = " ".join(self.progression).strip()
        tips = self.tips if (req.macro_goals is not None and self.tips) else None
        logger.info(
            "Parsed %d day(s) from model response (kept %d, %d exercise(s))",
            len(self.days),
            len(days),
            sum(len(d.exercises) for d in days),
        )
        return WorkoutPlan(
            id=uuid.uuid4().hex,
            days_per_week=req.days_per_week,
            goal=req.goal,
            created_at=datetime.now(timezone.utc),
            exercises=days,
            total_weeks=TOTAL_WEEKS,
            progression_notes=notes or DEFAULT_PROGRESSION_NOTES,
            macro_goals=req.macro_goals,
            nutrition_tips=tips,
        )


def parse_workout_response(text: str, request: WorkoutRequest) -> WorkoutPlan:
    """Parse a model reply into a plan, raising ParseFailure when no day is found."""
    return ResponseParser(request).parse(text)
