from __future__ import annotations

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel

from .errors import ConfigurationMissing, ExternalCallFailure, PlanGenerationError
from .fallback import create_fallback_plan
from .llm import LLMConfig, build_chat_model, message_text
from .models import PlanResponse, PlanSource, WorkoutPlan, WorkoutRequest
from .parser import parse_workout_response
from .prompt import build_workout_prompt

logger = logging.getLogger(__name__)


class WorkoutPlanGenerator:
    """
    Asks the chat model for a plan and parses the reply.

    Every failure (missing key, failed call, unusable reply) ends in the
    deterministic fallback plan, with the reason reported in
    ``PlanResponse.warning``.
    """

    def __init__(self, cfg: LLMConfig | None = None, chat_model: BaseChatModel | Any | None = None) -> None:
        self.cfg = cfg or LLMConfig.from_env()
        self._chat_model = chat_model

    @property
    def llm_configured(self) -> bool:
        return self._chat_model is not None or self.cfg.has_credentials()

    async def generate_plan(self, req: WorkoutRequest) -> PlanResponse:
        try:
            plan = await self._generate_ai_plan(req)
        except PlanGenerationError as e:
            logger.warning("Using fallback workout plan (%s): %s", type(e).__name__, e)
            return PlanResponse(
                plan=create_fallback_plan(req),
                source=PlanSource.FALLBACK,
                warning=str(e),
            )
        return PlanResponse(plan=plan, source=PlanSource.AI)

    # --- internals ---
    def _get_chat_model(self) -> Any:
        if self._chat_model is None:
            if not self.cfg.has_credentials():
                raise ConfigurationMissing("OPENAI_API_KEY is not configured")
            self._chat_model = build_chat_model(self.cfg)
        return self._chat_model

    async def _generate_ai_plan(self, req: WorkoutRequest) -> WorkoutPlan:
        chat_model = self._get_chat_model()
        prompt = build_workout_prompt(req)
        try:
            reply = await chat_model.ainvoke(prompt)
        except Exception as e:
            raise ExternalCallFailure(f"Text generation failed: {e}") from e

        text = message_text(reply).strip()
        if not text:
            raise ExternalCallFailure("Text generation returned an empty response")
        # ParseFailure propagates to generate_plan
        return parse_workout_response(text, req)
