from __future__ import annotations

import json
import logging
from pathlib import Path

from stockwise.application.interfaces.care_advisor import CareAdvisor, CareStrategies

logger = logging.getLogger(__name__)

# Load prompt from file
PROMPTS_DIR = Path(__file__).parent / "prompts"
CARE_STRATEGIES_PROMPT = (PROMPTS_DIR / "care_strategies.txt").read_text(encoding="utf-8")


def _unwrap_json(content: str) -> dict:
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        # Try to extract JSON if wrapped in markdown code blocks
        if "```json" in content:
            json_start = content.find("```json") + 7
            json_end = content.find("```", json_start)
            return json.loads(content[json_start:json_end].strip())
        if "```" in content:
            json_start = content.find("```") + 3
            json_end = content.find("```", json_start)
            return json.loads(content[json_start:json_end].strip())
        raise


def parse_care_strategies(content: str | None) -> CareStrategies:
    """Parse the model reply into care strategies.

    Raises:
        ValueError: If the reply is empty, not JSON, or misses a field
    """
    if not content:
        raise ValueError("Empty response from OpenAI")
    try:
        data = _unwrap_json(content)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse OpenAI response as JSON: {e}")
        raise ValueError(f"Invalid JSON response from OpenAI: {content[:200]}") from e
    if not isinstance(data, dict):
        raise ValueError("Response is not a JSON object")
    strategies = data.get("careStrategies")
    reasoning = data.get("reasoning")
    if not isinstance(strategies, str) or not strategies.strip():
        raise ValueError("Response missing 'careStrategies' field")
    if not isinstance(reasoning, str):
        raise ValueError("Response missing 'reasoning' field")
    return {"care_strategies": strategies.strip(), "reasoning": reasoning.strip()}


class OpenAIService(CareAdvisor):
    """Care strategy suggestions backed by the OpenAI chat API."""

    def __init__(self, api_key: str, *, model: str = "gpt-4o-mini"):
        from openai import AsyncOpenAI

        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model

    async def suggest_care_strategies(
        self, health_records: str, environmental_conditions: str
    ) -> CareStrategies:
        """
        Ask the model for care strategies for the described animals.

        Args:
            health_records: Free-text health history of the livestock
            environmental_conditions: Free-text description of the surroundings

        Returns:
            Care strategies and the reasoning behind them

        Raises:
            ValueError: If OpenAI response is invalid or cannot be parsed
            Exception: For OpenAI API errors
        """
        prompt = CARE_STRATEGIES_PROMPT.format(
            health_records=health_records,
            environmental_conditions=environmental_conditions,
        )
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
                max_tokens=1200,
                temperature=0.4,
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise
        return parse_care_strategies(content)
