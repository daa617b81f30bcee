"""
Trip advisor service.

This module provides short travel briefings for a location using OpenAI API.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI

from trip_helper.config import config

logger = logging.getLogger(__name__)


class TripAdvisor:
    """Travel briefings using OpenAI API."""

    def __init__(self, api_key: str = None, model: str = None):
        """
        Initialize the advisor.

        Args:
            api_key: OpenAI API key (defaults to config.OPENAI_API_KEY)
            model: OpenAI model name (defaults to config.OPENAI_MODEL)
        """
        self.api_key = api_key or config.OPENAI_API_KEY
        self.model = model or config.OPENAI_MODEL

    def _create_prompt(self, location: str) -> str:
        """Create briefing prompt."""
        return f"""
A traveller is currently at: {location}

Give them a short briefing for their trip:
- What the place is known for
- Two or three things worth seeing nearby
- One practical tip (transport, weather, local customs)

Keep it under 120 words, plain text, no markdown.
"""

    async def describe_location(self, location: str) -> Optional[str]:
        """
        Get a travel briefing for a location.

        Args:
            location: Location as shared by the user

        Returns:
            Briefing text if successful, None otherwise
        """
        try:
            client = AsyncOpenAI(api_key=self.api_key)

            logger.info(f"Calling OpenAI API for a briefing on {location!r}...")

            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a friendly, concise travel guide."},
                    {"role": "user", "content": self._create_prompt(location)}
                ],
                max_tokens=300,
                temperature=0.3
            )

            content = (response.choices[0].message.content or "").strip()
            if not content:
                logger.warning("OpenAI returned an empty briefing")
                return None

            logger.info("Successfully created trip briefing")
            return content

        except Exception as e:
            logger.error(f"Failed to create trip briefing: {e}")
            return None
