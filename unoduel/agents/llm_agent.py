"""LLM agent using the OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import os
import re
import time
from typing import List, Optional

from openai import OpenAI

from unoduel.agents.cpu_agent import CpuAgent
from unoduel.engine import Card, Color, Decision, Disposition, DrawCard, PlayAt, PlayerView
from unoduel.engine.rules import is_playable

logger = logging.getLogger(__name__)

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

MAX_ATTEMPTS = 3


def _format_player_view(pv: PlayerView) -> str:
    """Format player view as text for the LLM."""
    lines = [
        "=== Your hand ===",
        " ".join(str(c) for c in pv.my_hand),
        "",
        "=== Top card on discard (its color is the color to match) ===",
        str(pv.top_card),
        "",
        "=== Opponent ===",
        f"{pv.opponent_card_count} cards",
        "",
        "=== Cards left in the draw pile ===",
        str(pv.draw_pile_count),
        "",
        "=== Game History (last 10 events) ===",
    ]
    if pv.history:
        lines.extend(f"- {h}" for h in pv.history)
    else:
        lines.append("No history yet.")
    return "\n".join(lines)


def _format_options(options: List[str]) -> str:
    return "\n".join(f"{i}: {label}" for i, label in enumerate(options))


def _parse_option_response(response: str, num_options: int) -> Optional[int]:
    """Parse an LLM response into an option index, or None."""
    # 1. A JSON object, tolerating single quotes
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except ValueError:
                continue
            if isinstance(data, dict) and isinstance(data.get("action_index"), int):
                idx = data["action_index"]
                if 0 <= idx < num_options:
                    return idx
                logger.debug("Index %d out of range (0-%d)", idx, num_options - 1)
            break

    # 2. "action_index": N with any quoting
    match = re.search(r'["\']?action_index["\']?\s*:\s*(\d+)', response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < num_options:
            return idx

    # 3. Last resort: a standalone number
    cleaned = re.sub(r'[{}\[\]"\'.,:]', " ", response)
    for word in cleaned.split():
        if word.isdigit() and 0 <= int(word) < num_options:
            return int(word)

    return None


class LLMAgent:
    """Agent that uses an LLM to choose among numbered options.

    Falls back to the CPU policy when the model gives no usable answer.
    """

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        fallback: Optional[CpuAgent] = None,
        client: Optional[OpenAI] = None,
    ):
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._rate_limit = rate_limit  # Requests per minute
        self._request_history: list[float] = []
        self._fallback = fallback or CpuAgent(name=f"{self.name}-fallback")

        if client is not None:
            self._client = client
            return

        if provider == "openrouter":
            base_url = OPENROUTER_BASE
            key = api_key or os.environ.get("OPENROUTER_API_KEY")
        elif provider == "groq":
            base_url = GROQ_BASE
            key = api_key or os.environ.get("GROQ_API_KEY")
        elif provider == "ollama":
            base_url = os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE)
            key = "ollama"
        elif provider == "huggingface":
            base_url = HUGGINGFACE_BASE
            key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
        else:
            raise ValueError(f"Unknown provider: {provider}")

        if not key:
            raise ValueError(f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        logger.info(
            "[%s] provider=%s base_url=%s timeout=%ss rate_limit=%s rpm",
            self.name, provider, base_url, timeout, rate_limit or "None",
        )

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def request_turn_decision(self, view: PlayerView) -> Decision:
        playable = [i for i, card in enumerate(view.my_hand) if is_playable(card, view.top_card)]
        options = [f"PLAY {view.my_hand[i]}" for i in playable] + ["DRAW"]
        choice = self._ask(view, "Choose your move for this turn.", options)
        if choice is None:
            return self._fallback.request_turn_decision(view)
        if choice == len(playable):
            return DrawCard()
        return PlayAt(playable[choice])

    def request_drawn_card_disposition(self, view: PlayerView, card: Card) -> Disposition:
        options = [f"PLAY the drawn {card} now", "KEEP it in your hand"]
        choice = self._ask(view, f"You drew {card}, which can be played.", options)
        if choice is None:
            return self._fallback.request_drawn_card_disposition(view, card)
        return Disposition.PLAY_IMMEDIATELY if choice == 0 else Disposition.KEEP_IN_HAND

    def request_color_choice(self, view: PlayerView) -> Color:
        colors = Color.concrete()
        choice = self._ask(view, "You played a wild card. Pick the new color.", [c.value.upper() for c in colors])
        if choice is None:
            return self._fallback.request_color_choice(view)
        return colors[choice]

    def _wait_for_rate_limit(self) -> None:
        """Block if rate limit is exceeded."""
        if not self._rate_limit:
            return

        now = time.time()
        self._request_history = [t for t in self._request_history if now - t < 60.0]

        if len(self._request_history) >= self._rate_limit:
            # Wait until the oldest request in the window expires
            wait_time = 60.0 - (now - self._request_history[0])
            if wait_time > 0:
                logger.info("[%s] Rate limit reached, waiting %.2fs", self.name, wait_time)
                time.sleep(wait_time)

        self._request_history.append(time.time())

    def _ask(self, view: PlayerView, question: str, options: List[str]) -> Optional[int]:
        prompt = f"""You are playing two-player UNO.
Objective: Win by playing all your cards. Match the top discard card by color or value. Wild cards can be played on anything.

{_format_player_view(view)}

=== Question ===
{question}

=== Options ===
{_format_options(options)}

Respond with a JSON object containing the index of your chosen option.
Example: {{"action_index": 0}}
"""
        for attempt in range(1, MAX_ATTEMPTS + 1):
            start_time = time.time()
            try:
                self._wait_for_rate_limit()
                kwargs = {
                    "model": self._model,
                    "messages": [{"role": "user", "content": prompt}],
                    "timeout": self._timeout,
                }
                if "gpt-4" in self._model or "gpt-3.5" in self._model or self._provider == "groq":
                    kwargs["response_format"] = {"type": "json_object"}

                resp = self._client.chat.completions.create(**kwargs)
                content = resp.choices[0].message.content or ""
                logger.debug("[%s] Response in %.2fs: %s", self.name, time.time() - start_time, content)
            except Exception as e:  # any client/network failure counts as a failed attempt
                logger.warning(
                    "[%s] Error on attempt %d after %.2fs: %s: %s",
                    self.name, attempt, time.time() - start_time, type(e).__name__, e,
                )
                continue

            choice = _parse_option_response(content, len(options))
            if choice is not None:
                return choice
            logger.warning("[%s] Could not parse an option from: %r", self.name, content)

        logger.warning("[%s] All attempts failed, using fallback policy", self.name)
        return None
