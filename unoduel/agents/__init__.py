"""Built-in participants."""

from unoduel.agents.cpu_agent import CpuAgent
from unoduel.agents.human_agent import HumanAgent
from unoduel.agents.llm_agent import LLMAgent

__all__ = ["CpuAgent", "HumanAgent", "LLMAgent"]
