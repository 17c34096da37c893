# Prompt builders for the summarize and brief calls.
# Templates live in prompts.yaml next to this module.

from functools import lru_cache
from pathlib import Path
from typing import List
import yaml

PROMPTS_PATH = Path(__file__).with_name("prompts.yaml")


@lru_cache(maxsize=1)
def load_templates() -> dict:
    with open(PROMPTS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def brief_sections() -> List[str]:
    return list(load_templates().get("sections", []))


def build_summary_prompt(deck_text: str) -> str:
    return load_templates()["summary"].format(deck_text=deck_text)


def build_brief_prompt(summary: str, persona: str) -> str:
    sections = "\n".join(f"{i}. {name}" for i, name in enumerate(brief_sections(), start=1))
    return load_templates()["brief"].format(summary=summary, persona=persona, sections=sections)
