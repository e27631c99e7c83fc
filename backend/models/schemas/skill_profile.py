"""Skill extractor output: what one text blob says about skills."""

from pydantic import BaseModel, ConfigDict


class SkillProfile(BaseModel):
    """Canonical skills and frequency keywords found in a single text.

    `skills` holds canonical names only, deduplicated and listed in
    skill dictionary order. `keywords` holds at most 30 tokens, most
    frequent first, ties in first-seen order.
    """
    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
