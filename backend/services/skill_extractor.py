"""Dictionary-based skill extraction and keyword frequency ranking.

A skill is recognised when any of its surface variants ("reactjs",
"react.js", "react js") appears in the text as a whole word. Results are
always reported under the canonical name ("react").
"""

import logging
import re
from collections import Counter
from collections.abc import Iterable, Mapping

from models.schemas.skill_profile import SkillProfile
from services.tokenizer import iter_tokens

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 30
MIN_KEYWORD_LENGTH = 4


class SkillDictionary:
    """Immutable, ordered mapping of canonical skill -> surface variants.

    Build once with `from_mapping()` and share freely; nothing mutates it
    after construction.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[str, Iterable[str]]]) -> None:
        seen: set[str] = set()
        built: list[tuple[str, tuple[str, ...]]] = []
        for canonical, variants in entries:
            name = canonical.lower().strip()
            if not name:
                raise ValueError("Canonical skill name must not be empty")
            if name in seen:
                raise ValueError(f"Duplicate canonical skill: {canonical!r}")
            forms = tuple(v.lower().strip() for v in variants if v.strip())
            if not forms:
                raise ValueError(f"Skill {canonical!r} has no variants")
            seen.add(name)
            built.append((name, forms))
        self._entries: tuple[tuple[str, tuple[str, ...]], ...] = tuple(built)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "SkillDictionary":
        return cls(mapping.items())

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, canonical: object) -> bool:
        return isinstance(canonical, str) and any(
            name == canonical.lower() for name, _ in self._entries
        )

    @property
    def canonical_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._entries)

    def variants(self, canonical: str) -> tuple[str, ...]:
        for name, forms in self._entries:
            if name == canonical.lower():
                return forms
        raise KeyError(canonical)


# Canonical skill -> variants. Order matters: extraction reports skills in
# this order.
DEFAULT_SKILLS: dict[str, list[str]] = {
    "javascript": ["javascript", "js", "java script"],
    "typescript": ["typescript", "ts"],
    "react": ["react", "reactjs", "react.js", "react js"],
    "nextjs": ["nextjs", "next.js", "next js"],
    "node.js": ["node", "nodejs", "node.js", "node js"],
    "express": ["express", "expressjs", "express.js", "express js"],
    "html": ["html", "html5"],
    "css": ["css", "css3"],
    "tailwind": ["tailwind", "tailwindcss", "tailwind css"],
    "bootstrap": ["bootstrap"],
    "java": ["java"],
    "spring boot": ["spring boot", "spring-boot", "springboot"],
    "python": ["python"],
    "django": ["django"],
    "flask": ["flask"],
    "kotlin": ["kotlin"],
    "android": ["android", "android studio"],
    "react native": ["react native", "react-native"],
    "sql": ["sql", "structured query language"],
    "mysql": ["mysql", "my sql", "my-sql"],
    "postgresql": ["postgresql", "postgres", "postgre sql", "postgre-sql"],
    "mongodb": ["mongodb", "mongo db", "mongo-db", "mongo"],
    "firebase": ["firebase"],
    "redis": ["redis"],
    "aws": ["aws", "amazon web services"],
    "azure": ["azure", "microsoft azure"],
    "gcp": ["gcp", "google cloud", "google cloud platform"],
    "docker": ["docker"],
    "kubernetes": ["kubernetes", "k8s"],
    "git": ["git"],
    "github": ["github"],
    "jira": ["jira"],
    "jenkins": ["jenkins"],
    "rest api": ["rest", "rest api", "restful api", "restful services"],
    "graphql": ["graphql"],
    "microservices": ["microservices", "micro-service", "micro services"],
    "machine learning": ["machine learning", "ml"],
    "data analysis": ["data analysis", "data analytics", "analyst"],
    "excel": ["excel", "ms excel"],
    "powerbi": ["power bi", "powerbi"],
    "tableau": ["tableau"],
    "figma": ["figma"],
    "ui/ux": ["ui/ux", "ui ux", "user interface", "user experience"],
}

DEFAULT_DICTIONARY = SkillDictionary.from_mapping(DEFAULT_SKILLS)


def _variant_pattern(variant: str) -> re.Pattern:
    # ASCII word boundaries: "java" must not match inside "javascript"
    return re.compile(rf"\b{re.escape(variant)}\b", re.IGNORECASE | re.ASCII)


class SkillExtractor:
    """Extracts a SkillProfile from raw text using a fixed SkillDictionary."""

    def __init__(self, dictionary: SkillDictionary = DEFAULT_DICTIONARY) -> None:
        self.dictionary = dictionary
        self._patterns: tuple[tuple[str, tuple[re.Pattern, ...]], ...] = tuple(
            (name, tuple(_variant_pattern(v) for v in variants))
            for name, variants in dictionary
        )
        logger.debug("Compiled patterns for %d skills", len(self._patterns))

    def extract_skills(self, text: str) -> tuple[str, ...]:
        """Return canonical skills mentioned in text, in dictionary order."""
        text_lower = text.lower()
        found = []
        for name, patterns in self._patterns:
            # First matching variant wins
            if any(p.search(text_lower) for p in patterns):
                found.append(name)
        return tuple(found)

    def extract(self, text: str) -> SkillProfile:
        return SkillProfile(
            skills=self.extract_skills(text),
            keywords=extract_keywords(text),
        )


def extract_keywords(text: str, top_n: int = MAX_KEYWORDS) -> tuple[str, ...]:
    """Rank tokens by frequency and keep the long ones.

    Takes the `top_n` most frequent tokens (ties keep first-seen order),
    then drops tokens shorter than MIN_KEYWORD_LENGTH.
    """
    counts = Counter(iter_tokens(text))
    top = [token for token, _ in counts.most_common(top_n)]
    return tuple(t for t in top if len(t) >= MIN_KEYWORD_LENGTH)
