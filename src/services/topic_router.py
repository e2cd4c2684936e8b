"""Topic and emergency routing for coach messages.

Emergency detection uses its own lexicon, separate from the topic buckets,
and always wins: when it matches, topic detection is skipped. Otherwise the
buckets are tried in declaration order and the first hit is the topic.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.enums import Topic
from src.services.lexicon import DEFAULT_LEXICON, Lexicon, contains_any


@dataclass(frozen=True, slots=True)
class TopicMatch:
    topic: Topic
    template: str | None = None


@dataclass(frozen=True, slots=True)
class RouteDecision:
    is_emergency: bool
    topic: Topic
    template: str | None = None


class TopicRouter:
    """Routes case-folded text to the emergency path or a topic bucket."""

    __slots__ = ("_lexicon",)

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self._lexicon = lexicon

    def is_emergency(self, text: str) -> bool:
        return contains_any(text, self._lexicon.emergency_keywords)

    def detect_topic(self, text: str) -> TopicMatch:
        """First matching bucket, or ``Topic.GENERAL`` with no template."""
        for rule in self._lexicon.topic_rules:
            if rule.matches(text):
                return TopicMatch(topic=rule.topic, template=rule.template)
        return TopicMatch(topic=Topic.GENERAL)

    def route(self, text: str) -> RouteDecision:
        if self.is_emergency(text):
            return RouteDecision(is_emergency=True, topic=Topic.EMERGENCY)
        match = self.detect_topic(text)
        return RouteDecision(is_emergency=False, topic=match.topic, template=match.template)

    def needs_emotional_support(self, text: str) -> bool:
        return contains_any(text, self._lexicon.emotional_keywords)

    def wants_follow_up(self, text: str) -> bool:
        """True unless the user sounds satisfied and asks for nothing more."""
        satisfied = contains_any(text, self._lexicon.satisfaction_keywords)
        needs_more = contains_any(text, self._lexicon.needs_more_keywords)
        return not satisfied or needs_more
