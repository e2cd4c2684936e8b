"""Evidence and incident-type labelling, independent of severity scoring."""

from __future__ import annotations

from collections.abc import Iterable

from src.models.analysis import IncidentContext
from src.models.enums import Severity
from src.services.lexicon import (
    DEFAULT_LEXICON,
    IMMEDIATE_ACTION_LABEL,
    LOCATION_LABEL,
    Lexicon,
)


class EvidenceLabeler:
    """Tags a message with every evidence and incident type it mentions."""

    __slots__ = ("_lexicon",)

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self._lexicon = lexicon

    def label(
        self,
        text: str,
        severity: Severity,
        context: IncidentContext | None = None,
    ) -> list[str]:
        """Return deduplicated labels for already case-folded ``text``.

        Each rule is checked independently, so a message mentioning both a
        photo and a witness gets both labels.
        """
        labels = [
            rule.tag
            for rule in (*self._lexicon.evidence_rules, *self._lexicon.incident_rules)
            if rule.matches(text)
        ]
        if severity is Severity.HIGH:
            labels.append(IMMEDIATE_ACTION_LABEL)
        if context is not None and context.has_location:
            labels.append(LOCATION_LABEL)
        return list(dict.fromkeys(labels))

    def describe(self, labels: Iterable[str]) -> dict[str, str]:
        """Map labels to their display sentences, skipping labels without one."""
        descriptions = self._lexicon.evidence_descriptions
        return {label: descriptions[label] for label in labels if label in descriptions}
