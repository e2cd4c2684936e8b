from src.models.analysis import (
    AnalysisResult,
    ConversationMessage,
    ConversationResult,
    IncidentContext,
)
from src.models.coach import (
    CoachResponse,
    CoachTurn,
    ConversationSummary,
    EmotionalSupport,
    ProfessionalHelp,
    Resource,
)
from src.models.enums import ReportStatus, ResourceType, Severity, Topic
from src.models.fir import (
    Complainant,
    EvidenceItem,
    IncidentData,
    IncidentDetails,
    IncidentLocation,
    IncidentRecord,
    LegalSection,
    SuspectProfile,
)

__all__ = [
    "AnalysisResult",
    "CoachResponse",
    "CoachTurn",
    "Complainant",
    "ConversationMessage",
    "ConversationResult",
    "ConversationSummary",
    "EmotionalSupport",
    "EvidenceItem",
    "IncidentContext",
    "IncidentData",
    "IncidentDetails",
    "IncidentLocation",
    "IncidentRecord",
    "LegalSection",
    "ProfessionalHelp",
    "ReportStatus",
    "Resource",
    "ResourceType",
    "Severity",
    "SuspectProfile",
    "Topic",
]
