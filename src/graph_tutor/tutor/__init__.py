from .responses import LoggedResponse, ResponseAttempt, ResponseLogger, validate_attempt
from .sessions import SessionStarter
from .vocabulary import VocabularyReader

__all__ = [
    "LoggedResponse",
    "ResponseAttempt",
    "ResponseLogger",
    "validate_attempt",
    "SessionStarter",
    "VocabularyReader",
]
