"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List
from pydantic import BaseModel, ConfigDict

from shoplist.utils.logger import get_logger
from shoplist.parsing.vocabulary import ParserVocabulary, DEFAULT_VOCABULARY

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    suggestions: List[str] = []
    metadata: dict = {}

    model_config = ConfigDict(arbitrary_types_allowed=True)


class BaseService:
    """Base class for all services."""

    def __init__(self, vocabulary: ParserVocabulary = DEFAULT_VOCABULARY):
        """
        Initialize the service.

        Args:
            vocabulary: Allow-lists and keyword tables used for parsing
        """
        self.vocabulary = vocabulary
        self.logger = get_logger(self.__class__.__name__)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(
            f"{action}: {status}",
            **kwargs
        )
