"""Error handling for the remote parsing stage."""
from typing import Optional, List, Dict, Any

from shoplist.domain.types import ParsedItem
from shoplist.services.base_service import Result


class ParserError(Exception):
    """Base class for parsing errors."""
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class RemoteUnavailableError(ParserError):
    """Completion service unreachable, failing, or not configured."""
    pass


class UnparsableResponseError(ParserError):
    """Model replied but no usable JSON could be extracted."""
    pass


class EmptyResultError(ParserError):
    """Model reply decoded to zero items."""
    pass


class RemoteParseError(ParserError):
    """Every configured model failed."""
    pass


class ParseResult(Result[List[ParsedItem]]):
    """Result type for a parse call."""

    @classmethod
    def from_items(
        cls,
        items: List[ParsedItem],
        original_text: str,
        source: str,
        suggestions: Optional[List[str]] = None,
        **metadata
    ) -> 'ParseResult':
        """Create a successful result with the parse provenance."""
        return cls(
            success=True,
            data=items,
            suggestions=suggestions or [],
            metadata={
                'original_text': original_text,
                'source': source,
                **metadata
            }
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready payload: parsed items plus the original text."""
        payload: Dict[str, Any] = {
            'parsed': [item.to_dict() for item in self.data or []],
            'originalText': self.metadata.get('original_text', ''),
            'source': self.metadata.get('source'),
        }
        if self.metadata.get('model'):
            payload['model'] = self.metadata['model']
        return payload
