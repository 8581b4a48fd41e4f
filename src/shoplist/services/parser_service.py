"""Free-text item parsing service: remote model first, local rules second."""
from functools import lru_cache
from typing import List, Optional

from shoplist.config.settings import get_settings
from shoplist.domain.types import ParsedItem
from shoplist.parsing.local_parser import parse_local
from shoplist.parsing.splitter import split_items
from shoplist.parsing.vocabulary import ParserVocabulary, DEFAULT_VOCABULARY
from shoplist.ai.errors import ParserError, ParseResult
from shoplist.ai.remote_parser import RemoteItemParser
from .base_service import BaseService

SOURCE_REMOTE = "remote"
SOURCE_LOCAL = "local"


class TextItemParser(BaseService):
    """Service for turning free text into structured shopping items."""

    def __init__(
        self,
        remote: Optional[RemoteItemParser] = None,
        vocabulary: ParserVocabulary = DEFAULT_VOCABULARY,
        use_remote: Optional[bool] = None
    ):
        """
        Initialize the service.

        Args:
            remote: Remote stage; built from settings when omitted
            vocabulary: Allow-lists and keyword tables
            use_remote: Override SHOPLIST_USE_REMOTE; False skips the
                remote stage entirely
        """
        super().__init__(vocabulary)
        if use_remote is None:
            use_remote = get_settings().USE_REMOTE

        if use_remote and remote is None:
            remote = RemoteItemParser(vocabulary=vocabulary)
        self.remote = remote if use_remote else None

    async def parse(self, text: str) -> ParseResult:
        """
        Parse text and report where the items came from.

        Args:
            text: Free text describing one or more items

        Returns:
            ParseResult with the items in ``data`` and ``original_text``,
            ``source`` and, for remote results, ``model`` in ``metadata``
        """
        if not text or not text.strip():
            self._log_action("parse", status="empty input")
            return ParseResult.from_items([], original_text=text or "", source=SOURCE_LOCAL)

        self.logger.info(f'Trying to parse shopping text: "{text}"')

        remote_error = None
        suggestions: List[str] = []
        if self.remote is not None:
            try:
                items, model = await self.remote.parse_with_model(text)
                self._log_action("parse", source=SOURCE_REMOTE, model=model, items=len(items))
                return ParseResult.from_items(
                    items,
                    original_text=text,
                    source=SOURCE_REMOTE,
                    model=model
                )
            except ParserError as e:
                remote_error = e.message
                suggestions = e.suggestions
                self.logger.info(
                    "Remote parsing failed, falling back to local parsing",
                    error=e.message,
                    metadata=e.metadata
                )

        items = self.parse_local_with_fallback(text)
        self._log_action("parse", source=SOURCE_LOCAL, items=len(items))

        metadata = {'remote_error': remote_error} if remote_error else {}
        return ParseResult.from_items(
            items,
            original_text=text,
            source=SOURCE_LOCAL,
            suggestions=suggestions,
            **metadata
        )

    async def parse_item_text(self, text: str) -> List[ParsedItem]:
        """Parse text into items, falling back to local rules on remote failure."""
        result = await self.parse(text)
        return result.data or []

    def parse_local_with_fallback(self, text: str) -> List[ParsedItem]:
        """
        Parse a shopping list locally.

        Args:
            text: The shopping list text

        Returns:
            One item per split piece, in input order
        """
        self.logger.info("Using local parser for shopping list", text=text)
        item_texts = split_items(text)
        self.logger.debug(f"Split into {len(item_texts)} items", items=item_texts)
        return [parse_local(item_text, self.vocabulary) for item_text in item_texts]


@lru_cache()
def get_default_parser() -> TextItemParser:
    """Get cached parser built from settings."""
    return TextItemParser()


async def parse_item_text(text: str) -> List[ParsedItem]:
    """Parse free text with the default parser."""
    return await get_default_parser().parse_item_text(text)
