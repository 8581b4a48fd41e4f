"""Remote structured extraction of shopping items."""
from typing import Dict, List, Optional, Tuple

from shoplist.domain.types import ParsedItem
from shoplist.parsing.normalize import normalize
from shoplist.parsing.vocabulary import ParserVocabulary, DEFAULT_VOCABULARY
from shoplist.utils.logger import get_logger
from .call_llm import LLMHandler
from .errors import (
    ParserError,
    RemoteUnavailableError,
    EmptyResultError,
    RemoteParseError
)
from .extraction import extract_json_payload
from .prompts import build_item_parsing_prompt


class RemoteItemParser:
    """Parses item text with the completion service, trying models in order."""

    def __init__(
        self,
        handler: Optional[LLMHandler] = None,
        vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
    ):
        self.handler = handler or LLMHandler()
        self.vocabulary = vocabulary
        self.logger = get_logger(self.__class__.__name__)

    @property
    def models(self) -> Tuple[str, ...]:
        return self.handler.config.models

    async def parse(self, text: str) -> List[ParsedItem]:
        """Parse text remotely, see ``parse_with_model``."""
        items, _ = await self.parse_with_model(text)
        return items

    async def parse_with_model(self, text: str) -> Tuple[List[ParsedItem], str]:
        """
        Parse text remotely and report which model produced the items.

        Args:
            text: Raw user text

        Returns:
            Tuple of (normalized items, model identifier)

        Raises:
            RemoteUnavailableError: If the service is not configured
            RemoteParseError: If every model failed
        """
        if not self.handler.enabled:
            raise RemoteUnavailableError(
                "Completion service not configured",
                suggestions=["Set LLM_API_KEY to enable remote parsing"]
            )

        prompt = build_item_parsing_prompt(text, self.vocabulary)
        failures: Dict[str, str] = {}

        for model in self.models:
            try:
                items = await self._parse_with(model, prompt, text)
            except ParserError as e:
                self.logger.warning(
                    f"Error with model {model}",
                    model=model,
                    error=e.message
                )
                failures[model] = e.message
                continue

            self.logger.info(
                f"Parsed {len(items)} items with model {model}",
                model=model,
                items=len(items)
            )
            return items, model

        raise RemoteParseError(
            "All models failed",
            metadata={'failures': failures}
        )

    async def _parse_with(
        self,
        model: str,
        prompt: str,
        text: str
    ) -> List[ParsedItem]:
        reply = await self.handler.complete(prompt, model)
        self.logger.debug("Raw model reply", model=model, reply=reply)

        candidates = extract_json_payload(reply)
        if not candidates:
            raise EmptyResultError("Model returned no items", metadata={'model': model})

        return [
            normalize(candidate, fallback_name=text, vocabulary=self.vocabulary)
            for candidate in candidates
        ]
