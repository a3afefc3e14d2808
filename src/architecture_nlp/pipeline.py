"""NLP Pipeline - public entry point for requirements processing.

Chains entity extraction, intent recognition, requirements analysis and
validation. Every stage is synchronous and keeps no state between calls, so a
pipeline instance can be shared by concurrent callers once constructed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .config import PipelineConfig, get_config
from .entity_extractor import EntityExtractor
from .error_handler import ErrorHandler
from .exceptions import RequirementsProcessingError
from .intent_recognizer import IntentRecognizer
from .patterns_library import PatternLibrary, default_pattern_library
from .requirements_analyzer import RequirementsAnalyzer
from .schema import ValidatedArchitecture
from .service_catalog import ServiceCatalog, default_service_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineSuccess:
    """The pipeline produced a validated architecture."""
    value: ValidatedArchitecture

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class PipelineFailure:
    """A pipeline stage raised; ``error`` wraps the original exception."""
    error: RequirementsProcessingError

    @property
    def ok(self) -> bool:
        return False


PipelineResult = Union[PipelineSuccess, PipelineFailure]


class NLPPipeline:
    """Turns natural language requirements into a validated architecture."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        catalog: Optional[ServiceCatalog] = None,
        library: Optional[PatternLibrary] = None,
    ):
        config = config or get_config()
        self.catalog = catalog or default_service_catalog()
        self.library = library or default_pattern_library()
        self.entity_extractor = EntityExtractor(self.catalog, config.confidences)
        self.intent_recognizer = IntentRecognizer(self.library, config.confidences)
        self.requirements_analyzer = RequirementsAnalyzer(config.aggregation)
        self.error_handler = ErrorHandler(config.validation)

    def process(self, text: str) -> ValidatedArchitecture:
        """Process requirements text.

        Args:
            text: Natural language requirements

        Returns:
            The validated architecture

        Raises:
            RequirementsProcessingError: if any stage fails
        """
        try:
            entities = self.entity_extractor.extract(text)
            logger.debug(
                "Extracted %d services, %d components, %d relationships, %d requirements",
                len(entities.services), len(entities.components),
                len(entities.relationships), len(entities.requirements),
            )

            intents = self.intent_recognizer.recognize(text, entities)
            logger.debug(
                "Recognized %d patterns, %d use cases, %d constraints, %d practices",
                len(intents.architectural_patterns), len(intents.use_cases),
                len(intents.constraints), len(intents.best_practices),
            )

            structured = self.requirements_analyzer.analyze(text, entities, intents)
            validated = self.error_handler.validate(structured)
        except Exception as e:
            logger.error("NLP processing error: %s", e)
            raise RequirementsProcessingError(e) from e

        logger.debug(
            "Validated '%s': %d errors, %d warnings, confidence %.2f",
            validated.architecture.name, len(validated.validation.errors),
            len(validated.validation.warnings), validated.confidence,
        )
        return validated

    def try_process(self, text: str) -> PipelineResult:
        """Like :meth:`process`, but returns the failure instead of raising it."""
        try:
            return PipelineSuccess(self.process(text))
        except RequirementsProcessingError as e:
            return PipelineFailure(e)

    def get_service_catalog(self) -> dict[str, dict[str, Any]]:
        """Read-only view of the service catalog, keyed by category."""
        return self.catalog.get_catalog()

    def get_patterns_library(self) -> dict[str, dict[str, Any]]:
        """Read-only view of the pattern library, keyed by category."""
        return self.library.get_patterns()
