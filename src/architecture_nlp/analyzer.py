"""Architecture Analyzer - the Analyze operation.

Runs the NLP pipeline over requirements text and converts the result into the
analysis shape consumed by the validator and the renderers. When processing
fails, a fixed low-confidence basic analysis is returned instead.
"""

import logging
from typing import Optional

from .config import get_config
from .pipeline import NLPPipeline, PipelineFailure
from .schema import (
    AnalysisComponent,
    AnalysisEntities,
    AnalysisIntents,
    AnalysisPattern,
    ArchitectureAnalysis,
    NLPAnalysis,
    ValidatedArchitecture,
    ValidationBlock,
)

logger = logging.getLogger(__name__)


class ArchitectureAnalyzer:
    """Analyzes requirements text into an architecture analysis."""

    def __init__(self, pipeline: Optional[NLPPipeline] = None, fallback_confidence: Optional[float] = None):
        self.pipeline = pipeline or NLPPipeline()
        if fallback_confidence is None:
            fallback_confidence = get_config().validation.fallback_confidence
        self.fallback_confidence = fallback_confidence

    def analyze(self, text: Optional[str] = None) -> ArchitectureAnalysis:
        """Analyze requirements text.

        Never raises: missing text and pipeline failures both produce the
        basic analysis. Whitespace-only text is still processed.
        """
        if text is None or text == "":
            return self.basic_analysis()

        logger.info("Processing natural language requirements")
        result = self.pipeline.try_process(text)
        if isinstance(result, PipelineFailure):
            logger.warning("NLP processing failed, falling back to basic analysis: %s", result.error)
            return self.basic_analysis()

        return self.to_analysis(result.value)

    def basic_analysis(self) -> ArchitectureAnalysis:
        """The fixed empty analysis used when no inference is possible."""
        return ArchitectureAnalysis(
            validation=ValidationBlock(confidence=self.fallback_confidence),
            confidence=self.fallback_confidence,
            nlp_analysis=None,
        )

    @staticmethod
    def to_analysis(validated: ValidatedArchitecture) -> ArchitectureAnalysis:
        """Convert pipeline output into the analysis shape."""
        architecture = validated.architecture
        return ArchitectureAnalysis(
            components=[
                AnalysisComponent(
                    id=c.id,
                    name=c.name,
                    type=c.type,
                    description=c.description or "",
                    is_aws_service=c.is_aws_service,
                )
                for c in architecture.components
            ],
            relationships=list(architecture.relationships),
            patterns=[
                AnalysisPattern(name=p.name, category=p.category, services=list(p.services))
                for p in architecture.patterns
            ],
            requirements=list(architecture.requirements),
            constraints=list(architecture.constraints),
            best_practices=list(architecture.best_practices),
            validation=validated.validation,
            confidence=validated.confidence,
            nlp_analysis=NLPAnalysis(
                original_text="Processed via NLP",
                entities=AnalysisEntities(
                    services=list(architecture.services),
                    components=list(architecture.components),
                ),
                intents=AnalysisIntents(
                    architectural_patterns=list(architecture.patterns),
                    use_cases=list(validated.use_cases),
                    constraints=list(architecture.constraints),
                ),
            ),
        )
