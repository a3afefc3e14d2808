"""Natural language requirements to structured AWS architecture."""

from .analyzer import ArchitectureAnalyzer
from .entity_extractor import EntityExtractor
from .error_handler import ErrorHandler
from .exceptions import ArchitectureNLPError, RequirementsProcessingError
from .intent_recognizer import IntentRecognizer
from .patterns_library import PatternLibrary
from .pipeline import NLPPipeline, PipelineFailure, PipelineResult, PipelineSuccess
from .requirements_analyzer import RequirementsAnalyzer
from .service_catalog import ServiceCatalog

__all__ = [
    "ArchitectureAnalyzer",
    "ArchitectureNLPError",
    "EntityExtractor",
    "ErrorHandler",
    "IntentRecognizer",
    "NLPPipeline",
    "PatternLibrary",
    "PipelineFailure",
    "PipelineResult",
    "PipelineSuccess",
    "RequirementsAnalyzer",
    "RequirementsProcessingError",
    "ServiceCatalog",
]
