class AnalysisError(Exception):
    """Base exception for all text-analysis errors."""

    code = "ANALYSIS_ERROR"


class AnalysisInputError(AnalysisError):
    """Raised when the document text or request input cannot be analyzed."""

    code = "INPUT_ERROR"


class TextTooLongError(AnalysisInputError):
    """Raised when a document exceeds the configured character limit."""

    code = "TEXT_TOO_LONG"


class UnsupportedLanguageError(AnalysisInputError):
    """Raised when a request names a language the service does not support."""

    code = "UNSUPPORTED_LANGUAGE"


class UndefinedMetricError(AnalysisInputError, ZeroDivisionError):
    """Raised when a metric would divide by a zero word or sentence count."""

    code = "UNDEFINED_METRIC"


class AnalyzerError(AnalysisError):
    """Raised when an analyzer fails unexpectedly."""

    code = "ANALYZER_ERROR"


class UnsupportedAnalysisTypeError(AnalysisError, ValueError):
    """Raised when an analysis type is not recognized."""

    code = "UNSUPPORTED_TYPE"


class MissingModelError(AnalysisError):
    """Raised when no model is available for one or more requested types."""

    code = "MODEL_NOT_FOUND"
