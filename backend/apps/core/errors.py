"""Error kinds raised while analysing a response."""


class EmotionAnalysisError(Exception):
    """Base class for analysis failures."""


class ConfigurationMissing(EmotionAnalysisError):
    """A required environment value is absent or blank."""


class InvalidPayload(EmotionAnalysisError):
    """The request body is malformed or missing required fields."""


class UpstreamFailure(EmotionAnalysisError):
    """The NLU provider call failed."""


class PersistenceFailure(EmotionAnalysisError):
    """The analysis record could not be written."""
