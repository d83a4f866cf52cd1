class PlanGenerationError(Exception):
    """Base class for reasons a model-authored plan could not be produced."""


class ConfigurationMissing(PlanGenerationError):
    """No usable credential for the text-generation service."""


class ExternalCallFailure(PlanGenerationError):
    """The text-generation call raised or returned no text."""


class ParseFailure(PlanGenerationError):
    """The model reply yielded zero workout days."""
