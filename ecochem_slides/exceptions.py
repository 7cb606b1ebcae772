"""
Errors raised by the slide generation pipeline
"""

NO_RESPONSE_MESSAGE = "no response from generation service"


class GenerationError(Exception):
    """Base class for every slide generation failure"""


class GenerationServiceError(GenerationError):
    """The generation service call itself failed (network, auth, quota)"""


class EmptyResponseError(GenerationError):
    """The service answered without any text payload"""

    def __init__(self, message: str = NO_RESPONSE_MESSAGE):
        super().__init__(message)


class MalformedResponseError(GenerationError):
    """The payload is not valid JSON or does not match the slide schema"""
