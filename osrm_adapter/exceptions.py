class ParsingError(Exception):
    """Base class for every failure while parsing a route service response."""


class ResponseDecodeError(ParsingError):
    def __init__(self, detail: str) -> None:
        super().__init__(f'Invalid route response: {detail}')
        self.detail = detail


class InvalidStatusCodeError(ParsingError):
    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(
            f'Route service returned status {code!r}'
            + (f': {message}' if message else '')
        )
        self.code = code
        self.message = message


class InvalidGeometryError(ParsingError):
    def __init__(self, detail: str) -> None:
        super().__init__(f'Invalid geometry: {detail}')
        self.detail = detail


class AnnotationSerializationError(ParsingError):
    def __init__(self, step_index: int, detail: str, *, leg_index: int = 0) -> None:
        super().__init__(
            f'Failed to serialize annotations of step {step_index} of leg {leg_index}: {detail}'
        )
        self.leg_index = leg_index
        self.step_index = step_index
        self.detail = detail
