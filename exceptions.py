class OverpassError(Exception):
    pass


class TransportError(OverpassError):
    def __init__(self, message: str, *, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(OverpassError):
    pass
