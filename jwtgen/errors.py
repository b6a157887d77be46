class JwtGenError(Exception):
    """Base class for failures reported by the jwtgen commands."""


class TokenError(JwtGenError):
    pass


class InvalidUrlError(JwtGenError, ValueError):
    pass


class CoordinatorError(JwtGenError):
    pass


class QueryFailedError(JwtGenError):
    pass


class RequestFailedError(JwtGenError):
    pass
