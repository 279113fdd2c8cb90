from rest_framework import exceptions, status

ValidationError = exceptions.ValidationError


class AuthHeaderError(exceptions.NotAuthenticated):
    default_detail = "Authorization header is missing or malformed"
    default_code = "auth_header"


class InvalidTokenError(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token"
    default_code = "invalid_token"


class InvalidCredentialsError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class NotFoundError(exceptions.NotFound):
    default_detail = "Not found"


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A resource with this value already exists."
    default_code = "conflict"
