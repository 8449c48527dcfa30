"""Error kinds raised by transition functions and mapped to HTTP responses."""


class ServiceError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class BadRequest(ServiceError):
    status_code = 400
    default_message = 'Invalid request'


class Unauthorized(ServiceError):
    status_code = 401
    default_message = 'Unauthorized'


class Forbidden(ServiceError):
    status_code = 403
    default_message = 'Forbidden'


class NotFound(ServiceError):
    status_code = 404
    default_message = 'Not found'


class Conflict(ServiceError):
    status_code = 409
    default_message = 'Conflict'
