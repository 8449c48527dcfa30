from .errors import ServiceError, BadRequest, Unauthorized, Forbidden, NotFound, Conflict
from .auth import Caller, login_required, mentor_required, admin_required

__all__ = ['ServiceError', 'BadRequest', 'Unauthorized', 'Forbidden', 'NotFound', 'Conflict',
           'Caller', 'login_required', 'mentor_required', 'admin_required']
