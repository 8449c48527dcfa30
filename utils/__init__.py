from .helpers import get_json_body, require_fields, parse_datetime, parse_int, dump_json_list
from .notifications import mail, send_email

__all__ = ['get_json_body', 'require_fields', 'parse_datetime', 'parse_int', 'dump_json_list',
           'mail', 'send_email']
