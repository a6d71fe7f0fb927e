import requests
import ujson

from duoauth import __version__

QUERY_METHODS = frozenset(['GET', 'HEAD', 'DELETE'])
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class TransportError(Exception):
    def __init__(self, message, status=None):
        super(TransportError, self).__init__(message)
        self.status = status
        self.message = message


def error_message(response):
    """Build a readable message for a failed API response.

    Duo error documents look like
    ``{"stat": "FAIL", "code": 40101, "message": "...", "message_detail": "..."}``;
    anything else falls back to the HTTP reason.
    """
    message = '%s %s' % (response.status_code, response.reason)
    try:
        content = ujson.loads(response.content)
    except ValueError:
        return message
    if isinstance(content, dict) and content.get('message'):
        message = '%s: %s' % (message, content['message'])
        if content.get('message_detail'):
            message = '%s (%s)' % (message, content['message_detail'])
    return message


class DuoClient(requests.Session):
    def __init__(self, timeout=None, verify=True):
        super(DuoClient, self).__init__()
        self.timeout = timeout
        self.verify = verify
        self.headers['User-Agent'] = 'duoauth/%s' % __version__

    def dispatch(self, method, url, params, auth):
        """Send a signed request and return the parsed JSON body.

        ``params`` is the already encoded parameter string; it is sent
        untouched so the server hashes exactly what was signed.
        """
        method = method.upper()
        kwargs = {'auth': auth, 'timeout': self.timeout}
        if method in QUERY_METHODS:
            kwargs['params'] = params or None
        else:
            kwargs['data'] = params
            kwargs['headers'] = {'Content-Type': FORM_CONTENT_TYPE}

        response = self.request(method, url, **kwargs)
        if not response.ok:
            raise TransportError(error_message(response), response.status_code)
        try:
            return ujson.loads(response.content)
        except ValueError as e:
            raise TransportError('Invalid JSON in response: %s' % e, response.status_code)
