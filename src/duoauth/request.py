# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

from logging import getLogger

from duoauth.client import DuoClient
from duoauth.config import duo_section
from duoauth.sign import canonicalize_params, sign

logger = getLogger(__name__)

DEFAULT_FORMAT = 'json'


class SignedRequest(object):
    """A request to a Duo-style API, signed with the integration's secret key.

    Setters return the instance so a request can be configured in one chain::

        result = (SignedRequest()
                  .set_hostname('api-1234.duosecurity.com')
                  .set_integration_key(ikey)
                  .set_secret_key(skey)
                  .set_path('/admin/v1/users')
                  .send())

    ``send`` never raises. It returns the parsed response or ``None``, in
    which case the reason is appended to ``get_errors()``.
    """

    def __init__(self, client=None):
        self.client = client if client is not None else DuoClient()
        self.hostname = None
        self.path = None
        self.method = 'get'
        self.params = {}
        self.integration_key = None
        self.secret_key = None
        self.errors = []

    @classmethod
    def from_config(cls, config, client=None):
        settings = duo_section(config)
        if client is None:
            client = DuoClient(timeout=settings.get('timeout'),
                               verify=settings.get('verify', True))
        return (cls(client)
                .set_hostname(settings.get('hostname'))
                .set_integration_key(settings.get('integration_key'))
                .set_secret_key(settings.get('secret_key')))

    def set_client(self, client):
        self.client = client
        return self

    def get_client(self):
        return self.client

    def set_hostname(self, hostname):
        self.hostname = hostname
        return self

    def get_hostname(self):
        return self.hostname

    def set_path(self, path, format=None):
        """Set the request path, making sure it carries a response format.

        An explicit ``format`` is always appended. Without one, ``.json`` is
        appended unless the path already contains ``.json`` somewhere.
        """
        if format:
            path = '%s.%s' % (path, format)
        elif '.' + DEFAULT_FORMAT not in path:
            path = '%s.%s' % (path, DEFAULT_FORMAT)
        self.path = path
        return self

    def get_path(self):
        return self.path

    def set_method(self, method):
        self.method = method.lower()
        return self

    def get_method(self):
        return self.method.upper()

    def set_params(self, params):
        self.params = dict(params or {})
        return self

    def get_params(self):
        return self.params

    def set_integration_key(self, key):
        self.integration_key = key
        return self

    def get_integration_key(self):
        return self.integration_key

    def set_secret_key(self, key):
        self.secret_key = key
        return self

    def get_secret_key(self):
        return self.secret_key

    def get_errors(self):
        return list(self.errors)

    def reset_errors(self):
        self.errors = []
        return self

    def url(self):
        return 'https://%s%s' % (self.hostname or '', self.path or '')

    def signature(self):
        return sign(self.get_method(), self.hostname, self.path, self.params, self.secret_key)

    def send(self):
        url = self.url()
        logger.debug('sending %s %s', self.get_method(), url)
        try:
            auth = (self.integration_key or '', self.signature())
            params = canonicalize_params(self.params)
            return self.client.dispatch(self.method, url, params, auth)
        except Exception as e:
            logger.exception('%s %s failed', self.get_method(), url)
            self.errors.append(str(e) or repr(e))
            return None
