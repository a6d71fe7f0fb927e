# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import hashlib
import hmac

from urllib.parse import quote


def _to_text(value):
    if value is None:
        return ''
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return str(value)


def canonicalize_params(params):
    """Encode request parameters the way they go out on the wire.

    Items are sorted by key and each key and value is percent-encoded with
    only unreserved characters left as-is, so a space becomes ``%20``.

    :param params: mapping of parameter names to values
    :return: ``key=value&key=value`` string, empty when there are no params
    :rtype: str
    """
    if not params:
        return ''
    args = []
    for key, value in sorted(params.items(), key=lambda item: _to_text(item[0])):
        args.append('%s=%s' % (quote(_to_text(key), '~'), quote(_to_text(value), '~')))
    return '&'.join(args)


def canonical_string(method, hostname, path, params):
    canon = [_to_text(method).upper(),
             _to_text(hostname),
             _to_text(path),
             canonicalize_params(params)]
    return '\n'.join(canon)


def sign(method, hostname, path, params, secret_key):
    """Compute the hex HMAC-SHA1 signature of a request.

    :param method: HTTP verb, case-insensitive
    :param hostname: API host
    :param path: request path including the format suffix
    :param params: mapping of request parameters
    :param secret_key: HMAC key, an empty key is used when unset
    :rtype: str
    """
    canon = canonical_string(method, hostname, path, params).encode('utf-8')
    key = _to_text(secret_key).encode('utf-8')
    return hmac.new(key, canon, hashlib.sha1).hexdigest()
