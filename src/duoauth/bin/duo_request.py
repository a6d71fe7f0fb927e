#!/usr/bin/env python

# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import logging
import sys
from logging import basicConfig

import ujson
import yaml

from duoauth.config import load_config
from duoauth.request import SignedRequest

USAGE = 'USAGE: %s CONFIG_FILE METHOD PATH [key=value ...]'


def parse_params(args):
    params = {}
    for arg in args:
        key, sep, value = arg.partition('=')
        if not sep:
            raise ValueError('Invalid parameter %r, expected key=value' % arg)
        params[key] = value
    return params


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) < 4:
        sys.exit(USAGE % argv[0])

    basicConfig(format='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s %(message)s',
                level=logging.INFO,
                datefmt='%Y-%m-%d %H:%M:%S %z')

    try:
        config = load_config(argv[1])
        params = parse_params(argv[4:])
    except (OSError, yaml.YAMLError, ValueError) as e:
        sys.exit('Error: %s' % e)

    request = (SignedRequest.from_config(config)
               .set_method(argv[2])
               .set_path(argv[3])
               .set_params(params))
    result = request.send()
    if result is None:
        for error in request.get_errors():
            print(error, file=sys.stderr)
        sys.exit(1)

    print(ujson.dumps(result, indent=2))


if __name__ == '__main__':
    main()
