# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import yaml

SECTION = 'duo'


def load_config(path):
    with open(path, 'r') as config_file:
        return yaml.safe_load(config_file) or {}


def duo_section(config):
    """Return the Duo settings from either a whole config document or the section itself."""
    if config and isinstance(config.get(SECTION), dict):
        return config[SECTION]
    return config or {}
