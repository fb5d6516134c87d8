import os
from os import path

import appdirs
import toml

from gridtable.border import STYLES, Separator


DEFAULT_FILE = path.join(appdirs.user_config_dir('gridtable', roaming=True), 'config.toml')

DEFAULT_CONFIG = {
    'table': {
        'style': 'box',
        'padding-left': 1,
        'padding-right': 1,
        'surround': True,
        'separator': 'columns',
        'ellipsis': '',
        'collapse': False,
    }
}


def load(file_name: str = DEFAULT_FILE):
    cfg = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    try:
        for section, values in toml.load(file_name).items():
            cfg.setdefault(section, {}).update(values)
    except FileNotFoundError:
        os.makedirs(path.dirname(file_name) or '.', exist_ok=True)
        with open(file_name, 'w') as f:
            toml.dump(cfg, f)

    return cfg


def table_options(cfg: dict):
    table = cfg['table']
    try:
        style = STYLES[table['style']]
    except KeyError:
        raise ValueError('Unknown table style "{}". Allowed values are {}'.format(
            table['style'], ', '.join(STYLES)))
    try:
        separator = Separator.from_str(table['separator'])
    except KeyError:
        raise ValueError('Unknown separator "{}". Allowed values are {}'.format(
            table['separator'], ', '.join(map(str, Separator))))

    return {
        'style': style,
        'padding': (table['padding-left'], table['padding-right']),
        'surround': bool(table['surround']),
        'separator': separator,
        'ellipsis': table['ellipsis'],
        'collapse': bool(table['collapse']),
    }
