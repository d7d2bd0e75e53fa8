# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.errors import ConfigurationError
from gridsync.layout import GridLayout

from dataclasses import dataclass
import json
import os

SCALE_VAR = 'GRIDSYNC_SCALE'
DIM_VAR = 'GRIDSYNC_DIM'
MEMBER_VAR = 'GRIDSYNC_MEMBER'
CONFIG_VAR = 'GRIDSYNC_CONFIG'

@dataclass(frozen=True)
class GridConfig:
    scale: int
    dim: int
    member: int = None

    def layout(self):
        return GridLayout(self.scale, self.dim)

    def set(self, scale = None, dim = None, member = None):
        return GridConfig(
            scale if scale != None else self.scale,
            dim if dim != None else self.dim,
            member if member != None else self.member)

    def override(self, scale = None, dim = None, member = None):
        '''
        Like set, except that a member carried over from this configuration is dropped when the new scale or dim no
        longer contains it. An explicit member is always kept, so that validation reports it.
        '''
        config = self.set(scale, dim, member)
        if member == None and config.member != None and (scale != None or dim != None):
            if not 0 <= config.member < config.layout().total:
                config = GridConfig(config.scale, config.dim)
        return config

    def to_env(self):
        env = {
            SCALE_VAR: str(self.scale),
            DIM_VAR: str(self.dim),
        }
        if self.member != None:
            env[MEMBER_VAR] = str(self.member)
        return env

    def __str__(self):
        s = f'scale={self.scale},dim={self.dim}'
        if self.member != None:
            s += f',member={self.member}'
        return s

def _parse_int(environ, var):
    value = environ.get(var, '').strip()
    if value == '':
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f'{var} must be an integer, but {value!r} was given.')

def _load_config_file(path):
    # Imported here since serialization depends on this module
    from gridsync.serialization import load_gridsync_object

    if not os.path.exists(path):
        raise ConfigurationError(f'{CONFIG_VAR} points to {path}, which does not exist.')
    try:
        obj = load_gridsync_object(path)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f'{CONFIG_VAR} points to {path}, which is not valid JSON: {e}')
    if isinstance(obj, GridConfig):
        return obj
    if isinstance(obj, GridLayout):
        return GridConfig(obj.scale, obj.dim)
    raise ConfigurationError(f'{path} does not contain a grid layout or configuration.')

def config_from_env(environ=None):
    '''
    Reads the grid configuration agreed on by the cluster from environment variables. A file named by
    GRIDSYNC_CONFIG provides defaults that GRIDSYNC_SCALE, GRIDSYNC_DIM and GRIDSYNC_MEMBER override.
    Returns None when nothing is configured.
    '''
    if environ is None:
        environ = os.environ

    config = None
    path = environ.get(CONFIG_VAR, '')
    if path != '':
        config = _load_config_file(path)

    scale = _parse_int(environ, SCALE_VAR)
    dim = _parse_int(environ, DIM_VAR)
    member = _parse_int(environ, MEMBER_VAR)

    if config == None:
        if scale == None and dim == None:
            if member != None:
                raise ConfigurationError(f'{MEMBER_VAR} is set, but {SCALE_VAR} and {DIM_VAR} are not.')
            return None
        if scale == None or dim == None:
            missing = SCALE_VAR if scale == None else DIM_VAR
            raise ConfigurationError(f'{missing} is required when the other grid parameters are set.')
        config = GridConfig(scale, dim)
    config = config.override(scale, dim, member)
    validate_config(config)
    return config

def validate_config(config):
    layout = config.layout()
    if config.member != None and not 0 <= config.member < layout.total:
        raise ConfigurationError(f'Member {config.member} is not in {layout.name}, valid members are 0 to {layout.total - 1}.')
    return layout

def init(scale=None, dim=None, member=None, logging=False):
    '''
    Settles the grid configuration for this process and builds its layout. Arguments take precedence over the
    environment. The settled values are exported to os.environ so that child processes agree on the same grid.
    '''
    config = config_from_env()
    if config == None:
        if scale == None or dim == None:
            raise ConfigurationError(f'Grid scale and dim must be given either as arguments or through {SCALE_VAR} and {DIM_VAR}.')
        config = GridConfig(scale, dim, member)
    else:
        config = config.override(scale, dim, member)
    layout = validate_config(config)

    os.environ.update(config.to_env())
    if config.member == None:
        os.environ.pop(MEMBER_VAR, None)
    if logging:
        print(f'gridsync: {layout.name} with {layout.total} members ({config})')
    return config, layout
