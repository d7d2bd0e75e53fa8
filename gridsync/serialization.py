# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.layout import GridGroup, GridLayout
from gridsync.schedule import Round
from gridsync.topologies import Topology
from gridsync.config import GridConfig

import json
import warnings

def _gridsync_object_hook(o):
    if not 'gridsync_type' in o:
        return o
    if o['gridsync_type'] == 'layout':
        return GridLayout(o['scale'], o['dim'])
    if o['gridsync_type'] == 'group':
        return GridGroup(o['axis'], o['position'])
    if o['gridsync_type'] == 'round':
        return Round(o['index'], o['group'], tuple(o['members']))
    if o['gridsync_type'] == 'topology':
        return Topology(o['name'], o['links'])
    if o['gridsync_type'] == 'config':
        return GridConfig(o['scale'], o['dim'], o.get('member'))
    warnings.warn('Unhandled gridsync_type in JSON')

def GridSyncDecoder():
    return json.JSONDecoder(object_hook=_gridsync_object_hook)

class GridSyncEncoder(json.JSONEncoder):
    def __init__(self):
        super().__init__()

    def default(self, o):
        if isinstance(o, GridLayout):
            return {
                'gridsync_type': 'layout',
                'scale': o.scale,
                'dim': o.dim,
            }
        if isinstance(o, GridGroup):
            return {
                'gridsync_type': 'group',
                'axis': o.axis,
                'position': o.position,
            }
        if isinstance(o, Round):
            return {
                'gridsync_type': 'round',
                'index': o.index,
                'group': o.group,
                'members': list(o.members),
            }
        if isinstance(o, Topology):
            return {
                'gridsync_type': 'topology',
                'name': o.name,
                'links': o.links,
            }
        if isinstance(o, GridConfig):
            return {
                'gridsync_type': 'config',
                'scale': o.scale,
                'dim': o.dim,
                'member': o.member,
            }
        return json.JSONEncoder.default(self, o)

def save_gridsync_object(obj, filename):
    with open(filename, 'w') as f:
        f.write(GridSyncEncoder().encode(obj))

def load_gridsync_object(filename):
    with open(filename) as f:
        return GridSyncDecoder().decode(f.read())
