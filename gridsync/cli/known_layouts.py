# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.config import GridConfig, config_from_env, validate_config
from gridsync.errors import GridError
from gridsync.layout import GridLayout
from gridsync.serialization import load_gridsync_object
from pathlib import Path
import json
import sys

class KnownLayout:
    '''
    Adds the arguments describing a grid to a command. Parameters left out on the command line are taken from the
    GRIDSYNC_* environment variables.
    '''

    def __init__(self, parser):
        self.parser = parser
        self.parser.add_argument('-s', '--scale', type=int, help='positions per grid axis', metavar='N')
        self.parser.add_argument('-D', '--dim', type=int, help='number of grid axes', metavar='N')
        self.parser.add_argument('--layout-file', type=Path, default=None, help='a serialized layout or configuration', metavar='FILE')

    def _from_file(self, args):
        input_file = args.layout_file
        if not input_file.exists():
            print(f'error: input file not found: {input_file}', file=sys.stderr)
            exit(1)
        try:
            obj = load_gridsync_object(input_file)
        except json.JSONDecodeError as e:
            self.parser.error(f'{input_file} is not valid JSON: {e}')
        if isinstance(obj, GridLayout):
            return GridConfig(obj.scale, obj.dim)
        if isinstance(obj, GridConfig):
            return obj
        self.parser.error(f'{input_file} does not contain a grid layout')

    def config(self, args, member=None):
        try:
            if args.layout_file != None:
                config = self._from_file(args)
            else:
                config = config_from_env()
            if config == None:
                if args.scale == None or args.dim == None:
                    self.parser.error('grid requires -s/--scale and -D/--dim')
                config = GridConfig(args.scale, args.dim)
            config = config.override(args.scale, args.dim, member)
            validate_config(config)
        except GridError as e:
            self.parser.error(str(e))
        return config

    def create(self, args):
        return self.config(args).layout()
