# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.serialization import *
from pathlib import Path
import sys

def name_gridsync_object(name, ending='gridsync.json'):
    # Grid(scale=2,dim=3) -> Grid.scale2.dim3.gridsync.json
    for old, new in [('(', '.'), ('=', ''), (',', '.'), (')', '')]:
        name = name.replace(old, new)
    return f'{name}.{ending}'

def _write_output(path, force, get_contents):
    if path.exists():
        if not force:
            print(f'file already exists, use -f/--force to overwrite {path}', file=sys.stderr)
            return False
        print(f'Overwriting {path}')
    with path.open('w') as f:
        f.write(get_contents())
    print(f'Wrote to {path}')
    return True

def add_output_gridsync_object(parser, save_by_default=True):
    '''
    Adds -o/-d/-f/--no-save to a command. Without -o or -d the result is written to the current directory when
    save_by_default is set, and only printed otherwise.
    '''
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-o', '--output', type=Path, help='file to write the result to', metavar='FILE')
    group.add_argument('-d', '--directory', type=Path, default=Path() if save_by_default else None, help='directory to write the result to', metavar='DIR')
    parser.add_argument('-f', '--force', action='store_true', help='overwrite existing files')
    parser.add_argument('--no-save', action='store_true', help='do not save to file')

    def validate_args(args):
        if args.output != None and args.output.is_dir():
            parser.error(f'output path {args.output} is a directory, did you mean to use -d?')
        if args.directory != None and not args.directory.is_dir():
            parser.error(f'output directory {args.directory} does not exist')

    def handle(args, gridsync_object, name):
        if args.no_save:
            return False
        if args.output != None:
            path = args.output
        elif args.directory != None:
            path = args.directory / name_gridsync_object(name)
            if path.is_dir():
                parser.error(f'output path {path} is a directory')
        else:
            return False
        return _write_output(path, args.force, lambda: GridSyncEncoder().encode(gridsync_object))

    return validate_args, handle

def make_cmd_category(cmd_parsers, name, title, handler_funcs):
    cmd = cmd_parsers.add_parser(name)
    category_parsers = cmd.add_subparsers(title=title, dest=title)
    category_parsers.required = True

    handlers = []
    for func in handler_funcs:
        handlers.append(func(category_parsers))

    def handle(args, command):
        if command != name:
            return False

        for handler in handlers:
            if handler(args, vars(args)[title]):
                return True

    return handle
