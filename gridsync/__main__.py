#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.cli import *

import argparse
import argcomplete

def main():
    parser = argparse.ArgumentParser('gridsync')

    cmd_parsers = parser.add_subparsers(title='command', dest='command')
    cmd_parsers.required = True

    handlers = []
    handlers.append(make_handle_layout(cmd_parsers))
    handlers.append(make_handle_members(cmd_parsers))
    handlers.append(make_handle_groups(cmd_parsers))
    handlers.append(make_handle_schedule(cmd_parsers))
    handlers.append(make_handle_verify(cmd_parsers))
    handlers.append(make_topologies(cmd_parsers))
    handlers.append(make_analyses(cmd_parsers))

    argcomplete.autocomplete(parser)
    args = parser.parse_args()

    for handler in handlers:
        if handler(args, args.command):
            break

if __name__ == '__main__':
    main()
