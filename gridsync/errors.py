# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

class GridError(Exception):
    pass

class ConfigurationError(GridError, ValueError):
    '''
    Raised for grid parameters that do not describe a valid layout, either
    passed directly or read from the environment or a configuration file.
    '''
    pass

class OutOfRangeError(GridError, IndexError):
    '''
    Raised when a query names a member, group, coordinate or axis that does
    not exist in the layout being queried.
    '''
    pass
