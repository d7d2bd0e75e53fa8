# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.errors import GridError, ConfigurationError, OutOfRangeError
from gridsync.layout import GridGroup, GridLayout, gen_coordinates
from gridsync.schedule import Round, reduction_schedule, verify_layout
from gridsync.config import GridConfig, config_from_env, init
