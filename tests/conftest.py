# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import pytest

GRIDSYNC_VARS = ['GRIDSYNC_SCALE', 'GRIDSYNC_DIM', 'GRIDSYNC_MEMBER', 'GRIDSYNC_CONFIG']

@pytest.fixture(autouse=True)
def clean_gridsync_env(monkeypatch):
    for var in GRIDSYNC_VARS:
        monkeypatch.delenv(var, raising=False)
