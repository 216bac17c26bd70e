# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Module for configuring the test environment.
"""

import pytest

from googleworkspace.api import AdminReportsApiAdapter
from googleworkspace.config import ENVIRONMENT_VARIABLES


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keeps connection settings of the machine running the tests out of the
    configuration under test.
    """
    for variable in ENVIRONMENT_VARIABLES.values():
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def make_adapter():
    """
    Builds an AdminReportsApiAdapter around a mocked discovery client.
    """
    def factory(service) -> AdminReportsApiAdapter:
        return AdminReportsApiAdapter(service)

    return factory
