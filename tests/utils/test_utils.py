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
Module for testing the helpers reading API documents.
"""

import pytest

from googleworkspace.utils import get_path, to_camel_case


@pytest.mark.parametrize(
    "name, expected",
    [
        ("owner_domain", "ownerDomain"),
        ("ip_address", "ipAddress"),
        ("events", "events"),
        ("group_id_filter", "groupIdFilter"),
    ],
)
def test_to_camel_case(name: str, expected: str) -> None:
    assert to_camel_case(name) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("ipAddress", "10.0.0.1"),
        ("actor.profileId", "1111"),
        ("actor.missing", None),
        ("ipAddress.nested", None),
        ("missing.profileId", None),
    ],
)
def test_get_path(path: str, expected) -> None:
    """
    Test that dotted paths resolve and missing segments yield None.
    """
    document = {"ipAddress": "10.0.0.1", "actor": {"profileId": "1111"}}
    assert get_path(document, path) == expected


def test_get_path_without_document() -> None:
    assert get_path(None, "actor.key") is None
