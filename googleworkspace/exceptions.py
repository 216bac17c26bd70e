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
This module defines custom exceptions raised by the Admin Reports tables and
provides a decorator to shield credential loading from the errors raised by
google-auth by translating them into a ConfigurationError.
"""

from functools import wraps

from google.auth.exceptions import GoogleAuthError


class ConfigurationError(Exception):
    """
    Exception raised when the connection configuration is invalid or the
    credentials it points to cannot be loaded.
    """


class ParseError(ValueError):
    """
    Raised when a time literal supplied in a query cannot be parsed in the
    expected format.
    """


class TableNotFoundError(Exception):
    """
    Raised when a query targets a table the plugin does not define.
    """


def credentials_exception_shield(target):
    """
    Decorator to shield a function from exceptions raised while loading
    credentials. Converts them into a ConfigurationError so the query is
    aborted before any request is built.
    """

    @wraps(target)
    def inner(*args, **kwargs):
        try:
            return target(*args, **kwargs)
        except GoogleAuthError as e:
            raise ConfigurationError(f"Error: {e}") from e
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Credentials file not found: {e.filename}"
            ) from e
        except ValueError as e:
            raise ConfigurationError(f"Invalid credentials: {e}") from e

    return inner
