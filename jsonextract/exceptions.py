# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Public exceptions API for jsonextract.

Absence of any extractable value is not an error and is reported as ``None``
(or ``[]`` for keyed lookups). Everything raised by the library derives from
`JsonExtractError`.
"""

from __future__ import annotations


class JsonExtractError(Exception):
  """Base class for all jsonextract errors."""


class ConfigError(JsonExtractError):
  """Error raised when a resolver is configured with invalid options."""


class DecodeError(JsonExtractError, ValueError):
  """Error raised when a located block is rejected by the strict decoder.

  Attributes:
    text: The normalized text handed to the decoder.
    strategy: The strategy that located the block, if known.
  """

  def __init__(self, message: str, text: str = "", strategy=None):
    super().__init__(message)
    self.text = text
    self.strategy = strategy


__all__ = [
    "JsonExtractError",
    "ConfigError",
    "DecodeError",
]
