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

"""Classes and type aliases shared across the extraction pipeline."""

from __future__ import annotations

import dataclasses
import enum
from typing import Union

JSONValue = Union[
    str, int, float, bool, None, list["JSONValue"], dict[str, "JSONValue"]
]


class FormatType(enum.Enum):
  """Strict decoder used on normalized text.

  Attributes:
    JSON: `json.loads` without NaN or Infinity. Only strict JSON decodes.
    YAML: `yaml.safe_load`. More lenient than JSON: text such as
      ``{a: b c}`` still decodes, and values may come back as types JSON does
      not have (dates, timestamps). Use it only when that leniency is wanted.
  """

  JSON = "json"
  YAML = "yaml"


class Strategy(enum.Enum):
  """Ways of locating a value inside the input text.

  Attributes:
    BARE_LITERAL: The whole trimmed input already looks like a JSON literal.
    ASSIGNMENT: The value is the right-hand side of the first ``=``.
    BRACKET_SCAN: The value is the first balanced ``{...}`` or ``[...]``.
  """

  BARE_LITERAL = "bare_literal"
  ASSIGNMENT = "assignment"
  BRACKET_SCAN = "bracket_scan"


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    Strategy.BARE_LITERAL,
    Strategy.ASSIGNMENT,
    Strategy.BRACKET_SCAN,
)


@dataclasses.dataclass(slots=True, frozen=True)
class CharInterval:
  """Represents a range of character positions in the trimmed input.

  Attributes:
    start_pos: The starting character index (inclusive).
    end_pos: The ending character index (exclusive).
  """

  start_pos: int
  end_pos: int

  def slice(self, text: str) -> str:
    return text[self.start_pos : self.end_pos]


@dataclasses.dataclass(frozen=True)
class Extraction:
  """Outcome of one successful extraction.

  Attributes:
    value: The decoded value. May be ``None`` when the text was ``null``.
    strategy: The strategy that located the block.
    char_interval: Where the block sits in the trimmed input.
    normalized_text: The text handed to the strict decoder.
  """

  value: JSONValue
  strategy: Strategy
  char_interval: CharInterval
  normalized_text: str
