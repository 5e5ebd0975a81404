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

"""Locates a JSON-like value inside text and decodes it.

Strategies are tried in order and the first one that locates a block wins:

  1. BARE_LITERAL: the whole input already looks like a JSON literal.
  2. ASSIGNMENT: the input is ``name = {...}`` or ``var x = [...]``; the
     balanced block right of the first ``=`` is used.
  3. BRACKET_SCAN: the first balanced ``{...}``, then the first balanced
     ``[...]``, found anywhere in the input.

Locating a block and decoding it are separate outcomes. When no strategy
locates a block the result is None. When a block is located but still fails
strict decoding after normalization, `exceptions.DecodeError` propagates and no
further strategy is tried.
"""

from collections.abc import Callable, Sequence

from absl import logging

from jsonextract import balanced
from jsonextract import classifier
from jsonextract import data
from jsonextract import decoder
from jsonextract import normalizer

_Locator = Callable[[str], data.CharInterval | None]


def locate_bare_literal(text: str) -> data.CharInterval | None:
  if classifier.looks_like_json(text):
    return data.CharInterval(start_pos=0, end_pos=len(text))
  return None


def locate_assignment(text: str) -> data.CharInterval | None:
  """Finds the bracketed right-hand side of the first ``=`` in `text`."""
  eq_idx = text.find("=")
  if eq_idx == -1:
    return None
  json_start = eq_idx + 1
  while json_start < len(text) and text[json_start].isspace():
    json_start += 1
  if json_start >= len(text):
    return None
  opener = text[json_start]
  if opener not in balanced.PAIRS:
    return None
  return balanced.find_balanced(
      text, json_start, opener, balanced.PAIRS[opener]
  )


def locate_first_bracket(text: str) -> data.CharInterval | None:
  """Finds the first balanced object, falling back to the first array."""
  for open_char, close_char in balanced.PAIRS.items():
    idx = text.find(open_char)
    if idx == -1:
      continue
    interval = balanced.find_balanced(text, idx, open_char, close_char)
    if interval is not None:
      return interval
  return None


_LOCATORS: dict[data.Strategy, _Locator] = {
    data.Strategy.BARE_LITERAL: locate_bare_literal,
    data.Strategy.ASSIGNMENT: locate_assignment,
    data.Strategy.BRACKET_SCAN: locate_first_bracket,
}


def extract(
    text: str,
    strategies: Sequence[data.Strategy] = data.DEFAULT_STRATEGIES,
    format_type: data.FormatType = data.FormatType.JSON,
) -> data.Extraction | None:
  """Extracts and decodes the first JSON-like value found in `text`.

  Args:
    text: Arbitrary text. Surrounding whitespace is ignored.
    strategies: Strategies to try, in order.
    format_type: Strict decoder applied to the normalized block.

  Returns:
    The extraction, or None if no strategy located a block.

  Raises:
    DecodeError: If a located block cannot be decoded after normalization.
  """
  trimmed = text.strip()

  for strategy in strategies:
    interval = _LOCATORS[strategy](trimmed)
    if interval is None:
      logging.debug("Strategy %s located no block.", strategy.value)
      continue

    logging.debug(
        "Strategy %s located block at [%d, %d).",
        strategy.value,
        interval.start_pos,
        interval.end_pos,
    )
    normalized = normalizer.normalize_to_json(interval.slice(trimmed))
    value = decoder.decode(normalized, format_type, strategy=strategy)
    return data.Extraction(
        value=value,
        strategy=strategy,
        char_interval=interval,
        normalized_text=normalized,
    )

  logging.debug("No JSON-like block found in input.")
  return None


def extract_and_parse(
    text: str,
    strategies: Sequence[data.Strategy] = data.DEFAULT_STRATEGIES,
    format_type: data.FormatType = data.FormatType.JSON,
) -> data.JSONValue:
  """Like `extract`, but returns only the decoded value (None if absent)."""
  extraction = extract(text, strategies=strategies, format_type=format_type)
  if extraction is None:
    return None
  return extraction.value
