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

"""Locates a balanced bracketed block inside arbitrary text."""

from jsonextract import data

PAIRS = {"{": "}", "[": "]"}


def find_balanced(
    text: str,
    start: int,
    open_char: str,
    close_char: str,
) -> data.CharInterval | None:
  """Finds the balanced block that opens at `start`.

  Delimiters inside double-quoted strings are not counted. A backslash makes
  the scanner skip the next character, both inside and outside strings.

  Args:
    text: The text to scan.
    start: Index of the opening delimiter.
    open_char: The opening delimiter, e.g. ``{``.
    close_char: The matching closing delimiter, e.g. ``}``.

  Returns:
    The interval covering the block including both delimiters, or None if the
    text ends before the block is closed.
  """
  depth = 0
  in_string = False
  escape = False

  for i in range(start, len(text)):
    ch = text[i]

    if escape:
      escape = False
      continue
    if ch == "\\":
      escape = True
      continue
    if ch == '"':
      in_string = not in_string
      continue
    if in_string:
      continue

    if ch == open_char:
      depth += 1
    elif ch == close_char:
      depth -= 1
      if depth == 0:
        return data.CharInterval(start_pos=start, end_pos=i + 1)
  return None


def extract_balanced(
    text: str,
    start: int,
    open_char: str,
    close_char: str,
) -> str | None:
  """Returns the balanced block opening at `start`, or None if unbalanced."""
  interval = find_balanced(text, start, open_char, close_char)
  if interval is None:
    return None
  return interval.slice(text)
