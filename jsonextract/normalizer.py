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

"""Rewrites JavaScript-style object literals into strict JSON text.

Three leniencies are handled:
  - single-quoted strings become double-quoted strings,
  - bare identifier keys become quoted keys,
  - trailing commas before ``}`` or ``]`` are dropped.

The string conversion is a quote-aware scan. The key and comma rewrites are
plain regex passes over the scanned text and therefore also apply inside string
bodies that happen to contain ``{key:``, ``,key:``, ``,]`` or ``,}``.
"""

import re

from absl import logging

_UNQUOTED_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_$][A-Za-z0-9_$]*)(\s*:)")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")

_PREVIEW_CHARS = 200


def _convert_quotes(raw: str) -> str:
  """Converts single-quoted strings and copies double-quoted ones verbatim."""
  out_chars: list[str] = []
  n = len(raw)
  i = 0

  while i < n:
    ch = raw[i]

    if ch == "'":
      out_chars.append('"')
      i += 1
      while i < n:
        c = raw[i]
        if c == "\\":
          nxt = raw[i + 1] if i + 1 < n else ""
          if nxt == "'":
            out_chars.append("'")
          elif nxt == '"':
            out_chars.append('\\"')
          else:
            out_chars.append(c + nxt)
          i += 2
        elif c == '"':
          out_chars.append('\\"')
          i += 1
        elif c == "'":
          out_chars.append('"')
          i += 1
          break
        else:
          out_chars.append(c)
          i += 1

    elif ch == '"':
      out_chars.append('"')
      i += 1
      while i < n:
        c = raw[i]
        if c == "\\":
          out_chars.append(c + (raw[i + 1] if i + 1 < n else ""))
          i += 2
        elif c == '"':
          out_chars.append('"')
          i += 1
          break
        else:
          out_chars.append(c)
          i += 1

    else:
      out_chars.append(ch)
      i += 1

  return "".join(out_chars)


def quote_unquoted_keys(text: str) -> str:
  """Wraps identifier keys that follow ``{`` or ``,`` in double quotes."""
  return _UNQUOTED_KEY_RE.sub(r'\1"\2"\3', text)


def remove_trailing_commas(text: str) -> str:
  """Drops a comma that directly precedes ``}`` or ``]``."""
  return _TRAILING_COMMA_RE.sub(r"\1", text)


def normalize_to_json(raw: str) -> str:
  """Pre-processes a JSON-like string into text a strict decoder accepts.

  Input that is too malformed to repair is returned in its partially rewritten
  form; the decoder is responsible for rejecting it.

  Args:
    raw: A substring holding one JSON-like value.

  Returns:
    The normalized text.
  """
  out = _convert_quotes(raw)
  out = quote_unquoted_keys(out)
  out = remove_trailing_commas(out)
  if out != raw:
    logging.debug(
        "Normalized JSON-like text (preview): %s", out[:_PREVIEW_CHARS]
    )
  return out
