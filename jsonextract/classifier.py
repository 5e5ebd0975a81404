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

"""Cheap test for text that already starts like a JSON literal."""

import re

_NUMBER_START_RE = re.compile(r"-?[0-9]")
_OPENERS = ("{", "[", '"')
_KEYWORDS = frozenset({"true", "false", "null"})


def looks_like_json(text: str) -> bool:
  """Returns True if `text` begins like a JSON value.

  Objects, arrays, strings and numbers are recognised by their first
  character(s). The keywords ``true``, ``false`` and ``null`` only count when
  they are the whole input, so prose such as ``nullable = {...}`` is left to
  the other strategies.
  """
  t = text.lstrip()
  return (
      t.startswith(_OPENERS)
      or t in _KEYWORDS
      or _NUMBER_START_RE.match(t) is not None
  )
