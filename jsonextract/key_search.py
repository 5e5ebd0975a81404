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

"""Recursive search for mappings that own a given key."""

from collections.abc import Iterator, Mapping, Sequence

from jsonextract import data

_TEXT_TYPES = (str, bytes, bytearray)


def iter_key_owners(node: data.JSONValue, key: str) -> Iterator[Mapping]:
  """Yields every mapping in `node` that directly owns `key`, in pre-order.

  A matching mapping is yielded before any matches nested inside it. Arrays
  are walked in index order and mappings in insertion order.
  """
  if isinstance(node, Mapping):
    if key in node:
      yield node
    for value in node.values():
      yield from iter_key_owners(value, key)
  elif isinstance(node, Sequence) and not isinstance(node, _TEXT_TYPES):
    for item in node:
      yield from iter_key_owners(item, key)


def find_by_key(node: data.JSONValue, key: str) -> list[Mapping]:
  """Returns all mappings in `node` that own `key`, in pre-order."""
  return list(iter_key_owners(node, key))


def select_by_key(node: data.JSONValue, key: str) -> Mapping | list[Mapping]:
  """Returns key owners in the shape callers of `parse_json` expect.

  Args:
    node: A decoded value tree.
    key: The key to look for.

  Returns:
    ``[]`` when nothing owns `key`, the owning mapping itself when exactly one
    does, otherwise the list of owners in pre-order.
  """
  results = find_by_key(node, key)
  if len(results) == 1:
    return results[0]
  return results
