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

"""Strict decoders applied to normalized text."""

import json

from absl import logging
import yaml

from jsonextract import data
from jsonextract import exceptions

_PREVIEW_CHARS = 200


def _reject_constant(name: str):
  raise ValueError(f"Non-standard JSON constant: {name}")


def loads_strict_json(text: str) -> data.JSONValue:
  """Decodes `text` with `json.loads`, refusing NaN and Infinity."""
  return json.loads(text, parse_constant=_reject_constant)


def decode(
    text: str,
    format_type: data.FormatType = data.FormatType.JSON,
    strategy: data.Strategy | None = None,
) -> data.JSONValue:
  """Decodes normalized text with the strict decoder for `format_type`.

  Args:
    text: Normalized text.
    format_type: Which decoder to use.
    strategy: The strategy that produced `text`, attached to errors.

  Returns:
    The decoded value.

  Raises:
    DecodeError: If the decoder rejects the text, including input nested too
      deeply to decode.
  """
  try:
    if format_type == data.FormatType.YAML:
      return yaml.safe_load(text)
    return loads_strict_json(text)
  except (ValueError, RecursionError, yaml.YAMLError) as e:
    logging.debug(
        "Strict %s decode failed on (preview): %s",
        format_type.value,
        text[:_PREVIEW_CHARS],
    )
    raise exceptions.DecodeError(
        f"Failed to decode {format_type.value.upper()} content: {e}",
        text=text,
        strategy=strategy,
    ) from e
