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

"""Library entry point for resolving JSON-like input.

In the context of this module, a "resolver" turns raw input (text holding a
JSON-like value, or a value that is already decoded) into a decoded value and
optionally narrows it down to the mappings that own a given key.
"""

import abc
from collections.abc import Mapping, Sequence
from typing import Any

from absl import logging

from jsonextract import data
from jsonextract import exceptions
from jsonextract import extraction
from jsonextract import key_search

_TEXT_BYTES = (bytes, bytearray)


def _coerce_format_type(format_type) -> data.FormatType:
  try:
    return data.FormatType(format_type)
  except ValueError as e:
    raise exceptions.ConfigError(
        f"Unknown format type: {format_type!r}"
    ) from e


def _coerce_strategies(strategies) -> tuple[data.Strategy, ...]:
  if isinstance(strategies, (str, data.Strategy)):
    strategies = (strategies,)
  try:
    coerced = tuple(data.Strategy(s) for s in strategies)
  except (TypeError, ValueError) as e:
    raise exceptions.ConfigError(f"Unknown strategy in {strategies!r}") from e
  if not coerced:
    raise exceptions.ConfigError("At least one strategy is required.")
  return coerced


class AbstractResolver(abc.ABC):
  """Resolves raw input into decoded values."""

  def __init__(
      self,
      format_type: data.FormatType = data.FormatType.JSON,
      strategies: Sequence[data.Strategy] = data.DEFAULT_STRATEGIES,
  ):
    """Initializes the AbstractResolver.

    Args:
      format_type: The strict decoder applied to normalized text.
      strategies: Extraction strategies to try on text input, in order.

    Raises:
      ConfigError: If `format_type` or `strategies` is invalid.
    """
    self.format_type = format_type
    self.strategies = strategies

  @property
  def format_type(self) -> data.FormatType:
    """Returns the format type."""
    return self._format_type

  @format_type.setter
  def format_type(self, new_format_type: data.FormatType) -> None:
    """Sets a new format type."""
    self._format_type = _coerce_format_type(new_format_type)

  @property
  def strategies(self) -> tuple[data.Strategy, ...]:
    """Returns the extraction strategies, in the order they are tried."""
    return self._strategies

  @strategies.setter
  def strategies(self, new_strategies: Sequence[data.Strategy]) -> None:
    """Sets the extraction strategies."""
    self._strategies = _coerce_strategies(new_strategies)

  @abc.abstractmethod
  def resolve(
      self,
      raw_data: Any,
      node_key: str | None = None,
      **kwargs,
  ) -> Any:
    """Resolves raw input into a decoded value.

    Args:
      raw_data: Text holding a JSON-like value, or an already decoded value.
      node_key: Optional key to search for within the decoded value.
      **kwargs: Additional arguments for subclass implementations.

    Returns:
      The decoded value, or the key owners when `node_key` is given.
    """


class Resolver(AbstractResolver):
  """Resolver for JSON-like text and pre-decoded values."""

  def __init__(
      self,
      format_type: data.FormatType = data.FormatType.JSON,
      strategies: Sequence[data.Strategy] = data.DEFAULT_STRATEGIES,
      suppress_parse_errors_default: bool = False,
  ):
    """Constructor.

    Args:
      format_type: The strict decoder applied to normalized text.
      strategies: Extraction strategies to try on text input, in order.
      suppress_parse_errors_default: When True, resolve() reports a decode
        failure as absence instead of raising, unless overridden per call.
    """
    super().__init__(format_type=format_type, strategies=strategies)
    self._suppress_parse_errors_default = suppress_parse_errors_default

  def resolve(
      self,
      raw_data: Any,
      node_key: str | None = None,
      suppress_parse_errors: bool | None = None,
      **kwargs,
  ) -> Any:
    """Resolves raw input and optionally searches it for `node_key`.

    Args:
      raw_data: A string (or UTF-8 bytes) holding JSON, a JavaScript-style
        object literal, an assignment such as ``var x = {...}``, or prose
        around a bracketed block. A mapping or a non-text sequence is taken
        as an already decoded value and used as-is. Any other input (None,
        numbers, booleans) yields nothing.
      node_key: Optional key to search for within the decoded value.
      suppress_parse_errors: Log decode failures and report absence instead of
        raising. None uses the constructor default.
      **kwargs: Unused.

    Returns:
      Without `node_key`: the decoded root value, or None if nothing could be
      extracted. With `node_key`: the single mapping that owns the key, a list
      of owners in pre-order when there are several, or ``[]`` when there are
      none or nothing could be extracted.

    Raises:
      DecodeError: If a located block fails strict decoding and errors are not
        suppressed.
      ConfigError: If `node_key` is not a string.
    """
    logging.info("Starting resolver process for input.")

    if node_key is not None and not isinstance(node_key, str):
      raise exceptions.ConfigError(
          f"node_key must be a string, got {type(node_key).__name__}."
      )

    if suppress_parse_errors is None:
      suppress_flag = self._suppress_parse_errors_default
    else:
      suppress_flag = suppress_parse_errors

    try:
      parsed = self._parse(raw_data)
    except exceptions.DecodeError as e:
      if not suppress_flag:
        raise
      logging.warning(
          "Failed to decode input (suppress_parse_errors=True): %s",
          str(e)[:200],
      )
      parsed = None

    if node_key is None:
      logging.info("Completed the resolver process.")
      return parsed
    if parsed is None:
      logging.info("Completed the resolver process; nothing to search.")
      return []

    result = key_search.select_by_key(parsed, node_key)
    logging.info("Completed the resolver process.")
    return result

  def _parse(self, raw_data: Any) -> data.JSONValue:
    if raw_data is None:
      return None
    if isinstance(raw_data, _TEXT_BYTES):
      try:
        raw_data = bytes(raw_data).decode("utf-8")
      except UnicodeDecodeError as e:
        raise exceptions.DecodeError(
            f"Input bytes are not valid UTF-8: {e}"
        ) from e
    if isinstance(raw_data, str):
      return extraction.extract_and_parse(
          raw_data,
          strategies=self.strategies,
          format_type=self.format_type,
      )
    if isinstance(raw_data, (Mapping, Sequence)):
      logging.debug("Using pre-decoded %s as-is.", type(raw_data).__name__)
      return raw_data
    logging.debug(
        "Ignoring unsupported input of type %s.", type(raw_data).__name__
    )
    return None


def parse_json(
    raw_data: Any,
    node_key: str | None = None,
    suppress_parse_errors: bool | None = None,
    **resolver_options,
) -> Any:
  """Parses JSON-like input and optionally returns the owners of `node_key`.

  This is shorthand for ``Resolver(**resolver_options).resolve(...)``; see
  `Resolver.resolve` for the return shapes.
  """
  return Resolver(**resolver_options).resolve(
      raw_data,
      node_key=node_key,
      suppress_parse_errors=suppress_parse_errors,
  )
