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

import json

from absl.testing import absltest
from absl.testing import parameterized
import yaml

from jsonextract import data
from jsonextract import decoder
from jsonextract import exceptions


class DecodeTest(parameterized.TestCase):

  @parameterized.named_parameters(
      dict(testcase_name="json", format_type=data.FormatType.JSON),
      dict(testcase_name="yaml", format_type=data.FormatType.YAML),
  )
  def test_decodes_strict_json(self, format_type):
    self.assertEqual(
        decoder.decode('{"a": [1, "two", null, true]}', format_type),
        {"a": [1, "two", None, True]},
    )

  def test_duplicate_keys_last_write_wins(self):
    self.assertEqual(decoder.decode('{"a": 1, "a": 2}'), {"a": 2})

  def test_preserves_key_order(self):
    value = decoder.decode('{"z": 1, "a": 2, "m": 3}')
    self.assertEqual(list(value), ["z", "a", "m"])

  @parameterized.named_parameters(
      dict(testcase_name="nan", text="[NaN]"),
      dict(testcase_name="infinity", text='{"a": Infinity}'),
      dict(testcase_name="negative_infinity", text="-Infinity"),
  )
  def test_rejects_non_standard_constants(self, text):
    with self.assertRaises(exceptions.DecodeError):
      decoder.decode(text)

  def test_json_error_is_chained(self):
    with self.assertRaises(exceptions.DecodeError) as cm:
      decoder.decode('{"a": }', strategy=data.Strategy.BRACKET_SCAN)
    self.assertIsInstance(cm.exception.__cause__, json.JSONDecodeError)
    self.assertEqual(cm.exception.text, '{"a": }')
    self.assertEqual(cm.exception.strategy, data.Strategy.BRACKET_SCAN)

  def test_yaml_error_is_chained(self):
    with self.assertRaises(exceptions.DecodeError) as cm:
      decoder.decode('{"a": [1, 2}', data.FormatType.YAML)
    self.assertIsInstance(cm.exception.__cause__, yaml.YAMLError)

  def test_decode_error_is_value_error(self):
    with self.assertRaises(ValueError):
      decoder.decode("{")

  def test_too_deeply_nested_raises_decode_error(self):
    text = "[" * 3000 + "]" * 3000
    with self.assertRaises(exceptions.DecodeError) as cm:
      decoder.decode(text)
    self.assertIsInstance(cm.exception.__cause__, RecursionError)

  def test_yaml_is_more_lenient_than_json(self):
    self.assertEqual(
        decoder.decode("{a: b c}", data.FormatType.YAML), {"a": "b c"}
    )
    with self.assertRaises(exceptions.DecodeError):
      decoder.decode("{a: b c}")


if __name__ == "__main__":
  absltest.main()
