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

from jsonextract import normalizer


class NormalizeToJsonTest(parameterized.TestCase):

  @parameterized.named_parameters(
      dict(
          testcase_name="single_quotes",
          raw="{'a': 'b'}",
          expected='{"a": "b"}',
      ),
      dict(
          testcase_name="unquoted_keys",
          raw="{a: 1, b: 2}",
          expected='{"a": 1, "b": 2}',
      ),
      dict(
          testcase_name="dollar_and_underscore_keys",
          raw="{ $id : 1 , _x:2 }",
          expected='{ "$id" : 1 , "_x":2 }',
      ),
      dict(
          testcase_name="trailing_comma_array",
          raw="[1, 2, 3,]",
          expected="[1, 2, 3]",
      ),
      dict(
          testcase_name="trailing_comma_object",
          raw='{"a":1,}',
          expected='{"a":1}',
      ),
      dict(
          testcase_name="trailing_comma_with_whitespace",
          raw="[1,\n  2,\n]",
          expected="[1,\n  2\n]",
      ),
      dict(
          testcase_name="nested_mixed",
          raw="{a: {b: [1, 2,],},}",
          expected='{"a": {"b": [1, 2]}}',
      ),
      dict(
          testcase_name="escaped_single_quote_is_unescaped",
          raw=r"{'it\'s': 1}",
          expected='{"it\'s": 1}',
      ),
      dict(
          testcase_name="bare_double_quote_in_single_quoted",
          raw="{'say': 'a \"b\" c'}",
          expected=r'{"say": "a \"b\" c"}',
      ),
      dict(
          testcase_name="escaped_double_quote_in_single_quoted",
          raw=r"{'q': 'x\"y'}",
          expected=r'{"q": "x\"y"}',
      ),
      dict(
          testcase_name="other_escapes_copied",
          raw=r"{'n': 'line\nbreak\\'}",
          expected=r'{"n": "line\nbreak\\"}',
      ),
      dict(
          testcase_name="single_quote_inside_double_quoted",
          raw='{"a": "it\'s"}',
          expected='{"a": "it\'s"}',
      ),
      dict(
          testcase_name="escaped_quote_inside_double_quoted",
          raw=r'{"a": "x\"y"}',
          expected=r'{"a": "x\"y"}',
      ),
      dict(
          testcase_name="unterminated_single_quote",
          raw="{'a",
          expected='{"a',
      ),
      dict(
          testcase_name="trailing_lone_backslash",
          raw="'abc\\",
          expected='"abc\\',
      ),
  )
  def test_normalize(self, raw, expected):
    self.assertEqual(normalizer.normalize_to_json(raw), expected)

  def test_valid_json_is_unchanged(self):
    text = (
        '{"a": [1, 2.5, -3e2], "b": {"c": null, "d": true}, "e": "str",'
        ' "f": "quote \\" inside", "g": []}'
    )
    self.assertEqual(normalizer.normalize_to_json(text), text)
    self.assertEqual(
        json.loads(normalizer.normalize_to_json(text)), json.loads(text)
    )

  def test_javascript_literal_decodes(self):
    raw = "{name: 'Widget', tags: ['a', 'b',], meta: {count: 2,},}"
    self.assertEqual(
        json.loads(normalizer.normalize_to_json(raw)),
        {"name": "Widget", "tags": ["a", "b"], "meta": {"count": 2}},
    )

  def test_key_pattern_inside_string_is_rewritten(self):
    # The key pass is a plain regex over the scanned text.
    self.assertEqual(
        normalizer.normalize_to_json('{"note": "x, y: z"}'),
        '{"note": "x, "y": z"}',
    )

  def test_trailing_comma_pattern_inside_string_is_rewritten(self):
    self.assertEqual(
        normalizer.normalize_to_json('["a,]"]'),
        '["a]"]',
    )

  def test_helpers_run_independently(self):
    self.assertEqual(normalizer.quote_unquoted_keys("{a:1}"), '{"a":1}')
    self.assertEqual(normalizer.remove_trailing_commas("[1,]"), "[1]")


if __name__ == "__main__":
  absltest.main()
