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

"""jsonextract: pull structured values out of JSON-like text."""

from jsonextract.data import CharInterval
from jsonextract.data import DEFAULT_STRATEGIES
from jsonextract.data import Extraction
from jsonextract.data import FormatType
from jsonextract.data import JSONValue
from jsonextract.data import Strategy
from jsonextract.exceptions import ConfigError
from jsonextract.exceptions import DecodeError
from jsonextract.exceptions import JsonExtractError
from jsonextract.extraction import extract
from jsonextract.extraction import extract_and_parse
from jsonextract.key_search import find_by_key
from jsonextract.normalizer import normalize_to_json
from jsonextract.resolver import AbstractResolver
from jsonextract.resolver import parse_json
from jsonextract.resolver import Resolver

__all__ = [
    "AbstractResolver",
    "CharInterval",
    "ConfigError",
    "DEFAULT_STRATEGIES",
    "DecodeError",
    "Extraction",
    "FormatType",
    "JSONValue",
    "JsonExtractError",
    "Resolver",
    "Strategy",
    "extract",
    "extract_and_parse",
    "find_by_key",
    "normalize_to_json",
    "parse_json",
]
