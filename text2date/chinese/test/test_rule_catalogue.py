# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
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

import io

import pytest

from text2date.core import RawSpan, RuleCatalogue


def test_comments_blank_lines_and_duplicates_are_dropped():
    catalogue = RuleCatalogue(["# 注释", "", "  每天  ", "明天", "每天"])
    assert catalogue.patterns == ("每天", "明天")
    assert len(catalogue) == 2


def test_load_from_file(tmp_path):
    rule_file = tmp_path / "time.regex"
    rule_file.write_text("# rules\n明天\n\n[0-9]+点\n", encoding="utf-8")
    catalogue = RuleCatalogue(str(rule_file))
    assert catalogue.patterns == ("明天", "[0-9]+点")


def test_load_from_stream():
    catalogue = RuleCatalogue(io.StringIO("明天\n后天\n"))
    assert catalogue.patterns == ("明天", "后天")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        RuleCatalogue(str(tmp_path / "missing.regex"))


@pytest.mark.parametrize("lines", [[], ["# only comment", "   "]])
def test_empty_catalogue_raises(lines):
    with pytest.raises(ValueError):
        RuleCatalogue(lines)


def test_invalid_rule_raises():
    with pytest.raises(ValueError):
        RuleCatalogue(["明天", "([0-9]+点"])


def test_earlier_rule_wins_at_same_position():
    catalogue = RuleCatalogue(["明", "明天"])
    assert catalogue.segment("明天") == [RawSpan(0, "明")]


def test_empty_matches_are_skipped():
    catalogue = RuleCatalogue(["x?"])
    assert catalogue.segment("abc") == []


def test_default_catalogue_segments_adjacent_spans():
    catalogue = RuleCatalogue()
    assert len(catalogue) > 0
    assert catalogue.segment("明天下午3点开会") == [
        RawSpan(0, "明天"),
        RawSpan(2, "下午"),
        RawSpan(4, "3点"),
    ]


def test_default_catalogue_ignores_plain_text():
    assert RuleCatalogue().segment("你好，世界") == []
