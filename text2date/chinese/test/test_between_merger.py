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

from datetime import datetime

import pytest

from text2date.chinese import Boundary, Cycle, TimeEntity
from text2date.chinese.parser import BetweenMerger


@pytest.fixture
def merger():
    return BetweenMerger()


def _entity(original, offset, hour, shanghai, cycle=None, boundary=Boundary.NONE):
    value = datetime(2024, 1, 1, hour, tzinfo=shanghai)
    return TimeEntity(original, offset, value=value, cycle=cycle, boundary=boundary)


def test_mark_start_and_end(merger, shanghai):
    text = "5点到10点"
    start = _entity("5点", 0, 5, shanghai)
    end = _entity("10点", 3, 10, shanghai)
    merger.mark(text, start)
    merger.mark(text, end)
    assert start.is_start and not start.is_end
    assert end.is_end and not end.is_start


def test_preceding_connector_wins(merger, shanghai):
    entity = _entity("5点", 1, 5, shanghai)
    merger.mark("到5点到", entity)
    assert entity.boundary == Boundary.END


def test_no_connector(merger, shanghai):
    entity = _entity("5点", 0, 5, shanghai)
    merger.mark("5点开会", entity)
    assert entity.boundary == Boundary.NONE


def test_dangling_flags_are_cleared(merger, shanghai):
    first = _entity("5点", 1, 5, shanghai, boundary=Boundary.END)
    last = _entity("8点", 10, 8, shanghai, boundary=Boundary.START)
    merger.correct([first, last])
    assert first.boundary == Boundary.NONE
    assert last.boundary == Boundary.NONE


def test_single_start_is_cleared(merger, shanghai):
    entity = _entity("5点", 0, 5, shanghai, boundary=Boundary.START)
    assert merger.correct([entity]) == [entity]
    assert not entity.is_start


def test_end_inherits_cycle_and_moves_after_start(merger, shanghai):
    start = _entity("每周3下午8点", 0, 20, shanghai, cycle=Cycle.weekly(3), boundary=Boundary.START)
    end = _entity("10点", 9, 10, shanghai, boundary=Boundary.END)
    merger.correct([start, end])
    assert end.cycle == Cycle.weekly(3)
    assert end.value == datetime(2024, 1, 1, 22, tzinfo=shanghai)
    assert start.is_start and end.is_end


def test_end_after_start_is_unchanged(merger, shanghai):
    start = _entity("5点", 0, 5, shanghai, boundary=Boundary.START)
    end = _entity("10点", 3, 10, shanghai, boundary=Boundary.END)
    merger.correct([start, end])
    assert end.value == datetime(2024, 1, 1, 10, tzinfo=shanghai)
    assert end.cycle is None
