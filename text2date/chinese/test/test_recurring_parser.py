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

import pytest

from text2date.chinese import Cycle, CycleType
from text2date.chinese.parser import RecurringParser


@pytest.mark.parametrize(
    "text, expected",
    [
        ("每天8点", Cycle.daily()),
        ("每周3", Cycle.weekly(3)),
        ("每星期5", Cycle.weekly(5)),
        ("每周7上午", Cycle.weekly(7)),
        ("每月3号", Cycle.monthly(3)),
        ("每月15日", Cycle.monthly(15)),
        ("每月31", Cycle.monthly(31)),
        ("每年", Cycle.yearly()),
        ("明天8点", None),
    ],
)
def test_cycles(text, expected):
    assert RecurringParser().parse(text) == expected


def test_day_of_month_out_of_range_is_not_a_cycle():
    assert RecurringParser().parse("每月32号") is None


@pytest.mark.parametrize(
    "cycle_type, value",
    [
        (CycleType.WEEKLY, 0),
        (CycleType.WEEKLY, 8),
        (CycleType.WEEKLY, None),
        (CycleType.MONTHLY, 0),
        (CycleType.MONTHLY, 32),
        (CycleType.DAILY, 1),
        (CycleType.YEARLY, 3),
    ],
)
def test_invalid_cycle_raises(cycle_type, value):
    with pytest.raises(ValueError):
        Cycle(cycle_type, value)


def test_cycle_str():
    assert str(Cycle.daily()) == "每天"
    assert str(Cycle.weekly(3)) == "每周3"
    assert str(Cycle.monthly(15)) == "每月15号"
    assert str(Cycle.yearly()) == "每年"
