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

from text2date.chinese import Normalizer, TimeFields


@pytest.fixture(scope="module")
def normalizer():
    return Normalizer()


@pytest.mark.parametrize(
    "fields",
    [
        TimeFields(),
        TimeFields(month=13),
        TimeFields(day=32),
        TimeFields(hour=25),
        TimeFields(minute=60),
        TimeFields(second=60),
    ],
)
def test_validate_rejects(normalizer, fields):
    assert not normalizer.validate(fields)


def test_validate_accepts_upper_limits(normalizer):
    assert normalizer.validate(TimeFields(2024, 12, 31, 24, 59, 59))


def test_fill_coarser_fields_from_anchor(normalizer, relative):
    fields = normalizer.normalize(TimeFields(day=3), "3号", relative, relative)
    assert fields == TimeFields(2024, 1, 3)


def test_finer_fields_take_calendar_defaults(normalizer, relative, shanghai):
    fields = normalizer.normalize(TimeFields(month=3), "3月", relative, relative)
    assert fields == TimeFields(2024, 3)
    assert normalizer.assemble(fields, shanghai) == datetime(2024, 3, 1, tzinfo=shanghai)
    assert normalizer.is_date_only(fields)


def test_past_small_hour_rolls_forward(normalizer, shanghai):
    relative = datetime(2024, 1, 1, 15, 0, tzinfo=shanghai)
    fields = normalizer.normalize(TimeFields(hour=3, minute=30), "3点半", relative, relative)
    assert fields == TimeFields(2024, 1, 1, 15, 30)


@pytest.mark.parametrize(
    "fields, text",
    [
        (TimeFields(hour=3), "凌晨3点"),
        (TimeFields(hour=3), "下午3点"),
        (TimeFields(day=1, hour=3), "1号3点"),
        (TimeFields(hour=16), "16点"),
    ],
)
def test_no_roll(normalizer, shanghai, fields, text):
    relative = datetime(2024, 1, 1, 15, 0, tzinfo=shanghai)
    assert normalizer.normalize(fields, text, relative, relative).hour == fields.hour


def test_no_roll_against_carried_anchor(normalizer, shanghai):
    relative = datetime(2024, 1, 1, 15, 0, tzinfo=shanghai)
    anchor = datetime(2024, 1, 2, 15, 0, tzinfo=shanghai)
    fields = normalizer.normalize(TimeFields(hour=3), "3点", relative, anchor)
    assert fields == TimeFields(2024, 1, 2, 3)


def test_normalize_is_idempotent(normalizer, shanghai):
    relative = datetime(2024, 1, 1, 15, 0, tzinfo=shanghai)
    once = normalizer.normalize(TimeFields(hour=3, minute=30), "3点半", relative, relative)
    twice = normalizer.normalize(once, "3点半", relative, relative)
    assert once == twice
    assert normalizer.assemble(once, shanghai) == normalizer.assemble(twice, shanghai)


def test_normalize_does_not_modify_input(normalizer, relative):
    fields = TimeFields(day=3)
    normalizer.normalize(fields, "3号", relative, relative)
    assert fields == TimeFields(day=3)


def test_hour_24_is_midnight_of_next_day(normalizer, shanghai):
    value = normalizer.assemble(TimeFields(2024, 1, 31, 24), shanghai)
    assert value == datetime(2024, 2, 1, 0, 0, tzinfo=shanghai)


def test_day_overflow_rolls_into_next_month(normalizer, shanghai):
    value = normalizer.assemble(TimeFields(2024, 4, 31), shanghai)
    assert value == datetime(2024, 5, 1, tzinfo=shanghai)


def test_unrepresentable_year_is_rejected(normalizer, shanghai):
    assert normalizer.assemble(TimeFields(0, 1, 1), shanghai) is None
