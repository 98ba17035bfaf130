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

from text2date.chinese import TimeFields
from text2date.chinese.parser import AbsoluteParser, PeriodParser
from text2date.chinese.rules import PreProcessor


@pytest.fixture(scope="module")
def parser():
    return AbsoluteParser()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024年3月5日", TimeFields(2024, 3, 5)),
        ("24年", TimeFields(2024)),
        ("98年", TimeFields(1998)),
        ("12月", TimeFields(month=12)),
        ("8号", TimeFields(day=8)),
        ("3月15", TimeFields(month=3, day=15)),
        ("8点", TimeFields(hour=8)),
        ("8点30分15秒", TimeFields(hour=8, minute=30, second=15)),
        ("17点15", TimeFields(hour=17, minute=15)),
        ("8点半", TimeFields(hour=8, minute=30)),
        ("8点1刻", TimeFields(hour=8, minute=15)),
        ("8点3刻", TimeFields(hour=8, minute=45)),
        ("10:30", TimeFields(hour=10, minute=30)),
        ("10:30:15", TimeFields(hour=10, minute=30, second=15)),
        ("2024-03-05", TimeFields(2024, 3, 5)),
        ("2024-3-5", TimeFields(2024, 3, 5)),
        ("3/5/2024", TimeFields(2024, 3, 5)),
        ("2024.3.5", TimeFields(2024, 3, 5)),
    ],
)
def test_absolute_fields(parser, text, expected):
    assert parser.parse(text) == expected


def test_weekday_is_not_an_hour(parser):
    assert parser.parse("周3点").hour is None


@pytest.mark.parametrize(
    "text, hour",
    [
        ("凌晨", 1),
        ("早上", 6),
        ("早晨", 6),
        ("上午", 9),
        ("中午", 12),
        ("下午", 14),
        ("傍晚", 18),
        ("晚上", 20),
        ("凌晨3点", 3),
        ("上午9点", 9),
        ("中午12点", 12),
        ("中午1点", 13),
        ("下午3点", 15),
        ("傍晚6点", 18),
        ("晚上8点", 20),
        ("夜里11点", 23),
        ("晚上12点", 24),
    ],
)
def test_period_buckets(parser, text, hour):
    assert parser.parse(text).hour == hour


@pytest.mark.parametrize(
    "text, hour, minute",
    [
        ("下午3:15", 15, 15),
        ("晚上10:30", 22, 30),
        ("晚上12:00", 0, 0),
        ("上午10:30", 10, 30),
    ],
)
def test_period_on_clock_form(parser, text, hour, minute):
    fields = parser.parse(text)
    assert (fields.hour, fields.minute) == (hour, minute)


def test_chinese_numerals_after_preprocessing(parser):
    text = PreProcessor().process("二〇二四年三月五日下午三点一刻")
    assert text == "2024年3月5日下午3点1刻"
    assert parser.parse(text) == TimeFields(2024, 3, 5, 15, 15)


def test_preprocessor_sunday_and_fullwidth_colon():
    preprocessor = PreProcessor()
    assert preprocessor.process("星期天") == "星期7"
    assert preprocessor.process("下周日") == "下周7"
    assert preprocessor.process("10：30") == "10:30"


def test_evening_with_zero_hour():
    assert PeriodParser().adjust_hour("傍晚", 0) == 18


def test_time_modifier():
    period_parser = PeriodParser()
    assert period_parser.has_modifier("下午3点")
    assert period_parser.has_modifier("夜里")
    assert not period_parser.has_modifier("3点半")
