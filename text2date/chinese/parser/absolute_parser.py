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

import regex as re

from .base_parser import BaseParser
from .period_parser import PeriodParser
from ..time_fields import TimeFields


class AbsoluteParser(BaseParser):
    """
    绝对时间解析器

    处理直接写出数值的时间表达式，如：
    - 2024年、24年、3月、5日、8号
    - 8点、8点30、8点半、8点一刻、8点15分20秒
    - 2024-3-5、3/5/2024、2024.3.5、10:30、10:30:15
    """

    YEAR_4_DIGIT_PATTERN = re.compile(r"[0-9]?[0-9]{3}(?=年)")
    YEAR_2_DIGIT_PATTERN = re.compile(r"[0-9]{2}(?=年)")
    MONTH_PATTERN = re.compile(r"(?<!\d)(10|11|12|[1-9])(?=月)")
    DAY_PATTERN = re.compile(
        r"((?<!\d)([0-3][0-9]|[1-9])(?=(日|号)))|((?<=月)([0-3][0-9]|[1-9])(?=(日|号))?)"
    )

    # 排除"周3点"这类把星期误认成小时的情况
    HOUR_PATTERN = re.compile(r"(?<!(周|星期))([0-2]?[0-9])(?=(点|时))")
    # "N分"（排除"N分钟"），或省略"分"的"N点M"
    MINUTE_PATTERN = re.compile(
        r"([0-5]?[0-9](?=分(?!钟)))|((?<=((?<!(周|星期|\d))([0-2]?[0-9])(点|时)))[0-5]?[0-9](?!刻))"
    )
    ONE_QUARTER_PATTERN = re.compile(r"(?<=[点时])1刻(?!钟)")
    HALF_PATTERN = re.compile(r"(?<=[点时])半")
    THREE_QUARTER_PATTERN = re.compile(r"(?<=[点时])3刻(?!钟)")
    # "N秒"，或省略"秒"的"M分S"
    SECOND_PATTERN = re.compile(r"([0-5]?[0-9](?=秒))|((?<=分)[0-5]?[0-9])")

    HOUR_MINUTE_SECOND_PATTERN = re.compile(r"(?<!(周|星期))([0-2]?[0-9]):[0-5]?[0-9]:[0-5]?[0-9]")
    HOUR_MINUTE_PATTERN = re.compile(r"(?<!(周|星期))([0-2]?[0-9]):[0-5]?[0-9]")
    DASH_YEAR_MONTH_DAY = re.compile(r"[0-9]?[0-9]?[0-9]{2}-(1[0-2]|0?[1-9])-(?<!\d)([0-3][0-9]|[1-9])")
    SLASH_MONTH_DAY_YEAR = re.compile(r"(1[0-2]|0?[1-9])/(?<!\d)([0-3][0-9]|[1-9])/[0-9]?[0-9]?[0-9]{2}")
    DOT_YEAR_MONTH_DAY = re.compile(r"[0-9]?[0-9]?[0-9]{2}\.(1[0-2]|0?[1-9])\.(?<!\d)([0-3][0-9]|[1-9])")

    def __init__(self):
        """初始化绝对时间解析器"""
        super().__init__()
        self.period_parser = PeriodParser()

    def parse(self, text, base_time=None):
        """
        解析实体文本中直接写出的年月日时分秒

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 未使用，绝对时间与基准时间无关

        Returns:
            TimeFields: 解析出的字段，未出现的字段为None
        """
        fields = TimeFields(
            year=self._parse_year(text),
            month=self._search_int(self.MONTH_PATTERN, text),
            day=self._search_int(self.DAY_PATTERN, text),
            hour=self._parse_hour(text),
            minute=self._parse_minute(text),
            second=self._search_int(self.SECOND_PATTERN, text),
        )
        # 分隔符形式优先于逐字段抽取的结果
        self._parse_clock(text, fields)
        self._parse_delimited_date(text, fields)
        return fields

    def _parse_year(self, text):
        """
        解析年份，三位或四位数字原样使用，两位数字小于30视为20xx年，否则视为19xx年
        """
        year = self._search_int(self.YEAR_4_DIGIT_PATTERN, text)
        if year is not None:
            return year
        year = self._search_int(self.YEAR_2_DIGIT_PATTERN, text)
        if year is not None:
            year += 2000 if year < 30 else 1900
        return year

    def _parse_hour(self, text):
        hour = self._search_int(self.HOUR_PATTERN, text)
        return self.period_parser.adjust_hour(text, hour)

    def _parse_minute(self, text):
        """
        解析分钟，支持省略"分"的"17点15"；一刻、半、三刻分别为15、30、45分
        """
        minute = self._search_int(self.MINUTE_PATTERN, text)
        if self.ONE_QUARTER_PATTERN.search(text):
            minute = 15
        if self.HALF_PATTERN.search(text):
            minute = 30
        if self.THREE_QUARTER_PATTERN.search(text):
            minute = 45
        return minute

    def _parse_clock(self, text, fields):
        """解析 HH:MM:SS 与 HH:MM，并按时段词修正小时"""
        match = self.HOUR_MINUTE_SECOND_PATTERN.search(text)
        if match:
            fields.hour, fields.minute, fields.second = map(int, match.group().split(":"))
        else:
            match = self.HOUR_MINUTE_PATTERN.search(text)
            if match:
                fields.hour, fields.minute = map(int, match.group().split(":"))
        if match:
            fields.hour = self.period_parser.adjust_clock_hour(text, fields.hour)

    def _parse_delimited_date(self, text, fields):
        """解析 Y-M-D、M/D/Y 与 Y.M.D"""
        match = self.DASH_YEAR_MONTH_DAY.search(text)
        if match:
            fields.year, fields.month, fields.day = map(int, match.group().split("-"))

        match = self.SLASH_MONTH_DAY_YEAR.search(text)
        if match:
            fields.month, fields.day, fields.year = map(int, match.group().split("/"))

        match = self.DOT_YEAR_MONTH_DAY.search(text)
        if match:
            fields.year, fields.month, fields.day = map(int, match.group().split("."))
