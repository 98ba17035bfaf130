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
from dateutil.relativedelta import relativedelta

from .base_parser import BaseParser, YEAR, MONTH, DAY
from .week_parser import WeekParser


class RelativeParser(BaseParser):
    """
    相对时间解析器

    处理相对当前时间的固定说法，如：
    - 前年、去年、今年、明年、后年
    - 上个月、本月、这个月、下个月
    - 大大前天、大前天、前天、昨天、今天、明天、后天、大后天、大大后天
    - 上周3、下星期5 等星期表达式（委托给 WeekParser）
    """

    YEAR_WORDS = (
        ("前年", -2),
        ("去年", -1),
        ("今年", 0),
        ("明年", 1),
        ("后年", 2),
    )

    LAST_MONTH_PATTERN = re.compile(r"上(个)?月")
    THIS_MONTH_PATTERN = re.compile(r"(本|这个)月")
    NEXT_MONTH_PATTERN = re.compile(r"下(个)?月")

    DAY_BEFORE_YESTERDAY_PATTERN = re.compile(r"(?<!大)前天")
    YESTERDAY_PATTERN = re.compile(r"昨")
    # "今年"、"明年"由年份词处理
    TODAY_PATTERN = re.compile(r"今(?!年)")
    TOMORROW_PATTERN = re.compile(r"明(?!年)")
    DAY_AFTER_TOMORROW_PATTERN = re.compile(r"(?<!大)后天")

    def __init__(self):
        """初始化相对时间解析器"""
        super().__init__()
        self.week_parser = WeekParser()

    def parse(self, text, base_time):
        """
        解析相对时间表达式

        各类说法在同一个基准时间上依次累加，最后只取被触及的字段

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 基准时间

        Returns:
            TimeFields: 被触及的字段，没有相对说法时全部为None
        """
        finest = None

        for word, years in self.YEAR_WORDS:
            if word in text:
                base_time = base_time + relativedelta(years=years)
                finest = YEAR

        month_offset = self._month_offset(text)
        if month_offset is not None:
            base_time = base_time + relativedelta(months=month_offset)
            finest = MONTH

        day_offset = self._day_offset(text)
        if day_offset is not None:
            base_time = base_time + relativedelta(days=day_offset)
            finest = DAY

        base_time, week_touched = self.week_parser.shift(text, base_time)
        if week_touched:
            finest = DAY

        return self._touched_fields(base_time, finest)

    def _month_offset(self, text):
        offset = None
        for pattern, months in (
            (self.LAST_MONTH_PATTERN, -1),
            (self.THIS_MONTH_PATTERN, 0),
            (self.NEXT_MONTH_PATTERN, 1),
        ):
            if pattern.search(text):
                offset = (offset or 0) + months
        return offset

    def _day_offset(self, text):  # noqa: C901
        """
        Returns:
            int: 累计的天偏移，没有任何日期说法时为None
        """
        offset = None

        if "大大前天" in text:
            offset = -4
        elif "大前天" in text:
            offset = -3

        for pattern, days in (
            (self.DAY_BEFORE_YESTERDAY_PATTERN, -2),
            (self.YESTERDAY_PATTERN, -1),
            (self.TODAY_PATTERN, 0),
            (self.TOMORROW_PATTERN, 1),
            (self.DAY_AFTER_TOMORROW_PATTERN, 2),
        ):
            if pattern.search(text):
                offset = (offset or 0) + days

        if "大大后天" in text:
            offset = (offset or 0) + 4
        elif "大后天" in text:
            offset = (offset or 0) + 3

        return offset
