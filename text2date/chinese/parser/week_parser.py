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

from datetime import timedelta

import regex as re
from dateutil.relativedelta import relativedelta

from .base_parser import BaseParser, DAY


class WeekParser(BaseParser):
    """
    星期解析器

    处理星期相关的时间表达式，一周从周一开始，周7为周日：
    - 上上周3、上周3、周3、下周3、下下周3
    - 星期与周写法等价，如 下星期5
    """

    BEFORE_LAST_WEEKDAY_PATTERN = re.compile(r"(?<=(上上(周|星期)))[1-7]")
    LAST_WEEKDAY_PATTERN = re.compile(r"(?<=((?<!上)上(周|星期)))[1-7]")
    THIS_WEEKDAY_PATTERN = re.compile(r"(?<=((?<!(上|下))(周|星期)))[1-7]")
    NEXT_WEEKDAY_PATTERN = re.compile(r"(?<=((?<!下)下(周|星期)))[1-7]")
    NEXT_NEXT_WEEKDAY_PATTERN = re.compile(r"(?<=(下下(周|星期)))[1-7]")

    # (模式, 周偏移)
    WEEK_RULES = (
        (BEFORE_LAST_WEEKDAY_PATTERN, -2),
        (LAST_WEEKDAY_PATTERN, -1),
        (NEXT_WEEKDAY_PATTERN, 1),
        (NEXT_NEXT_WEEKDAY_PATTERN, 2),
        (THIS_WEEKDAY_PATTERN, 0),
    )

    def parse(self, text, base_time):
        """
        解析星期表达式

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 基准时间

        Returns:
            TimeFields: 命中星期时包含年月日，否则全部为None
        """
        base_time, touched = self.shift(text, base_time)
        return self._touched_fields(base_time, DAY if touched else None)

    def shift(self, text, base_time):
        """
        把基准时间移动到目标星期几，时分秒保持不变

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 基准时间

        Returns:
            tuple: (移动后的时间, 是否命中星期表达式)
        """
        touched = False
        for pattern, weeks in self.WEEK_RULES:
            weekday = self._search_int(pattern, text)
            if weekday is None:
                continue
            base_time = self._to_weekday(base_time, weeks, weekday)
            touched = True
        return base_time, touched

    @staticmethod
    def _to_weekday(base_time, weeks, weekday):
        """
        Args:
            weeks (int): 周偏移，-1为上周，1为下周
            weekday (int): 星期几，1为周一，7为周日
        """
        target = base_time + relativedelta(weeks=weeks)
        return target + timedelta(days=weekday - target.isoweekday())
