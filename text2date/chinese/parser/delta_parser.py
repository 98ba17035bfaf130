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

from .base_parser import BaseParser, YEAR, MONTH, MINUTE


class DeltaParser(BaseParser):
    """
    时间增量解析器

    处理相对基准时间偏移的时间表达式，如：
    - 20分钟后、3小时之前、提前10分钟
    - 1个半小时后、半小时前
    - 5天后、2个月以前、3年后
    """

    HALF_AN_HOUR_BEFORE_PATTERN = re.compile(r"(\d*)个?半个?小时[以之]?前")
    HALF_AN_HOUR_AFTER_PATTERN = re.compile(r"(\d*)个?半个?小时[以之]?后")

    MINUTE_BEFORE_PATTERN = re.compile(r"(\d+(?=分钟[以之]?前))|((?<=提前)\d+(?=分钟))")
    MINUTE_AFTER_PATTERN = re.compile(r"\d+(?=分钟[以之]?后)")
    HOURS_BEFORE_PATTERN = re.compile(r"(\d+(?=(个)?小时[以之]?前))|((?<=提前)\d+(?=(个)?小时))")
    HOURS_AFTER_PATTERN = re.compile(r"\d+(?=(个)?小时[以之]?后)")
    DAYS_BEFORE_PATTERN = re.compile(r"(\d+(?=天[以之]?前))|((?<=提前)\d+(?=天))")
    DAYS_AFTER_PATTERN = re.compile(r"\d+(?=天[以之]?后)")
    MONTH_BEFORE_PATTERN = re.compile(r"\d+(?=(个)?月[以之]?前)")
    MONTH_AFTER_PATTERN = re.compile(r"\d+(?=(个)?月[以之]?后)")
    YEAR_BEFORE_PATTERN = re.compile(r"\d+(?=年[以之]?前)")
    YEAR_AFTER_PATTERN = re.compile(r"\d+(?=年[以之]?后)")

    # (模式, relativedelta参数名, 方向, 被触及的最细字段)
    OFFSET_RULES = (
        (HOURS_BEFORE_PATTERN, "hours", -1, MINUTE),
        (HOURS_AFTER_PATTERN, "hours", 1, MINUTE),
        (MINUTE_BEFORE_PATTERN, "minutes", -1, MINUTE),
        (MINUTE_AFTER_PATTERN, "minutes", 1, MINUTE),
        (DAYS_BEFORE_PATTERN, "days", -1, MINUTE),
        (DAYS_AFTER_PATTERN, "days", 1, MINUTE),
        (MONTH_BEFORE_PATTERN, "months", -1, MONTH),
        (MONTH_AFTER_PATTERN, "months", 1, MONTH),
        (YEAR_BEFORE_PATTERN, "years", -1, YEAR),
        (YEAR_AFTER_PATTERN, "years", 1, YEAR),
    )

    def parse(self, text, base_time):
        """
        解析时间增量表达式

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 基准时间

        Returns:
            TimeFields: 偏移后被触及的字段，没有偏移时全部为None
        """
        finest = None
        for pattern, unit, direction, touched in self.OFFSET_RULES:
            amount = self._search_int(pattern, text)
            if amount is None:
                continue
            base_time = base_time + relativedelta(**{unit: amount * direction})
            finest = touched if finest is None else max(finest, touched)

        base_time, touched = self._apply_half_hour(text, base_time)
        if touched is not None:
            finest = touched if finest is None else max(finest, touched)

        return self._touched_fields(base_time, finest)

    def _apply_half_hour(self, text, base_time):
        """
        处理"N个半小时前/后"与"半小时前/后"

        Returns:
            tuple: (偏移后的基准时间, 被触及的最细字段)
        """
        touched = None
        for pattern, direction in (
            (self.HALF_AN_HOUR_BEFORE_PATTERN, -1),
            (self.HALF_AN_HOUR_AFTER_PATTERN, 1),
        ):
            match = pattern.search(text)
            if not match:
                continue
            hours = int(match.group(1)) if match.group(1) else 0
            base_time = base_time + relativedelta(hours=hours * direction, minutes=30 * direction)
            touched = MINUTE
        return base_time, touched
