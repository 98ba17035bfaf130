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

from datetime import datetime, timedelta, tzinfo
from typing import Optional

from .parser.base_parser import DAY, HOUR
from .parser.period_parser import PeriodParser
from .time_fields import TimeFields
from ..core.logger import get_logger

# 各字段允许的最大值，None表示不检查
FIELD_LIMITS = (None, 12, 31, 24, 59, 59)


class Normalizer:
    """
    时间字段校验与补全

    解析得到的六个字段依次经过：
    1. validate: 超出范围或全部未解析时拒绝
    2. normalize: 已过去的小点数顺延12小时，再用锚点补全比最粗字段更粗的字段
    3. assemble: 在指定时区下拼成时间点，未解析的字段取日历默认值
    """

    def __init__(self):
        self.logger = get_logger(__name__)
        self.period_parser = PeriodParser()

    def validate(self, fields: TimeFields) -> bool:
        """
        Args:
            fields (TimeFields): 解析出的字段

        Returns:
            bool: 字段均在合法范围内且至少有一个已解析时为True
        """
        if fields.is_empty():
            return False
        for value, limit in zip(fields, FIELD_LIMITS):
            if value is not None and limit is not None and value > limit:
                return False
        return True

    def normalize(self, fields: TimeFields, text: str, relative: datetime, anchor: datetime) -> TimeFields:
        """
        顺延与补全，返回新的字段，不修改入参

        对同一结果再次调用得到相同字段。

        Args:
            fields (TimeFields): 校验通过的字段
            text (str): 归一化后的实体文本，用于判断是否带有时段词
            relative (datetime): 调用方给出的参考时间
            anchor (datetime): 当前实体使用的锚点，通常是上一个实体的时间

        Returns:
            TimeFields: 处理后的字段
        """
        fields = fields.copy()

        if self._should_roll(fields, text, relative, anchor):
            fields.hour += 12

        coarsest = fields.coarsest_index()
        if coarsest is None:
            return fields
        reference = TimeFields.from_datetime(anchor)
        for index in range(coarsest):
            if fields[index] is None:
                fields[index] = reference[index]
        return fields

    def _should_roll(self, fields, text, relative, anchor):
        """
        只说了小点数且没有时段词时，把今天已经过去的时间推到12小时之后，
        例如下午3点说"5点"指17点
        """
        if anchor != relative:
            return False
        if fields[HOUR] is None or fields[DAY] is not None:
            return False
        if self.period_parser.has_modifier(text):
            return False
        return fields.hour < relative.hour and fields.hour <= 12

    def assemble(self, fields: TimeFields, tz: tzinfo) -> Optional[datetime]:
        """
        把字段拼成带时区的时间点

        未解析（或不大于0）的字段取日历默认值：1月、1日、0时0分0秒。
        24点与超出当月天数的日期会顺延，例如4月31日即5月1日。

        Args:
            fields (TimeFields): 补全后的字段
            tz (tzinfo): 目标时区

        Returns:
            datetime: 时间点，年份无法表示时返回None
        """
        year, month, day, hour, minute, second = (value if value and value > 0 else 0 for value in fields)
        try:
            start = datetime(year, month or 1, 1, tzinfo=tz)
            return start + timedelta(days=max(day - 1, 0), hours=hour, minutes=minute, seconds=second)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"Error in assemble {fields}: {e}")
            return None

    @staticmethod
    def is_date_only(fields: TimeFields) -> bool:
        """时、分、秒都未解析"""
        return not fields.has_clock()
