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

from typing import Optional

import regex as re

from .base_parser import BaseParser
from ..time_entity import Cycle


class RecurringParser(BaseParser):
    """
    周期时间解析器

    处理周期性的时间表达式，如：
    - 每天8点
    - 每周3、每星期5
    - 每月15号
    - 每年
    """

    DAILY_PATTERN = re.compile(r"每天")
    WEEKLY_PATTERN = re.compile(r"每(周|星期)([1-7])")
    MONTHLY_PATTERN = re.compile(r"每月(3[01]|[12][0-9]|[1-9])(?![0-9])(号|日)?")
    YEARLY_PATTERN = re.compile(r"每年")

    def parse(self, text, base_time=None) -> Optional[Cycle]:
        """
        解析周期表达式，按 每天、每周、每月、每年 的顺序取第一个命中的周期

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 未使用，周期与基准时间无关

        Returns:
            Cycle: 周期描述，没有周期说法时返回None
        """
        if self.DAILY_PATTERN.search(text):
            return Cycle.daily()

        match = self.WEEKLY_PATTERN.search(text)
        if match:
            return Cycle.weekly(int(match.group(2)))

        match = self.MONTHLY_PATTERN.search(text)
        if match:
            return Cycle.monthly(int(match.group(1)))

        if self.YEARLY_PATTERN.search(text):
            return Cycle.yearly()
        return None
