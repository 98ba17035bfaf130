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

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..time_fields import TimeFields
from ...core.logger import get_logger

# 字段下标
YEAR, MONTH, DAY, HOUR, MINUTE, SECOND = range(6)


class BaseParser(ABC):
    """
    时间解析器基类

    每个解析器只负责一类字段，输入是经过 PreProcessor 归一化的实体文本，
    输出一组 TimeFields，其中未涉及的字段保持为None。
    """

    def __init__(self):
        """初始化解析器"""
        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def parse(self, text: str, base_time: Optional[datetime]):
        """
        解析时间表达式的抽象方法

        Args:
            text (str): 归一化后的实体文本
            base_time (datetime): 基准时间（锚点）

        Returns:
            解析结果，具体类型由子类决定
        """
        pass

    @staticmethod
    def _search_int(pattern, text: str) -> Optional[int]:
        """返回第一个匹配的整数值，没有匹配时返回None"""
        match = pattern.search(text)
        if match:
            return int(match.group())
        return None

    @staticmethod
    def _touched_fields(base_time: datetime, finest: Optional[int]) -> TimeFields:
        """
        从偏移后的基准时间中取出被触及的字段

        被触及的最细字段决定范围：从年到该字段都取基准时间的值，例如
        天偏移会带上年、月、日、时、分。

        Args:
            base_time (datetime): 偏移后的基准时间
            finest (int): 被触及的最细字段下标，None表示没有触及任何字段
        """
        if finest is None:
            return TimeFields()
        return TimeFields.from_datetime(base_time, finest)
