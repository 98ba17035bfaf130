# Copyright (c) 2025 Ming Yu (yuming@oppo.com), Liangliang Han (hanliangliang@oppo.com)
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

"""
时间实体数据结构

TimeEntity 是识别器的输出单元，记录原文片段、在原文中的位置、解析出的时间点，
以及周期（Cycle）和区间边界（Boundary）信息。
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class CycleType(Enum):
    """周期类型"""

    DAILY = "day"
    WEEKLY = "week"
    MONTHLY = "month"
    YEARLY = "year"


@dataclass(frozen=True)
class Cycle:
    """
    周期描述

    Attributes:
        type: 周期类型
        value: 每周的第几天（1-7，7为周日）或每月的第几号（1-31），每天/每年为None
    """

    type: CycleType
    value: Optional[int] = None

    def __post_init__(self):
        if self.type == CycleType.WEEKLY:
            if self.value is None or not 1 <= self.value <= 7:
                raise ValueError(f"day of week must be in 1..7, got {self.value}")
        elif self.type == CycleType.MONTHLY:
            if self.value is None or not 1 <= self.value <= 31:
                raise ValueError(f"day of month must be in 1..31, got {self.value}")
        elif self.value is not None:
            raise ValueError(f"{self.type.value} cycle takes no value, got {self.value}")

    @classmethod
    def daily(cls) -> "Cycle":
        return cls(CycleType.DAILY)

    @classmethod
    def weekly(cls, day_of_week: int) -> "Cycle":
        return cls(CycleType.WEEKLY, day_of_week)

    @classmethod
    def monthly(cls, day_of_month: int) -> "Cycle":
        return cls(CycleType.MONTHLY, day_of_month)

    @classmethod
    def yearly(cls) -> "Cycle":
        return cls(CycleType.YEARLY)

    def __str__(self) -> str:
        if self.type == CycleType.DAILY:
            return "每天"
        if self.type == CycleType.WEEKLY:
            return f"每周{self.value}"
        if self.type == CycleType.MONTHLY:
            return f"每月{self.value}号"
        return "每年"


class Boundary(Enum):
    """区间边界：不在区间中 / 区间开始 / 区间结束"""

    NONE = "none"
    START = "start"
    END = "end"


@dataclass
class TimeEntity:
    """
    识别出的时间实体

    Attributes:
        original: 原文中匹配到的（可能由多段合并而成的）片段
        offset: 片段在原文中的起始位置
        value: 解析出的时间点（带时区）
        date_only: 原文中没有时、分、秒信息时为True
        cycle: 周期信息，没有时为None
        boundary: 区间边界标记
    """

    original: str
    offset: int
    value: Optional[datetime] = None
    date_only: bool = False
    cycle: Optional[Cycle] = None
    boundary: Boundary = Boundary.NONE

    @property
    def end_offset(self) -> int:
        return self.offset + len(self.original)

    @property
    def is_start(self) -> bool:
        return self.boundary == Boundary.START

    @property
    def is_end(self) -> bool:
        return self.boundary == Boundary.END

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "offset": self.offset,
            "value": self.value.isoformat() if self.value else None,
            "date_only": self.date_only,
            "cycle": str(self.cycle) if self.cycle else None,
            "is_start": self.is_start,
            "is_end": self.is_end,
        }

    def __repr__(self) -> str:
        value = self.value.strftime("%Y-%m-%d %H:%M:%S") if self.value else None
        return (
            f"TimeEntity('{self.original}', offset={self.offset}, value={value}, "
            f"date_only={self.date_only}, cycle={self.cycle}, boundary={self.boundary.value})"
        )
