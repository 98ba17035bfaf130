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
from typing import Iterator, Optional

# 字段顺序即粒度顺序，从粗到细
FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second")


class TimeFields:
    """
    年、月、日、时、分、秒六个字段，None 表示未解析

    月份按自然习惯从1开始。
    """

    __slots__ = FIELD_NAMES

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
    ):
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second

    @classmethod
    def from_datetime(cls, value: datetime, finest: int = len(FIELD_NAMES) - 1) -> "TimeFields":
        """
        取时间点从年到第 finest 个字段的值，更细的字段保持未解析

        Args:
            value: 时间点
            finest: 最细字段的下标（0=年 ... 5=秒）
        """
        fields = cls()
        for name in FIELD_NAMES[: finest + 1]:
            setattr(fields, name, getattr(value, name))
        return fields

    def __getitem__(self, index: int) -> Optional[int]:
        return getattr(self, FIELD_NAMES[index])

    def __setitem__(self, index: int, value: Optional[int]) -> None:
        setattr(self, FIELD_NAMES[index], value)

    def __iter__(self) -> Iterator[Optional[int]]:
        return (getattr(self, name) for name in FIELD_NAMES)

    def __len__(self) -> int:
        return len(FIELD_NAMES)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeFields):
            return NotImplemented
        return list(self) == list(other)

    def update(self, other: "TimeFields") -> None:
        """用另一组字段中已解析的值覆盖当前字段"""
        for name in FIELD_NAMES:
            value = getattr(other, name)
            if value is not None:
                setattr(self, name, value)

    def copy(self) -> "TimeFields":
        return TimeFields(*self)

    def is_empty(self) -> bool:
        return all(value is None for value in self)

    def coarsest_index(self) -> Optional[int]:
        """最粗的已解析字段下标，全部未解析时返回None"""
        for index, value in enumerate(self):
            if value is not None:
                return index
        return None

    def has_clock(self) -> bool:
        return self.hour is not None or self.minute is not None or self.second is not None

    def __repr__(self) -> str:
        return "TimeFields(" + ", ".join(f"{n}={getattr(self, n)}" for n in FIELD_NAMES) + ")"
