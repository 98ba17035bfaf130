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


class PeriodParser:
    """
    时段解析器

    根据凌晨、上午、下午、晚上等时段词修正小时，规约如下：

    ======  ==============================  ========  ====================
    时段    标记词                          默认小时  已有小时的修正
    ======  ==============================  ========  ====================
    凌晨    凌晨                            1         无
    早上    早上/早晨                       6         无
    上午    上午/am/AM                      9         无
    中午    中午/午间                       12        0-10点 +12
    下午    下午/午后/pm/PM                 14        0-11点 +12
    傍晚    傍晚                            18        1-10点 +12
    晚上    晚/晚上/晚间/夜/夜里/深夜       20        1-11点 +12，12点为24
    ======  ==============================  ========  ====================

    傍晚与晚上只取其一，傍晚优先。
    """

    EARLY_MORNING_PATTERN = re.compile("凌晨")
    MORNING_PATTERN = re.compile("早上|早晨")
    FORENOON_PATTERN = re.compile("上午|am|AM")
    NOON_PATTERN = re.compile("中午|午间")
    AFTERNOON_PATTERN = re.compile("下午|午后|pm|PM")
    EVENING_PATTERN = re.compile("傍晚")
    NIGHT_PATTERN = re.compile("(?<!傍)晚|夜")

    # 出现任何一个时段词时，不再把已过去的小时推到12小时之后
    TIME_MODIFIER_PATTERN = re.compile(
        "早|早晨|早上|上午|中午|午后|下午|傍晚|晚上|晚间|夜里|夜|凌晨|深夜|pm|PM"
    )

    def adjust_hour(self, text: str, hour: Optional[int]) -> Optional[int]:  # noqa: C901
        """
        按时段词修正"N点"形式解析出的小时

        Args:
            text (str): 归一化后的实体文本
            hour (int): 已解析的小时，None表示未解析

        Returns:
            int: 修正后的小时，仍可能为None
        """
        if hour is None:
            if self.EARLY_MORNING_PATTERN.search(text):
                hour = 1
            elif self.MORNING_PATTERN.search(text):
                hour = 6
            elif self.FORENOON_PATTERN.search(text):
                hour = 9

        if self.NOON_PATTERN.search(text):
            if hour is None:
                hour = 12
            elif 0 <= hour <= 10:
                hour += 12

        if self.AFTERNOON_PATTERN.search(text):
            if hour is None:
                hour = 14
            elif 0 <= hour <= 11:
                hour += 12

        if self.EVENING_PATTERN.search(text):
            if hour is None or hour < 1:
                hour = 18
            elif hour < 11:
                hour += 12
        elif self.NIGHT_PATTERN.search(text):
            if hour is None:
                hour = 20
            elif 1 <= hour <= 12:
                hour += 12
        return hour

    def adjust_clock_hour(self, text: str, hour: int) -> int:
        """
        按时段词修正"HH:MM"形式解析出的小时，只处理中午、下午和晚上，
        晚上12点视为0点

        Args:
            text (str): 归一化后的实体文本
            hour (int): "HH:MM"中的小时

        Returns:
            int: 修正后的小时
        """
        if self.NOON_PATTERN.search(text) and 0 <= hour <= 10:
            hour += 12
        if self.AFTERNOON_PATTERN.search(text) and 0 <= hour <= 11:
            hour += 12
        if self.NIGHT_PATTERN.search(text):
            if 1 <= hour <= 11:
                hour += 12
            elif hour == 12:
                hour = 0
        return hour

    def has_modifier(self, text: str) -> bool:
        """文本中是否带有时段词"""
        return self.TIME_MODIFIER_PATTERN.search(text) is not None
