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
text2date - 基于规则的中文时间实体识别库

从自由文本中找出时间表达式，并解析为带时区的时间点，支持：
- 绝对时间：2024年3月5日、下午3点半、2024-03-05 10:30
- 相对时间：20分钟后、明天、下周三
- 周期：每天、每周三、每月15号
- 区间：5点到10点

Classes:
    TimeEntityRecognizer: 时间实体识别器
    TimeEntity: 识别结果

Usage:
    from text2date import TimeEntityRecognizer

    recognizer = TimeEntityRecognizer()
    entities = recognizer.parse("明天下午三点到五点开会")
"""

from .chinese import Boundary, Cycle, CycleType, TimeEntity, TimeEntityRecognizer

# 版本信息
__version__ = "1.0.0"
__author__ = "Ming Yu (yuming@oppo.com)"

__all__ = [
    "TimeEntityRecognizer",
    "TimeEntity",
    "Cycle",
    "CycleType",
    "Boundary",
]
