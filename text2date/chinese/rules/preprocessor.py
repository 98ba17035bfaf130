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

from ...core.chinese_number_converter import replace_chinese_numbers


class PreProcessor:
    """预处理器，把时间实体文本统一为便于字段抽取的形式"""

    # 周日统一写成周7，需在数字转换之前完成
    REPLACEMENTS = (
        ("周日", "周7"),
        ("周天", "周7"),
        ("星期日", "星期7"),
        ("星期天", "星期7"),
        ("：", ":"),
    )

    def process(self, text: str) -> str:
        """
        Args:
            text: 时间实体原文，如 "星期天下午三点"

        Returns:
            str: 归一化后的文本，如 "星期7下午3点"
        """
        for old, new in self.REPLACEMENTS:
            text = text.replace(old, new)
        return replace_chinese_numbers(text)
