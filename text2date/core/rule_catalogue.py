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
规则目录模块

把规则文件中的时间表达式正则合并为一个总的候选模式，用于在原始文本中
切分出候选时间片段。规则文件格式：

- UTF-8文本，每行一条正则
- 空行与以 # 开头的行会被忽略
- 重复的规则只保留第一次出现的位置

规则的先后顺序即同一位置多条规则都能匹配时的优先级，越靠前越优先。
"""

import os
import time
from typing import Iterable, List, NamedTuple, Tuple, Union

import regex as re
from importlib_resources import files

from .logger import get_logger


class RawSpan(NamedTuple):
    """总模式在文本中的一次匹配"""

    offset: int
    text: str


class RuleCatalogue:
    """
    不可变的规则目录，构造时一次性编译，之后可在多线程间只读共享。

    Attributes:
        patterns (Tuple[str, ...]): 去重后的规则列表（保持原顺序）
        pattern: 所有规则合并后的编译结果
    """

    DEFAULT_RULE_PACKAGE = "text2date.chinese"
    DEFAULT_RULE_FILE = "data/time.regex"

    def __init__(self, source: Union[None, str, os.PathLike, Iterable[str]] = None) -> None:
        """
        加载并编译规则

        Args:
            source: 规则来源。None 表示使用内置规则文件；字符串或路径表示规则文件路径；
                    也可以是已打开的文本流或规则字符串的可迭代对象

        Raises:
            FileNotFoundError: 规则文件不存在
            ValueError: 没有有效规则，或某条规则无法编译
        """
        self.logger = get_logger(__name__)

        lines = self._read_lines(source)
        self.patterns: Tuple[str, ...] = self._clean(lines)
        if not self.patterns:
            raise ValueError("规则文件中没有有效的时间表达式规则")

        self.logger.debug(f"input regex[size={len(self.patterns)}, text={self.patterns}]")

        start = time.time()
        self.pattern = self._compile(self.patterns)
        cost = (time.time() - start) * 1000
        self.logger.info(
            f"pattern initialized for {len(self.patterns)} patterns, time used(ms):{cost:.1f}"
        )

    def _read_lines(self, source) -> List[str]:
        if source is None:
            resource = files(self.DEFAULT_RULE_PACKAGE).joinpath(self.DEFAULT_RULE_FILE)
            return resource.read_text(encoding="utf-8").splitlines()
        if isinstance(source, (str, os.PathLike)):
            with open(source, "r", encoding="utf-8") as f:
                return f.read().splitlines()
        if hasattr(source, "read"):
            return source.read().splitlines()
        return list(source)

    @staticmethod
    def _clean(lines: Iterable[str]) -> Tuple[str, ...]:
        """去掉空行、注释行和重复规则，保持首次出现的顺序"""
        patterns = []
        seen = set()
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#") or line in seen:
                continue
            seen.add(line)
            patterns.append(line)
        return tuple(patterns)

    def _compile(self, patterns: Tuple[str, ...]):
        # 逐条校验，便于定位出错的规则
        for item in patterns:
            try:
                re.compile(item)
            except re.error as e:
                raise ValueError(f"无效的时间表达式规则: {item}, {e}") from e
        return re.compile("|".join(f"(?:{item})" for item in patterns))

    def segment(self, text: str) -> List[RawSpan]:
        """
        从左到右切分出互不重叠的候选片段

        Args:
            text: 原始文本

        Returns:
            List[RawSpan]: 按位置升序排列的候选片段
        """
        return [
            RawSpan(match.start(), match.group())
            for match in self.pattern.finditer(text)
            if match.group()
        ]

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"RuleCatalogue(size={len(self.patterns)})"

