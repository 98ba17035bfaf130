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

from datetime import timedelta
from typing import List

from ..time_entity import Boundary, TimeEntity
from ...core.logger import get_logger

RANGE_CONNECTOR = "到"


class BetweenMerger:
    """
    区间边界合并器

    根据实体前后紧邻的"到"字标记区间的开始与结束，并在全部实体解析完成后
    修正互相矛盾的标记，例如"5点到我这里来"中的"5点"不是区间开始。
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def mark(self, text: str, entity: TimeEntity) -> None:
        """
        按原文上下文标记实体的区间边界，前面紧邻"到"优先于后面紧邻"到"

        Args:
            text (str): 原文
            entity (TimeEntity): 已解析出时间点的实体
        """
        if entity.offset >= 1 and text[entity.offset - 1] == RANGE_CONNECTOR:
            entity.boundary = Boundary.END
        elif entity.end_offset < len(text) and text[entity.end_offset] == RANGE_CONNECTOR:
            entity.boundary = Boundary.START

    def correct(self, entities: List[TimeEntity]) -> List[TimeEntity]:
        """
        修正区间标记并向区间结束传播信息

        - 第一个实体不能是区间结束，最后一个实体不能是区间开始
        - 区间结束没有周期时沿用前一个实体的周期，如"每月3号上午8点到10点"
        - 区间结束早于前一个实体时顺延12小时，如"8点到5点"

        Args:
            entities (list): 按位置排序、均已解析的实体

        Returns:
            list: 原列表，实体被就地修改
        """
        prev = None
        for index, entity in enumerate(entities):
            if entity.is_end and prev is None:
                self.logger.debug(f"clear dangling end: {entity}")
                entity.boundary = Boundary.NONE
            elif entity.is_start and index == len(entities) - 1:
                self.logger.debug(f"clear dangling start: {entity}")
                entity.boundary = Boundary.NONE

            if entity.is_end and prev is not None:
                if prev.cycle is not None and entity.cycle is None:
                    entity.cycle = prev.cycle
                if prev.value > entity.value:
                    entity.value = entity.value + timedelta(hours=12)
                    self.logger.debug(f"end moved 12 hours forward: {entity}")
            prev = entity
        return entities
