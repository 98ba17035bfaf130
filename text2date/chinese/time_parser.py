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

from datetime import datetime, tzinfo
from typing import Optional

from .normalizer import Normalizer
from .parser import AbsoluteParser, DeltaParser, RelativeParser, RecurringParser
from .rules import PreProcessor
from .time_entity import TimeEntity
from ..core.logger import get_logger


class TimeParser:
    """将识别出的实体文本解析为实际的时间点"""

    def __init__(self):
        """
        初始化各字段解析器
        """
        self.logger = get_logger(__name__)
        self.preprocessor = PreProcessor()
        self.absolute_parser = AbsoluteParser()
        self.recurring_parser = RecurringParser()
        self.delta_parser = DeltaParser()
        self.relative_parser = RelativeParser()
        self.normalizer = Normalizer()

    def parse(
        self,
        entity: TimeEntity,
        tz: tzinfo,
        anchor: datetime,
        relative: datetime,
    ) -> Optional[datetime]:
        """
        解析单个实体并把结果写回实体

        依次执行：文本归一化、绝对字段抽取、周期识别、时间增量、相对时间、
        校验、顺延补全、拼装。

        Args:
            entity (TimeEntity): 待解析的实体
            tz (tzinfo): 目标时区
            anchor (datetime): 锚点，上一个成功解析的实体时间或参考时间
            relative (datetime): 调用方给出的参考时间

        Returns:
            datetime: 解析出的时间点，实体被拒绝时返回None
        """
        text = self.preprocessor.process(entity.original)

        fields = self.absolute_parser.parse(text)
        cycle = self.recurring_parser.parse(text)
        if cycle is not None:
            entity.cycle = cycle

        try:
            fields.update(self.delta_parser.parse(text, anchor))
            fields.update(self.relative_parser.parse(text, anchor))
        except (ValueError, OverflowError) as e:
            # 偏移后超出 datetime 可表示的范围，如"3000年前"
            self.logger.debug(f"reject {entity.original!r}: {e}")
            return None

        if not self.normalizer.validate(fields):
            self.logger.debug(f"reject {entity.original!r}: {fields}")
            return None

        fields = self.normalizer.normalize(fields, text, relative, anchor)
        value = self.normalizer.assemble(fields, tz)
        if value is None:
            return None

        entity.value = value
        entity.date_only = self.normalizer.is_date_only(fields)
        self.logger.debug(f"resolved {entity.original!r} -> {fields}")
        return value
