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

from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional, Union

from dateutil import tz as dateutil_tz

from .parser import BetweenMerger
from .time_entity import TimeEntity
from .time_parser import TimeParser
from ..core.config import load_config
from ..core.logger import get_logger
from ..core.rule_catalogue import RuleCatalogue


class TimeEntityRecognizer:
    """
    中文时间实体识别器

    用规则目录在文本中找出时间片段，把首尾相接的片段合并为一个实体，
    再以上一个成功解析的实体时间为锚点依次解析，最后标记并修正区间边界。

    构造完成后只读，可在多线程间共享。

    Example:
        >>> recognizer = TimeEntityRecognizer()
        >>> recognizer.parse("明天下午3点到5点开会")
    """

    def __init__(self, rule_source=None, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            rule_source: 规则来源，见 RuleCatalogue；为None时取配置中的 rule_file，
                         仍为空则使用内置规则
            config (dict): 配置项，覆盖 recognizer.yaml 中的同名配置

        Raises:
            FileNotFoundError: 规则文件不存在
            ValueError: 规则无效，或默认时区无法识别
        """
        self.logger = get_logger(__name__)
        self.config = load_config()
        if config:
            self.config.update({k: v for k, v in config.items() if v is not None})

        if rule_source is None:
            rule_source = self.config.get("rule_file")
        self.catalogue = RuleCatalogue(rule_source)
        self.default_timezone = self._resolve_timezone(self.config["timezone"])

        self.time_parser = TimeParser()
        self.between_merger = BetweenMerger()

    def parse(
        self,
        text: str,
        timezone: Union[None, str, tzinfo] = None,
        relative: Optional[datetime] = None,
    ) -> List[TimeEntity]:
        """
        识别文本中的时间实体

        Args:
            text (str): 原始文本
            timezone: 时区名（如 "Asia/Shanghai"）或 tzinfo，为None时使用默认时区
            relative (datetime): 参考时间，为None时取该时区的当前时间；
                                 不带时区的时间视为该时区的本地时间

        Returns:
            list: 按位置排序的时间实体，无法解析的片段不会出现在结果中

        Raises:
            TypeError: text 不是字符串
            ValueError: 时区无法识别
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        tz = self._resolve_timezone(timezone) if timezone is not None else self.default_timezone
        relative = self._localize(relative, tz)

        entities = self._merge(text)
        self.logger.debug(f"merged entities: {[entity.original for entity in entities]}")

        result = []
        anchor = relative
        for entity in entities:
            value = self.time_parser.parse(entity, tz, anchor, relative)
            if value is None:
                continue
            anchor = value
            self.between_merger.mark(text, entity)
            result.append(entity)

        return self.between_merger.correct(result)

    def date_parse(
        self,
        text: str,
        timezone: Union[None, str, tzinfo] = None,
        relative: Optional[datetime] = None,
    ) -> List[datetime]:
        """只返回解析出的时间点"""
        return [entity.value for entity in self.parse(text, timezone, relative)]

    def _merge(self, text: str) -> List[TimeEntity]:
        """首尾相接的片段合并为同一个实体"""
        entities = []
        for span in self.catalogue.segment(text):
            last = entities[-1] if entities else None
            if last is not None and span.offset == last.end_offset:
                last.original += span.text
            else:
                entities.append(TimeEntity(span.text, span.offset))
        return entities

    @staticmethod
    def _resolve_timezone(timezone: Union[str, tzinfo]) -> tzinfo:
        if isinstance(timezone, tzinfo):
            return timezone
        resolved = dateutil_tz.gettz(timezone)
        if resolved is None:
            raise ValueError(f"unknown timezone: {timezone}")
        return resolved

    @staticmethod
    def _localize(relative: Optional[datetime], tz: tzinfo) -> datetime:
        if relative is None:
            return datetime.now(tz)
        if relative.tzinfo is None:
            return relative.replace(tzinfo=tz)
        return relative.astimezone(tz)
