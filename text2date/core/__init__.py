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
时间识别核心模块

与具体语言无关的基础设施。

主要组件:
- RuleCatalogue: 规则目录，加载并编译时间表达式规则
- 中文数字转换: 将中文数字串转换为阿拉伯数字
- 日志与配置: 统一的日志器获取和YAML配置加载
"""

from .rule_catalogue import RuleCatalogue, RawSpan
from .chinese_number_converter import convert_chinese_number, replace_chinese_numbers
from .config import load_config
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "RuleCatalogue",
    "RawSpan",
    "convert_chinese_number",
    "replace_chinese_numbers",
    "load_config",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
