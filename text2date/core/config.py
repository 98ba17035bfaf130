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

"""
识别器配置加载

配置文件为YAML格式，默认位于 text2date/config/recognizer.yaml：

    timezone: Asia/Shanghai   # 默认时区
    rule_file:                # 规则文件路径，为空时使用内置规则
"""

import os
from typing import Any, Dict, Optional

import yaml

from .logger import get_logger

DEFAULT_CONFIG = {
    "timezone": "Asia/Shanghai",
    "rule_file": None,
}

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "../config/recognizer.yaml")

logger = get_logger(__name__)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    加载识别器配置，缺失的键使用默认值补齐

    Args:
        config_path: 配置文件路径，为None时使用内置配置

    Returns:
        dict: 配置字典
    """
    config = dict(DEFAULT_CONFIG)
    path = config_path or DEFAULT_CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        # 配置加载失败，使用默认值
        logger.warning(f"配置文件加载失败，使用默认配置: {path}, {e}")
        return config

    if not isinstance(loaded, dict):
        logger.warning(f"配置文件格式错误，使用默认配置: {path}")
        return config

    for key in DEFAULT_CONFIG:
        if loaded.get(key) is not None:
            config[key] = loaded[key]
    return config
