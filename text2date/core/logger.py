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
统一日志系统配置模块
提供全局的日志配置和获取接口
"""

import logging
import os
import sys
from typing import Optional


LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# 简化格式（用于生产环境）
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# 只对本库的日志器生效，不改动宿主程序的根日志器
ROOT_LOGGER_NAME = "text2date"

_configured = False


def setup_logging(
    level: str = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
):
    """
    配置 text2date 的日志系统

    Args:
        level: 日志级别，可选值: DEBUG, INFO, WARNING, ERROR, CRITICAL
               如果为None，从环境变量TEXT2DATE_LOG_LEVEL读取，默认为WARNING
        log_file: 日志文件路径，如果提供则同时输出到文件
        format_string: 日志格式字符串
        console_output: 是否输出到控制台
    """
    global _configured

    if _configured:
        return

    if level is None:
        level = os.environ.get("TEXT2DATE_LOG_LEVEL", "WARNING")
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    formatter = logging.Formatter(format_string)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    获取指定名称的日志器

    Args:
        name: 日志器名称，通常使用 __name__

    Returns:
        logging.Logger: 配置好的日志器实例
    """
    if not _configured:
        auto_setup()

    return logging.getLogger(name)


def auto_setup():
    """
    根据环境变量自动配置日志系统

    环境变量:
        TEXT2DATE_LOG_LEVEL: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        TEXT2DATE_LOG_FILE: 日志文件路径
        TEXT2DATE_LOG_FORMAT: 日志格式 (default, simple)
    """
    log_level = os.environ.get("TEXT2DATE_LOG_LEVEL", "WARNING")
    log_file = os.environ.get("TEXT2DATE_LOG_FILE", None)
    log_format = os.environ.get("TEXT2DATE_LOG_FORMAT", "default")

    format_string = SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT

    setup_logging(level=log_level, log_file=log_file, format_string=format_string)
