# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

import regex as re
from typing import Optional


_DIGIT_MAP = {
    "零": 0,
    "〇": 0,
    "一": 1,
    "二": 2,
    "两": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}

_UNIT_MAP = {
    "十": 10,
    "百": 100,
    "千": 1000,
}

# 时间表达式中出现的中文数字串
CHINESE_NUMBER_PATTERN = re.compile("[零〇一二两三四五六七八九十百千]+")


def convert_chinese_number(text: str) -> Optional[int]:
    """将中文数字串转换为整数。

    - "二〇二四" -> 2024（逐字拼接）
    - "二十三" -> 23（单位解析）
    - "两千零二十四" -> 2024
    无法识别时返回None
    """
    if not text:
        return None
    if any(ch not in _DIGIT_MAP and ch not in _UNIT_MAP for ch in text):
        return None
    if any(ch in _UNIT_MAP for ch in text):
        return _convert_with_units(text)
    return int("".join(str(_DIGIT_MAP[ch]) for ch in text))


def _convert_with_units(text: str) -> int:
    # 按 千/百/十 乘加，单位前省略的数字视为一：十五 -> 15
    total = 0
    pending = 0
    for ch in text:
        if ch in _DIGIT_MAP:
            pending = _DIGIT_MAP[ch]
            continue
        total += (pending or 1) * _UNIT_MAP[ch]
        pending = 0
    return total + pending


def replace_chinese_numbers(text: str) -> str:
    """把文本中每一段中文数字替换为阿拉伯数字，如 "下午三点十五" -> "下午3点15"。"""

    def _replace(match):
        value = convert_chinese_number(match.group())
        return match.group() if value is None else str(value)

    return CHINESE_NUMBER_PATTERN.sub(_replace, text)
