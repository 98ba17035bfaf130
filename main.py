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

import argparse
import json
import os
import sys
import time

from dateutil.parser import isoparse

from text2date import TimeEntityRecognizer

DEFAULT_BASE_TIME = "2025-01-21T08:00:00+08:00"


def compare_results(calculated, ground_truth):
    """比较计算结果和ground truth"""
    if len(calculated) != len(ground_truth):
        return False

    if calculated != ground_truth:
        return False

    return True


def benchmark(recognizer, input_file, timezone=None, show_all_cases=True, writer=print):
    """
    逐行读取JSONL文件并比较识别结果，每行格式：
    {"query": "...", "metadata": "2025-01-21T08:00:00+08:00", "datetime_result": ["..."]}
    """
    total_cases = 0
    success_cases = 0
    error_cases = 0

    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            if not line.strip():
                continue
            total_cases += 1
            try:
                data = json.loads(line)
                query = data["query"]
                base_time = isoparse(data.get("metadata", DEFAULT_BASE_TIME))
                gt = data["datetime_result"]

                _wall_start = time.time()
                entities = recognizer.parse(query, timezone, base_time)
                _wall_cost = time.time() - _wall_start
            except (ValueError, OverflowError, KeyError, TypeError) as e:
                error_cases += 1
                writer(f"Line {line_num}: ✗ Error | {e}")
                continue

            datetime_results = [entity.value.isoformat() for entity in entities]
            match = compare_results(datetime_results, gt)
            if match:
                success_cases += 1
                # 根据控制变量决定是否显示成功case信息
                if show_all_cases:
                    writer(f"Line {line_num}: ✓ Success | total={_wall_cost:.6f}s")
                    writer(f"  Query: {query}")
                    writer(f"  Entities: {entities}")
                    writer(f"  Result: {datetime_results}")
                    writer(f"  Ground Truth: {gt}")
            else:
                error_cases += 1
                # 错误case总是显示
                writer(f"Line {line_num}: ✗ Mismatch | total={_wall_cost:.6f}s")
                writer(f"  Query: {query}")
                writer(f"  Entities: {entities}")
                writer(f"  Calculated: {datetime_results}")
                writer(f"  Ground Truth: {gt}")

    # 输出统计信息
    writer("\n" + "=" * 80)
    writer("BENCHMARK SUMMARY")
    writer("=" * 80)
    writer(f"Total test cases: {total_cases}")
    if total_cases:
        writer(f"Success cases: {success_cases} ({success_cases/total_cases*100:.2f}%)")
        writer(f"Error cases: {error_cases} ({error_cases/total_cases*100:.2f}%)")


def main():  # noqa: C901
    """命令行入口：解析单条文本，或批量比较JSONL文件中的识别结果"""
    # 控制--file模式时是否显示所有case信息（包括成功和失败）
    SHOW_ALL_CASES = False

    parser = argparse.ArgumentParser(
        description="text2date - 中文时间实体识别工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例：
  # 解析单条文本
  python main.py --text "明天上午9点到11点开会"

  # 指定基准时间与时区
  python main.py --text "20分钟后" --base_time "2024-01-01T10:00:00" --timezone Asia/Shanghai

  # 批量处理文件并保存结果
  python main.py --file cases.jsonl --output result.txt

  # 使用自定义规则文件
  python main.py --text "明天" --rule_file my_time.regex
        """,
    )
    parser.add_argument("--text", help="Input text string for time extraction")
    parser.add_argument("--file", help="Path to JSONL file for batch comparison")
    parser.add_argument("--output", help="Path to output file for saving --file results")
    parser.add_argument("--rule_file", help="Path to a custom rule catalogue")
    parser.add_argument("--timezone", help="IANA timezone name, e.g. Asia/Shanghai")
    parser.add_argument(
        "--base_time",
        type=str,
        default=None,
        help="Base time for relative time calculations (ISO 8601 format), defaults to now",
    )
    args = parser.parse_args()

    # 参数验证：--text 与 --file 必须且只能提供一个
    if bool(args.text) == bool(args.file):
        print("错误：必须提供 --text 或 --file 参数之一，且不能同时使用\n")
        parser.print_help()
        return 1

    if args.output and not args.file:
        print("错误：--output 参数只能与 --file 参数一起使用\n")
        parser.print_help()
        return 1

    if args.file and not os.path.exists(args.file):
        print(f"错误：文件不存在: {args.file}\n")
        return 1

    try:
        recognizer = TimeEntityRecognizer(rule_source=args.rule_file)
        base_time = isoparse(args.base_time) if args.base_time else None
    except (OSError, ValueError) as e:
        print(f"错误：{e}\n")
        return 1

    start_time = time.time()
    if args.text:
        try:
            entities = recognizer.parse(args.text, args.timezone, base_time)
        except ValueError as e:
            print(f"错误：{e}\n")
            return 1

        print(f"Query: {args.text}")
        print(f"BaseTime: {args.base_time or 'now'}")
        for entity in entities:
            print(json.dumps(entity.to_dict(), ensure_ascii=False))
    elif args.output:
        # 同时输出到控制台和文件
        with open(args.output, "w", encoding="utf-8") as f:

            def writer(msg):
                try:
                    print(msg)
                except BrokenPipeError:
                    # 忽略管道中断错误（如使用 head 命令时）
                    pass
                f.write(msg + "\n")

            benchmark(recognizer, args.file, args.timezone, show_all_cases=SHOW_ALL_CASES, writer=writer)
    else:
        benchmark(recognizer, args.file, args.timezone, show_all_cases=SHOW_ALL_CASES)

    print(f"Total time: {time.time() - start_time}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
