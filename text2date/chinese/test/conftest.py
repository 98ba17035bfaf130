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

from datetime import datetime

import pytest
from dateutil import tz

from text2date import TimeEntityRecognizer


@pytest.fixture(scope="session")
def shanghai():
    return tz.gettz("Asia/Shanghai")


@pytest.fixture
def relative(shanghai):
    # 2024-01-01 是周一
    return datetime(2024, 1, 1, 10, 0, 0, tzinfo=shanghai)


@pytest.fixture(scope="session")
def recognizer():
    return TimeEntityRecognizer()
