#
# Copyright (c) 2016 Intel Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
Common Pytest fixtures.
"""

from concurrent.futures import ThreadPoolExecutor

from mock import MagicMock
from testfixtures.popen import MockPopen
import pytest


@pytest.fixture
def mock_popen(monkeypatch):
    mock_popen = MockPopen()
    monkeypatch.setattr('cfclient.tokens.Popen', mock_popen)
    yield mock_popen
    assert mock_popen.mock.method_calls


@pytest.fixture
def executor():
    executor = ThreadPoolExecutor(max_workers=2)
    yield executor
    executor.shutdown(wait=True)


@pytest.fixture
def mock_session():
    return MagicMock()
