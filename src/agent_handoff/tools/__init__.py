# Copyright 2025 Google LLC
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

from .base_tool import BaseTool
from .google_search_tool import google_search
from .google_search_tool import GoogleSearchTool
from .tool_context import ToolContext
from .transfer_to_agent_tool import transfer_to_agent
from .transfer_to_agent_tool import TransferToAgentTool

__all__ = [
    'BaseTool',
    'google_search',
    'GoogleSearchTool',
    'ToolContext',
    'transfer_to_agent',
    'TransferToAgentTool',
]
