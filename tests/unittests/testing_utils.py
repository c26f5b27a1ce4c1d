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

"""Helpers shared by the unit tests."""

from typing import AsyncGenerator
from typing import Optional

from google.genai import types
from typing_extensions import override

from agent_handoff.agents.base_agent import BaseAgent
from agent_handoff.agents.invocation_context import InvocationContext
from agent_handoff.models.base_llm import BaseLlm
from agent_handoff.models.llm_request import LlmRequest
from agent_handoff.tools.base_tool import BaseTool
from agent_handoff.tools.tool_context import ToolContext


class MockModel(BaseLlm):
  """A model that records requests and never calls a provider."""

  model: str = 'gemini-2.0-flash'

  requests: list[LlmRequest] = []

  @override
  async def generate_content_async(
      self, llm_request: LlmRequest, stream: bool = False
  ) -> AsyncGenerator[types.GenerateContentResponse, None]:
    self.requests.append(llm_request)
    yield types.GenerateContentResponse()


class DeclaredTool(BaseTool):
  """A tool with a function declaration."""

  def __init__(self, name: str, description: str = 'a declared tool'):
    super().__init__(name=name, description=description)

  @override
  def _get_declaration(self) -> types.FunctionDeclaration:
    return types.FunctionDeclaration(
        name=self.name, description=self.description
    )


class PlainTool(BaseTool):
  """A tool without a function declaration."""

  def __init__(self, name: str):
    super().__init__(name=name, description='a plain tool')


def create_invocation_context(
    agent: BaseAgent, root_agent: Optional[BaseAgent] = None
) -> InvocationContext:
  return InvocationContext(
      invocation_id='test_id', agent=agent, root_agent=root_agent
  )


def create_tool_context(
    agent: BaseAgent, root_agent: Optional[BaseAgent] = None
) -> ToolContext:
  return ToolContext(create_invocation_context(agent, root_agent))
