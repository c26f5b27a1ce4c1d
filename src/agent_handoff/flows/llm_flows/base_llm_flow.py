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

from __future__ import annotations

from abc import ABC
import logging
from typing import TYPE_CHECKING

from ...models.llm_request import LlmRequest
from ...tools.tool_context import ToolContext

if TYPE_CHECKING:
  from ...agents.invocation_context import InvocationContext
  from ._base_llm_processor import BaseLlmRequestProcessor

logger = logging.getLogger(__name__)


class BaseLlmFlow(ABC):
  """A basic flow that prepares the LLM request for one turn.

  Request processors run in order, then every tool of the agent gets to
  process the request. Each stage depends on what the previous one wrote,
  so the stages never run concurrently.
  """

  def __init__(self):
    self.request_processors: list[BaseLlmRequestProcessor] = []

  async def preprocess_async(
      self, invocation_context: InvocationContext, llm_request: LlmRequest
  ) -> None:
    """Runs all request processors and tools against the request.

    Any error aborts the assembly of the request and is raised to the caller.
    """
    from ...agents.llm_agent import LlmAgent

    agent = invocation_context.agent

    for processor in self.request_processors:
      await processor.run_async(invocation_context, llm_request)

    if not isinstance(agent, LlmAgent):
      return

    # Run processors for tools.
    for tool in agent.tools:
      tool_context = ToolContext(invocation_context)
      await tool.process_llm_request(
          tool_context=tool_context, llm_request=llm_request
      )

  async def build_llm_request_async(
      self, invocation_context: InvocationContext
  ) -> LlmRequest:
    """Builds the request for the active agent of the invocation."""
    llm_request = LlmRequest()
    await self.preprocess_async(invocation_context, llm_request)
    logger.debug(
        'Built request for agent %s with tools %s',
        invocation_context.agent.name,
        list(llm_request.tools_dict),
    )
    return llm_request
