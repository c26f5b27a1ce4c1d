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

import logging
from typing import Callable
from typing import Optional
from typing import Union

from google.genai import types
from pydantic import Field
from pydantic import field_validator
from typing_extensions import override
from typing_extensions import TypeAlias

from ..flows.llm_flows.auto_flow import AutoFlow
from ..flows.llm_flows.base_llm_flow import BaseLlmFlow
from ..flows.llm_flows.single_flow import SingleFlow
from ..models.base_llm import BaseLlm
from ..models.llm_request import LlmRequest
from ..tools.base_tool import BaseTool
from .base_agent import BaseAgent
from .base_agent import TransferFlags
from .invocation_context import InvocationContext

logger = logging.getLogger(__name__)


InstructionProvider: TypeAlias = Callable[[InvocationContext], str]


class LlmAgent(BaseAgent):
  """LLM-based Agent.

  An `LlmAgent` either answers the user itself or, when it has sub-agents or
  is allowed to transfer to its parent or peers, hands control to another
  agent by calling the `transfer_to_agent` tool.
  """

  model: Union[str, BaseLlm] = ''
  """The model to use for the agent.

  When not set, the agent will inherit the model from its ancestor.
  """

  instruction: Union[str, InstructionProvider] = ''
  """Instructions for the LLM model, guiding the agent's behavior."""

  global_instruction: Union[str, InstructionProvider] = ''
  """Instructions for all the agents in the entire agent tree.

  global_instruction ONLY takes effect in root agent.
  """

  tools: list[BaseTool] = Field(default_factory=list)
  """Tools available to this agent."""

  generate_content_config: Optional[types.GenerateContentConfig] = None
  """The additional content generation configurations.

  NOTE: not all fields are usable, e.g. tools must be configured via `tools`.

  For example: use this config to adjust model temperature, configure safety
  settings, etc.
  """

  # LLM-based agent transfer configs - Start
  disallow_transfer_to_parent: bool = False
  """Disallows LLM-controlled transferring to the parent agent."""
  disallow_transfer_to_peers: bool = False
  """Disallows LLM-controlled transferring to the peer agents."""
  # LLM-based agent transfer configs - End

  @override
  def transfer_flags(self) -> TransferFlags:
    return TransferFlags(
        disallow_transfer_to_parent=self.disallow_transfer_to_parent,
        disallow_transfer_to_peers=self.disallow_transfer_to_peers,
    )

  def canonical_model_name(self, ctx: InvocationContext) -> str:
    """The resolved model name, inherited from the nearest ancestor if unset.

    Raises:
      ValueError: If neither the agent nor any LlmAgent ancestor has a model.
    """
    agent: Optional[BaseAgent] = self
    while agent is not None:
      if isinstance(agent, LlmAgent) and agent.model:
        if isinstance(agent.model, BaseLlm):
          return agent.model.model
        return agent.model
      agent = ctx.find_parent(agent.name)
    raise ValueError(f'No model found for {self.name}.')

  def canonical_instruction(self, ctx: InvocationContext) -> str:
    """The resolved self.instruction field to construct instruction for this agent."""
    if isinstance(self.instruction, str):
      return self.instruction
    else:
      return self.instruction(ctx)

  def canonical_global_instruction(self, ctx: InvocationContext) -> str:
    """The resolved self.global_instruction field to construct global instruction."""
    if isinstance(self.global_instruction, str):
      return self.global_instruction
    else:
      return self.global_instruction(ctx)

  @property
  def llm_flow(self) -> BaseLlmFlow:
    if (
        self.disallow_transfer_to_parent
        and self.disallow_transfer_to_peers
        and not self.sub_agents
    ):
      return SingleFlow()
    else:
      return AutoFlow()

  async def build_llm_request_async(
      self, ctx: InvocationContext
  ) -> LlmRequest:
    """Assembles the request this agent sends to the model for the turn."""
    return await self.llm_flow.build_llm_request_async(ctx)

  @field_validator('generate_content_config', mode='after')
  @classmethod
  def __validate_generate_content_config(
      cls, generate_content_config: Optional[types.GenerateContentConfig]
  ) -> types.GenerateContentConfig:
    if not generate_content_config:
      return types.GenerateContentConfig()
    if generate_content_config.thinking_config:
      raise ValueError('Thinking config is not supported by LlmAgent.')
    if generate_content_config.tools:
      raise ValueError('All tools must be set via LlmAgent.tools.')
    if generate_content_config.system_instruction:
      raise ValueError(
          'System instruction must be set via LlmAgent.instruction.'
      )
    return generate_content_config


Agent: TypeAlias = LlmAgent
