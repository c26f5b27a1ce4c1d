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

from typing import NamedTuple
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class TransferFlags(NamedTuple):
  """Transfer suppression flags exposed by agents that support auto flow."""

  disallow_transfer_to_parent: bool = False
  disallow_transfer_to_peers: bool = False


class BaseAgent(BaseModel):
  """Base class for all agents in the agent tree.

  Agents form a tree owned top-down: an agent knows its sub-agents but holds
  no reference to its parent. Parents are resolved per turn, see
  `agent_handoff.agents.parent_map`.
  """

  model_config = ConfigDict(
      arbitrary_types_allowed=True,
      extra='forbid',
  )

  name: str
  """The agent's name.

  Agent name must be a Python identifier and unique within the agent tree.
  Agent name cannot be "user", since it's reserved for end-user's input.
  """

  description: str = ''
  """Description about the agent's capability.

  The model uses this to determine whether to delegate control to the agent.
  One-line description is enough and preferred.
  """

  sub_agents: list[BaseAgent] = Field(default_factory=list)
  """The sub-agents of this agent, in declared order."""

  def transfer_flags(self) -> Optional[TransferFlags]:
    """Returns the transfer flags, or None if the agent can't transfer.

    Agents that are not driven by a model never take part in LLM-controlled
    transfer and return None.
    """
    return None

  def find_agent(self, name: str) -> Optional[BaseAgent]:
    """Finds the agent with the given name in this agent and its descendants."""
    if self.name == name:
      return self
    return self.find_sub_agent(name)

  def find_sub_agent(self, name: str) -> Optional[BaseAgent]:
    """Finds the agent with the given name in this agent's descendants."""
    for sub_agent in self.sub_agents:
      if result := sub_agent.find_agent(name):
        return result
    return None

  @field_validator('name', mode='after')
  @classmethod
  def __validate_name(cls, value: str) -> str:
    if not value.isidentifier():
      raise ValueError(
          f'Found invalid agent name: `{value}`.'
          ' Agent name must be a valid identifier. It should start with a'
          ' letter (a-z, A-Z) or an underscore (_), and can only contain'
          ' letters, digits (0-9), and underscores.'
      )
    if value == 'user':
      raise ValueError(
          "Agent name cannot be `user`. `user` is reserved for end-user's"
          ' input.'
      )
    return value

  @field_validator('sub_agents', mode='after')
  @classmethod
  def __validate_sub_agents(cls, value: list[BaseAgent]) -> list[BaseAgent]:
    seen = set()
    for sub_agent in value:
      if sub_agent.name in seen:
        raise ValueError(f'Duplicate sub-agent name: `{sub_agent.name}`.')
      seen.add(sub_agent.name)
    return value
