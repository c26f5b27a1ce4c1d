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

from functools import cached_property
from typing import Optional
import uuid

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from .base_agent import BaseAgent
from .parent_map import build_parent_map
from .parent_map import ParentMap


def new_invocation_context_id() -> str:
  return 'e-' + str(uuid.uuid4())


class InvocationContext(BaseModel):
  """The state of one turn of an agent.

  An invocation context is created for exactly one turn and is never shared
  between turns. Everything derived from the agent tree, such as the parent
  map, is computed at most once per context.
  """

  model_config = ConfigDict(
      arbitrary_types_allowed=True,
      extra='forbid',
  )

  invocation_id: str = Field(default_factory=new_invocation_context_id)
  """The id of this invocation context."""

  agent: BaseAgent
  """The agent that is active for this turn."""

  root_agent: Optional[BaseAgent] = None
  """The root of the agent tree. Defaults to `agent`."""

  @model_validator(mode='after')
  def __default_root_agent(self) -> InvocationContext:
    if self.root_agent is None:
      self.root_agent = self.agent
    return self

  @cached_property
  def parent_map(self) -> ParentMap:
    """The agent name -> parent agent lookup for this turn."""
    return build_parent_map(self.root_agent)

  def find_parent(self, agent_name: str) -> Optional[BaseAgent]:
    """Returns the parent of the named agent, or None for the root."""
    return self.parent_map.get(agent_name)
