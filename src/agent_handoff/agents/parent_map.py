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

"""Derives the name -> parent lookup for an agent tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from .base_agent import BaseAgent

logger = logging.getLogger(__name__)

ParentMap = dict[str, 'BaseAgent']


def build_parent_map(root_agent: BaseAgent) -> ParentMap:
  """Walks the agent tree once and maps each agent name to its parent.

  The root agent has no entry. The hierarchy may be reconfigured between
  turns, so callers should build a fresh map for every turn.

  Args:
    root_agent: The root of the agent tree.

  Returns:
    A dict from agent name to parent agent.

  Raises:
    ValueError: If two agents in the tree share the same name.
  """
  parents: ParentMap = {}
  seen = {root_agent.name}
  stack = [root_agent]
  while stack:
    agent = stack.pop()
    for sub_agent in agent.sub_agents:
      if sub_agent.name in seen:
        raise ValueError(
            f'Agent name `{sub_agent.name}` is not unique in the agent tree'
            f' rooted at `{root_agent.name}`.'
        )
      seen.add(sub_agent.name)
      parents[sub_agent.name] = agent
      stack.append(sub_agent)
  logger.debug(
      'Built parent map for %d agents under %s', len(seen), root_agent.name
  )
  return parents
