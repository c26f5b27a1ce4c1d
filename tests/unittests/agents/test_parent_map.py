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

import pytest

from agent_handoff.agents.base_agent import BaseAgent
from agent_handoff.agents.invocation_context import InvocationContext
from agent_handoff.agents.llm_agent import Agent
from agent_handoff.agents.parent_map import build_parent_map


def _tree():
  a1 = Agent(name='a1')
  a = Agent(name='a', sub_agents=[a1])
  b = BaseAgent(name='b')
  root = Agent(name='root', sub_agents=[a, b])
  return root, a, a1, b


def test_build_parent_map():
  root, a, a1, b = _tree()

  parents = build_parent_map(root)

  assert parents == {'a': root, 'a1': a, 'b': root}
  assert 'root' not in parents


def test_build_parent_map_rejects_duplicate_names_across_tree():
  root = Agent(
      name='root',
      sub_agents=[
          Agent(name='a', sub_agents=[Agent(name='x')]),
          Agent(name='b', sub_agents=[Agent(name='x')]),
      ],
  )

  with pytest.raises(ValueError, match='`x` is not unique'):
    build_parent_map(root)


def test_build_parent_map_rejects_root_name_reuse():
  root = Agent(name='root', sub_agents=[Agent(name='root')])

  with pytest.raises(ValueError):
    build_parent_map(root)


def test_invocation_context_root_defaults_to_agent():
  agent = Agent(name='a')

  ctx = InvocationContext(agent=agent)

  assert ctx.root_agent is agent
  assert ctx.invocation_id.startswith('e-')
  assert ctx.find_parent('a') is None


def test_invocation_context_parent_map_is_per_context():
  root, a, a1, _ = _tree()
  ctx = InvocationContext(agent=a1, root_agent=root)

  assert ctx.find_parent('a1') is a
  assert ctx.parent_map is ctx.parent_map

  # A new turn sees the reconfigured hierarchy.
  root.sub_agents.remove(a)
  new_root = Agent(name='new_root', sub_agents=[a])
  next_ctx = InvocationContext(agent=a, root_agent=new_root)

  assert next_ctx.find_parent('a') is new_root
  assert ctx.find_parent('a') is root
