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

"""Handles agent transfer for LLM flow.

Agent transfers are allowed in the following directions:

  1. From parent to sub-agent.
  2. From sub-agent to parent.
  3. From sub-agent to its peer agents.

Peer-agent transfers are only enabled when the parent agent is itself
flow-capable and the agent does not disallow transfer to peers.

Which agent actually runs the next turn is decided by the runner, using the
name recorded by the `transfer_to_agent` tool.
"""

from __future__ import annotations

import logging
from typing import Optional
from typing import TYPE_CHECKING

import jinja2
from typing_extensions import override

from ...errors import TemplateError
from ...tools.transfer_to_agent_tool import transfer_to_agent
from ._base_llm_processor import BaseLlmRequestProcessor

if TYPE_CHECKING:
  from ...agents.base_agent import BaseAgent
  from ...agents.invocation_context import InvocationContext
  from ...models.llm_request import LlmRequest

logger = logging.getLogger(__name__)

_TRANSFER_INSTRUCTION_TEMPLATE = """\
You have a list of other agents to transfer to:
{% for target in targets %}
Agent name: {{ target.name }}
Agent description: {{ target.description }}
{% endfor %}
If you are the best to answer the question according to your description, you
can answer it.
If another agent is better for answering the question according to its
description, call '{{ tool_name }}' function to transfer the
question to that agent. When transfering, do not generate any text other than
the function call.
{% if parent is not none %}
Your parent agent is {{ parent.name }}. If neither the other agents nor
you are best for answering the question according to the descriptions, transfer
to your parent agent. If you don't have parent agent, try answer by yourself.
{% endif %}
"""

# Compiled once and only read afterwards.
_transfer_instruction_template = jinja2.Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
).from_string(_TRANSFER_INSTRUCTION_TEMPLATE)


def is_flow_capable(agent: Optional[BaseAgent]) -> bool:
  """Returns whether LLM-controlled transfer applies to the agent.

  An agent is flow-capable if it exposes transfer flags and either has
  sub-agents or allows transfer to its parent or its peers.
  """
  if agent is None:
    return False
  flags = agent.transfer_flags()
  if flags is None:
    return False
  return (
      bool(agent.sub_agents)
      or not flags.disallow_transfer_to_parent
      or not flags.disallow_transfer_to_peers
  )


def get_transfer_targets(
    agent: BaseAgent, parent: Optional[BaseAgent]
) -> list[BaseAgent]:
  """Returns the agents the given agent may transfer control to.

  The order is: sub-agents in declared order, then the parent, then the peers
  in the parent's declared order.

  Args:
    agent: The active agent.
    parent: The parent of the active agent, or None for the root agent.

  Returns:
    The transfer targets. Empty when the agent can't transfer at all.
  """
  flags = agent.transfer_flags()
  if flags is None:
    return []

  targets = list(agent.sub_agents)

  if not flags.disallow_transfer_to_parent and parent is not None:
    targets.append(parent)

  if not flags.disallow_transfer_to_peers and is_flow_capable(parent):
    targets.extend(
        peer for peer in parent.sub_agents if peer.name != agent.name
    )

  return targets


def build_transfer_instructions(
    agent_name: str,
    parent: Optional[BaseAgent],
    targets: list[BaseAgent],
    tool_name: str,
) -> str:
  """Renders the instructions that tell the model how to transfer.

  Args:
    agent_name: The name of the active agent.
    parent: The parent to offer as the fallback target, or None when there is
      no parent or transfer to it is disallowed.
    targets: The transfer targets, listed in the given order.
    tool_name: The name of the tool the model calls to transfer.

  Returns:
    The instruction text. Same inputs always render the same text.

  Raises:
    TemplateError: If rendering fails.
  """
  try:
    return _transfer_instruction_template.render(
        agent_name=agent_name,
        parent=parent,
        targets=targets,
        tool_name=tool_name,
    )
  except jinja2.TemplateError as e:
    raise TemplateError(
        f'Failed to render transfer instructions for agent {agent_name}: {e}'
    ) from e


class _AgentTransferLlmRequestProcessor(BaseLlmRequestProcessor):
  """Agent transfer request processor."""

  @override
  async def run_async(
      self, invocation_context: InvocationContext, llm_request: LlmRequest
  ) -> None:
    agent = invocation_context.agent
    if not is_flow_capable(agent):
      return

    parent = invocation_context.find_parent(agent.name)
    targets = get_transfer_targets(agent, parent)
    if not targets:
      return

    if agent.transfer_flags().disallow_transfer_to_parent:
      parent = None

    logger.debug(
        'Agent %s can transfer to: %s',
        agent.name,
        [target.name for target in targets],
    )
    llm_request.append_instructions([
        build_transfer_instructions(
            agent.name, parent, targets, transfer_to_agent.name
        )
    ])
    llm_request.append_tools([transfer_to_agent])


request_processor = _AgentTransferLlmRequestProcessor()
