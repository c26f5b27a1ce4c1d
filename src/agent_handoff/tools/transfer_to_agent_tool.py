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

from collections.abc import Mapping
from typing import Any
from typing import TYPE_CHECKING

from google.genai import types
from typing_extensions import override

from ..errors import ArgumentError
from .base_tool import BaseTool

if TYPE_CHECKING:
  from .tool_context import ToolContext


class TransferToAgentTool(BaseTool):
  """Transfer the current request to another agent.

  This tool hands off control to a different named agent. It holds no state:
  the chosen agent is written into `tool_context.actions.transfer_to_agent`,
  and the runner decides what happens next.
  """

  def __init__(self):
    super().__init__(
        name='transfer_to_agent',
        description=(
            'Transfer the question to another agent.\nThis tool hands off'
            " control to another agent when it's more suitable to answer the"
            " user's question according to the agent's description."
        ),
    )

  @override
  def _get_declaration(self) -> types.FunctionDeclaration:
    return types.FunctionDeclaration(
        name=self.name,
        description=self.description,
        parameters=types.Schema(
            type=types.Type.OBJECT,
            properties={
                'agent_name': types.Schema(
                    type=types.Type.STRING,
                    description='the agent name to transfer to',
                ),
            },
            required=['agent_name'],
        ),
    )

  @override
  async def run_async(
      self, *, args: Any, tool_context: ToolContext
  ) -> dict[str, Any]:
    """Records the target agent of the transfer.

    Args:
      args: The LLM-filled arguments, a mapping with a non-empty `agent_name`.
      tool_context: The current ToolContext, whose `actions.transfer_to_agent`
        field will be set.

    Returns:
      An empty dict.

    Raises:
      ArgumentError: If the arguments are missing or malformed.
    """
    if args is None:
      raise ArgumentError('missing argument')
    if not isinstance(args, Mapping):
      raise ArgumentError(f'unexpected args type: {type(args).__name__}')
    agent_name = args.get('agent_name')
    if not isinstance(agent_name, str) or not agent_name:
      raise ArgumentError(f'empty agent_name: {dict(args)!r}')
    tool_context.actions.transfer_to_agent = agent_name
    return {}


transfer_to_agent = TransferToAgentTool()
