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

"""Handles function calls for LLM flow."""

from __future__ import annotations

import logging
from typing import Optional
from typing import TYPE_CHECKING

from google.genai import types

from ...errors import UnsupportedError
from ...events.event_actions import EventActions
from ...tools.tool_context import ToolContext

if TYPE_CHECKING:
  from ...agents.invocation_context import InvocationContext
  from ...tools.base_tool import BaseTool

logger = logging.getLogger(__name__)


async def handle_function_call_async(
    invocation_context: InvocationContext,
    function_call: types.FunctionCall,
    tools_dict: dict[str, BaseTool],
    actions: Optional[EventActions] = None,
) -> tuple[types.Part, EventActions]:
  """Runs the tool the model asked for.

  Args:
    invocation_context: The invocation context of the turn.
    function_call: The function call returned by the model.
    tools_dict: The tools registered in the request, keyed by name.
    actions: The event actions of the turn. A new one is created if unset.

  Returns:
    The function response part and the actions the tool set, e.g. the agent
    to transfer to.

  Raises:
    UnsupportedError: If no tool with the called name is registered.
  """
  tool = tools_dict.get(function_call.name)
  if tool is None:
    raise UnsupportedError(
        f'Function {function_call.name} is not found in the tools_dict.'
    )

  if actions is None:
    actions = EventActions()
  tool_context = ToolContext(
      invocation_context,
      function_call_id=function_call.id,
      actions=actions,
  )
  logger.debug(
      'Calling tool %s with id %s', tool.name, tool_context.function_call_id
  )
  function_response = await tool.run_async(
      args=function_call.args, tool_context=tool_context
  )

  # Function responses must be dicts.
  if not isinstance(function_response, dict):
    function_response = {'result': function_response}

  part = types.Part(
      function_response=types.FunctionResponse(
          id=tool_context.function_call_id,
          name=tool.name,
          response=function_response,
      )
  )
  return part, actions
