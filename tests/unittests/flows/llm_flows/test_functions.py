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

from google.genai import types
import pytest

from agent_handoff.agents.llm_agent import Agent
from agent_handoff.errors import ArgumentError
from agent_handoff.errors import UnsupportedError
from agent_handoff.events.event_actions import EventActions
from agent_handoff.flows.llm_flows.functions import handle_function_call_async
from agent_handoff.tools import google_search
from agent_handoff.tools import transfer_to_agent

from ... import testing_utils


@pytest.fixture
def invocation_context():
  child = Agent(name='child')
  root = Agent(name='root', model='gemini-2.0-flash', sub_agents=[child])
  return testing_utils.create_invocation_context(root)


@pytest.mark.asyncio
async def test_transfer_function_call(invocation_context):
  function_call = types.FunctionCall(
      id='call-1', name='transfer_to_agent', args={'agent_name': 'child'}
  )
  actions = EventActions()

  part, result_actions = await handle_function_call_async(
      invocation_context,
      function_call,
      {transfer_to_agent.name: transfer_to_agent},
      actions,
  )

  assert result_actions is actions
  assert actions.transfer_to_agent == 'child'
  assert part.function_response.id == 'call-1'
  assert part.function_response.name == 'transfer_to_agent'
  assert part.function_response.response == {}


@pytest.mark.asyncio
async def test_function_call_without_id_gets_generated_id(invocation_context):
  function_call = types.FunctionCall(
      name='transfer_to_agent', args={'agent_name': 'child'}
  )

  part, actions = await handle_function_call_async(
      invocation_context,
      function_call,
      {transfer_to_agent.name: transfer_to_agent},
  )

  assert part.function_response.id
  assert actions.transfer_to_agent == 'child'


@pytest.mark.asyncio
async def test_function_call_with_bad_args(invocation_context):
  function_call = types.FunctionCall(name='transfer_to_agent', args={})
  actions = EventActions()

  with pytest.raises(ArgumentError):
    await handle_function_call_async(
        invocation_context,
        function_call,
        {transfer_to_agent.name: transfer_to_agent},
        actions,
    )

  assert actions.transfer_to_agent is None


@pytest.mark.asyncio
async def test_unknown_function(invocation_context):
  function_call = types.FunctionCall(name='missing', args={})

  with pytest.raises(UnsupportedError, match='missing is not found'):
    await handle_function_call_async(invocation_context, function_call, {})


@pytest.mark.asyncio
async def test_built_in_tool_can_not_run(invocation_context):
  function_call = types.FunctionCall(name='google_search', args={})

  with pytest.raises(UnsupportedError, match='runs internally'):
    await handle_function_call_async(
        invocation_context,
        function_call,
        {google_search.name: google_search},
    )
