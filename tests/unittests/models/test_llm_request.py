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

from agent_handoff.errors import ArgumentError
from agent_handoff.errors import ConflictError
from agent_handoff.errors import ToolNameError
from agent_handoff.errors import UnsupportedError
from agent_handoff.models.llm_request import LlmRequest

from .. import testing_utils


def test_append_tools_registers_tools_and_declarations():
  llm_request = LlmRequest()
  tool_a = testing_utils.DeclaredTool('a')
  tool_b = testing_utils.DeclaredTool('b')

  llm_request.append_tools([tool_a, tool_b])

  assert llm_request.tools_dict == {'a': tool_a, 'b': tool_b}
  # One entry per tool, declarations are never merged.
  assert [
      [d.name for d in tool.function_declarations]
      for tool in llm_request.config.tools
  ] == [['a'], ['b']]


def test_append_tools_duplicate_keeps_earlier_tools():
  llm_request = LlmRequest()
  tools = [
      testing_utils.DeclaredTool('a'),
      testing_utils.DeclaredTool('b'),
      testing_utils.DeclaredTool('a'),
  ]

  with pytest.raises(ConflictError, match="duplicate tool: 'a'"):
    llm_request.append_tools(tools)

  assert set(llm_request.tools_dict) == {'a', 'b'}
  assert llm_request.tools_dict['a'] is tools[0]
  assert len(llm_request.config.tools) == 2


def test_append_tools_duplicate_across_calls():
  llm_request = LlmRequest()
  llm_request.append_tools([testing_utils.PlainTool('a')])

  with pytest.raises(ConflictError):
    llm_request.append_tools([testing_utils.PlainTool('a')])


@pytest.mark.parametrize('bad_tool', [None, testing_utils.PlainTool('')])
def test_append_tools_nameless_tool(bad_tool):
  llm_request = LlmRequest()

  with pytest.raises(ToolNameError, match=r'tools\[1\] tool without name'):
    llm_request.append_tools([testing_utils.PlainTool('a'), bad_tool])

  assert list(llm_request.tools_dict) == ['a']


def test_tool_name_error_is_argument_error():
  with pytest.raises(ArgumentError):
    LlmRequest().append_tools([None])


def test_append_tools_without_declaration_keeps_config_unset():
  llm_request = LlmRequest()

  llm_request.append_tools([testing_utils.PlainTool('plain')])

  assert 'plain' in llm_request.tools_dict
  assert llm_request.config is None


def test_append_tools_appends_after_existing_config_tools():
  existing = types.Tool(google_search=types.GoogleSearch())
  llm_request = LlmRequest(
      config=types.GenerateContentConfig(tools=[existing], temperature=0.1)
  )

  llm_request.append_tools([testing_utils.DeclaredTool('a')])

  assert llm_request.config.tools[0] == existing
  assert llm_request.config.tools[1].function_declarations[0].name == 'a'
  assert llm_request.config.temperature == 0.1


def test_append_instructions():
  llm_request = LlmRequest()

  llm_request.append_instructions(['first'])
  llm_request.append_instructions(['second', 'third'])

  assert llm_request.config.system_instruction == 'first\n\nsecond\n\nthird'


def test_append_instructions_to_content_system_instruction():
  llm_request = LlmRequest(
      config=types.GenerateContentConfig(
          system_instruction=types.Content(parts=[types.Part(text='x')])
      )
  )

  llm_request.append_instructions(['first', 'second'])

  system_instruction = llm_request.config.system_instruction
  assert isinstance(system_instruction, types.Content)
  assert [part.text for part in system_instruction.parts] == [
      'x',
      'first\n\nsecond',
  ]


def test_append_instructions_to_content_without_parts():
  llm_request = LlmRequest(
      config=types.GenerateContentConfig(
          system_instruction=types.Content(role='system')
      )
  )

  llm_request.append_instructions(['first'])

  parts = llm_request.config.system_instruction.parts
  assert [part.text for part in parts] == ['first']


def test_append_instructions_unsupported_system_instruction():
  llm_request = LlmRequest(
      config=types.GenerateContentConfig(
          system_instruction=types.Part(text='x')
      )
  )

  with pytest.raises(UnsupportedError, match='of type Part'):
    llm_request.append_instructions(['first'])


def test_append_instructions_empty_is_noop():
  llm_request = LlmRequest()

  llm_request.append_instructions([])

  assert llm_request.config is None


def test_tools_dict_is_not_serialized():
  llm_request = LlmRequest(model='gemini-2.0-flash')
  llm_request.append_tools([testing_utils.PlainTool('a')])

  assert 'tools_dict' not in llm_request.model_dump()
