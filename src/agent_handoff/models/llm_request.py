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
from typing import Optional

from google.genai import types
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from ..errors import ConflictError
from ..errors import ToolNameError
from ..errors import UnsupportedError
from ..tools.base_tool import BaseTool

logger = logging.getLogger(__name__)


class LlmRequest(BaseModel):
  """LLM request class that allows passing in tools and system instructions to
  the model.

  A request is owned by the pipeline assembling one turn and must not be
  mutated by two turns concurrently.

  Attributes:
    model: The model name.
    contents: The contents to send to the model.
    config: Additional config for the generate content request. Its `tools`
      list holds the declarations sent to the model.
    tools_dict: The tools registered for this request, keyed by name.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  model: Optional[str] = None
  """The model name."""

  contents: list[types.Content] = Field(default_factory=list)
  """The contents to send to the model."""

  config: Optional[types.GenerateContentConfig] = None
  """Additional config for the generate content request.

  tools in generate_content_config should not be set.
  """

  tools_dict: dict[str, BaseTool] = Field(default_factory=dict, exclude=True)

  def append_instructions(self, instructions: list[str]) -> None:
    """Appends instructions to the system instruction.

    A string system instruction is extended in place. A `types.Content`
    system instruction gets the instructions as one more text part.

    Args:
      instructions: The instructions to append.

    Raises:
      UnsupportedError: If the existing system instruction is neither a
        string nor a `types.Content`.
    """
    if not instructions:
      return
    self.config = self.config or types.GenerateContentConfig()
    text = '\n\n'.join(instructions)
    system_instruction = self.config.system_instruction
    if not system_instruction:
      self.config.system_instruction = text
    elif isinstance(system_instruction, str):
      self.config.system_instruction = system_instruction + '\n\n' + text
    elif isinstance(system_instruction, types.Content):
      system_instruction.parts = system_instruction.parts or []
      system_instruction.parts.append(types.Part(text=text))
    else:
      raise UnsupportedError(
          'Cannot append instructions to a system instruction of type'
          f' {type(system_instruction).__name__}.'
      )

  def append_tools(self, tools: list[Optional[BaseTool]]) -> None:
    """Registers tools into the request.

    Each tool's declaration, when it has one, is added to `config.tools` as a
    separate `types.Tool` entry. Registration is not atomic: when a tool fails
    to register, the tools before it stay registered.

    Args:
      tools: The tools to register, in order.

    Raises:
      ToolNameError: If a tool is None or has an empty name.
      ConflictError: If a tool with the same name is already registered.
    """
    for i, tool in enumerate(tools):
      if tool is None or not tool.name:
        raise ToolNameError(f'tools[{i}] tool without name: {tool!r}')
      if tool.name in self.tools_dict:
        raise ConflictError(f'tools[{i}] duplicate tool: {tool.name!r}')
      self.tools_dict[tool.name] = tool

      if declaration := tool._get_declaration():
        self.config = self.config or types.GenerateContentConfig()
        self.config.tools = self.config.tools or []
        self.config.tools.append(
            types.Tool(function_declarations=[declaration])
        )
      logger.debug('Registered tool %s', tool.name)
