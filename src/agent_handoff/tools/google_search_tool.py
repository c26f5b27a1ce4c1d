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
from typing import Any
from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

from google.genai import types
from typing_extensions import override

from ..errors import ArgumentError
from ..errors import ConflictError
from ..errors import UnsupportedError
from ..models.base_llm import BaseLlm
from ..utils.model_name_utils import is_gemini_1_model
from ..utils.model_name_utils import is_gemini_2_model
from .base_tool import BaseTool

if TYPE_CHECKING:
  from ..models.llm_request import LlmRequest
  from .tool_context import ToolContext

logger = logging.getLogger(__name__)


class GoogleSearchTool(BaseTool):
  """A built-in tool that is automatically invoked by Gemini models to retrieve search results from Google Search.

  This tool operates internally within the model and does not require or
  perform local code execution. Gemini 1.x models only accept it as the sole
  tool of a request.
  """

  def __init__(self, model: Union[str, BaseLlm, None] = None):
    """Initializes the tool.

    Args:
      model: The model the request is sent to. When unset, the model of the
        request being processed is used.
    """
    # Name and description are not used because this is a model built-in tool.
    super().__init__(name='google_search', description='google_search')
    self.model = model

  def _model_name(self, llm_request: LlmRequest) -> Optional[str]:
    if isinstance(self.model, BaseLlm):
      return self.model.model
    return self.model or llm_request.model

  @override
  async def process_llm_request(
      self,
      *,
      tool_context: ToolContext,
      llm_request: LlmRequest,
  ) -> None:
    if llm_request is None:
      raise ArgumentError('llm request is None')

    llm_request.config = llm_request.config or types.GenerateContentConfig()

    model_name = self._model_name(llm_request)
    if is_gemini_1_model(model_name):
      if llm_request.config.tools:
        raise ConflictError(
            'Google search tool cannot be used with other tools in Gemini 1.x.'
        )
      tool = types.Tool(google_search_retrieval=types.GoogleSearchRetrieval())
    elif is_gemini_2_model(model_name):
      tool = types.Tool(google_search=types.GoogleSearch())
    else:
      raise UnsupportedError(
          f'Google search tool is not supported for model {model_name}'
      )

    llm_request.config.tools = llm_request.config.tools or []
    llm_request.config.tools.append(tool)
    logger.debug('Enabled google search for model %s', model_name)

  @override
  async def run_async(self, *, args: Any, tool_context: ToolContext) -> Any:
    raise UnsupportedError(
        'Google search tool runs internally on the model, it can not be run'
        ' directly.'
    )


google_search = GoogleSearchTool()
