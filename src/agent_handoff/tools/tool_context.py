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

from typing import Optional
from typing import TYPE_CHECKING
import uuid

from ..events.event_actions import EventActions

if TYPE_CHECKING:
  from ..agents.invocation_context import InvocationContext


class ToolContext:
  """The context of the tool.

  This class provides the context for a tool invocation, including the
  invocation context of the turn, the function call id and the event actions
  the tool may set.

  Attributes:
    invocation_context: The invocation context of the tool.
    function_call_id: The function call id of the current tool call. This id
      was returned in the function call event from LLM to identify a function
      call. A new id is generated when the model did not provide one.
    actions: The event actions of the current tool call, owned by the caller.
  """

  def __init__(
      self,
      invocation_context: InvocationContext,
      *,
      function_call_id: Optional[str] = None,
      actions: Optional[EventActions] = None,
  ):
    self.invocation_context = invocation_context
    self.function_call_id = function_call_id or str(uuid.uuid4())
    self.actions = actions if actions is not None else EventActions()
