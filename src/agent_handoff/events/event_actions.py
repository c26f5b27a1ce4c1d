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

from pydantic import BaseModel
from pydantic import ConfigDict


class EventActions(BaseModel):
  """Represents the actions attached to an event.

  Created per turn by the caller and passed by reference into tool execution.
  """

  model_config = ConfigDict(extra='forbid')

  transfer_to_agent: Optional[str] = None
  """If set, the name of the agent that should handle the next turn."""
