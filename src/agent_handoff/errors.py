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

"""Errors raised while assembling requests and executing agent transfers.

None of these are retried inside the library. They are raised from the call
that detected the problem and are expected to abort the current turn.
"""


class AgentHandoffError(Exception):
  """Base class for all agent_handoff errors."""


class ArgumentError(AgentHandoffError, ValueError):
  """Malformed or missing tool-call arguments."""


class ToolNameError(ArgumentError):
  """A tool was missing or had an empty name when being registered."""


class ConflictError(AgentHandoffError):
  """A tool name collides with a registered tool, or tools are incompatible."""


class UnsupportedError(AgentHandoffError):
  """The model family, tool or operation is not supported."""


class TemplateError(AgentHandoffError):
  """Rendering of the transfer instructions failed."""
