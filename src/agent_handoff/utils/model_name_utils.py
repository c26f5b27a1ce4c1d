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

"""Utilities for classifying models by name."""

from __future__ import annotations

from typing import Optional

GEMINI_1_PREFIX = 'gemini-1'
GEMINI_2_PREFIX = 'gemini-2'


def is_gemini_1_model(model_name: Optional[str]) -> bool:
  """Returns whether the model belongs to the Gemini 1.x family."""
  return bool(model_name) and model_name.startswith(GEMINI_1_PREFIX)


def is_gemini_2_model(model_name: Optional[str]) -> bool:
  """Returns whether the model belongs to the Gemini 2.x family."""
  return bool(model_name) and model_name.startswith(GEMINI_2_PREFIX)
