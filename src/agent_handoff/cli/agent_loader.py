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

"""Loads the root agent of an agent module from disk."""

from __future__ import annotations

import importlib
import logging
import os
import sys

from ..agents.base_agent import BaseAgent
from .utils import envs

logger = logging.getLogger(__name__)

AGENT_FILE_NAME = 'agent.py'
ROOT_AGENT_ATTR = 'root_agent'


def load_root_agent(agent_path: str) -> BaseAgent:
  """Loads `root_agent` from an agent file or a folder containing agent.py.

  The agent folder is imported as a package from its parent directory, so
  `agent.py` may use relative imports such as `from . import tools`. The
  `.env` file closest to the agent is loaded before the module runs, so the
  agent module can read its configuration from the environment.

  Raises:
    ValueError: If the file is missing, the folder name is not importable or
      the module does not define a root agent.
  """
  if os.path.isdir(agent_path):
    agent_file = os.path.join(agent_path, AGENT_FILE_NAME)
  else:
    agent_file = agent_path
  agent_file = os.path.abspath(agent_file)
  if not os.path.isfile(agent_file):
    raise ValueError(f'Agent file not found: {agent_file}')

  agent_folder = os.path.dirname(agent_file)
  agents_dir = os.path.dirname(agent_folder)
  package_name = os.path.basename(agent_folder)
  module_stem = os.path.splitext(os.path.basename(agent_file))[0]
  if not package_name.isidentifier() or not module_stem.isidentifier():
    raise ValueError(
        f'Agent file {agent_file} is not importable as'
        f' `{package_name}.{module_stem}`.'
    )

  envs.load_dotenv_for_agent(agent_folder)

  module_name = f'{package_name}.{module_stem}'
  _forget_package(package_name, agent_folder)
  importlib.invalidate_caches()
  sys.path.insert(0, agents_dir)
  try:
    module = importlib.import_module(module_name)
  finally:
    sys.path.remove(agents_dir)

  root_agent = getattr(module, ROOT_AGENT_ATTR, None)
  if not isinstance(root_agent, BaseAgent):
    raise ValueError(
        f'`{ROOT_AGENT_ATTR}` in {agent_file} must be an agent, got'
        f' {type(root_agent).__name__}.'
    )
  logger.info('Loaded root agent %s from %s', root_agent.name, module_name)
  return root_agent


def _forget_package(package_name: str, agent_folder: str):
  """Drops a previously imported agent package so edits are picked up."""
  package = sys.modules.get(package_name)
  if package is None:
    return
  if agent_folder not in list(getattr(package, '__path__', [])):
    raise ValueError(
        f'Module `{package_name}` is already imported from another location.'
    )
  for name in list(sys.modules):
    if name == package_name or name.startswith(package_name + '.'):
      del sys.modules[name]
