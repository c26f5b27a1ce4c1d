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

import asyncio
from typing import Optional

import click

from .. import version
from ..agents.base_agent import BaseAgent
from ..agents.invocation_context import InvocationContext
from ..errors import AgentHandoffError
from ..flows.llm_flows import agent_transfer
from ..models.llm_request import LlmRequest
from .agent_loader import load_root_agent
from .utils import logs


class HelpfulCommand(click.Command):
    """Command that shows full help on error instead of just the error message."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.MissingParameter as exc:
            click.echo(ctx.get_help())
            click.secho(f"\nError: {str(exc)}", fg="red", err=True)
            ctx.exit(2)


_log_level_option = click.option(
    "--log_level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="WARNING",
    help="Optional. Set the logging level",
)
_agent_path_argument = click.argument(
    "agent_path",
    type=click.Path(
        exists=True, dir_okay=True, file_okay=True, resolve_path=True
    ),
)


def _load(agent_path: str, log_level: str) -> BaseAgent:
    logs.setup_logger(log_level)
    try:
        return load_root_agent(agent_path)
    except ValueError as e:
        raise click.ClickException(str(e))


def _find(root_agent: BaseAgent, agent_name: str) -> BaseAgent:
    agent = root_agent.find_agent(agent_name)
    if agent is None:
        raise click.ClickException(
            f"Agent {agent_name} not found in the tree of {root_agent.name}."
        )
    return agent


def _describe_transfer(ctx: InvocationContext) -> str:
    llm_request = LlmRequest()
    asyncio.run(agent_transfer.request_processor.run_async(ctx, llm_request))
    if llm_request.config is None:
        return "(no agent transfer)\n"
    return llm_request.config.system_instruction


@click.group(context_settings={"max_content_width": 240})
@click.version_option(version.__version__)
def main():
    """Agent handoff CLI tools."""
    pass


@main.command("inspect", cls=HelpfulCommand)
@click.option(
    "--agent",
    "agent_name",
    type=str,
    help="Optional. Only inspect the agent with this name.",
)
@_log_level_option
@_agent_path_argument
def cli_inspect(agent_path: str, agent_name: Optional[str], log_level: str):
    """Prints the transfer instructions of each agent in the tree."""
    root_agent = _load(agent_path, log_level)
    if agent_name:
        agents = [_find(root_agent, agent_name)]
    else:
        agents = []
        stack = [root_agent]
        while stack:
            agent = stack.pop(0)
            agents.append(agent)
            stack.extend(agent.sub_agents)

    for agent in agents:
        ctx = InvocationContext(agent=agent, root_agent=root_agent)
        try:
            text = _describe_transfer(ctx)
        except (AgentHandoffError, ValueError) as e:
            raise click.ClickException(str(e))
        click.secho(f"== {agent.name} ==", bold=True)
        click.echo(text)


@main.command("targets", cls=HelpfulCommand)
@_log_level_option
@_agent_path_argument
@click.argument("agent_name", type=str)
def cli_targets(agent_path: str, agent_name: str, log_level: str):
    """Prints the names of the agents AGENT_NAME may transfer to."""
    root_agent = _load(agent_path, log_level)
    agent = _find(root_agent, agent_name)
    ctx = InvocationContext(agent=agent, root_agent=root_agent)
    try:
        parent = ctx.find_parent(agent.name)
    except ValueError as e:
        raise click.ClickException(str(e))
    for target in agent_transfer.get_transfer_targets(agent, parent):
        click.echo(target.name)


@main.command("request", cls=HelpfulCommand)
@_log_level_option
@_agent_path_argument
@click.argument("agent_name", type=str)
def cli_request(agent_path: str, agent_name: str, log_level: str):
    """Prints the model request AGENT_NAME would send, as JSON."""
    from ..agents.llm_agent import LlmAgent

    root_agent = _load(agent_path, log_level)
    agent = _find(root_agent, agent_name)
    if not isinstance(agent, LlmAgent):
        raise click.ClickException(f"Agent {agent_name} is not an LlmAgent.")
    ctx = InvocationContext(agent=agent, root_agent=root_agent)
    try:
        llm_request = asyncio.run(agent.build_llm_request_async(ctx))
    except (AgentHandoffError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(
        llm_request.model_dump_json(indent=2, exclude_none=True, by_alias=False)
    )
