"""Command line interface for Gerrit (gerritctl)."""

import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, TypeVar

import click
import httpx
from rich.console import Console

from . import __version__
from .api_clients import GerritClient
from .config import CLIConfig, ConfigManager
from .exceptions import ConfigurationError, GerritClientError
from .models import GerritModel
from .models.accounts import AccountInput, QueryAccountOptions
from .models.changes import ChangeInfo, ChangeInput, QueryChangeOptions
from .models.groups import GroupInput, ListGroupsOptions
from .models.projects import (
    BranchOptions,
    DeleteOptionsInfo,
    ProjectInput,
    ProjectOptions,
    TagOptions,
)

logger = logging.getLogger(__name__)

console = Console()

T = TypeVar("T")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    if not verbose:
        # httpx logs every request at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def fail(ctx: click.Context, message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"❌ {message}", style="red", markup=False)
    if ctx.obj.get("verbose"):
        console.print(traceback.format_exc(), style="dim red", markup=False)
    sys.exit(1)


def load_config(ctx: click.Context) -> CLIConfig:
    if "config" not in ctx.obj:
        ctx.obj["config"] = ConfigManager(ctx.obj.get("config_path")).load()
    return ctx.obj["config"]


def create_client(config: CLIConfig) -> GerritClient:
    """Build a client from CLI configuration.

    Credentials are applied only when both username and password are set.
    """
    client = GerritClient(config.url, transport_config=config.transport)
    if config.has_credentials:
        client.set_auth(config.auth_type, config.username, config.password)
    return client


def run_command(
    ctx: click.Context,
    operation: Callable[[GerritClient], Awaitable[T]],
    failure: Optional[str] = None,
) -> T:
    """Run one async client operation on a fresh client.

    Every library or transport error is reported and exits with status 1.
    """
    try:
        config = load_config(ctx)
        client = create_client(config)
    except ConfigurationError as e:
        fail(ctx, f"Configuration error: {e}")

    async def _run() -> T:
        async with client:
            return await operation(client)

    try:
        return asyncio.run(_run())
    except GerritClientError as e:
        fail(ctx, f"{failure}: {e}" if failure else str(e))
    except httpx.HTTPError as e:
        fail(ctx, f"Gerrit server unreachable: {config.url} ({e})")


def show_json(ctx: click.Context, model: Optional[GerritModel]) -> None:
    """Dump a model as indented JSON in verbose mode."""
    if ctx.obj.get("verbose") and model is not None:
        console.print_json(model.to_json())


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file path (default: {ConfigManager.DEFAULT_CONFIG_PATH})",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=__version__, prog_name="gerritctl")
@click.pass_context
def cli(ctx, config_path: Optional[Path], verbose: bool):
    """Client for Gerrit, manage resources on a Gerrit server.

    \b
    CONFIGURATION:
      Config file: ~/.config/gerritctl/config.json
      {"url": "https://review.example.org", "username": "...",
       "password": "<HTTP password>", "auth_type": "basic"}

      Environment overrides: GERRITCTL_URL, GERRITCTL_USERNAME,
      GERRITCTL_PASSWORD, GERRITCTL_AUTH_TYPE

    \b
    EXAMPLES:
      gerritctl version
      gerritctl change query -q status:open -l 10
      gerritctl -v project show -n my/project
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    setup_logging(verbose)


@cli.command("version")
@click.pass_context
def version_command(ctx):
    """Show the server version."""

    async def _version(client: GerritClient) -> Optional[str]:
        return await client.server.get_version()

    version = run_command(ctx, _version)
    config = load_config(ctx)
    console.print(f"✅ Connected with: {config.username}")
    console.print(f"✅ Server: {config.url}")
    console.print(f"✅ Version: {version}")


# Changes


@cli.group()
def change():
    """Change related commands."""
    pass


@change.command("query")
@click.option("--limit", "-l", type=int, default=25, show_default=True, help="Limit")
@click.option("--start", "-s", type=int, default=0, help="Skip the first N changes")
@click.option(
    "--query",
    "-q",
    "queries",
    multiple=True,
    default=("is:open",),
    show_default=True,
    help="Query string, repeat for several queries",
)
@click.option(
    "--additional-fields",
    "-a",
    multiple=True,
    help="Additional fields, e.g. LABELS or CURRENT_REVISION",
)
@click.pass_context
def change_query(ctx, limit: int, start: int, queries, additional_fields):
    """Query changes."""
    options = QueryChangeOptions(
        query=list(queries),
        limit=limit,
        start=start,
        additional_fields=list(additional_fields) or None,
    )

    async def _query(client: GerritClient):
        return await client.changes.query(options)

    results = run_command(ctx, _query)

    changes: List[ChangeInfo] = []
    for item in results:
        # One result list per query when several were given
        changes.extend(item if isinstance(item, list) else [item])

    for info in changes:
        console.print(f"✅ Change ChangeID: {info.id}.")
        show_json(ctx, info)


@change.command("create")
@click.option("--project", "-p", "project_name", required=True, help="Project name")
@click.option("--branch", "-b", "branch_name", required=True, help="Branch name")
@click.option("--subject", "-s", required=True, help="Subject")
@click.pass_context
def change_create(ctx, project_name: str, branch_name: str, subject: str):
    """Create a new change."""
    change_input = ChangeInput(project=project_name, branch=branch_name, subject=subject)

    async def _create(client: GerritClient):
        return await client.changes.create(change_input)

    handle = run_command(ctx, _create)
    console.print(f"✅ Create new change, ChangeID: {handle.identifier}.")
    show_json(ctx, handle.info)


@change.command("show")
@click.option("--change", "-c", "change_id", required=True, help="Change id")
@click.pass_context
def change_show(ctx, change_id: str):
    """Retrieve a change."""

    async def _get(client: GerritClient):
        return await client.changes.get(change_id)

    handle = run_command(ctx, _get, f"Unable to find the specific change: {change_id}")
    console.print(f"✅ Change ChangeID: {handle.info.id}.")
    show_json(ctx, handle.info)


@change.command("delete")
@click.option("--change", "-c", "change_id", required=True, help="Change id")
@click.pass_context
def change_delete(ctx, change_id: str):
    """Delete a change."""

    async def _delete(client: GerritClient):
        await client.changes.delete(change_id)

    run_command(ctx, _delete)
    console.print(f"✅ Delete change, ChangeID: {change_id}.")


# Groups


@cli.group()
def group():
    """Group related commands."""
    pass


@group.command("list")
@click.option("--limit", "-l", type=int, default=25, show_default=True, help="Limit")
@click.option("--skip", "-s", type=int, default=0, help="Skip the first N groups")
@click.pass_context
def group_list(ctx, limit: int, skip: int):
    """List the groups."""
    options = ListGroupsOptions(limit=limit, skip=skip)

    async def _list(client: GerritClient):
        return await client.groups.list(options)

    groups = run_command(ctx, _list)
    for name, info in groups.items():
        console.print(f"✅ Group Name: {name}, GroupID: {info.group_id}.")
        show_json(ctx, info)


@group.command("create")
@click.option("--name", "-n", required=True, help="Group name")
@click.pass_context
def group_create(ctx, name: str):
    """Create a new group."""

    async def _create(client: GerritClient):
        return await client.groups.create(name, GroupInput(name=name))

    handle = run_command(ctx, _create)
    console.print(f"✅ Create new group, Name: {name}.")
    show_json(ctx, handle.info)


@group.command("show")
@click.option("--group", "-g", "group_id", required=True, help="Group id")
@click.pass_context
def group_show(ctx, group_id: str):
    """Retrieve a group."""

    async def _get(client: GerritClient):
        return await client.groups.get(group_id)

    handle = run_command(ctx, _get, f"Unable to find the specific group: {group_id}")
    console.print(f"✅ Group GroupID: {handle.info.group_id}.")
    show_json(ctx, handle.info)


# Accounts


@cli.group()
def account():
    """Account related commands."""
    pass


@account.command("list")
@click.option("--limit", "-l", type=int, default=25, show_default=True, help="Limit")
@click.option("--start", "-s", type=int, default=0, help="Skip the first N accounts")
@click.option(
    "--additional-fields", "-f", multiple=True, help="Additional fields, e.g. DETAILS"
)
@click.pass_context
def account_list(ctx, limit: int, start: int, additional_fields):
    """List active accounts."""
    options = QueryAccountOptions(
        query="is:active",
        limit=limit,
        start=start,
        additional_fields=list(additional_fields) or None,
    )

    async def _query(client: GerritClient):
        return await client.accounts.query(options)

    accounts = run_command(ctx, _query)
    for info in accounts:
        console.print(f"✅ Account AccountID: {info.account_id}.")
        show_json(ctx, info)


@account.command("show")
@click.option("--account", "-a", "account_id", required=True, help="Account id")
@click.pass_context
def account_show(ctx, account_id: str):
    """Retrieve an account."""

    async def _get(client: GerritClient):
        return await client.accounts.get(account_id)

    handle = run_command(ctx, _get, f"Unable to find the specific account: {account_id}")
    console.print(f"✅ Account AccountID: {handle.info.account_id}.")
    show_json(ctx, handle.info)


@account.command("create")
@click.option("--email", "-e", required=True, help="Email address of the new account")
@click.option("--username", "-u", required=True, help="Username of the new account")
@click.pass_context
def account_create(ctx, email: str, username: str):
    """Create a new account."""
    account_input = AccountInput(email=email, username=username)

    async def _create(client: GerritClient):
        return await client.accounts.create(username, account_input)

    handle = run_command(ctx, _create)
    console.print(f"✅ Create new account, Email: {email}.")
    show_json(ctx, handle.info)


# Projects


@cli.group()
def project():
    """Project related commands."""
    pass


@project.command("list")
@click.option("--all", "-a", "include_all", is_flag=True, help="Include hidden projects")
@click.option("--limit", "-l", type=int, default=0, help="Limit the number of projects")
@click.option("--skip", "-S", type=int, default=0, help="Skip the first N projects")
@click.option("--description", "-d", is_flag=True, help="Include project descriptions")
@click.option("--prefix", "-p", default="", help="Only projects with this prefix")
@click.option("--regex", "-r", default="", help="Only projects matching this regex")
@click.option("--state", "-s", default="", help="ACTIVE, READ_ONLY or HIDDEN")
@click.option("--tree", "-t", is_flag=True, help="Include the project tree")
@click.option("--substring", "-u", default="", help="Only projects containing this")
@click.option("--type", "-T", "project_type", default="", help="ALL, CODE or PERMISSIONS")
@click.option("--branch", "-b", default="", help="Show the revision of this branch")
@click.pass_context
def project_list(
    ctx,
    include_all: bool,
    limit: int,
    skip: int,
    description: bool,
    prefix: str,
    regex: str,
    state: str,
    tree: bool,
    substring: str,
    project_type: str,
    branch: str,
):
    """List all accessible projects."""
    options = ProjectOptions(
        all=include_all,
        limit=limit,
        skip=skip,
        description=description,
        prefix=prefix,
        regex=regex,
        state=state,
        tree=tree,
        substring=substring,
        type=project_type,
        branch=branch,
    )

    async def _list(client: GerritClient):
        return await client.projects.list(options)

    projects = run_command(ctx, _list)
    for name, info in projects.items():
        console.print(f"✅ Project Name: {name}.")
        show_json(ctx, info)


@project.command("show")
@click.option("--name", "-n", required=True, help="Project name")
@click.pass_context
def project_show(ctx, name: str):
    """Retrieve a project."""

    async def _get(client: GerritClient):
        return await client.projects.get(name)

    handle = run_command(ctx, _get, f"Unable to find the specific project: {name}")
    console.print(
        f"✅ Project Name: {name}, Id: {handle.info.id}, State: {handle.info.state}"
    )
    show_json(ctx, handle.info)


@project.command("create")
@click.option("--name", "-n", required=True, help="Project name")
@click.option("--parent", "-P", default=None, help="Parent project")
@click.option("--description", "-D", default=None, help="Project description")
@click.pass_context
def project_create(ctx, name: str, parent: Optional[str], description: Optional[str]):
    """Create a project."""
    project_input = ProjectInput(name=name, parent=parent, description=description)

    async def _create(client: GerritClient):
        return await client.projects.create(name, project_input)

    run_command(ctx, _create)
    console.print(f"✅ Create new project, Name: {name}.")


@project.command("delete")
@click.option("--name", "-n", required=True, help="Project name")
@click.pass_context
def project_delete(ctx, name: str):
    """Delete a project, forcing removal of open changes."""

    async def _delete(client: GerritClient):
        handle = await client.projects.get(name)
        await handle.delete(DeleteOptionsInfo(force=True, preserve=True))

    run_command(ctx, _delete, f"Unable to delete project: {name}")
    console.print(f"✅ Delete project, Name: {name}.")


@project.group("branch")
def project_branch():
    """Project branch related commands."""
    pass


@project_branch.command("list")
@click.option("--name", "-n", required=True, help="Project name")
@click.option("--limit", "-l", type=int, default=0, help="Limit the number of branches")
@click.option("--skip", "-S", type=int, default=0, help="Skip the first N branches")
@click.option("--substring", "-u", default="", help="Only branches containing this")
@click.option("--regex", "-r", default="", help="Only branches matching this regex")
@click.pass_context
def branch_list(ctx, name: str, limit: int, skip: int, substring: str, regex: str):
    """List the branches of a project."""
    options = BranchOptions(limit=limit, skip=skip, substring=substring, regex=regex)

    async def _list(client: GerritClient):
        handle = await client.projects.get(name)
        return await handle.branches.list(options)

    branches = run_command(ctx, _list, f"Unable to list branches of project: {name}")
    for info in branches:
        console.print(f"✅ Branch Name: {info.ref}.")
        show_json(ctx, info)


@project.group("tag")
def project_tag():
    """Project tag related commands."""
    pass


@project_tag.command("list")
@click.option("--name", "-n", required=True, help="Project name")
@click.option("--limit", "-l", type=int, default=0, help="Limit the number of tags")
@click.option("--skip", "-S", type=int, default=0, help="Skip the first N tags")
@click.option("--substring", "-u", default="", help="Only tags containing this")
@click.option("--regex", "-r", default="", help="Only tags matching this regex")
@click.pass_context
def tag_list(ctx, name: str, limit: int, skip: int, substring: str, regex: str):
    """List the tags of a project."""
    options = TagOptions(limit=limit, skip=skip, substring=substring, regex=regex)

    async def _list(client: GerritClient):
        handle = await client.projects.get(name)
        return await handle.tags.list(options)

    tags = run_command(ctx, _list, f"Unable to list tags of project: {name}")
    for info in tags:
        console.print(f"✅ Tag Name: {info.ref}.")
        show_json(ctx, info)


def main():
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user", style="red")
        sys.exit(1)
    except Exception as e:
        console.print(f"❌ Unexpected error: {str(e)}", style="red", markup=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
