"""Deploy command for creating new R packages from the template"""

import sys
from pathlib import Path
from typing import Optional

import click

from ..utils.output import console, format_deployment_result, print_error, print_json
from ...api.deployer import TemplateDeployer
from ...api.exceptions import RpkgdevError
from ...core.config import load_config
from ...core.ide import RStudioBridge
from ...core.vcs import GitClient
from ...models import DeploymentRequest


def _pick(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value


@click.command()
@click.argument('path', type=click.Path(path_type=Path))
@click.option(
    '--name', '-n', 'package_name',
    help='Package name (defaults to the last path segment)'
)
@click.option(
    '--agent-config/--no-agent-config',
    default=None,
    help='Deploy the .claude/ agent configuration'
)
@click.option(
    '--dev-scripts/--no-dev-scripts',
    default=None,
    help='Deploy the dev/ workflow scripts'
)
@click.option(
    '--overwrite', '-f',
    is_flag=True,
    help='Deploy into an existing directory, replacing template files'
)
@click.option(
    '--git/--no-git', 'git_init',
    default=None,
    help='Initialize a git repository'
)
@click.option(
    '--ide-project/--no-ide-project',
    default=None,
    help='Create an RStudio .Rproj file'
)
@click.option(
    '--open', 'open_project',
    is_flag=True,
    help='Open the new project in RStudio (interactive sessions only)'
)
@click.option(
    '--config', 'config_path',
    type=click.Path(path_type=Path, dir_okay=False),
    help='Configuration file with descriptor defaults'
)
@click.option(
    '--json', 'as_json',
    is_flag=True,
    help='Print the deployment result as JSON'
)
@click.pass_context
def deploy(ctx, path, package_name, agent_config, dev_scripts, overwrite,
           git_init, ide_project, open_project, config_path, as_json):
    """Deploy the package template to a new directory

    Examples:
        rpkgdev deploy ../mynewpackage
        rpkgdev deploy ../testpkg --no-agent-config --no-git
        rpkgdev deploy ./pkg --name mypkg --overwrite
    """
    quiet = ctx.obj.quiet or as_json

    try:
        config = load_config(config_path)

        ide = RStudioBridge()
        request = DeploymentRequest(
            path=path,
            package_name=package_name,
            agent_config=_pick(agent_config, config.agent_config),
            dev_scripts=_pick(dev_scripts, config.dev_scripts),
            overwrite=overwrite,
            git_init=_pick(git_init, config.git_init),
            ide_project=_pick(ide_project, config.ide_project),
            open_project=open_project,
            quiet=quiet,
            interactive=sys.stdin.isatty(),
            ide_available=open_project and ide.is_available(),
        )

        deployer = TemplateDeployer(
            vcs=GitClient(),
            ide=ide,
            config=config,
            console=console,
        )
        result = deployer.deploy(request)

    except RpkgdevError as e:
        print_error(str(e))
        ctx.exit(1)
    except OSError as e:
        print_error("Deployment failed; the destination may be partially written", e)
        ctx.exit(1)

    if as_json:
        print_json(result.to_dict())
    elif not quiet:
        format_deployment_result(result)
