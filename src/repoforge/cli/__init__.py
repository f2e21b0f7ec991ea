import typer
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

from dotenv import load_dotenv, find_dotenv

from repoforge.main import configure_logging
from repoforge.models import Account, WizardContext
from repoforge.providers import ProviderRegistry
from repoforge.services.secrets import resolve_username

load_dotenv(find_dotenv(usecwd=True))

app = typer.Typer(
    help="Repoforge: create git repositories for generated projects",
    add_completion=False,
)

ProviderOption = Annotated[
    str, typer.Option("-p", "--provider", help="Git hosting provider")
]
UsernameOption = Annotated[
    Optional[str], typer.Option("--username", help="Git user name", envvar="REPOFORGE_USERNAME")
]
TokenOption = Annotated[
    Optional[str], typer.Option("--token", help="Git API token", envvar="REPOFORGE_TOKEN")
]
UserTokenOption = Annotated[
    Optional[str],
    typer.Option("--user-token", help="Keycloak session token", envvar="KEYCLOAK_USER_TOKEN"),
]


def get_registry():
    registry = ProviderRegistry()
    registry.discover_providers()
    return registry


def get_provider(name):
    provider = get_registry().get(name)
    if provider is None:
        typer.echo(f"Unknown provider '{name}'", err=True)
        raise typer.Exit(code=2)
    return provider


def build_context(provider, username=None, token=None, user_token=None, **extra):
    """Build the wizard context from command line credentials."""
    account = None
    if token:
        account = resolve_username(
            Account(provider=provider.name, username=username or "", token=token),
            provider.client_factory,
        )
    return WizardContext(account=account, user_token=user_token, **extra)


def initialise_step(provider, context):
    step = provider.create_repo_step()
    choices = step.initialise(context)
    if not step.ready:
        typer.echo(f"No valid {provider.name} account available", err=True)
        raise typer.Exit(code=1)
    return step, choices


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level", envvar="LOG_LEVEL")
    ] = "INFO",
):
    configure_logging(log_level)


@app.command("check")
def check(provider_name: ProviderOption = "github"):
    """Check whether the provider's credentials secret is usable."""
    provider = get_provider(provider_name)
    if provider.is_configured_correctly():
        typer.echo(f"{provider.name} is configured correctly")
        return
    typer.echo(f"{provider.name} is not configured", err=True)
    raise typer.Exit(code=1)


@app.command("providers")
def list_providers():
    """List the available hosting providers."""
    for metadata in get_registry().get_providers_metadata():
        typer.echo(f"{metadata['name']}\t{metadata['description']}")


@app.command("orgs")
def list_organisations(
    provider_name: ProviderOption = "github",
    username: UsernameOption = None,
    token: TokenOption = None,
    user_token: UserTokenOption = None,
):
    """List the organisations repositories can be created in."""
    provider = get_provider(provider_name)
    context = build_context(provider, username, token, user_token)
    _, choices = initialise_step(provider, context)
    for organisation in choices.organisations:
        marker = "*" if organisation == choices.default_organisation else " "
        typer.echo(f"{marker} {organisation.name}")


@app.command("validate")
def validate(
    organisation: Annotated[str, typer.Argument(help="Organisation name")],
    repository: Annotated[str, typer.Argument(help="Repository name")],
    provider_name: ProviderOption = "github",
    username: UsernameOption = None,
    token: TokenOption = None,
    user_token: UserTokenOption = None,
):
    """Check a repository name before creating it."""
    provider = get_provider(provider_name)
    context = build_context(provider, username, token, user_token)
    step, _ = initialise_step(provider, context)
    outcome = step.validate(organisation, repository)
    if not outcome.valid:
        typer.echo(f"{outcome.field}: {outcome.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{organisation}/{repository} is available")


@app.command("provision")
def provision(
    organisation: Annotated[str, typer.Argument(help="Organisation name")],
    repository: Annotated[str, typer.Argument(help="Repository name")],
    description: Annotated[
        str, typer.Option("-d", "--description", help="Repository description")
    ] = "",
    directory: Annotated[
        Path, typer.Option("--dir", help="Project directory to import")
    ] = Path("."),
    provider_name: ProviderOption = "github",
    username: UsernameOption = None,
    token: TokenOption = None,
    user_token: UserTokenOption = None,
):
    """Create the repository and push the project directory into it."""
    provider = get_provider(provider_name)
    context = build_context(
        provider, username, token, user_token,
        project_name=repository, project_directory=directory,
    )
    step, _ = initialise_step(provider, context)

    outcome = step.validate(organisation, repository)
    if not outcome.valid:
        typer.echo(f"{outcome.field}: {outcome.message}", err=True)
        raise typer.Exit(code=1)

    result = step.execute(context, organisation, repository, description)
    if not result.succeeded:
        typer.echo(result.message, err=True)
        raise typer.Exit(code=1)
    typer.echo(result.clone_url)
