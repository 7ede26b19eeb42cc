"""Bootstrap workflow steps.

Each step is a function of the BootstrapContext. A step either runs an
external command, asks the operator something, or derives a value from
earlier results, and records what it produced on ``ctx.state``. Steps
signal failure by raising a CgaError subclass.
"""

from cga.integrations import git
from cga.integrations.packages import install_dependencies
from cga.ui.prompts import prompt_confirm, prompt_input, prompt_select
from cga.utils.console import (
    console,
    print_info,
    print_step,
    print_success,
    print_url,
    print_warning,
)
from cga.utils.errors import CgaError
from cga.workflow.constants import (
    CONSOLE_URL,
    OAUTH_REDIRECT_PATH,
    OAUTH_SCOPES,
    REQUIRED_SERVICES,
    SERVICE_ACCOUNT_KEYFILE,
)
from cga.workflow.env_files import build_environments, write_env_files
from cga.workflow.regions import parse_region_table, resolve_region_abbreviation
from cga.workflow.state import BootstrapContext
from cga.workflow.tokens import generate_jwt_secret
from cga.workflow.validation import make_project_id, min_length_validator


def step_authenticate(ctx: BootstrapContext) -> None:
    print_step("Signing in to Google Cloud...")
    ctx.gcloud.login()


def step_query_identity(ctx: BootstrapContext) -> None:
    ctx.state.account_email = ctx.gcloud.get_account()
    print_success(f"Signed in as {ctx.state.account_email}")


def step_prompt_project_name(ctx: BootstrapContext) -> None:
    """Ask for the project name and derive the project identifier.

    The identifier is computed here once; every later step reads
    ``state.project_id`` instead of rebuilding it.
    """
    name = prompt_input("Project name:", validate=min_length_validator())
    ctx.state.project_name = name
    ctx.state.project_id = make_project_id(name)
    print_info(f"Project id: {ctx.state.project_id}")


def step_create_project(ctx: BootstrapContext) -> None:
    print_step(f"Creating project {ctx.state.project_id}...")
    ctx.gcloud.create_project(ctx.state.project_id)
    print_success(f"Project {ctx.state.project_id} created")


def step_list_regions(ctx: BootstrapContext) -> None:
    ctx.state.regions = parse_region_table(ctx.gcloud.list_app_regions())
    if not ctx.state.regions:
        raise CgaError("gcloud returned no App Engine regions")


def step_select_region(ctx: BootstrapContext) -> None:
    ctx.state.region = prompt_select(
        "Select a region for your app deployment",
        choices=ctx.state.regions,
    )


def step_resolve_region_abbreviation(ctx: BootstrapContext) -> None:
    ctx.state.region_abbreviation = resolve_region_abbreviation(
        ctx.state.region,
        extra=ctx.settings.get_region_abbreviations(),
    )


def step_create_app(ctx: BootstrapContext) -> None:
    print_step(f"Creating App Engine app in {ctx.state.region}...")
    ctx.gcloud.create_app(ctx.state.region)
    print_success(f"App will be served at {ctx.state.production_origin}")


def step_generate_secret(ctx: BootstrapContext) -> None:
    ctx.state.jwt_secret = generate_jwt_secret()


def step_confirm_billing(ctx: BootstrapContext) -> None:
    url = f"{CONSOLE_URL}/billing/linkedaccount?project={ctx.state.project_id}"
    if not prompt_confirm(f"Please configure Google billing: {url}", default=True):
        print_warning("Billing not confirmed; Cloud Build cannot be enabled without it.")


def step_enable_services(ctx: BootstrapContext) -> None:
    for service in REQUIRED_SERVICES:
        print_step(f"Enabling {service}...")
        ctx.gcloud.enable_service(service)


def step_confirm_consent_screen(ctx: BootstrapContext) -> None:
    state = ctx.state
    url = (
        f"{CONSOLE_URL}/apis/credentials/consent/edit;newAppInternalUser=false"
        f"?project={state.project_id}"
    )
    message = (
        f"Please configure Google auth consent: {url}\n"
        f"Authorized domains: {state.app_hostname}\n"
        f"Scopes: [{', '.join(OAUTH_SCOPES)}]\n"
        f"Users: {state.account_email}"
    )
    if not prompt_confirm(message, default=True):
        print_warning("Consent screen not confirmed; Google sign-in will fail until it is.")


def step_show_oauth_instructions(ctx: BootstrapContext) -> None:
    state = ctx.state
    local_origin = ctx.settings.local_origin

    print_info("Please configure Google auth")
    oauth_url = f"{CONSOLE_URL}/apis/credentials/oauthclient?project={state.project_id}"
    print_url("OAuth client:", oauth_url)
    console.print()
    console.print("Add these authorized origins:")
    console.print(local_origin)
    console.print(state.production_origin)
    console.print()
    console.print("Add these redirect URIs:")
    console.print(f"{local_origin}{OAUTH_REDIRECT_PATH}")
    console.print(state.production_redirect_url)
    console.print()


def step_prompt_client_id(ctx: BootstrapContext) -> None:
    ctx.state.client_id = prompt_input("Client id:", validate=min_length_validator())


def step_prompt_client_secret(ctx: BootstrapContext) -> None:
    ctx.state.client_secret = prompt_input(
        "Client secret:",
        validate=min_length_validator(),
        sensitive=True,
    )


def step_assemble_environments(ctx: BootstrapContext) -> None:
    state = ctx.state
    state.environments = build_environments(
        jwt_secret=state.jwt_secret,
        client_id=state.client_id,
        client_secret=state.client_secret,
        local_origin=ctx.settings.local_origin,
        production_origin=state.production_origin,
    )


def step_scaffold_template(ctx: BootstrapContext) -> None:
    target = ctx.workdir / ctx.state.project_id
    print_step("Scaffolding project...")
    git.scaffold_template(ctx.runner, ctx.settings.template_repository, target)
    ctx.state.project_dir = target


def step_create_service_account_key(ctx: BootstrapContext) -> None:
    key_file = ctx.state.project_dir / SERVICE_ACCOUNT_KEYFILE
    print_step("Creating service account key...")
    ctx.gcloud.create_service_account_key(key_file, ctx.state.project_id)


def step_write_env_files(ctx: BootstrapContext) -> None:
    for path in write_env_files(ctx.state.project_dir, ctx.state.environments):
        print_success(f"Wrote {path.name}")


def step_init_repository(ctx: BootstrapContext) -> None:
    project_dir = ctx.state.project_dir
    git.init_repository(ctx.runner, project_dir)
    git.stage_all(ctx.runner, project_dir)
    git.commit(ctx.runner, project_dir)


def step_install_dependencies(ctx: BootstrapContext) -> None:
    print_step("Installing dependencies...")
    install_dependencies(ctx.runner, ctx.state.project_dir, ctx.settings.package_manager)


__all__ = [
    "step_authenticate",
    "step_query_identity",
    "step_prompt_project_name",
    "step_create_project",
    "step_list_regions",
    "step_select_region",
    "step_resolve_region_abbreviation",
    "step_create_app",
    "step_generate_secret",
    "step_confirm_billing",
    "step_enable_services",
    "step_confirm_consent_screen",
    "step_show_oauth_instructions",
    "step_prompt_client_id",
    "step_prompt_client_secret",
    "step_assemble_environments",
    "step_scaffold_template",
    "step_create_service_account_key",
    "step_write_env_files",
    "step_init_repository",
    "step_install_dependencies",
]
