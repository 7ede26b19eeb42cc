"""Workflow orchestration for CGA.

This module provides the ordered step pipeline and the driver that runs
it, stopping at the first failing step and reporting which one failed.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from cga.utils.console import print_error, print_header, print_info, print_success
from cga.utils.errors import CgaError, ExitCode, UserCancelledError
from cga.utils.logging import log_message
from cga.workflow import steps
from cga.workflow.state import BootstrapContext


@dataclass(frozen=True)
class Step:
    """A named unit of the bootstrap pipeline.

    Attributes:
        name: Stable identifier reported on failure
        description: Human-readable summary
        run: Function performing the step
    """

    name: str
    description: str
    run: Callable[[BootstrapContext], None]


@dataclass
class WorkflowResult:
    """Outcome of a workflow run.

    Attributes:
        completed_steps: Names of steps that finished, in order
        failed_step: Name of the step that raised, if any
        error: The error that stopped the run, if any
    """

    completed_steps: list[str] = field(default_factory=list)
    failed_step: str | None = None
    error: CgaError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> ExitCode:
        if self.error is None:
            return ExitCode.SUCCESS
        return self.error.exit_code


BOOTSTRAP_STEPS: tuple[Step, ...] = (
    Step("authenticate", "Sign in to Google Cloud", steps.step_authenticate),
    Step("query_identity", "Read the active account", steps.step_query_identity),
    Step("prompt_project_name", "Choose the project name", steps.step_prompt_project_name),
    Step("create_project", "Create the Google Cloud project", steps.step_create_project),
    Step("list_regions", "List App Engine regions", steps.step_list_regions),
    Step("select_region", "Choose the App Engine region", steps.step_select_region),
    Step(
        "resolve_region_abbreviation",
        "Resolve the appspot.com region id",
        steps.step_resolve_region_abbreviation,
    ),
    Step("create_app", "Create the App Engine app", steps.step_create_app),
    Step("generate_secret", "Generate the JWT secret", steps.step_generate_secret),
    Step("confirm_billing", "Confirm billing setup", steps.step_confirm_billing),
    Step("enable_services", "Enable required Google APIs", steps.step_enable_services),
    Step(
        "confirm_consent_screen",
        "Confirm OAuth consent screen setup",
        steps.step_confirm_consent_screen,
    ),
    Step(
        "show_oauth_instructions",
        "Show OAuth client registration details",
        steps.step_show_oauth_instructions,
    ),
    Step("prompt_client_id", "Enter the OAuth client id", steps.step_prompt_client_id),
    Step("prompt_client_secret", "Enter the OAuth client secret", steps.step_prompt_client_secret),
    Step(
        "assemble_environments",
        "Assemble dev and prod settings",
        steps.step_assemble_environments,
    ),
    Step("scaffold_template", "Scaffold the starter template", steps.step_scaffold_template),
    Step(
        "create_service_account_key",
        "Create the service account key",
        steps.step_create_service_account_key,
    ),
    Step("write_env_files", "Write .env files", steps.step_write_env_files),
    Step("init_repository", "Create the initial commit", steps.step_init_repository),
    Step("install_dependencies", "Install dependencies", steps.step_install_dependencies),
)


def run_bootstrap_workflow(
    ctx: BootstrapContext,
    pipeline: Sequence[Step] = BOOTSTRAP_STEPS,
) -> WorkflowResult:
    """Run the pipeline in order until a step fails.

    No step is retried and nothing is rolled back: resources created
    before the failing step stay in place.

    Args:
        ctx: Context shared by all steps
        pipeline: Steps to run, in order

    Returns:
        WorkflowResult naming the completed steps and, on failure,
        the failing step and its error
    """
    print_header("Bootstrapping a new App Engine project")
    result = WorkflowResult()

    for index, step in enumerate(pipeline, start=1):
        log_message(f"Step {index}/{len(pipeline)}: {step.name}")
        try:
            step.run(ctx)
        except CgaError as e:
            result.failed_step = step.name
            result.error = e
            log_message(f"Step {step.name} failed: {e}")
            if isinstance(e, UserCancelledError):
                print_info(f"Cancelled during '{step.description}'")
            else:
                print_error(f"Step '{step.name}' ({step.description}) failed: {e}")
            return result
        result.completed_steps.append(step.name)

    project_dir = ctx.state.project_dir
    print_success(f"Project {ctx.state.project_id} is ready in {project_dir}")
    return result


__all__ = [
    "Step",
    "WorkflowResult",
    "BOOTSTRAP_STEPS",
    "run_bootstrap_workflow",
]
