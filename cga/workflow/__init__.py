"""Bootstrap workflow for CGA.

This package contains:
- runner: ordered step pipeline and its driver
- steps: the individual bootstrap steps
- state: BootstrapState and BootstrapContext
- regions: region table parsing and appspot.com region ids
- env_files: .env generation and parsing
- validation: prompt validators and project id derivation
- tokens: JWT secret generation
"""

from cga.workflow.runner import BOOTSTRAP_STEPS, Step, WorkflowResult, run_bootstrap_workflow
from cga.workflow.state import BootstrapContext, BootstrapState

__all__ = [
    "BOOTSTRAP_STEPS",
    "BootstrapContext",
    "BootstrapState",
    "Step",
    "WorkflowResult",
    "run_bootstrap_workflow",
]
