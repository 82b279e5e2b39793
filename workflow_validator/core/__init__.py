"""
Core package for the workflow validator.
Lightweight package init to avoid import cycles.

Consumers should import submodules directly, e.g.:
  from workflow_validator.core.checker import WorkflowChecker, WorkflowRecord
  from workflow_validator.core.scanner import check_workflows
  from workflow_validator.core.engine import run_validation
"""

__all__: list[str] = []
