# scripts/validate_workflows.py
"""
Validate every workflow listed by settings.json (CI entry point).
Run: python scripts/validate_workflows.py [--github]
"""

import sys

from workflow_validator.cli import cli


def main():
    cli(["validate", *sys.argv[1:]], prog_name="validate_workflows")


if __name__ == "__main__":
    main()
