#!/usr/bin/env python
"""
Verify that the ORM models match the migration head.
Fails CI if there are model changes not captured in a migration.
"""

import os
import subprocess
import sys


def main() -> int:
    """Check if migrations are in sync with models."""
    print("Checking if migrations are in sync with models...")

    # Apply migrations first so the comparison runs against the head
    upgrade = subprocess.run(
        ["alembic", "upgrade", "head"],
        capture_output=True,
        text=True,
        check=False,
        env={"PYTHONPATH": "src", **os.environ},
    )
    if upgrade.returncode != 0:
        print(f"❌ Alembic upgrade failed: {upgrade.stdout}{upgrade.stderr}")
        return 1

    # `alembic check` exits non-zero when autogenerate would emit operations
    result = subprocess.run(
        ["alembic", "check"],
        capture_output=True,
        text=True,
        check=False,
        env={"PYTHONPATH": "src", **os.environ},
    )
    output = result.stdout + result.stderr

    if result.returncode != 0:
        if "New upgrade operations detected" in output:
            print("❌ Pending model changes not captured in migrations:")
        else:
            print("❌ Alembic command failed:")
        print(output)
        return 1

    print("✅ Models and migrations are in sync")
    return 0


if __name__ == "__main__":
    sys.exit(main())
