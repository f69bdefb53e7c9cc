#!/usr/bin/env python
"""
Test runner script for Restock.
Provides different test running options and configurations.
"""
import os
import sys
import shutil
import subprocess
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent

ARTIFACT_DIRS = {'.pytest_cache', '__pycache__', 'htmlcov'}


def run_command(command, description=""):
    """Run a command and report whether it succeeded."""
    print(f"\n{'='*60}")
    print(f"Running: {description or command}")
    print(f"{'='*60}")

    result = subprocess.run(command, shell=True, capture_output=False)

    if result.returncode != 0:
        print(f"\n❌ Command failed: {command}")
        return False
    print(f"\n✅ Command succeeded: {description or command}")
    return True


def run_unit_tests():
    return run_command("python -m pytest tests/unit/ -v --tb=short", "Unit Tests")


def run_integration_tests():
    return run_command("python -m pytest tests/integration/ -v --tb=short", "Integration Tests")


def run_e2e_tests():
    return run_command("python -m pytest tests/e2e/ -m e2e -v --tb=short", "End-to-End Tests")


def run_all_tests():
    """Run all tests with coverage."""
    return run_command(
        "python -m pytest --cov=apps --cov-report=html --cov-report=term-missing --cov-fail-under=80",
        "All Tests with Coverage"
    )


def run_fast_tests():
    """Run tests without coverage, stopping at the first failure."""
    return run_command("python -m pytest --tb=short -x -m 'not e2e'", "Fast Tests (no e2e, fail fast)")


def run_specific_test(test_path):
    return run_command(f"python -m pytest {test_path} -v --tb=short", f"Specific Test: {test_path}")


def clean_test_artifacts():
    """Remove caches and coverage output."""
    print("\n🧹 Cleaning test artifacts...")

    for root, dirs, files in os.walk(project_root):
        for name in list(dirs):
            if name in ARTIFACT_DIRS:
                path = os.path.join(root, name)
                print(f"Removing directory: {path}")
                shutil.rmtree(path, ignore_errors=True)
                dirs.remove(name)

    coverage_file = project_root / '.coverage'
    if coverage_file.exists():
        coverage_file.unlink()

    print("✅ Cleanup completed")
    return True


def main():
    parser = argparse.ArgumentParser(description="Restock Test Runner")
    parser.add_argument(
        "command",
        choices=["unit", "integration", "e2e", "all", "fast", "clean", "specific"],
        help="Test command to run"
    )
    parser.add_argument("--path", help="Specific test path (for 'specific' command)")

    args = parser.parse_args()

    os.chdir(project_root)
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.test')

    print(f"📁 Project root: {project_root}")
    print(f"⚙️  Django settings: {os.environ.get('DJANGO_SETTINGS_MODULE')}")

    commands = {
        "unit": run_unit_tests,
        "integration": run_integration_tests,
        "e2e": run_e2e_tests,
        "all": run_all_tests,
        "fast": run_fast_tests,
        "clean": clean_test_artifacts,
    }

    if args.command == "specific":
        if not args.path:
            print("❌ --path argument required for 'specific' command")
            sys.exit(1)
        success = run_specific_test(args.path)
    else:
        success = commands[args.command]()

    if success:
        print(f"\n🎉 Command '{args.command}' completed successfully!")
        sys.exit(0)
    print(f"\n💥 Command '{args.command}' failed!")
    sys.exit(1)


if __name__ == "__main__":
    main()
