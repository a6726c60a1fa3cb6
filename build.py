#!/usr/bin/env python3
"""
Awesome Language Build System

This script handles testing, linting and cleaning the Awesome sources.
"""

import sys
import os
import shutil
import subprocess
import argparse
from pathlib import Path

SOURCE_DIRS = ["awesome/", "tests/"]


def run_command(cmd, description=""):
    """Run a command and return success status."""
    if description:
        print(f"Running: {description}")

    print(f"$ {' '.join(cmd)}")

    result = subprocess.run(cmd)

    if result.returncode != 0:
        print(f"✗ Failed: {description or cmd}")
        return False
    else:
        print(f"✓ Success: {description or cmd}")
        return True


def has_tool(name):
    """Check whether a command line tool is installed."""
    try:
        subprocess.run([name, "--version"], check=True, capture_output=True)
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


def banner(title):
    print("=" * 50)
    print(title)
    print("=" * 50)


def test():
    """Run all tests."""
    banner("Running Awesome Test Suite")

    success = run_command([sys.executable, "-m", "unittest", "discover", "-s", "tests", "-v"],
                          "Unit tests")

    print()
    banner("✓ All tests passed!" if success else "✗ Some tests failed!")
    return success


def lint():
    """Run linting on the codebase."""
    banner("Running Linting")

    if has_tool("flake8"):
        success = run_command(["flake8", "--max-line-length", "100", *SOURCE_DIRS, "build.py"],
                              "Python linting")
    else:
        print("flake8 not found, skipping Python linting")
        success = True

    print()
    banner("✓ All linting passed!" if success else "✗ Some linting issues found!")
    return success


def format_code():
    """Format Python sources."""
    banner("Formatting Awesome Code")

    if not has_tool("black"):
        print("black not found, skipping Python formatting")
        return True

    return run_command(["black", *SOURCE_DIRS, "build.py"], "Python formatting")


def clean():
    """Clean build artifacts."""
    banner("Cleaning Build Artifacts")

    success = True

    for root, dirs, files in os.walk("."):
        for dir_name in dirs[:]:  # Use slice to avoid modifying while iterating
            if dir_name in ("__pycache__", ".pytest_cache") or dir_name.endswith(".egg-info"):
                cache_path = os.path.join(root, dir_name)
                try:
                    shutil.rmtree(cache_path)
                    print(f"Removed: {cache_path}")
                except OSError as e:
                    print(f"Failed to remove {cache_path}: {e}")
                    success = False
                dirs.remove(dir_name)

        for file_name in files:
            if file_name.endswith((".pyc", ".pyo")) or file_name == ".coverage":
                file_path = os.path.join(root, file_name)
                try:
                    os.remove(file_path)
                    print(f"Removed: {file_path}")
                except OSError as e:
                    print(f"Failed to remove {file_path}: {e}")
                    success = False

    if success:
        print("✓ Cleanup completed")
    else:
        print("✗ Some cleanup operations failed")

    return success


def coverage():
    """Run the tests under coverage and print a report."""
    banner("Measuring Coverage")

    if not has_tool("coverage"):
        print("coverage not found, skipping")
        return True

    success = run_command(["coverage", "run", "--source", "awesome",
                           "-m", "unittest", "discover", "-s", "tests"],
                          "Tests under coverage")
    return success and run_command(["coverage", "report", "-m"], "Coverage report")


def install_deps():
    """Install development dependencies."""
    banner("Installing Development Dependencies")

    return run_command([sys.executable, "-m", "pip", "install", "-e", ".[dev]"],
                       "Install package with dev extras")


def ci():
    """Run continuous integration pipeline."""
    print("=" * 60)
    print("AWESOME CONTINUOUS INTEGRATION PIPELINE")
    print("=" * 60)

    steps = [
        ("Clean", clean),
        ("Lint", lint),
        ("Test", test),
    ]

    for step_name, step_func in steps:
        print(f"\n{'=' * 20} {step_name} {'=' * 20}")

        if not step_func():
            print(f"❌ CI FAILED at step: {step_name}")
            return False

        print(f"✅ {step_name} completed successfully")

    print("\n" + "=" * 60)
    print("🎉 CONTINUOUS INTEGRATION PASSED!")
    print("=" * 60)
    return True


def main():
    """Main entry point."""
    commands = {
        "test": test,
        "lint": lint,
        "format": format_code,
        "clean": clean,
        "coverage": coverage,
        "ci": ci,
        "install-deps": install_deps,
    }

    parser = argparse.ArgumentParser(description="Awesome Language Build System")
    parser.add_argument("command", choices=list(commands), help="Build command to run")

    args = parser.parse_args()

    # Change to script directory
    os.chdir(Path(__file__).parent)

    success = commands[args.command]()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
