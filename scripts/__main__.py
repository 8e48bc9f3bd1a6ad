#!/usr/bin/env python3
"""
Entry point for running scripts as a module.

Usage:
    python -m scripts                              # Show available commands
    python -m scripts deploy_universal_router ...  # Deploy the router
"""
import sys


def main():
    """Main entry point for scripts module."""
    available_commands = {
        "deploy_universal_router": "Deploy UnsupportedProtocol and UniversalRouter contracts",
    }

    if len(sys.argv) < 2:
        print("Usage: python -m scripts <command>")
        print("\nAvailable commands:")
        for cmd, desc in available_commands.items():
            print(f"  {cmd:30} - {desc}")
        print("\nExample: python -m scripts deploy_universal_router --rpc-url ...")
        sys.exit(0)

    command = sys.argv[1]

    # Remove the command from argv so submodules see correct args
    sys.argv = [f"scripts.{command}"] + sys.argv[2:]

    if command == "deploy_universal_router":
        from scripts.deploy_universal_router import main as run
        sys.exit(run())
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m scripts' to see available commands.")
        sys.exit(1)


if __name__ == "__main__":
    main()
