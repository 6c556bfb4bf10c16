"""Main CLI entry point for xcodebuild tooling."""

import sys

from xcodebuild_tooling.cli import action_cmd


def _usage() -> None:
    print("Usage: xcodebuild-action <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  run [--inputs-file F] [--verbose]      - Compose and run xcodebuild (| xcpretty)",
        file=sys.stderr,
    )
    print(
        "  compose [--inputs-file F] [--verbose]  - Validate inputs and print the commands only",
        file=sys.stderr,
    )
    print(
        "Without --inputs-file, inputs are read from INPUT_* environment variables.",
        file=sys.stderr,
    )


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        _usage()
        sys.exit(1)

    command = sys.argv[1]
    rest = sys.argv[2:]

    if command == "run":
        sys.exit(action_cmd.run_action_argv(rest))
    elif command == "compose":
        sys.exit(action_cmd.run_action_argv(rest, compose_only=True))
    elif command in ("-h", "--help", "help"):
        _usage()
        sys.exit(0)
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
