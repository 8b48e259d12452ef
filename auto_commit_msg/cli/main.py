"""CLI Main Entry Point"""

import sys
from pathlib import Path

from auto_commit_msg.config import Config, ConfigError, load_config
from auto_commit_msg.git import GitAnalyzer, GitError, StagedChanges
from auto_commit_msg.llm import LLMError, build_request, get_client, select_model
from auto_commit_msg.output import bold, dim, info, success, print_error, print_info, print_warning
from auto_commit_msg.output.trace import Stopwatch, TraceRecord, render_message
from auto_commit_msg.output.writer import get_writer

from auto_commit_msg.cli.args import parse_args


def _load_config(args) -> Config:
    """Load the config named on the command line, or the default file."""
    if args.config and not Path(args.config).exists():
        print_warning(f"Config file {args.config} not found, using defaults")
    config = load_config(args.config)
    if args.verbose:
        source = str(config.path) if config.path else "defaults (no config file)"
        print_info(f"Using config: {info(source)}")
    return config


def _choose_model(changes: StagedChanges, config: Config, verbose: bool) -> str:
    stats = changes.stats
    model = select_model(stats.total_changes, config.diff)
    if verbose:
        print_info(
            f"Staged {bold(str(stats.files_changed))} files "
            f"(+{stats.insertions} -{stats.deletions}, {stats.total_changes} lines, "
            f"threshold {config.diff.threshold})"
        )
        size = "long" if model == config.diff.long_model else "short"
        print_info(f"Using {size} model {info(model)}")
    return model


def _generate_commit_flow(args, execution: Stopwatch) -> int:
    """Main generation flow. Config and git errors surface before any request is sent.

    Returns:
        int: Exit code
    """
    config = _load_config(args)
    trace_enabled = config.trace or args.trace

    changes = GitAnalyzer().get_staged_changes()
    model = _choose_model(changes, config, args.verbose)

    client = get_client(config)
    request = build_request(model, changes.diff)
    if args.verbose:
        print_info(f"Requesting {dim(client.name)}")

    response_timer = Stopwatch()
    response = client.create_chat_completion(request)
    response_time = response_timer.elapsed()
    if args.verbose:
        print_info(f"Response in {response_time:.2f}s")

    message = response.assistant_message()

    trace = None
    if trace_enabled:
        trace = TraceRecord.create(model=model, response_time=response_time, execution_time=execution.elapsed())

    writer = get_writer(args.commit_msg_file)
    try:
        writer.write(render_message(message, trace))
    except OSError as e:
        print_error(f"Could not write {writer.name}: {e}")
        return 1

    if args.verbose:
        print_info(success(f"Wrote message to {writer.name}"))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    execution = Stopwatch()
    args = parse_args(argv)

    try:
        return _generate_commit_flow(args, execution)
    except (ConfigError, GitError, LLMError) as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_error("Interrupted.")
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
