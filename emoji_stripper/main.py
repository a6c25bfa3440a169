import sys

from pydantic import ValidationError

from emoji_stripper.cli.parser import build_parser
from emoji_stripper.cli.reporter import Reporter
from emoji_stripper.config.settings import Settings
from emoji_stripper.logging.logger import Log
from emoji_stripper.processor.exceptions import ProcessorError
from emoji_stripper.processor.models import RunOptions
from emoji_stripper.processor.orchestrator import build_orchestrator


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> load settings -> dispatch mode -> exit status."""
    args = build_parser().parse_args(argv)
    reporter = Reporter()

    try:
        settings = Settings()
    except ValidationError as exc:
        reporter.error(f"Error: invalid configuration: {exc}")
        return 1
    Log.configure(settings.log_level)

    options = RunOptions(
        dry_run=args.dry_run,
        verbose=args.verbose,
        backup=args.backup and args.recursive,
        output=None if args.recursive else args.output,
    )
    if args.recursive and args.output is not None:
        Log.warning("--output is ignored with --recursive")
    if args.backup and not args.recursive:
        Log.warning("--backup only applies with --recursive; ignoring it")

    orchestrator = build_orchestrator(settings, reporter=reporter)
    try:
        if args.recursive:
            orchestrator.process_directory(args.path, options)
        else:
            orchestrator.process_file(args.path, options)
    except ProcessorError as exc:
        Log.debug(f"Aborted with {type(exc).__name__}")
        reporter.error(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
