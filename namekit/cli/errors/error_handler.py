import sys
from collections.abc import Generator
from contextlib import contextmanager

from libnamekit.exceptions import NameKitError
from namekit.cli.output import cli_fatal_abort, cli_message

# Conventional exit code of an process terminated by SIGINT
INTERRUPTED_EXIT_CODE = 130


@contextmanager
def cli_namekit_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, None]:
    """Report toolchain configuration errors as an fatal CLI message instead of traceback.

    `--debug-unwrap-errors` disables that and lets errors propagate.
    """
    try:
        yield
    except NameKitError as e:
        if not debug_user_friendly_errors:
            raise
        cli_fatal_abort(repr(e))
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("WARNING", "Interrupted by user (Ctrl+C), remaining files were not processed!")
        sys.exit(INTERRUPTED_EXIT_CODE)
