"""Command line entry point for docucomment."""
import sys
from typing import List, Optional

import sentry_sdk

from docucomment.core.config import parse_args_and_get_config
from docucomment.core.exceptions import DocuCommentError
from docucomment.core.logging import get_logger
from docucomment.core.sentry import init_sentry
from docucomment.features.formatting.service import format_file_impl, format_source_impl


def main(argv: Optional[List[str]] = None) -> int:
    """Format the given files (or stdin) and write the result.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = parse_args_and_get_config(argv)
    logger = get_logger("cli")

    if args.serve:
        from docucomment.server.runner import run_mcp_server

        run_mcp_server()
        return 0

    init_sentry()

    try:
        if args.paths:
            outputs = [format_file_impl(path, args.output_format).output for path in args.paths]
        else:
            outputs = [format_source_impl(sys.stdin.read(), args.output_format).output]
    except DocuCommentError as e:
        logger.error("format_failed", error=str(e))
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("read_failed", error=str(e))
        sentry_sdk.capture_exception(e)
        print(str(e), file=sys.stderr)
        return 1

    output = "\n".join(outputs)
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        except OSError as e:
            logger.error("write_failed", path=args.output, error=str(e))
            sentry_sdk.capture_exception(e)
            print(str(e), file=sys.stderr)
            return 1
        logger.info("output_written", path=args.output, files=len(outputs))
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
