"""
Command-line interface for CLEF Reader
"""
import argparse
import logging
import os
import sys
from typing import Iterator

import pandas as pd

from ..config import DEFAULT_CONFIG, configure_logging
from ..dto.event import LogEvent
from ..errors import ClefReaderError
from ..service.reader import LogEventReader
from ..service.summary import events_to_frame, level_distribution, top_templates

logger = logging.getLogger(__name__)


class CLI:
    """Main command-line interface class"""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.skipped = 0

    def run(self, args=None):
        """Run CLI"""
        parser = self.create_parser()
        args = parser.parse_args(args)
        configure_logging(args.log_level)

        # Execute the corresponding command
        if hasattr(args, 'func'):
            return args.func(args)
        parser.print_help()
        return 0

    def create_parser(self):
        """Create command-line argument parser"""
        parser = argparse.ArgumentParser(
            prog='clef-reader',
            description='Compact JSON log event reader'
        )

        # Global arguments
        parser.add_argument(
            '--encoding',
            default=self.config.encoding,
            help=f'Log file encoding (default: {self.config.encoding})'
        )
        parser.add_argument(
            '--log-level',
            default=self.config.log_level,
            help=f'Diagnostic log level (default: {self.config.log_level})'
        )

        # Create subcommands
        subparsers = parser.add_subparsers(title='Subcommands', dest='command')

        # parse command - Decode and display events
        parse_parser = subparsers.add_parser('parse', help='Parse log file and display events')
        parse_parser.add_argument('log_file', help='Log file path (one JSON object per line)')
        parse_parser.add_argument(
            '--limit',
            type=int,
            default=self.config.limit if self.config.limit is not None else 10,
            help='Event display limit (default: 10)'
        )
        self._add_on_error(parse_parser)
        parse_parser.set_defaults(func=self.handle_parse)

        # render command - Print rendered messages
        render_parser = subparsers.add_parser('render', help='Print one rendered message per event')
        render_parser.add_argument('log_file', help='Log file path')
        render_parser.add_argument('--limit', type=int, default=self.config.limit, help='Maximum events to render')
        self._add_on_error(render_parser)
        render_parser.set_defaults(func=self.handle_render)

        # stats command - Display statistics
        stats_parser = subparsers.add_parser('stats', help='Display log file statistics')
        stats_parser.add_argument('log_file', help='Log file path')
        self._add_on_error(stats_parser)
        stats_parser.set_defaults(func=self.handle_stats)

        return parser

    def _add_on_error(self, subparser):
        subparser.add_argument(
            '--on-error',
            choices=['abort', 'skip'],
            default=self.config.on_error,
            help=f'What to do with lines that fail to decode (default: {self.config.on_error})'
        )

    def _iter_events(self, args, limit=None) -> Iterator[LogEvent]:
        """Yield events, skipping bad lines when --on-error=skip"""
        self.skipped = 0
        count = 0
        with LogEventReader.open(args.log_file, encoding=args.encoding) as reader:
            while limit is None or count < limit:
                try:
                    event = reader.try_read()
                except ClefReaderError as e:
                    if args.on_error != 'skip':
                        raise
                    self.skipped += 1
                    logger.warning("Skipping line %d: %s", reader.line_number, e)
                    continue
                if event is None:
                    break
                count += 1
                yield event

    def _check_file(self, path):
        if not os.path.exists(path):
            print(f"Error: Log file does not exist: {path}", file=sys.stderr)
            return False
        return True

    def handle_parse(self, args):
        """Handle parse command"""
        if not self._check_file(args.log_file):
            return 1

        print(f"Parsing log file: {args.log_file}")
        print(f"Displaying first {args.limit} events:\n")

        try:
            for i, event in enumerate(self._iter_events(args, limit=args.limit), start=1):
                print(f"=== Event #{i} ===")
                print(f"Time: {event.timestamp.isoformat()}")
                print(f"Level: {event.level.value}")
                print(f"Template: {event.message_template.text}")
                print(f"Message: {event.render_message()}")
                if event.trace_id is not None:
                    print(f"Trace ID: {event.trace_id_hex}")
                if event.span_id is not None:
                    print(f"Span ID: {event.span_id_hex}")
                if event.exception is not None:
                    print(f"Exception: {event.exception}")

                if event.properties:
                    print("Properties:")
                    for prop in event.properties[:5]:  # Display first 5 only
                        print(f"  {prop.name}: {prop.value.render()}")
                print()
        except (ClefReaderError, OSError) as e:
            print(f"Parse failed: {e}", file=sys.stderr)
            return 1
        return 0

    def handle_render(self, args):
        """Handle render command"""
        if not self._check_file(args.log_file):
            return 1

        try:
            for event in self._iter_events(args, limit=args.limit):
                print(f"[{event.timestamp.isoformat()} {event.level.value}] {event.render_message()}")
                if event.exception is not None:
                    print(event.exception)
        except (ClefReaderError, OSError) as e:
            print(f"Render failed: {e}", file=sys.stderr)
            return 1
        return 0

    def handle_stats(self, args):
        """Handle stats command"""
        if not self._check_file(args.log_file):
            return 1

        try:
            df = events_to_frame(self._iter_events(args))
        except (ClefReaderError, OSError) as e:
            print(f"Failed to get statistics: {e}", file=sys.stderr)
            return 1

        print("=== Log File Statistics ===")
        print(f"Log file: {args.log_file}")
        print(f"\nTotal events: {len(df)}")
        if self.skipped:
            print(f"Skipped lines: {self.skipped}")

        if len(df) > 0:
            ts = pd.to_datetime(df["timestamp"], utc=True)
            print(f"Time range: {ts.min()} to {ts.max()}")

            print("\nLevel distribution:")
            for level, count in level_distribution(df).items():
                print(f"  {level}: {count} events")

            print("\nTop 5 message templates:")
            for template, count in top_templates(df).items():
                print(f"  {template!r}: {count}")

            with_exception = int(df["exception"].notna().sum())
            print(f"\nEvents with exceptions: {with_exception}")
        return 0


def main():
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()
