#!/usr/bin/env python3
"""
org-gtasks - One-way transfers between Google Tasks and org documents.
"""

import argparse
import logging
import sys

from org_gtasks.core.config import load_config, get_default_config_path
from org_gtasks.core.exceptions import ConfigurationError, UsageError
from org_gtasks.commands import PullCommand, PushCommand, ListsCommand


def main(argv=None):
    """Main entry point for org-gtasks."""
    parser = argparse.ArgumentParser(
        prog="org-gtasks",
        description="Pull Google Tasks into org files and push tagged org entries to Google Tasks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  org-gtasks lists                                   # Show tasklist ids
  org-gtasks pull --tasklist ID --file inbox.org     # Append tasks to inbox.org
  org-gtasks pull --post-action complete             # ...then mark them completed
  org-gtasks push work errands                       # Push entries tagged :work: and :errands:
        """
    )

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {get_default_config_path()})',
        default=None
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Pull command
    pull_parser = subparsers.add_parser('pull', help='Append the tasks of a tasklist to an org file')
    pull_parser.add_argument(
        '--tasklist',
        help='Tasklist id (default: pull.tasklist_id from the config)'
    )
    pull_parser.add_argument(
        '--file',
        help='Target org file (default: pull.inbox_file from the config)'
    )
    pull_parser.add_argument(
        '--post-action',
        choices=['none', 'complete', 'delete'],
        default=None,
        help='What to do with the remote tasks after a successful import'
    )

    # Push command
    push_parser = subparsers.add_parser('push', help='Create tasks from tagged org entries')
    push_parser.add_argument(
        'tags',
        nargs='*',
        help='Tags to push (default: push.tags from the config)'
    )

    # Lists command
    subparsers.add_parser('lists', help='Show the available tasklists')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        actual_config_path = args.config if args.config else get_default_config_path()
        print(f"Using config: {actual_config_path}")

    try:
        config = load_config(args.config)

        if args.command == 'pull':
            cmd = PullCommand(config, verbose=args.verbose)
            success = cmd.run(
                tasklist_id=args.tasklist,
                file_path=args.file,
                post_action=args.post_action
            )

        elif args.command == 'push':
            cmd = PushCommand(config, verbose=args.verbose)
            success = cmd.run(tags=args.tags)

        elif args.command == 'lists':
            cmd = ListsCommand(config, verbose=args.verbose)
            success = cmd.run()

        else:
            print(f"Unknown command '{args.command}'.")
            return 1

        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except (UsageError, ConfigurationError) as e:
        print(f"Error: {e}")
        return 2
    except Exception as e:
        print(f"Error: {e}")
        if not args.verbose:
            print("Re-run with --verbose for more detail.")
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
