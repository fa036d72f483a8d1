"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional, Tuple

from patternkit import __version__
from patternkit.bootstrap import Application
from patternkit.cli.formatters import format_output
from patternkit.config.schemas.logging_schema import LoggingConfig
from patternkit.domain.base.exceptions import DomainException
from patternkit.infrastructure.logging.logger import get_logger, setup_logging
from patternkit.infrastructure.persistence.exceptions import PersistenceError

FORMATS = ['json', 'yaml', 'table', 'list']
DEFAULT_CLI_LOG_LEVEL = 'WARNING'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="patternkit - runtime-selected strategies, factories and repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s variants list                           # List every registered variant
  %(prog)s notify send email ada@example.com "Hi"  # Send a message by email
  %(prog)s pricing quote percentage 120.00         # Quote with a percentage discount
  %(prog)s users create "Ada Lovelace" ada@example.com
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Print tracebacks on failure')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Variants resource
    variants_parser = subparsers.add_parser('variants', help='Inspect registered variants')
    variants_subparsers = variants_parser.add_subparsers(dest='action', help='Variant actions')
    variants_list = variants_subparsers.add_parser('list', help='List registered variants')
    variants_list.add_argument('--capability', help='Only list variants of one capability')

    # Notify resource
    notify_parser = subparsers.add_parser('notify', help='Send notifications')
    notify_subparsers = notify_parser.add_subparsers(dest='action', help='Notification actions')
    notify_subparsers.add_parser('channels', help='List notification channels')
    notify_send = notify_subparsers.add_parser('send', help='Send a message')
    notify_send.add_argument('channel', help='Channel to send over (e.g. email, sms, push)')
    notify_send.add_argument('recipient', help='Channel-specific recipient address')
    notify_send.add_argument('body', help='Message text')
    notify_send.add_argument('--subject', help='Message subject or title')

    # Pricing resource
    pricing_parser = subparsers.add_parser('pricing', help='Quote prices under discount strategies')
    pricing_subparsers = pricing_parser.add_subparsers(dest='action', help='Pricing actions')
    pricing_subparsers.add_parser('strategies', help='List discount strategies')
    pricing_quote = pricing_subparsers.add_parser('quote', help='Quote a subtotal')
    pricing_quote.add_argument('strategy', help='Discount strategy (e.g. none, percentage, fixed)')
    pricing_quote.add_argument('amount', help='Subtotal amount')

    # Users resource
    users_parser = subparsers.add_parser('users', help='Manage users')
    users_subparsers = users_parser.add_subparsers(dest='action', help='User actions')
    users_create = users_subparsers.add_parser('create', help='Register a user')
    users_create.add_argument('name', help='Display name')
    users_create.add_argument('email', help='Email address')
    users_subparsers.add_parser('list', help='List users')
    users_show = users_subparsers.add_parser('show', help='Show user details')
    users_show.add_argument('user_id', help='User ID to show')
    users_delete = users_subparsers.add_parser('delete', help='Delete a user')
    users_delete.add_argument('user_id', help='User ID to delete')

    return parser.parse_args(argv)


def handle_variants_list(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    registries = app.registries()
    if args.capability:
        if args.capability not in registries:
            raise DomainException(
                f"Unknown capability '{args.capability}'. "
                f"Valid capabilities: {', '.join(sorted(registries))}"
            )
        registries = {args.capability: registries[args.capability]}
    return {
        "variants": [
            {"capability": name, "discriminator": discriminator}
            for name, registry in registries.items()
            for discriminator in registry.discriminators()
        ]
    }


def handle_notify_channels(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"channels": app.notifications.available_channels()}


def handle_notify_send(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    result = app.notifications.send(args.channel, args.recipient, args.body, args.subject)
    return result.model_dump(mode="json")


def handle_pricing_strategies(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"strategies": app.pricing.available_strategies()}


def handle_pricing_quote(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return app.pricing.quote(args.strategy, args.amount).model_dump(mode="json")


def handle_users_create(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return app.users.register_user(args.name, args.email).model_dump(mode="json")


def handle_users_list(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"users": [user.model_dump(mode="json") for user in app.users.list_users()]}


def handle_users_show(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return app.users.get_user(args.user_id).model_dump(mode="json")


def handle_users_delete(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    app.users.remove_user(args.user_id)
    return {"id": args.user_id, "message": "User deleted"}


# Command handler mapping
COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, Application], Dict[str, Any]]] = {
    ('variants', 'list'): handle_variants_list,
    ('notify', 'channels'): handle_notify_channels,
    ('notify', 'send'): handle_notify_send,
    ('pricing', 'strategies'): handle_pricing_strategies,
    ('pricing', 'quote'): handle_pricing_quote,
    ('users', 'create'): handle_users_create,
    ('users', 'list'): handle_users_list,
    ('users', 'show'): handle_users_show,
    ('users', 'delete'): handle_users_delete,
}


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler = COMMAND_HANDLERS[(args.resource, args.action)]
    return handler(args, app)


def apply_cli_log_level(args: argparse.Namespace, logging_config: LoggingConfig) -> None:
    """
    Set the level the application logs at while running a command.

    --log-level wins. Otherwise --quiet, or a configuration that does not
    name a level, keeps the CLI's WARNING level so stderr only shows problems.
    """
    if args.log_level:
        logging_config.level = args.log_level
    elif args.quiet or 'level' not in logging_config.model_fields_set:
        logging_config.level = DEFAULT_CLI_LOG_LEVEL


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    # Console logging on stderr until the configured logging takes over
    setup_logging(LoggingConfig(level=args.log_level or DEFAULT_CLI_LOG_LEVEL))
    logger = get_logger(__name__)

    # Validate required arguments
    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return 1

    if not getattr(args, 'action', None):
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        return 1

    app = Application(args.config)
    try:
        apply_cli_log_level(args, app.config.logging)
        with app:
            result = execute_command(args, app)

        formatted_output = format_output(result, args.format)
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(formatted_output)
            if not args.quiet:
                print(f"Output written to {args.output}")
        else:
            print(formatted_output)
        return 0

    except (DomainException, PersistenceError) as e:
        logger.error(f"Command failed: {e}")
        if args.verbose:
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.verbose:
            traceback.print_exc()
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
