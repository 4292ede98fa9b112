#!/usr/bin/env python3
"""
Emergency alerts CLI - replay an alert locally or manage topic membership
Usage:
    emergency-alerts send --alert-id a456 --message "Fire on 3rd floor" --uid u123
    emergency-alerts subscribe --token <device-token> --topic security
"""
import sys
import logging
import argparse

from emergency_alerts.config import Settings
from emergency_alerts.constants import ALERTS_COLLECTION
from emergency_alerts.fcm_publisher import FcmPublisher
from emergency_alerts.firebase_client import FirebaseClient
from emergency_alerts.handlers import create_forwarder, set_forwarder, triggers
from emergency_alerts.models import ForwardStatus


def setup_logging(verbose: bool = False):
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        format='%(asctime)s [%(levelname)s] %(message)s',
        level=level,
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def alert_id_arg(value: str) -> str:
    """Alert ids name a single document under the alerts collection"""
    value = value.strip()
    if not value or '/' in value:
        raise ValueError(f"Invalid alert id: {value!r}")
    return value


def run_send(args, settings: Settings) -> int:
    """Push one alert document through the registered triggers"""
    logger = logging.getLogger(__name__)

    if args.dry_run:
        settings = settings.model_copy(update={'dry_run': True})
    set_forwarder(create_forwarder(settings))

    document = {}
    if args.message is not None:
        document['message'] = args.message
    if args.uid is not None:
        document['uid'] = args.uid

    path = f"{ALERTS_COLLECTION}/{args.alert_id}"
    results = triggers.dispatch_created(path, document)
    if not results:
        logger.error(f"No trigger handled {path}, nothing sent")
        return 1

    failed = [r for r in results if r.status == ForwardStatus.FAILED]
    return 1 if failed else 0


def run_topic(args, settings: Settings) -> int:
    """Subscribe or unsubscribe device tokens"""
    publisher = FcmPublisher(FirebaseClient.get_app(settings))
    topic = args.topic or settings.topic

    if args.command == 'subscribe':
        response = publisher.subscribe(args.token, topic)
    else:
        response = publisher.unsubscribe(args.token, topic)

    return 0 if response.failure_count == 0 else 1


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Emergency Alerts')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    send = subparsers.add_parser('send', help='Forward one alert to the topic')
    send.add_argument('--alert-id', required=True, type=alert_id_arg,
                      help='Alert document id')
    send.add_argument('--message', help='Alert text')
    send.add_argument('--uid', help='Reporting user id')
    send.add_argument('--dry-run', action='store_true',
                      help='Validate the message without delivering it')

    for name in ('subscribe', 'unsubscribe'):
        topic_cmd = subparsers.add_parser(name, help=f'{name.capitalize()} device tokens')
        topic_cmd.add_argument('--token', action='append', required=True,
                               help='Device registration token (repeatable)')
        topic_cmd.add_argument('--topic', help='Topic name (default: ALERT_TOPIC or security)')

    return parser.parse_args(argv)


def main(argv=None):
    """Main execution"""
    args = parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = Settings.from_env()

        if args.command == 'send':
            exit_code = run_send(args, settings)
        else:
            exit_code = run_topic(args, settings)

        sys.exit(exit_code)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)
    finally:
        FirebaseClient.reset()


if __name__ == '__main__':
    main()
