"""Command line interface for x25519key.

Prints key nodes and results as JSON on stdout. Log level and destination
come from the LOG_LEVEL and LOG_FILE environment variables.
"""

# Standard lib
import argparse
import json
import logging
import sys

# Internal modules
from x25519key.config import configure_logging
from x25519key.ed25519 import Ed25519KeyPair
from x25519key.errors import X25519KeyError
from x25519key.keypair import X25519KeyPair

LOGGER = logging.getLogger(__name__)


def generate(args) -> int:
    kp = X25519KeyPair.generate(controller=args.controller, id=args.id)
    print(json.dumps(kp.export(private_key=args.private)))
    return 0


def fingerprint(args) -> int:
    print(X25519KeyPair.fingerprint_from_public_key(args.public_key))
    return 0


def from_fingerprint(args) -> int:
    kp = X25519KeyPair.from_fingerprint(args.fingerprint)
    print(json.dumps(kp.export()))
    return 0


def verify(args) -> int:
    kp = X25519KeyPair(public_key_base58=args.public_key)
    result = kp.verify_fingerprint(args.fingerprint)
    out = {'valid': result.valid}
    if result.error is not None:
        out['error'] = str(result.error)
    print(json.dumps(out))
    return 0 if result.valid else 1


def convert(args) -> int:
    ed_kp = Ed25519KeyPair(public_key_base58=args.public_key,
                           private_key_base58=args.private,
                           controller=args.controller)
    kp = X25519KeyPair.from_ed_key_pair(ed_kp)
    print(json.dumps(kp.export(private_key=kp.private_key is not None)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='x25519key',
        description='X25519KeyAgreementKey2019 key pair tool.')
    commands = parser.add_subparsers(dest='command', required=True)

    cmd = commands.add_parser('generate', help='generate a new key pair')
    cmd.add_argument('--controller')
    cmd.add_argument('--id')
    cmd.add_argument('--private', action='store_true',
                     help='include the private key in the output')
    cmd.set_defaults(func=generate)

    cmd = commands.add_parser('fingerprint',
                              help='fingerprint a base58 public key')
    cmd.add_argument('public_key')
    cmd.set_defaults(func=fingerprint)

    cmd = commands.add_parser('from-fingerprint',
                              help='print the key node for a fingerprint')
    cmd.add_argument('fingerprint')
    cmd.set_defaults(func=from_fingerprint)

    cmd = commands.add_parser('verify',
                              help='check a fingerprint against a public key')
    cmd.add_argument('fingerprint')
    cmd.add_argument('public_key')
    cmd.set_defaults(func=verify)

    cmd = commands.add_parser('convert',
                              help='convert an Ed25519 key pair to X25519')
    cmd.add_argument('public_key', help='base58 Ed25519 public key')
    cmd.add_argument('--private', help='base58 Ed25519 private key')
    cmd.add_argument('--controller')
    cmd.set_defaults(func=convert)

    return parser


def main(argv=None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        return args.func(args)
    except X25519KeyError as err:
        LOGGER.info(f'{args.command} failed: {err}')
        print(f'error: {err}', file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
