import argparse
import logging
import sys

from . import bls
from .errors import BLSError


def _secret(args):  # Secret key from --secret hex.
    return bls.deserialize_secret_key(bls.from_hex(args.secret))


def _cmd_pubkey(args):
    print(bls.to_hex(bls.get_public_key(_secret(args))))
    return 0


def _cmd_keygen(args):
    sk = bls.key_gen(bls.from_hex(args.ikm), args.key_info.encode())
    print(f"secret_key: {bls.to_hex(bls.serialize_secret_key(sk))}")
    print(f"public_key: {bls.to_hex(sk.public_key())}")
    return 0


def _cmd_sign(args):
    print(bls.to_hex(bls.sign(_secret(args), args.message.encode(), args.ciphersuite)))
    return 0


def _cmd_verify(args):
    ok = bls.verify(bls.from_hex(args.signature), args.message.encode(), bls.from_hex(args.public_key), args.ciphersuite)
    print("true" if ok else "false")
    return 0 if ok else 1


def _cmd_pop_prove(args):
    print(bls.to_hex(bls.pop_prove(_secret(args))))
    return 0


def _cmd_pop_verify(args):
    ok = bls.pop_verify(bls.from_hex(args.public_key), bls.from_hex(args.proof))
    print("true" if ok else "false")
    return 0 if ok else 1


def build_parser():  # argparse tree for `python -m tz4bls`.
    parser = argparse.ArgumentParser(prog="tz4bls", description="BLS12-381 keys and signatures (tz4 / min-pk)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    suites = [c.value for c in bls.Ciphersuite]

    p = sub.add_parser("pubkey", help="Print the public key of a secret key")
    p.add_argument("--secret", required=True, metavar="HEX", help="32-byte secret key")
    p.set_defaults(func=_cmd_pubkey)

    p = sub.add_parser("keygen", help="Derive a key pair from input key material")
    p.add_argument("--ikm", required=True, metavar="HEX", help="At least 32 bytes of key material")
    p.add_argument("--key-info", default="", metavar="TEXT", help="Optional HKDF key_info")
    p.set_defaults(func=_cmd_keygen)

    p = sub.add_parser("sign", help="Sign a UTF-8 message")
    p.add_argument("--secret", required=True, metavar="HEX", help="32-byte secret key")
    p.add_argument("--message", required=True, metavar="TEXT")
    p.add_argument("--ciphersuite", choices=suites, default=bls.Ciphersuite.MessageAugmentation.value)
    p.set_defaults(func=_cmd_sign)

    p = sub.add_parser("verify", help="Verify a signature; exit status 1 when invalid")
    p.add_argument("--public-key", required=True, metavar="HEX")
    p.add_argument("--signature", required=True, metavar="HEX")
    p.add_argument("--message", required=True, metavar="TEXT")
    p.add_argument("--ciphersuite", choices=suites, default=bls.Ciphersuite.MessageAugmentation.value)
    p.set_defaults(func=_cmd_verify)

    p = sub.add_parser("pop-prove", help="Produce a proof of possession")
    p.add_argument("--secret", required=True, metavar="HEX", help="32-byte secret key")
    p.set_defaults(func=_cmd_pop_prove)

    p = sub.add_parser("pop-verify", help="Verify a proof of possession; exit status 1 when invalid")
    p.add_argument("--public-key", required=True, metavar="HEX")
    p.add_argument("--proof", required=True, metavar="HEX")
    p.set_defaults(func=_cmd_pop_verify)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except BLSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
