from __future__ import annotations
import argparse, json, logging, sys
from .binary.errors import SourceOpenError
from .binary.reader import DictionaryStream, dump_bytes, read_fields
from .models.config import KeySchedule, ObfuscationConfig, StreamConfig

def _config(args) -> StreamConfig:
    if args.key is None:
        return StreamConfig()
    return StreamConfig(obfuscation=ObfuscationConfig(key=args.key, schedule=args.schedule))

def cmd_peek(args):
    with DictionaryStream(args.input, _config(args)) as ds:
        dump = dump_bytes(ds.reader, args.offset, args.count)
    if args.json:
        print(json.dumps(dump.model_dump(mode="json"), indent=2))
    else:
        print(dump.hexdump())

def cmd_bits(args):
    with DictionaryStream(args.input, _config(args)) as ds:
        fields = read_fields(ds.reader, args.offset, args.widths)
    print(json.dumps([f.model_dump(mode="json") for f in fields], indent=2))

def _int(text: str) -> int:
    return int(text, 0)

def build_parser():
    p = argparse.ArgumentParser(prog="lsdstream", description="LSD dictionary stream inspection")
    p.add_argument("-v", "--verbose", action="store_true", help="Log stream open/seek activity")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", help="Path to .lsd file")
    common.add_argument("--offset", type=_int, default=0, help="Byte offset to start at")
    common.add_argument("--key", type=_int, default=None, help="Deobfuscation key byte (e.g. 0x7f)")
    common.add_argument("--schedule", type=KeySchedule, default=KeySchedule.ROTATING,
                        choices=[KeySchedule.CONSTANT, KeySchedule.ROTATING],
                        metavar="{constant,rotating}", help="How the key byte varies with offset")

    sp = sub.add_parser("peek", parents=[common], help="hex dump of (deobfuscated) bytes")
    sp.add_argument("--count", type=_int, default=64)
    sp.add_argument("--json", action="store_true")
    sp.set_defaults(func=cmd_peek)

    sp = sub.add_parser("bits", parents=[common], help="read MSB-first bit fields as JSON")
    sp.add_argument("widths", nargs="+", type=int, choices=range(1, 33), metavar="WIDTH")
    sp.set_defaults(func=cmd_bits)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        ns.func(ns)
    except (SourceOpenError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
