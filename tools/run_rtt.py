# tools/run_rtt.py
# Usage examples:
#   python3 -m tools.run_rtt version
#   python3 -m tools.run_rtt rtt
#   python3 -m tools.run_rtt rtt https://example.com -i 2000 -t 300
#   python3 -m tools.run_rtt rtt google.com:443 --no-timeout

import argparse
import logging
import sys

from netmon.config import PROGRAM_NAME, SERVER_DEFAULT, VERSION, Settings
from netmon.loop.controller import RttController
from netmon.prober.tcp import TcpProber

def non_negative_ms(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid millisecond value: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value

def positive_ms(text):
    value = non_negative_ms(text)
    if value == 0:
        # a zero timeout would put the socket in non-blocking mode
        raise argparse.ArgumentTypeError("must be > 0; use --no-timeout for no bound")
    return value

def build_argparser():
    ap = argparse.ArgumentParser(prog=PROGRAM_NAME,
                                 description="A simple network stability monitoring tool")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Print the program version")

    rtt = sub.add_parser("rtt", help="Measure Round-Trip Time (RTT) to a server")
    rtt.add_argument("server", nargs="?", default=SERVER_DEFAULT,
                     help="Server to ping, host[:port] or http(s)://host (default: cloudflare dns)")
    rtt.add_argument("-i", "--interval", type=non_negative_ms, default=1000,
                     help="Interval in milliseconds between pings")
    rtt.add_argument("-t", "--timeout", type=positive_ms, default=500,
                     help="Milliseconds before a connect attempt is abandoned")
    rtt.add_argument("--no-timeout", dest="timeout", action="store_const", const=None,
                     help="Wait for each connect with no bound")
    rtt.add_argument("--no-fallback", dest="use_fallback", action="store_false", default=True,
                     help="Report unresolvable servers instead of pinging the default address")
    rtt.add_argument("-v", "--verbose", action="store_true", help="Log per-probe details")
    return ap

def settings_from_args(args) -> Settings:
    return Settings(
        server=args.server,
        interval_ms=args.interval,
        timeout_ms=args.timeout,
        use_fallback=args.use_fallback,
    )

def run_rtt(args, stop=None, max_probes=None):
    s = settings_from_args(args)
    p = TcpProber(
        timeout_ms=s.timeout_ms,
        fallback_server=s.fallback_server,
        use_fallback=s.use_fallback,
    )
    ctrl = RttController(p, s)
    return ctrl.run(s.server, stop=stop, max_probes=max_probes)

def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.command == "version":
        print(f"{PROGRAM_NAME} version: {VERSION}")
        return 0

    logging.basicConfig(format="%(message)s",
                        level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run_rtt(args)
    except KeyboardInterrupt:
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
