import argparse
import logging
import sys

from baseline.scanner.main import apply_overrides, load_config, run_audit
from baseline.scanner.report import ReportRenderer


def build_parser():
    parser = argparse.ArgumentParser(
        prog="baseline-audit",
        description="Linux security baseline auditor: world-writable paths, sshd_config and login.defs checks.",
    )
    parser.add_argument(
        "roots",
        nargs="*",
        metavar="ROOT",
        help="Directories to scan for world-writable entries (default: /etc /var/log /home)",
    )
    parser.add_argument("--config", metavar="FILE", help="YAML file with roots and config file paths")
    parser.add_argument("--ssh-config", metavar="PATH", help="sshd configuration file to check")
    parser.add_argument("--ssh-dir", metavar="PATH", help="SSH configuration directory")
    parser.add_argument("--login-defs", metavar="PATH", help="login.defs file to check")
    parser.add_argument("--color", action="store_true", help="Colour status tags in the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr")
    return parser


def write_report(text, stream=None):
    """
    Write the report as raw bytes.

    Paths keep the bytes they have on disk, even when they are not valid in
    the terminal encoding.
    """
    stream = stream or sys.stdout
    data = text.encode(sys.getfilesystemencoding(), errors="surrogateescape")
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode(stream.encoding or "utf-8", errors="replace"))
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = load_config(args.config)
    config = apply_overrides(config, {
        "roots": args.roots or None,
        "ssh_config": args.ssh_config,
        "ssh_dir": args.ssh_dir,
        "login_defs": args.login_defs,
    })

    report = run_audit(config)
    write_report(ReportRenderer(color=args.color).render(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
