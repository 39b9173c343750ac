import argparse, logging, sys
from pdfrecover.config import (DEFAULT_RESULT_DIR, DEFAULT_STAGING_DIR,
                               DEFAULT_TOOL, RecoveryConfig)
from pdfrecover.exceptions import RecoveryError
from pdfrecover.pipeline import DumpRecovery

def _report(outcome):
    if outcome.ok:
        print(f"[ok] {outcome.index} -> {outcome.output_path}")
    else:
        code = "not started" if outcome.exit_code is None else f"exit {outcome.exit_code}"
        print(f"[fail] {outcome.index} ({code})")

def main(argv=None):
    p = argparse.ArgumentParser(description="Recover PDF documents from a raw dump")
    p.add_argument("--source", required=True, help="Path to the dump file (e.g. chrome.DMP)")
    p.add_argument("--qpdf", default=DEFAULT_TOOL, help="qpdf executable name or path")
    p.add_argument("--qpdf-home", default=None, help="qpdf install dir; its bin/ is added to PATH")
    p.add_argument("--temp", default=DEFAULT_STAGING_DIR, help="Staging folder, removed afterwards")
    p.add_argument("--out", default=DEFAULT_RESULT_DIR, help="Output folder for repaired PDFs")
    p.add_argument("--strict", action="store_true",
                   help="Only count qpdf exit codes 0, 1 and 3 as recovered")
    p.add_argument("-v", "--verbose", action="count", default=0)
    args = p.parse_args(argv)

    level = logging.WARNING if not args.verbose else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    cfg = RecoveryConfig(source=args.source, tool=args.qpdf, tool_home=args.qpdf_home,
                         staging_dir=args.temp, result_dir=args.out,
                         strict_exit_codes=args.strict)
    try:
        report = DumpRecovery(cfg, progress_cb=_report).run()
    except RecoveryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"{len(report.recovered)}/{len(report.candidates)} candidates recovered")
    return 0

if __name__ == "__main__":
    sys.exit(main())
