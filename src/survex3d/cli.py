from __future__ import annotations
import argparse, json, logging, sys
from .models.survey import SurvexData
from .binary.errors import SurvexError

def _load(path: str) -> SurvexData | None:
    try:
        return SurvexData.from_binary(path)
    except SurvexError as e:
        print(f"{path}: not a Survex 3D file ({e})", file=sys.stderr)
        return None
    except OSError as e:
        print(f"{path}: cannot read file ({e.strerror or e})", file=sys.stderr)
        return None

def cmd_info(args):
    # Fast path: item counts only
    if args.summary:
        from .binary.reader import summarize_file, read_header
        try:
            hdr = read_header(args.input)
        except SurvexError as e:
            print(f"{args.input}: not a Survex 3D file ({e})", file=sys.stderr)
            return 2
        except OSError as e:
            print(f"{args.input}: cannot read file ({e.strerror or e})", file=sys.stderr)
            return 2
        labels, lines = summarize_file(args.input)
        print(f"title={hdr.title!r}, version={hdr.version}, labels={labels}, lines={lines}")
        return 0

    # Full parse
    f = _load(args.input)
    if f is None:
        return 2
    print(json.dumps(f.model_dump(mode="json", by_alias=True), indent=2))
    return 0

def cmd_to_json(args):
    f = _load(args.input)
    if f is None:
        return 2
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(f.model_dump(mode="json", by_alias=True), out, indent=2)
    return 0

def cmd_stations(args):
    f = _load(args.input)
    if f is None:
        return 2
    for st in f.stations:
        p = st.position
        print(f"{st.name}\t{p.x:.2f}\t{p.y:.2f}\t{p.z:.2f}\t0x{st.flags:02x}")
    return 0

def cmd_plot(args):
    from .viz import plot_survey
    f = _load(args.input)
    if f is None:
        return 2
    plot_survey(f, mode=args.mode)
    return 0

def cmd_demo(args):
    from .binary.writer import build_demo_survey
    with open(args.output, "wb") as out:
        out.write(build_demo_survey())
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="survex3d", description="Survex 3D image utilities")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="print parsed survey as JSON or a fast summary")
    sp.add_argument("input", help="Path to .3d file")
    sp.add_argument("--summary", action="store_true", help="Print item counts without building the graph")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="convert a .3d file to JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("stations", help="list stations with positions and flags")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_stations)

    sp = sub.add_parser("plot", help="minimal verification plot")
    sp.add_argument("input")
    sp.add_argument("--mode", default="plan", choices=["plan", "elevation"])
    sp.set_defaults(func=cmd_plot)

    sp = sub.add_parser("demo", help="write a small sample .3d file")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_demo)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=ns.log_level, format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
