#!/usr/bin/env python3
import argparse, logging, os
from ellermaze.config import ConfigError, MazeConfig
from ellermaze.mapgen.connectivity import is_fully_connected
from ellermaze.mapgen.generator import iter_rows
from ellermaze.render.ascii import maze_to_ascii

# name -> config for the text fixtures under data/golden_mazes
GOLDEN_CASES = {
    "fixture_w3_h1": MazeConfig(width=3, height=1, seed="fixture"),
    "eller_w8_h6": MazeConfig(width=8, height=6, seed="eller"),
    "seed42_w5_h4_floor0": MazeConfig(width=5, height=4, seed=42, floorp=0),
    "walls_w6_h5_wallp1": MazeConfig(width=6, height=5, seed="walls", wallp=1),
}

def write_text(text, path):
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text + "\n")

def cmd_emit(args, parser):
    try:
        cfg = MazeConfig(
            width=args.width,
            height=args.height,
            wallp=args.wallp,
            floorp=args.floorp,
            seed=args.seed,
        )
    except ConfigError as e:
        parser.error(str(e))
    if not cfg.bounded and args.rows is None:
        parser.error("an unbounded maze needs --rows")
    rows = list(iter_rows(cfg, limit=args.rows))
    text = maze_to_ascii(rows)
    if args.check and not is_fully_connected(rows):
        logging.error("maze is not fully connected")
        return 1
    if args.out:
        write_text(text, args.out)
        print(f"Wrote {args.out}")
    else:
        print(text)
    return 0

def cmd_golden(args, parser):
    os.makedirs(args.outdir, exist_ok=True)
    for name, cfg in GOLDEN_CASES.items():
        path = os.path.join(args.outdir, f"{name}.txt")
        write_text(maze_to_ascii(iter_rows(cfg)), path)
        logging.info("wrote %s", path)
    print(f"Wrote golden mazes to {args.outdir}")
    return 0

def build_parser():
    p = argparse.ArgumentParser(description="Eller maze generator")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--width', type=int, required=True)
    p1.add_argument('--height', type=int, default=None)
    p1.add_argument('--seed', type=str, default=None)
    p1.add_argument('--wallp', type=float, default=0.5)
    p1.add_argument('--floorp', type=float, default=0.5)
    p1.add_argument('--rows', type=int, default=None, help="Pull at most N rows, finalizing the last")
    p1.add_argument('--out', type=str, default=None)
    p1.add_argument('--check', action='store_true', help="Fail unless every cell is reachable")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--outdir', type=str, default=os.path.join("data", "golden_mazes"))
    p2.set_defaults(func=cmd_golden)
    return p

def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return args.func(args, p)

if __name__ == '__main__':
    raise SystemExit(main())
