import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'prim_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.core.errors import MazeError

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def parse_coord(text: str):
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got '{text}'")
    return x, y

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prim Maze: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--hole", type=parse_coord, action="append", default=[], metavar="X,Y",
                            help="Cut cell X,Y off from the maze (repeatable). "
                                 "Write negative values as --hole=-1,0")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation of a square maze")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("prim_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    from prim_maze.algo.prim import generate

    if args.command == "generate":
        from prim_maze.core.holes import punch_holes
        from prim_maze.viz.ascii import to_text

        logger.info(f"Generating {args.width}x{args.height} maze...")
        try:
            maze = generate(args.width, args.height, seed=args.seed)
            if args.hole:
                logger.info(f"Punching {len(args.hole)} hole(s)...")
                punch_holes(maze, args.hole)
        except MazeError as e:
            parser.error(str(e))

        if args.stats:
            from prim_maze.core.analysis import calculate_stats
            logger.info(f"Stats: {calculate_stats(maze)}")

        print(to_text(maze))

        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            from prim_maze.viz.renderer import Renderer
            renderer = Renderer(maze)
            renderer.init_window()
            renderer.run_loop()

    elif args.command == "benchmark":
        logger.info(f"Generating {args.size}x{args.size} maze...")
        t0 = time.time()
        try:
            generate(args.size, args.size, seed=123)
        except MazeError as e:
            parser.error(str(e))
        duration = time.time() - t0
        cells = args.size * args.size
        print(f"Generation Time: {duration:.4f}s")
        print(f"Speed: {cells / max(duration, 1e-9):,.0f} cells/sec")

if __name__ == "__main__":
    main()
