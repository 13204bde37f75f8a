import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import ALGORITHMS, create

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: steppable maze generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List available algorithms")

    gen_parser = subparsers.add_parser("generate", help="Generate a maze step by step")
    gen_parser.add_argument("--size", type=positive_int, default=10, help="Maze width (and height unless --height is given)")
    gen_parser.add_argument("--height", type=positive_int, default=None, help="Maze height for rectangular mazes")
    gen_parser.add_argument("--algo", type=str, default="recdesc", choices=list(ALGORITHMS), help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--show-steps", action="store_true", help="Print the partial maze after every step")
    gen_parser.add_argument("--max-steps", type=positive_int, default=None, help="Stop after this many steps")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "list":
        for key, cls in ALGORITHMS.items():
            print(f"{key:<10} {cls.name}: {cls.link}")
        return 0

    if args.command == "generate":
        from maze_stepper.core.analysis import MazeAnalyzer

        width = args.size
        height = args.height if args.height is not None else args.size

        algo = create(args.algo, seed=args.seed)
        logger.info(f"Generating {width}x{height} maze with {algo.name}...")
        algo.init(width, height)

        while True:
            if args.max_steps is not None and algo.step_count >= args.max_steps:
                logger.info(f"Reached --max-steps {args.max_steps}, stopping.")
                algo.stop()
                break
            if algo.step():
                break
            if args.show_steps:
                print(f"Step {algo.step_count}: {algo.current}")
                print(algo.grid.asciify())

        print(algo.grid.asciify())
        stats = MazeAnalyzer.calculate_stats(algo.grid)
        logger.info(f"Done in {algo.step_count} steps. Stats: {stats}")
        if not MazeAnalyzer.is_symmetric(algo.grid):
            logger.error("Passage symmetry violated")
            return 1
        return 0

    return 0

if __name__ == "__main__":
    sys.exit(main())
