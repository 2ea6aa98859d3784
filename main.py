import sys
import torch
import argparse

from gridlife.model import create_engine
from gridlife.board import parse_input, format_grid
from gridlife.settings import Settings
from gridlife.view import show_grid
from gridlife.constants import DEFAULT_DEVICE, DEFAULT_ENGINE, ENGINES

def print_cuda_info(file=None):
    """Print information about CUDA configuration (to standard error by default)."""
    file = file or sys.stderr
    print("\n=== CUDA Configuration ===", file=file)
    print(f"PyTorch version: {torch.__version__}", file=file)
    print(f"CUDA available: {torch.cuda.is_available()}", file=file)
    print(f"CUDA version: {torch.version.cuda if torch.cuda.is_available() else 'N/A'}", file=file)
    print(f"GPU device count: {torch.cuda.device_count() if torch.cuda.is_available() else 0}", file=file)
    if torch.cuda.is_available():
        print(f"GPU device name: {torch.cuda.get_device_name(0)}", file=file)
    print("========================\n", file=file)

def build_parser():
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life on a bounded grid. Reads 'ROWS COLS GENERATIONS' "
                    "followed by the cells ('*' alive, '.' dead) and prints the final generation.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin,
                        help="Board file (default: standard input)")
    parser.add_argument("--generations", type=int, default=None,
                        help="Number of generations, overriding the input header")
    parser.add_argument("--engine", type=str, default=DEFAULT_ENGINE, choices=ENGINES,
                        help="Simulation engine ('dense' uses torch, 'sparse' tracks live cells)")
    parser.add_argument("--device", type=str, default=DEFAULT_DEVICE, choices=['cuda', 'cpu'],
                        help="Computation device for the dense engine")
    parser.add_argument("--verbose", action='store_true',
                        help="Print diagnostics to standard error")
    parser.add_argument("--show", action='store_true',
                        help="Show the final generation in a window after printing it")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    text = args.input.read()
    if args.input is not sys.stdin:
        args.input.close()
    grid, generations = parse_input(text)
    settings = Settings.from_args(args, generations)

    if settings.verbose:
        print_cuda_info()
        if settings.device_fallback:
            print("Warning: CUDA requested but not available, falling back to CPU.", file=sys.stderr)
        rows, cols = grid.shape
        print(f"Size: {rows}x{cols}, Generations: {settings.generations}, "
              f"Engine: {settings.engine}, Device: {settings.device}", file=sys.stderr)

    game = create_engine(grid, engine=settings.engine, device=settings.device)
    final_grid = game.run(settings.generations)

    sys.stdout.write(format_grid(final_grid))
    sys.stdout.flush()

    if settings.verbose:
        print(f"Live Cells: {game.live_count()}", file=sys.stderr)

    if settings.show:
        show_grid(final_grid, title=f"Game of Life - generation {game.generation}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
