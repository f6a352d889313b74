#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from pathlib import Path

from lifegrid import GameOfLife, load, dumps


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    grid = load(Path(__file__).parent / "boards" / "glider.txt")
    game = GameOfLife(grid)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    # Run simulation for 10 generations
    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}:")
        print(grid)
        print(f"Population: {game.population}")
        print()

    print("Final board in file format:")
    print(dumps(grid), end="")

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
